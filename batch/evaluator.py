import logging
from collections import OrderedDict
from typing import Iterable, Optional, Union

import numpy as np
import pandas as pd

from config.config import BATCH_CONFIG
from core import ExpressionEngine, ExpressionError

logger = logging.getLogger(__name__)


class BatchEvaluator:
    """
    批量求值，结果放入DataFrame
    引擎是纯函数，相同的表达式文本总是得到相同结果，因此可以按文本缓存
    """

    def __init__(self, cache_size=BATCH_CONFIG["cache_size"], engine: Optional[ExpressionEngine] = None):
        self.engine = engine or ExpressionEngine()
        # 使用有限大小的OrderedDict实现LRU缓存，值为 (result, error_kind_name)
        self.cache_size = cache_size
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def cache_info(self):
        return {
            "hits": self._cache_hits,
            "misses": self._cache_misses,
            "size": len(self._result_cache),
            "max_size": self.cache_size,
        }

    def _evaluate_cached(self, expr):
        if expr in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(expr)
            self._cache_hits += 1
            return self._result_cache[expr]

        self._cache_misses += 1
        try:
            entry = (self.engine.evaluate(expr), None)
        except ExpressionError as e:
            logger.debug(f"Error evaluating expression {expr!r}: {e.kind.name}: {e}")
            entry = (np.nan, e.kind.name)

        if self.cache_size > 0:
            self._result_cache[expr] = entry
            self._manage_cache()
        return entry

    def evaluate(self, expr: str) -> float:
        """单个表达式求值，失败时返回NaN，不抛出异常"""
        result, _ = self._evaluate_cached(expr)
        return result

    def evaluate_many(self, expressions: Union[Iterable[str], pd.Series]) -> pd.DataFrame:
        """
        Args:
            expressions: 表达式列表或Series
        Returns:
            DataFrame，列为 expression / result / error；
            Series输入时保留原索引，失败行 result 为NaN，error 为错误种类名
        """
        if isinstance(expressions, pd.Series):
            index = expressions.index
            texts = expressions.tolist()
        else:
            texts = list(expressions)
            index = pd.RangeIndex(len(texts))

        rows = [self._evaluate_cached(expr) for expr in texts]
        frame = pd.DataFrame({
            "expression": pd.Series(texts, index=index, dtype=object),
            "result": pd.Series([r for r, _ in rows], index=index, dtype=float),
            "error": pd.Series([err for _, err in rows], index=index, dtype=object),
        })

        n_failed = int(frame["error"].notna().sum())
        if n_failed:
            logger.info(f"{n_failed}/{len(frame)} expressions failed to evaluate")
        return frame
