"""core/engine.py - 分词、转后缀、求值三个阶段的组合入口"""
import logging

from config.config import ENGINE_CONFIG
from core.errors import EngineError, ExpressionError
from core.operators import CONSTANTS, FUNCTION_SPECS, OPERATOR_SPECS, UNARY_OPERATOR_SPECS
from core.rpn_evaluator import RPNEvaluator
from core.tokenizer import tokenize
from core.translator import to_postfix

logger = logging.getLogger(__name__)


class ExpressionEngine:
    """
    无状态的表达式引擎；操作符、函数、常数表在构造时注入
    任一阶段失败都转换为 ExpressionError，cause 为原始错误
    """

    def __init__(self, operators=OPERATOR_SPECS, functions=FUNCTION_SPECS, constants=CONSTANTS,
                 unary_operators=UNARY_OPERATOR_SPECS,
                 max_length=ENGINE_CONFIG["max_expression_length"]):
        self.operators = operators
        self.functions = functions
        self.constants = constants
        self.unary_operators = unary_operators
        self.max_length = max_length

    def compile(self, expr):
        """只做分词和转后缀，返回后缀Token列表"""
        try:
            tokens = tokenize(expr, functions=self.functions, constants=self.constants,
                              operators=self.operators, max_length=self.max_length)
            return to_postfix(tokens, operators=self.operators,
                              unary_operators=self.unary_operators)
        except EngineError as e:
            logger.debug(f"Failed to compile {expr!r}: {e.kind.name}: {e}")
            raise ExpressionError(e) from e

    def evaluate_postfix(self, postfix) -> float:
        """对 compile 的结果求值"""
        try:
            return RPNEvaluator.evaluate(postfix, operators=self.operators, functions=self.functions,
                                         unary_operators=self.unary_operators)
        except EngineError as e:
            logger.debug(f"Failed to evaluate postfix: {e.kind.name}: {e}")
            raise ExpressionError(e) from e

    def evaluate(self, expr: str) -> float:
        return self.evaluate_postfix(self.compile(expr))


_default_engine = ExpressionEngine()


def evaluate_expression(expr: str) -> float:
    """UI层唯一调用的接口：返回有限的float，失败抛出 ExpressionError"""
    return _default_engine.evaluate(expr)
