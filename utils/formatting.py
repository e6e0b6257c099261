"""utils/formatting.py"""
import numpy as np


def format_result(value, precision=None):
    """
    把结果格式化为不带指数的十进制文本，去掉多余的0
    precision=None 时使用能精确回读的最短表示；非负结果可以直接作为表达式再次求值
    """
    value = np.float64(value)
    if not np.isfinite(value):
        raise ValueError(f"Cannot format non-finite value: {value}")
    if value == 0:
        # -0.0 也显示为 0
        return "0"
    if precision is None:
        return np.format_float_positional(value, unique=True, trim='-')
    return np.format_float_positional(value, precision=precision, unique=True,
                                      fractional=False, trim='-')
