"""core/errors.py - 各阶段的错误类型"""
from enum import Enum


class ErrorKind(Enum):
    UNRECOGNIZED_SYMBOL = "unrecognized_symbol"    # 分词阶段
    UNMATCHED_PAREN = "unmatched_paren"            # 中缀转后缀阶段
    STACK_UNDERFLOW = "stack_underflow"            # 以下为求值阶段
    DIVISION_BY_ZERO = "division_by_zero"
    DOMAIN_ERROR = "domain_error"
    MALFORMED_EXPRESSION = "malformed_expression"


class EngineError(Exception):
    """引擎内部错误的基类，携带错误种类和（可选的）字符位置"""

    def __init__(self, kind, message, position=None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.position = position

    def __repr__(self):
        return f"{type(self).__name__}({self.kind.name}, {self.message!r})"


class TokenizeError(EngineError):
    pass


class TranslateError(EngineError):
    pass


class EvalError(EngineError):
    pass


class ExpressionError(Exception):
    """
    门面层统一抛出的错误
    cause 保存原始的阶段错误，kind 与其一致
    """

    def __init__(self, cause):
        super().__init__(str(cause))
        self.cause = cause
        self.kind = cause.kind

    def __repr__(self):
        return f"ExpressionError({self.cause!r})"
