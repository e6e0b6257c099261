"""核心模块 - Token系统、分词器、调度场转换、RPN评估器和操作符"""
from .errors import (
    ErrorKind, EngineError, TokenizeError, TranslateError, EvalError, ExpressionError
)
from .token_system import TokenType, Token
from .operators import (
    Operators, Associativity, OperatorSpec, FunctionSpec,
    OPERATOR_SPECS, UNARY_OPERATOR_SPECS, FUNCTION_SPECS, CONSTANTS
)
from .tokenizer import tokenize
from .translator import to_postfix, postfix_to_string
from .rpn_evaluator import RPNEvaluator
from .engine import ExpressionEngine, evaluate_expression

__all__ = [
    'ErrorKind', 'EngineError', 'TokenizeError', 'TranslateError', 'EvalError',
    'ExpressionError', 'TokenType', 'Token', 'Operators', 'Associativity',
    'OperatorSpec', 'FunctionSpec', 'OPERATOR_SPECS', 'UNARY_OPERATOR_SPECS', 'FUNCTION_SPECS',
    'CONSTANTS',
    'tokenize', 'to_postfix', 'postfix_to_string', 'RPNEvaluator',
    'ExpressionEngine', 'evaluate_expression'
]
