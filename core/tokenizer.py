"""core/tokenizer.py - 把表达式字符串切分为Token序列"""
import logging
import math
import re
from functools import lru_cache

from core.errors import ErrorKind, TokenizeError
from core.operators import CONSTANTS, FUNCTION_SPECS, OPERATOR_SPECS
from core.token_system import Token

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r'\s*')


def _alternation(names):
    # 长名字优先，保证 sqrt 不会被拆成其他前缀
    return '|'.join(re.escape(name) for name in sorted(names, key=len, reverse=True))


@lru_cache(maxsize=16)
def _build_pattern(function_names, constant_names, operator_symbols):
    """
    按顺序尝试：函数名、常数、数字、操作符、括号
    函数名和常数后面不能紧跟字母，避免 sine、pie 之类被静默拆开
    """
    parts = []
    if function_names:
        parts.append(rf'(?P<function>{_alternation(function_names)})(?![A-Za-z])')
    if constant_names:
        parts.append(rf'(?P<constant>{_alternation(constant_names)})(?![A-Za-z])')
    parts.append(r'(?P<number>[0-9]+(?:\.[0-9]+)?)')
    if operator_symbols:
        parts.append(rf'(?P<operator>{_alternation(operator_symbols)})')
    parts.append(r'(?P<lparen>\()')
    parts.append(r'(?P<rparen>\))')
    return re.compile('|'.join(parts))


def tokenize(expr, functions=FUNCTION_SPECS, constants=CONSTANTS, operators=OPERATOR_SPECS,
             max_length=None):
    """
    Args:
        expr: 表达式字符串，Token之间允许空白
        functions/constants/operators: 可识别的函数名、常数、操作符表
        max_length: 表达式最大长度，None表示不限制
    Returns:
        Token列表
    Raises:
        TokenizeError: 出现无法识别的字符（不会跳过）
    """
    if not isinstance(expr, str):
        raise TokenizeError(ErrorKind.UNRECOGNIZED_SYMBOL,
                            f"Expression must be a string, got {type(expr).__name__}")
    if max_length is not None and len(expr) > max_length:
        raise TokenizeError(ErrorKind.UNRECOGNIZED_SYMBOL,
                            f"Expression is too long ({len(expr)} > {max_length} characters)")

    pattern = _build_pattern(tuple(functions), tuple(constants), tuple(operators))
    tokens = []
    pos = 0
    end = len(expr)

    while True:
        pos = _WHITESPACE.match(expr, pos).end()
        if pos >= end:
            break

        match = pattern.match(expr, pos)
        if match is None:
            raise TokenizeError(ErrorKind.UNRECOGNIZED_SYMBOL,
                                f"Unrecognized symbol {expr[pos]!r} at position {pos}",
                                position=pos)

        kind = match.lastgroup
        text = match.group()
        if kind == 'function':
            tokens.append(Token.function(text, pos))
        elif kind == 'constant':
            tokens.append(Token.number(constants[text], pos))
        elif kind == 'number':
            value = float(text)
            if not math.isfinite(value):
                raise TokenizeError(ErrorKind.UNRECOGNIZED_SYMBOL,
                                    f"Numeric literal at position {pos} is out of float64 range",
                                    position=pos)
            tokens.append(Token.number(value, pos))
        elif kind == 'operator':
            tokens.append(Token.operator(text, pos))
        elif kind == 'lparen':
            tokens.append(Token.left_paren(pos))
        else:
            tokens.append(Token.right_paren(pos))
        pos = match.end()

    logger.debug(f"Tokenized {expr!r} into {len(tokens)} tokens")
    return tokens
