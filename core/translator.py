"""core/translator.py - 中缀Token序列转后缀（调度场算法）"""
import logging

from core.errors import ErrorKind, TranslateError
from core.operators import OPERATOR_SPECS, UNARY_OPERATOR_SPECS, Associativity
from core.token_system import Token, TokenType

logger = logging.getLogger(__name__)

# 这些Token之后出现的操作符是前缀一元操作符
_PREFIX_CONTEXT = frozenset({TokenType.LEFT_PAREN, TokenType.OPERATOR, TokenType.FUNCTION})


def _should_pop(incoming, top):
    """左结合时优先级 <= 栈顶即出栈，右结合时需严格小于"""
    if incoming.associativity == Associativity.LEFT:
        return incoming.precedence <= top.precedence
    return incoming.precedence < top.precedence


def to_postfix(tokens, operators=OPERATOR_SPECS, unary_operators=UNARY_OPERATOR_SPECS):
    """
    Args:
        tokens: 分词器输出的Token序列
        operators: 二元操作符表（优先级和结合性）
        unary_operators: 前缀一元操作符表，按输入符号索引
    Returns:
        后缀Token列表，只包含 NUMBER / OPERATOR / FUNCTION
    Raises:
        TranslateError: 括号不匹配
    """
    # 栈中操作符按后缀符号查表
    specs = dict(operators)
    specs.update({spec.symbol: spec for spec in unary_operators.values()})

    output = []
    stack = []
    previous = None

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output.append(token)

        elif token.type == TokenType.FUNCTION:
            # 函数等待其右括号
            stack.append(token)

        elif token.type == TokenType.OPERATOR:
            prefix = previous is None or previous.type in _PREFIX_CONTEXT
            if prefix and token.value in unary_operators:
                # 前缀操作符的操作数还未出现，直接入栈
                stack.append(Token.operator(unary_operators[token.value].symbol, token.position))
            else:
                incoming = operators[token.value]
                while (stack and stack[-1].type == TokenType.OPERATOR
                       and _should_pop(incoming, specs[stack[-1].value])):
                    output.append(stack.pop())
                stack.append(token)

        elif token.type == TokenType.LEFT_PAREN:
            stack.append(token)

        elif token.type == TokenType.RIGHT_PAREN:
            while stack and stack[-1].type != TokenType.LEFT_PAREN:
                output.append(stack.pop())
            if not stack:
                raise TranslateError(ErrorKind.UNMATCHED_PAREN,
                                     f"Unmatched ')' at position {token.position}",
                                     position=token.position)
            stack.pop()
            # 右括号闭合了函数的参数
            if stack and stack[-1].type == TokenType.FUNCTION:
                output.append(stack.pop())

        previous = token

    while stack:
        token = stack.pop()
        if token.type == TokenType.LEFT_PAREN:
            raise TranslateError(ErrorKind.UNMATCHED_PAREN,
                                 f"Unclosed '(' at position {token.position}",
                                 position=token.position)
        output.append(token)

    logger.debug(f"Postfix: {postfix_to_string(output)}")
    return output


def postfix_to_string(postfix):
    """后缀表达式的文本形式，如 '3.0 4.0 2.0 * +'"""
    return ' '.join(token.name for token in postfix)
