"""RPN表达式求值器 - 调用统一的Operators表"""
import logging

from core.errors import ErrorKind, EvalError
from core.operators import FUNCTION_SPECS, OPERATOR_SPECS, UNARY_OPERATOR_SPECS
from core.token_system import POSTFIX_TOKEN_TYPES, TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀表达式的值"""

    @staticmethod
    def evaluate(postfix, operators=OPERATOR_SPECS, functions=FUNCTION_SPECS,
                 unary_operators=UNARY_OPERATOR_SPECS):
        """
        Args:
            postfix: 后缀Token序列
            operators: 二元操作符表
            functions: 一元函数表
            unary_operators: 前缀一元操作符表（后缀中以 spec.symbol 出现）
        Returns:
            有限的float结果
        Raises:
            EvalError: 操作数不足、除零、定义域错误、栈中剩余值个数不为1
        """
        specs = dict(operators)
        specs.update({spec.symbol: spec for spec in unary_operators.values()})
        stack = []

        for token in postfix:
            if token.type not in POSTFIX_TOKEN_TYPES:
                raise EvalError(ErrorKind.MALFORMED_EXPRESSION,
                                f"Unexpected {token.type.name} in postfix expression",
                                position=token.position)

            if token.type == TokenType.NUMBER:
                stack.append(token.value)

            elif token.type == TokenType.OPERATOR:
                spec = specs.get(token.value)
                if spec is None:
                    raise EvalError(ErrorKind.MALFORMED_EXPRESSION,
                                    f"Unknown operator: {token.value}", position=token.position)
                if len(stack) < spec.arity:
                    raise EvalError(ErrorKind.STACK_UNDERFLOW,
                                    f"Insufficient operands for '{token.value}'",
                                    position=token.position)
                if spec.arity == 1:
                    stack.append(spec.apply(stack.pop()))
                else:
                    # 后出栈的是左操作数
                    b = stack.pop()
                    a = stack.pop()
                    stack.append(spec.apply(a, b))

            else:
                spec = functions.get(token.value)
                if spec is None:
                    raise EvalError(ErrorKind.MALFORMED_EXPRESSION,
                                    f"Unknown function: {token.value}", position=token.position)
                if not stack:
                    raise EvalError(ErrorKind.STACK_UNDERFLOW,
                                    f"Missing argument for {token.value}()",
                                    position=token.position)
                stack.append(spec.apply(stack.pop()))

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise EvalError(ErrorKind.MALFORMED_EXPRESSION,
                            f"Expression leaves {len(stack)} values, expected 1")
        return stack[0]
