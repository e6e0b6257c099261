import math

import pytest

from core import ErrorKind, EvalError, Operators, RPNEvaluator, Token


def n(value):
    return Token.number(value)


def op(symbol):
    return Token.operator(symbol)


def fn(name):
    return Token.function(name)


def test_operand_order():
    # 后出栈的是左操作数：10 4 - = 6
    assert RPNEvaluator.evaluate([n(10), n(4), op('-')]) == 6.0
    assert RPNEvaluator.evaluate([n(8), n(2), op('/')]) == 4.0
    assert RPNEvaluator.evaluate([n(2), n(3), op('^')]) == 8.0


def test_function_application():
    assert RPNEvaluator.evaluate([n(16), fn('sqrt')]) == 4.0
    assert RPNEvaluator.evaluate([n(100), fn('log')]) == pytest.approx(2.0)
    assert RPNEvaluator.evaluate([n(math.e), fn('ln')]) == pytest.approx(1.0)
    assert RPNEvaluator.evaluate([n(0), fn('cos')]) == 1.0


def test_single_number():
    assert RPNEvaluator.evaluate([n(4)]) == 4.0


def test_result_is_python_float():
    assert type(RPNEvaluator.evaluate([n(1), n(2), op('+')])) is float


@pytest.mark.parametrize("postfix", [
    [op('+')],
    [n(1), op('+')],
    [fn('sqrt')],
])
def test_stack_underflow(postfix):
    with pytest.raises(EvalError) as excinfo:
        RPNEvaluator.evaluate(postfix)
    assert excinfo.value.kind == ErrorKind.STACK_UNDERFLOW


@pytest.mark.parametrize("postfix", [[], [n(1), n(2)]])
def test_malformed_expression(postfix):
    with pytest.raises(EvalError) as excinfo:
        RPNEvaluator.evaluate(postfix)
    assert excinfo.value.kind == ErrorKind.MALFORMED_EXPRESSION


def test_parenthesis_in_postfix_is_malformed():
    with pytest.raises(EvalError) as excinfo:
        RPNEvaluator.evaluate([n(1), Token.left_paren()])
    assert excinfo.value.kind == ErrorKind.MALFORMED_EXPRESSION


def test_division_by_zero():
    with pytest.raises(EvalError) as excinfo:
        RPNEvaluator.evaluate([n(5), n(0), op('/')])
    assert excinfo.value.kind == ErrorKind.DIVISION_BY_ZERO


@pytest.mark.parametrize("postfix", [
    [n(0), n(4), op('-'), fn('sqrt')],   # sqrt(0-4)
    [n(0), fn('log')],
    [n(0), n(1), op('-'), fn('ln')],
    [n(10), n(400), op('^')],            # 上溢
    [n(0), n(0), n(1), op('-'), op('^')],  # 0^-1
    [n(0), n(8), op('-'), n(0.5), op('^')],  # (-8)^0.5
])
def test_domain_errors(postfix):
    with pytest.raises(EvalError) as excinfo:
        RPNEvaluator.evaluate(postfix)
    assert excinfo.value.kind == ErrorKind.DOMAIN_ERROR


def test_underflow_rounds_to_zero():
    assert Operators.mul(1e-300, 1e-300) == 0.0


def test_negative_base_with_integer_exponent():
    assert Operators.pow(-2.0, 3.0) == -8.0


def test_injected_tables():
    from core import FunctionSpec
    functions = {'double': FunctionSpec('double', lambda x: 2 * x)}
    assert RPNEvaluator.evaluate([n(21), fn('double')], functions=functions) == 42.0
    with pytest.raises(EvalError):
        RPNEvaluator.evaluate([n(4), fn('sqrt')], functions=functions)


def test_unary_negation():
    assert RPNEvaluator.evaluate([n(3), op('neg')]) == -3.0
    assert RPNEvaluator.evaluate([n(4), op('neg'), n(1), op('+')]) == -3.0


def test_unary_negation_underflow():
    with pytest.raises(EvalError) as excinfo:
        RPNEvaluator.evaluate([op('neg')])
    assert excinfo.value.kind == ErrorKind.STACK_UNDERFLOW


def test_sqrt_of_negated_value():
    with pytest.raises(EvalError) as excinfo:
        RPNEvaluator.evaluate([n(4), op('neg'), fn('sqrt')])
    assert excinfo.value.kind == ErrorKind.DOMAIN_ERROR
