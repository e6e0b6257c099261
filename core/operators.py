"""core/operators.py"""
import logging
import math
from collections import namedtuple
from enum import Enum
from types import MappingProxyType

import numpy as np

from core.errors import ErrorKind, EvalError

logger = logging.getLogger(__name__)

# 上溢、除零、非法运算直接抛出；下溢按0处理
FP_ERRSTATE = {'over': 'raise', 'divide': 'raise', 'invalid': 'raise', 'under': 'ignore'}


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


OperatorSpec = namedtuple('OperatorSpec', ['symbol', 'precedence', 'associativity', 'apply', 'arity'],
                          defaults=(2,))
FunctionSpec = namedtuple('FunctionSpec', ['name', 'apply'])


class Operators:
    """所有操作符和函数的静态方法集合，输入输出均为float64"""

    @staticmethod
    def _apply(name, fn, *operands):
        """在numpy浮点错误检查下计算，结果必须是有限值"""
        try:
            with np.errstate(**FP_ERRSTATE):
                result = fn(*(np.float64(x) for x in operands))
        except FloatingPointError as e:
            raise EvalError(ErrorKind.DOMAIN_ERROR,
                            f"{name}{tuple(operands)} is undefined: {e}") from e
        if not np.isfinite(result):
            raise EvalError(ErrorKind.DOMAIN_ERROR, f"{name}{tuple(operands)} is not finite")
        return float(result)

    # 二元操作符========================================
    @staticmethod
    def add(a, b):
        return Operators._apply('add', np.add, a, b)

    @staticmethod
    def sub(a, b):
        return Operators._apply('sub', np.subtract, a, b)

    @staticmethod
    def mul(a, b):
        return Operators._apply('mul', np.multiply, a, b)

    @staticmethod
    def div(a, b):
        """除数为0时报错，不返回inf/NaN"""
        if b == 0:
            raise EvalError(ErrorKind.DIVISION_BY_ZERO, f"Division by zero: {a!r} / {b!r}")
        return Operators._apply('div', np.divide, a, b)

    @staticmethod
    def pow(a, b):
        """负数的分数次幂、0的负数次幂、上溢均视为定义域错误"""
        return Operators._apply('pow', np.power, a, b)

    # 一元操作符====================
    @staticmethod
    def neg(x):
        return Operators._apply('neg', np.negative, x)

    # 一元函数====================
    @staticmethod
    def sin(x):
        return Operators._apply('sin', np.sin, x)

    @staticmethod
    def cos(x):
        return Operators._apply('cos', np.cos, x)

    @staticmethod
    def tan(x):
        return Operators._apply('tan', np.tan, x)

    @staticmethod
    def log(x):
        """以10为底"""
        if x <= 0:
            raise EvalError(ErrorKind.DOMAIN_ERROR, f"log({x!r}) is undefined")
        return Operators._apply('log', np.log10, x)

    @staticmethod
    def ln(x):
        """自然对数"""
        if x <= 0:
            raise EvalError(ErrorKind.DOMAIN_ERROR, f"ln({x!r}) is undefined")
        return Operators._apply('ln', np.log, x)

    @staticmethod
    def sqrt(x):
        if x < 0:
            raise EvalError(ErrorKind.DOMAIN_ERROR, f"sqrt({x!r}) is undefined")
        return Operators._apply('sqrt', np.sqrt, x)


# 优先级：+ - 为1，* / 为2，^ 为3；只有 ^ 右结合
OPERATOR_SPECS = MappingProxyType({
    '+': OperatorSpec('+', 1, Associativity.LEFT, Operators.add),
    '-': OperatorSpec('-', 1, Associativity.LEFT, Operators.sub),
    '*': OperatorSpec('*', 2, Associativity.LEFT, Operators.mul),
    '/': OperatorSpec('/', 2, Associativity.LEFT, Operators.div),
    '^': OperatorSpec('^', 3, Associativity.RIGHT, Operators.pow),
})

# 前缀一元操作符，按输入符号索引；后缀表达式中以 spec.symbol 出现
# 优先级与 ^ 相同且右结合：-2^2 = -(2^2)，-2*3 = (-2)*3
UNARY_OPERATOR_SPECS = MappingProxyType({
    '-': OperatorSpec('neg', 3, Associativity.RIGHT, Operators.neg, arity=1),
})

FUNCTION_SPECS = MappingProxyType({
    'sin': FunctionSpec('sin', Operators.sin),
    'cos': FunctionSpec('cos', Operators.cos),
    'tan': FunctionSpec('tan', Operators.tan),
    'log': FunctionSpec('log', Operators.log),
    'ln': FunctionSpec('ln', Operators.ln),
    'sqrt': FunctionSpec('sqrt', Operators.sqrt),
})

# 命名常数，分词时直接解析为数值Token
CONSTANTS = MappingProxyType({
    'π': math.pi,
    'pi': math.pi,
    'e': math.e,
})
