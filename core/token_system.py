"""core/token_system.py"""
from enum import Enum


class TokenType(Enum):
    NUMBER = "number"          # 数值（常数在分词时已解析为数值）
    OPERATOR = "operator"      # 二元操作符 + - * / ^
    FUNCTION = "function"      # 一元函数 sin cos tan log ln sqrt
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class Token:
    """
    带类型的Token
    value: NUMBER为float，OPERATOR/FUNCTION为符号名，括号为原字符
    position: 在原始表达式中的起始位置，不参与相等比较
    """

    __slots__ = ('type', 'value', 'position')

    def __init__(self, token_type, value, position=None):
        self.type = token_type
        self.value = value
        self.position = position

    @classmethod
    def number(cls, value, position=None):
        return cls(TokenType.NUMBER, float(value), position)

    @classmethod
    def operator(cls, symbol, position=None):
        return cls(TokenType.OPERATOR, symbol, position)

    @classmethod
    def function(cls, name, position=None):
        return cls(TokenType.FUNCTION, name, position)

    @classmethod
    def left_paren(cls, position=None):
        return cls(TokenType.LEFT_PAREN, '(', position)

    @classmethod
    def right_paren(cls, position=None):
        return cls(TokenType.RIGHT_PAREN, ')', position)

    @property
    def name(self):
        """用于日志和后缀表达式展示的文本"""
        if self.type == TokenType.NUMBER:
            return repr(self.value)
        return self.value

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r})"


# 后缀表达式中允许出现的Token类型
POSTFIX_TOKEN_TYPES = frozenset({TokenType.NUMBER, TokenType.OPERATOR, TokenType.FUNCTION})
