"""rpncalc/token_system.py"""
from enum import Enum

from rpncalc.errors import InvalidOperator


class TokenType(Enum):
    OPERAND = "operand"  # 数字
    OPERATOR = "operator"  # + - * /
    BRACKET = "bracket"  # ( )


class Token:
    __slots__ = ('type', 'name', 'value', 'precedence', 'symbol')

    def __init__(self, token_type, name, value=None, precedence=None, symbol=None):
        # Token在所有表达式之间共享，构造后不可修改
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'precedence', precedence)  # 只有运算符有优先级
        object.__setattr__(self, 'symbol', symbol if symbol is not None else str(value))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Token, (self.type, self.name, self.value, self.precedence, self.symbol))

    def is_operand(self):
        return self.type == TokenType.OPERAND

    def is_operator(self):
        return self.type == TokenType.OPERATOR

    def _key(self):
        return (self.type, self.name, self.value)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        if self.is_operand():
            return f"{self.name}({self.value})"
        return self.name


PLUS = Token(TokenType.OPERATOR, 'Plus', precedence=0, symbol='+')
MINUS = Token(TokenType.OPERATOR, 'Minus', precedence=0, symbol='-')
MULTIPLY = Token(TokenType.OPERATOR, 'Multiply', precedence=1, symbol='*')
DIVIDE = Token(TokenType.OPERATOR, 'Divide', precedence=1, symbol='/')
LEFT_PAREN = Token(TokenType.BRACKET, 'LeftParen', symbol='(')
RIGHT_PAREN = Token(TokenType.BRACKET, 'RightParen', symbol=')')


def number(value):
    """
    创建数字Token
    数字永远是非负整数，负数只能通过运算得到
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Number token must hold an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"Number token cannot be negative, got {value}")
    return Token(TokenType.OPERAND, 'Number', value=value)


# 字符到Token的直接映射（'-' 需要看下一个字符，不在这里处理）
TOKEN_DEFINITIONS = {
    '+': PLUS,
    '*': MULTIPLY,
    '/': DIVIDE,
    '(': LEFT_PAREN,
    ')': RIGHT_PAREN,
}

# '-(' 改写为 '+(0-1)*(' ，用来表示负号而不产生负数字面量
NEGATE_GROUP = (
    PLUS,
    LEFT_PAREN,
    number(0),
    MINUS,
    number(1),
    RIGHT_PAREN,
    MULTIPLY,
)


def precedence(token):
    """返回运算符优先级：乘除为1，加减为0"""
    if not token.is_operator():
        raise InvalidOperator(f"Precedence of token '{token!r}' cannot be found.")
    return token.precedence
