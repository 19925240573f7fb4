"""core/token_system.py"""
from enum import Enum


class TokenType(Enum):
    NUMBER = "number"  # 数值
    OPERATOR = "operator"  # 二元操作符
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class Token:
    """词法单元，创建后不可修改"""

    __slots__ = ('type', 'value', 'symbol', 'precedence', 'arity')

    def __init__(self, token_type, value=None, symbol=None, precedence=0, arity=0):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'symbol', symbol)
        object.__setattr__(self, 'precedence', precedence)
        object.__setattr__(self, 'arity', arity)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    @staticmethod
    def number(value):
        return Token(TokenType.NUMBER, value=float(value))

    @staticmethod
    def operator(symbol):
        if symbol not in OPERATOR_DEFINITIONS:
            raise KeyError(f"Unknown operator: {symbol!r}")
        return OPERATOR_DEFINITIONS[symbol]

    @property
    def is_number(self):
        return self.type == TokenType.NUMBER

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value, self.symbol) == (other.type, other.value, other.symbol)

    def __hash__(self):
        return hash((self.type, self.value, self.symbol))

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Number({self.value!r})"
        if self.type == TokenType.OPERATOR:
            return f"Operator({self.symbol!r})"
        return "LeftParen" if self.type == TokenType.LEFT_PAREN else "RightParen"

    def __str__(self):
        if self.type == TokenType.NUMBER:
            return repr(self.value)
        if self.type == TokenType.OPERATOR:
            return self.symbol
        return PAREN_SYMBOLS[self.type]


# 操作符定义：优先级越高结合越紧，全部为二元左结合
OPERATOR_DEFINITIONS = {
    '+': Token(TokenType.OPERATOR, symbol='+', precedence=1, arity=2),
    '-': Token(TokenType.OPERATOR, symbol='-', precedence=1, arity=2),
    '*': Token(TokenType.OPERATOR, symbol='*', precedence=2, arity=2),
    '/': Token(TokenType.OPERATOR, symbol='/', precedence=2, arity=2),
}

LEFT_PAREN = Token(TokenType.LEFT_PAREN)
RIGHT_PAREN = Token(TokenType.RIGHT_PAREN)

PAREN_SYMBOLS = {
    TokenType.LEFT_PAREN: '(',
    TokenType.RIGHT_PAREN: ')',
}

STRUCTURAL_TOKENS = {
    '(': LEFT_PAREN,
    ')': RIGHT_PAREN,
}


def precedence(symbol):
    """返回操作符优先级，未知符号为0"""
    token = OPERATOR_DEFINITIONS.get(symbol)
    return token.precedence if token is not None else 0
