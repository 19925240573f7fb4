"""核心模块 - Token系统、词法分析、调度场转换和RPN评估器"""
from .token_system import (
    TokenType, Token, OPERATOR_DEFINITIONS, LEFT_PAREN, RIGHT_PAREN, precedence
)
from .errors import (
    ExpressionError, InvalidNumberError, EmptyInputError,
    MismatchedParenthesesError, InsufficientOperandsError,
    MalformedTokenError, EmptyResultError, ExcessOperandsError, ERROR_KINDS
)
from .lexer import tokenize
from .shunting_yard import to_postfix
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

__all__ = [
    'TokenType', 'Token', 'OPERATOR_DEFINITIONS', 'LEFT_PAREN', 'RIGHT_PAREN',
    'precedence', 'ExpressionError', 'InvalidNumberError', 'EmptyInputError',
    'MismatchedParenthesesError', 'InsufficientOperandsError',
    'MalformedTokenError', 'EmptyResultError', 'ExcessOperandsError',
    'ERROR_KINDS', 'tokenize', 'to_postfix', 'RPNEvaluator', 'Operators'
]
