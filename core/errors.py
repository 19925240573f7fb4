"""core/errors.py - 表达式求值过程中的错误类型"""


class ExpressionError(Exception):
    """所有表达式错误的基类，kind 用于区分错误种类"""
    kind = "ExpressionError"

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class InvalidNumberError(ExpressionError):
    kind = "InvalidNumber"


class EmptyInputError(ExpressionError):
    kind = "EmptyInput"


class MismatchedParenthesesError(ExpressionError):
    kind = "MismatchedParentheses"


class InsufficientOperandsError(ExpressionError):
    kind = "InsufficientOperands"


class MalformedTokenError(ExpressionError):
    kind = "MalformedToken"


class EmptyResultError(ExpressionError):
    kind = "EmptyResult"


class ExcessOperandsError(ExpressionError):
    """严格模式下求值结束时栈中剩余多个值"""
    kind = "ExcessOperands"


ERROR_KINDS = [
    cls.kind for cls in (
        InvalidNumberError, EmptyInputError, MismatchedParenthesesError,
        InsufficientOperandsError, MalformedTokenError, EmptyResultError,
        ExcessOperandsError,
    )
]
