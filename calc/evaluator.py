"""表达式求值流水线 - 文本到结果的统一入口"""
import logging
import math
from typing import Optional

from core import tokenize, to_postfix, RPNEvaluator, ExpressionError
from utils.formatting import format_postfix

logger = logging.getLogger(__name__)


class EvaluationResult:
    """一次求值的结果：成功时有 value，失败时有 error 和 message"""

    def __init__(self, expression: str, value: Optional[float] = None,
                 error: Optional[str] = None, message: Optional[str] = None,
                 postfix: Optional[str] = None):
        self.expression = expression
        self.value = value
        self.error = error
        self.message = message
        self.postfix = postfix

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, expression: str, exc: ExpressionError, postfix: Optional[str] = None):
        return cls(expression, error=exc.kind, message=exc.message, postfix=postfix)

    def to_dict(self):
        return {
            'expression': self.expression,
            'postfix': self.postfix,
            'result': self.value,
            'error': self.error,
            'message': self.message,
        }

    def __eq__(self, other):
        if not isinstance(other, EvaluationResult):
            return NotImplemented
        mine, theirs = self.to_dict(), other.to_dict()
        a, b = mine.pop('result'), theirs.pop('result')
        if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
            return mine == theirs
        return a == b and mine == theirs

    def __repr__(self):
        if self.ok:
            return f"EvaluationResult({self.expression!r}, value={self.value!r})"
        return f"EvaluationResult({self.expression!r}, error={self.error!r})"


class ExpressionEvaluator:
    """文本 -> Token -> 后缀 -> 数值 的完整流水线"""

    def __init__(self, strict_parentheses=False, strict_stack=False):
        self.strict_parentheses = strict_parentheses
        self.strict_stack = strict_stack
        self._succeeded = 0
        self._failed = 0

    def tokenize(self, text: str):
        return tokenize(text)

    def to_postfix(self, tokens):
        return to_postfix(tokens, strict_parentheses=self.strict_parentheses)

    def evaluate(self, postfix) -> float:
        return RPNEvaluator.evaluate(postfix, strict_stack=self.strict_stack)

    def calculate(self, text: str) -> EvaluationResult:
        """
        Args:
            text: 一行表达式
        Returns:
            EvaluationResult，表达式错误不会抛出
        """
        expression = text.strip()
        postfix = None
        try:
            tokens = self.tokenize(text)
            postfix_tokens = self.to_postfix(tokens)
            postfix = format_postfix(postfix_tokens)
            value = self.evaluate(postfix_tokens)
        except ExpressionError as e:
            self._failed += 1
            logger.debug(f"Failed to evaluate {expression!r}: {e.kind}: {e.message}")
            return EvaluationResult.failure(expression, e, postfix=postfix)

        self._succeeded += 1
        logger.debug(f"{expression!r} -> [{postfix}] -> {value}")
        return EvaluationResult(expression, value=value, postfix=postfix)

    def log_stats(self):
        logger.info(f"Evaluated {self._succeeded + self._failed} expressions. "
                    f"Succeeded: {self._succeeded}, Failed: {self._failed}")


def evaluate_expression(text: str, **options) -> EvaluationResult:
    return ExpressionEvaluator(**options).calculate(text)
