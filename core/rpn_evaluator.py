"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.token_system import TokenType
from core.operators import Operators
from core.errors import (
    InsufficientOperandsError,
    MalformedTokenError,
    EmptyResultError,
    ExcessOperandsError,
)

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, strict_stack=False):
        """
        评估后缀表达式
        Args:
            token_sequence: to_postfix() 产生的后缀Token序列
            strict_stack: 为True时，结束后栈中剩余多个值视为错误
        Returns:
            float 结果
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)

            elif token.type == TokenType.OPERATOR:
                if len(stack) < token.arity:
                    logger.debug(f"Insufficient operands for {token.symbol}")
                    raise InsufficientOperandsError(
                        f"Invalid expression: operator '{token.symbol}' needs {token.arity} operands."
                    )
                # 先弹出的是右操作数
                operands = [stack.pop() for _ in range(token.arity)][::-1]
                stack.append(Operators.apply(token.symbol, *operands))

            else:
                # 括号不可能出现在合法的后缀序列中
                raise MalformedTokenError("Invalid token in output queue")

        if not stack:
            raise EmptyResultError("Invalid expression: nothing to evaluate.")

        if len(stack) > 1:
            if strict_stack:
                raise ExcessOperandsError(
                    f"Invalid expression: {len(stack)} values left after evaluation, expected 1."
                )
            logger.debug(f"Stack has {len(stack)} elements after evaluation, using top")

        return float(stack[-1])
