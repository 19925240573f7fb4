"""core/shunting_yard.py - 中缀转后缀（调度场算法）"""
import logging
from collections import deque

from core.token_system import TokenType, precedence
from core.errors import MismatchedParenthesesError

logger = logging.getLogger(__name__)


def to_postfix(tokens, strict_parentheses=False):
    """
    把中缀Token序列转换为后缀（RPN）序列
    Args:
        tokens: tokenize() 产生的Token序列
        strict_parentheses: 为True时，多余的右括号也视为括号不匹配
    Returns:
        后缀顺序的Token列表
    """
    output_queue = deque()
    operator_stack = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output_queue.append(token)

        elif token.type == TokenType.LEFT_PAREN:
            operator_stack.append(token)

        elif token.type == TokenType.RIGHT_PAREN:
            matched = False
            while operator_stack:
                top = operator_stack.pop()
                if top.type == TokenType.LEFT_PAREN:
                    matched = True
                    break
                output_queue.append(top)
            if not matched:
                if strict_parentheses:
                    raise MismatchedParenthesesError("Mismatched parentheses")
                logger.debug("Unmatched right parenthesis ignored")

        elif token.type == TokenType.OPERATOR:
            # 左括号或更低优先级的操作符会停止弹栈
            while operator_stack:
                top = operator_stack[-1]
                if top.type == TokenType.OPERATOR and precedence(token.symbol) <= precedence(top.symbol):
                    output_queue.append(operator_stack.pop())
                else:
                    break
            operator_stack.append(token)

    while operator_stack:
        top = operator_stack.pop()
        if top.type == TokenType.LEFT_PAREN:
            raise MismatchedParenthesesError("Mismatched parentheses")
        output_queue.append(top)

    logger.debug(f"Postfix: {' '.join(str(t) for t in output_queue)}")
    return list(output_queue)
