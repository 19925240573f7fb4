"""core/lexer.py - 把输入文本切分为Token序列"""
import logging

from core.token_system import Token, OPERATOR_DEFINITIONS, STRUCTURAL_TOKENS
from core.errors import InvalidNumberError, EmptyInputError

logger = logging.getLogger(__name__)

NUMERAL_CHARS = frozenset('0123456789.')


def _parse_number(numeral):
    try:
        return Token.number(float(numeral))
    except ValueError:
        raise InvalidNumberError(f"Invalid number entered: {numeral!r}") from None


def tokenize(text):
    """
    从左到右扫描文本，生成中缀Token序列
    Args:
        text: 一行表达式文本（可包含换行和空白）
    Returns:
        Token列表
    Raises:
        InvalidNumberError: 数字缓冲区无法解析为浮点数
        EmptyInputError: 没有得到任何Token
    """
    tokens = []
    numeral = []

    for char in text:
        if char in NUMERAL_CHARS:
            numeral.append(char)
        elif char in STRUCTURAL_TOKENS or char in OPERATOR_DEFINITIONS:
            if numeral:
                tokens.append(_parse_number(''.join(numeral)))
                numeral.clear()
            if char in STRUCTURAL_TOKENS:
                tokens.append(STRUCTURAL_TOKENS[char])
            else:
                tokens.append(OPERATOR_DEFINITIONS[char])
        # 其他字符（空白、字母等）直接跳过，不会截断数字

    if numeral:
        tokens.append(_parse_number(''.join(numeral)))

    if not tokens:
        raise EmptyInputError("No tokens found.")

    logger.debug(f"Tokenized {text.strip()!r} into {len(tokens)} tokens")
    return tokens
