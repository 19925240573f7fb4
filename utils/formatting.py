"""utils/formatting.py"""
import math
import numpy as np


def format_number(value):
    """
    最短往返的定点十进制表示，不使用科学计数法：
    11.0 -> '11', -0.0 -> '-0', 1e-7 -> '0.0000001'；特殊值输出为 inf / -inf / NaN
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(value, unique=True, trim='-')


def format_postfix(tokens):
    """把后缀Token序列渲染为空格分隔的字符串，例如 '3 4 2 * +'"""
    parts = []
    for token in tokens:
        if token.is_number:
            parts.append(format_number(token.value))
        else:
            parts.append(str(token))
    return ' '.join(parts)


def format_result(result):
    if result.ok:
        return f"Result: {format_number(result.value)}"
    return f"Error: {result.message}"
