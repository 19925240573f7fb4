"""core/operators.py"""
import numpy as np
import logging

from core.errors import MalformedTokenError

logger = logging.getLogger(__name__)


class Operators:
    """二元算术操作符的静态方法集合，按IEEE 754双精度计算"""

    @staticmethod
    def _as_float64(x):
        return np.float64(x)

    @staticmethod
    def add(a, b):
        with np.errstate(all='ignore'):
            return np.add(Operators._as_float64(a), Operators._as_float64(b))

    @staticmethod
    def sub(a, b):
        with np.errstate(all='ignore'):
            return np.subtract(Operators._as_float64(a), Operators._as_float64(b))

    @staticmethod
    def mul(a, b):
        with np.errstate(all='ignore'):
            return np.multiply(Operators._as_float64(a), Operators._as_float64(b))

    @staticmethod
    def div(a, b):
        """除零不报错：返回 inf / -inf / nan"""
        with np.errstate(all='ignore'):
            return np.divide(Operators._as_float64(a), Operators._as_float64(b))

    @staticmethod
    def apply(symbol, a, b):
        op_method = SYMBOL_TO_METHOD.get(symbol)
        if op_method is None:
            logger.error(f"Unknown binary operator: {symbol}")
            raise MalformedTokenError(f"Invalid operation entered: {symbol!r}")
        return op_method(a, b)


SYMBOL_TO_METHOD = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
}
