"""
Provider: numpy_scalar — numpy scalar dtypes.

Results keep the provider's dtype. Floating operations run under
np.errstate(divide='raise', invalid='raise', over='raise'), so division by
zero and the square root of a negative surface as FloatingPointError
instead of inf/nan.

Integer dtypes are computed exactly on Python ints and range-checked
against np.iinfo, since numpy wraps integer overflow silently. They
floor-divide, and square_root is math.isqrt (negative → ValueError).
"""

import math
import operator

import numpy as np

from genvector.arithmetic import Arithmetic


class NumpyArithmetic(Arithmetic[np.generic]):
    name = 'numpy_scalar'

    def __init__(self, dtype=np.float64):
        self.dtype = np.dtype(dtype)

    @classmethod
    def for_type(cls, tp: type) -> 'NumpyArithmetic':
        return cls(tp)

    @property
    def _integral(self) -> bool:
        return np.issubdtype(self.dtype, np.integer)

    def _cast(self, value):
        return self.dtype.type(value)

    def _checked(self, value: int):
        info = np.iinfo(self.dtype)
        if not info.min <= value <= info.max:
            raise FloatingPointError(f"{value} overflows {self.dtype.name}")
        return self._cast(value)

    def _integer_op(self, op, a, b):
        return self._checked(op(int(a), int(b)))

    def add(self, a, b):
        if self._integral:
            return self._integer_op(operator.add, a, b)
        with np.errstate(over='raise', invalid='raise'):
            return self._cast(np.add(a, b, dtype=self.dtype))

    def subtract(self, a, b):
        if self._integral:
            return self._integer_op(operator.sub, a, b)
        with np.errstate(over='raise', invalid='raise'):
            return self._cast(np.subtract(a, b, dtype=self.dtype))

    def multiply(self, a, b):
        if self._integral:
            return self._integer_op(operator.mul, a, b)
        with np.errstate(over='raise', invalid='raise'):
            return self._cast(np.multiply(a, b, dtype=self.dtype))

    def divide(self, a, b):
        if self._integral:
            if b == 0:
                raise FloatingPointError("integer divide by zero")
            return self._integer_op(operator.floordiv, a, b)
        with np.errstate(divide='raise', invalid='raise', over='raise'):
            return self._cast(np.divide(a, b, dtype=self.dtype))

    def square_root(self, a):
        if self._integral:
            return self._cast(math.isqrt(int(a)))
        with np.errstate(invalid='raise'):
            return self._cast(np.sqrt(a, dtype=self.dtype))

    @property
    def zero(self):
        return self._cast(0)

    @property
    def one(self):
        return self._cast(1)

    @property
    def two(self):
        return self._cast(2)

    def __repr__(self) -> str:
        return f"NumpyArithmetic(dtype={self.dtype.name})"
