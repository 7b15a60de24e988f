"""Provider: integer — Python int (and bool) with floor division."""
import math

from genvector.arithmetic import Arithmetic


class IntegerArithmetic(Arithmetic[int]):
    """
    Arbitrary-precision integers.

    divide floors (``//``) and square_root is ``math.isqrt``, so every result
    stays an int. Negative roots raise ValueError, zero divisors raise
    ZeroDivisionError.
    """

    name = 'integer'

    def add(self, a, b):
        return a + b

    def subtract(self, a, b):
        return a - b

    def multiply(self, a, b):
        return a * b

    def divide(self, a, b):
        return a // b

    def square_root(self, a):
        return math.isqrt(a)

    @property
    def zero(self):
        return 0

    @property
    def one(self):
        return 1

    @property
    def two(self):
        return 2
