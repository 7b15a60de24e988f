"""Provider: decimal_number — decimal.Decimal under the active context."""
from decimal import Decimal

from genvector.arithmetic import Arithmetic


class DecimalArithmetic(Arithmetic[Decimal]):
    """
    Decimal arithmetic. Precision and traps come from
    ``decimal.getcontext()``; with the default context a zero divisor raises
    DivisionByZero and a negative root raises InvalidOperation.
    """

    name = 'decimal_number'

    def add(self, a, b):
        return a + b

    def subtract(self, a, b):
        return a - b

    def multiply(self, a, b):
        return a * b

    def divide(self, a, b):
        return a / b

    def square_root(self, a):
        return Decimal(a).sqrt()

    @property
    def zero(self):
        return Decimal(0)

    @property
    def one(self):
        return Decimal(1)

    @property
    def two(self):
        return Decimal(2)
