"""Provider: rational — fractions.Fraction with exact square roots only."""
import math
from fractions import Fraction

from genvector.arithmetic import Arithmetic


def _exact_isqrt(n: int) -> int:
    root = math.isqrt(n)
    if root * root != n:
        raise ValueError(f"{n} is not a perfect square")
    return root


class RationalArithmetic(Arithmetic[Fraction]):
    """
    Exact rationals. square_root succeeds only when numerator and
    denominator are both perfect squares (e.g. 9/4 → 3/2); anything else
    has no rational root and raises ValueError.
    """

    name = 'rational'

    def add(self, a, b):
        return Fraction(a) + Fraction(b)

    def subtract(self, a, b):
        return Fraction(a) - Fraction(b)

    def multiply(self, a, b):
        return Fraction(a) * Fraction(b)

    def divide(self, a, b):
        return Fraction(a) / Fraction(b)

    def square_root(self, a):
        a = Fraction(a)
        if a < 0:
            raise ValueError(f"Negative value has no rational square root: {a}")
        try:
            return Fraction(_exact_isqrt(a.numerator), _exact_isqrt(a.denominator))
        except ValueError:
            raise ValueError(f"{a} has no rational square root") from None

    @property
    def zero(self):
        return Fraction(0)

    @property
    def one(self):
        return Fraction(1)

    @property
    def two(self):
        return Fraction(2)
