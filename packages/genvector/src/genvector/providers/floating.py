"""Provider: floating — IEEE-754 doubles via the math module."""
import math

from genvector.arithmetic import Arithmetic


class FloatArithmetic(Arithmetic[float]):
    name = 'floating'

    def add(self, a, b):
        return a + b

    def subtract(self, a, b):
        return a - b

    def multiply(self, a, b):
        return a * b

    def divide(self, a, b):
        return a / b

    def square_root(self, a):
        # math domain error on negatives
        return math.sqrt(a)

    @property
    def zero(self):
        return 0.0

    @property
    def one(self):
        return 1.0

    @property
    def two(self):
        return 2.0
