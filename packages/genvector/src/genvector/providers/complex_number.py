"""Provider: complex_number — Python complex, principal square root."""
import cmath

from genvector.arithmetic import Arithmetic


class ComplexArithmetic(Arithmetic[complex]):
    name = 'complex_number'

    def add(self, a, b):
        return a + b

    def subtract(self, a, b):
        return a - b

    def multiply(self, a, b):
        return a * b

    def divide(self, a, b):
        return a / b

    def square_root(self, a):
        return cmath.sqrt(a)

    @property
    def zero(self):
        return 0j

    @property
    def one(self):
        return 1 + 0j

    @property
    def two(self):
        return 2 + 0j
