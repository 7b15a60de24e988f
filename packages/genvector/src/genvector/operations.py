"""
Vector Operations
=================
Static operation library over Vector. Every function returns a new
Vector (or a scalar) and leaves its operands untouched. Scalar work is
done by the left/first operand's Arithmetic Provider.

Elementwise:   add, subtract, multiply, divide
Scalar:        scalar_add, scalar_multiply, scalar_divide, square_root
Geometric:     dot_product, sum_of_squares, norm, normalize,
               cosine_similarity, reflect, lerp,
               distance, distance_squared, length, length_squared

Usage:
    from genvector import Vector, operations as ops

    ops.dot_product(Vector([1, 2, 3]), Vector([4, 5, 6]))   # → 32
    ops.lerp(Vector([0, 0]), Vector([10, 10]), 0.5)       # → Vector([5.0, 5.0])
"""

from typing import TypeVar

from genvector.vector import Vector, for_each, pairwise_for_each

T = TypeVar('T')


# =====================================================================
# Elementwise
# =====================================================================

def add(left: Vector[T], right: Vector[T]) -> Vector[T]:
    return pairwise_for_each(left, right, left.arithmetic.add)


def subtract(left: Vector[T], right: Vector[T]) -> Vector[T]:
    """Subtracts the second vector from the first."""
    return pairwise_for_each(left, right, left.arithmetic.subtract)


def multiply(left: Vector[T], right: Vector[T]) -> Vector[T]:
    return pairwise_for_each(left, right, left.arithmetic.multiply)


def divide(left: Vector[T], right: Vector[T]) -> Vector[T]:
    """Divides the first vector by the second."""
    return pairwise_for_each(left, right, left.arithmetic.divide)


# =====================================================================
# Scalar
# =====================================================================

def _scalar_vector(vector: Vector[T], scalar: T) -> Vector[T]:
    return Vector([scalar] * vector.dimensions, vector.arithmetic)


def scalar_add(vector: Vector[T], scalar: T) -> Vector[T]:
    return pairwise_for_each(vector, _scalar_vector(vector, scalar), vector.arithmetic.add)


def scalar_multiply(vector: Vector[T], scalar: T) -> Vector[T]:
    return pairwise_for_each(vector, _scalar_vector(vector, scalar), vector.arithmetic.multiply)


def scalar_divide(vector: Vector[T], scalar: T) -> Vector[T]:
    return pairwise_for_each(vector, _scalar_vector(vector, scalar), vector.arithmetic.divide)


def square_root(vector: Vector[T]) -> Vector[T]:
    """Per-element square root (not the norm). Empty input comes back as-is."""
    return for_each(vector, vector.arithmetic.square_root)


# =====================================================================
# Geometric
# =====================================================================

def dot_product(left: Vector[T], right: Vector[T]) -> T:
    """
    Sum of elementwise products.

    The fold starts from the first product rather than from zero, so the
    result keeps whatever type the provider's multiply returns. Two empty
    vectors give the provider's zero.
    """
    products = multiply(left, right)
    if products.dimensions == 0:
        return left.arithmetic.zero

    arith = left.arithmetic
    result = products[0]
    for value in products.elements[1:]:
        result = arith.add(result, value)
    return result


def sum_of_squares(vector: Vector[T]) -> T:
    """Squares every element, then sums, starting from zero."""
    arith = vector.arithmetic
    result = arith.zero
    for value in vector:
        result = arith.add(result, arith.multiply(value, value))
    return result


def norm(vector: Vector[T]) -> T:
    """L2 norm: square root of the vector dotted with itself."""
    return vector.arithmetic.square_root(dot_product(vector, vector))


def normalize(vector: Vector[T]) -> Vector[T]:
    """
    Unit vector in the same direction. A zero vector fails with whatever
    the provider raises for division by zero.
    """
    return scalar_divide(vector, norm(vector))


def cosine_similarity(left: Vector[T], right: Vector[T]) -> T:
    """
    Cosine of the angle between two non-zero vectors, in [-1, 1].

    Proportional vectors give 1, orthogonal 0, opposite -1. Each sum is
    seeded at zero. An all-zero operand makes the divisor zero, and the
    provider's division error propagates.
    """
    arith = left.arithmetic
    products = multiply(left, right)

    dividend = arith.zero
    for value in products:
        dividend = arith.add(dividend, value)

    sqrt_left = arith.square_root(sum_of_squares(left))
    sqrt_right = arith.square_root(sum_of_squares(right))
    divisor = arith.multiply(sqrt_left, sqrt_right)

    return arith.divide(dividend, divisor)


def reflect(vector: Vector[T], normal: Vector[T]) -> Vector[T]:
    """
    normal · dot(vector, normal) · 2.

    `vector` only enters through the dot product; it is not subtracted
    from the result as in v - 2(v·n)n.
    """
    dot = dot_product(vector, normal)
    result = scalar_multiply(normal, dot)
    return scalar_multiply(result, normal.arithmetic.two)


def lerp(first: Vector[T], second: Vector[T], amount: T) -> Vector[T]:
    """
    Linear interpolation: first·(1 - amount) + second·amount.
    `amount` is not clamped; values outside [0, 1] extrapolate.
    """
    arith = first.arithmetic
    return add(
        scalar_multiply(first, arith.subtract(arith.one, amount)),
        scalar_multiply(second, amount),
    )


def distance(first: Vector[T], second: Vector[T]) -> T:
    """Euclidean distance."""
    return first.arithmetic.square_root(distance_squared(first, second))


def distance_squared(first: Vector[T], second: Vector[T]) -> T:
    difference = subtract(first, second)
    return dot_product(difference, difference)


def length(first: Vector[T], second: Vector[T]) -> T:
    """Square root of length_squared(first, second)."""
    return first.arithmetic.square_root(length_squared(first, second))


def length_squared(first: Vector[T], second: Vector[T]) -> T:
    # Same formula as dot_product; not a distance between the two.
    return dot_product(first, second)
