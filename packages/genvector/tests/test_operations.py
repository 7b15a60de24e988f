"""Tests for the vector operation library."""

import decimal
import math
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from genvector import Vector, DimensionMismatchError
from genvector import operations as ops
from genvector.providers.floating import FloatArithmetic


class CountingArithmetic(FloatArithmetic):
    """Float provider that records square_root calls."""

    def __init__(self):
        self.sqrt_calls = 0

    def square_root(self, a):
        self.sqrt_calls += 1
        return super().square_root(a)


class SentinelZeroArithmetic(FloatArithmetic):
    """Float provider that counts reads of its zero constant."""

    def __init__(self):
        self.zero_reads = 0

    @property
    def zero(self):
        self.zero_reads += 1
        return 0.0


def random_pair(n=8, seed=42):
    rng = np.random.RandomState(seed)
    return Vector(rng.randn(n).tolist()), Vector(rng.randn(n).tolist())


class TestElementwise:

    def test_add(self):
        assert ops.add(Vector([1, 2, 3]), Vector([4, 5, 6])) == Vector([5, 7, 9])

    def test_subtract(self):
        assert ops.subtract(Vector([5, 3, 1]), Vector([1, 2, 3])) == Vector([4, 1, -2])

    def test_multiply(self):
        assert ops.multiply(Vector([1, 2, 3]), Vector([4, 5, 6])) == Vector([4, 10, 18])

    def test_divide(self):
        assert ops.divide(Vector([1.0, 9.0]), Vector([4.0, 3.0])) == Vector([0.25, 3.0])

    def test_add_commutative(self):
        left, right = random_pair()
        assert ops.add(left, right) == ops.add(right, left)

    def test_empty(self):
        assert ops.add(Vector(), Vector()).dimensions == 0

    @pytest.mark.parametrize('func', [ops.add, ops.subtract, ops.multiply, ops.divide])
    def test_dimension_mismatch(self, func):
        with pytest.raises(DimensionMismatchError):
            func(Vector([1, 2]), Vector([1, 2, 3]))

    def test_divide_by_zero_element_propagates(self):
        with pytest.raises(ZeroDivisionError):
            ops.divide(Vector([1.0, 2.0]), Vector([1.0, 0.0]))

    def test_operands_untouched(self):
        left = Vector([1, 2, 3])
        right = Vector([4, 5, 6])
        ops.add(left, right)
        ops.multiply(left, right)
        assert left.elements == (1, 2, 3)
        assert right.elements == (4, 5, 6)

    def test_result_is_new_instance(self):
        left = Vector([1, 2])
        result = ops.add(left, Vector([0, 0]))
        assert result == left
        assert result is not left


class TestScalar:

    def test_scalar_add(self):
        assert ops.scalar_add(Vector([1, 2]), 10) == Vector([11, 12])

    def test_scalar_multiply(self):
        assert ops.scalar_multiply(Vector([1, 2, 3]), 3) == Vector([3, 6, 9])

    def test_scalar_divide(self):
        assert ops.scalar_divide(Vector([2.0, 5.0]), 2.0) == Vector([1.0, 2.5])

    def test_scalar_divide_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            ops.scalar_divide(Vector([1.0]), 0.0)

    def test_scalar_on_empty(self):
        assert ops.scalar_multiply(Vector(), 5.0).dimensions == 0

    def test_square_root_elementwise(self):
        assert ops.square_root(Vector([4.0, 9.0, 16.0])) == Vector([2.0, 3.0, 4.0])

    def test_square_root_integer(self):
        assert ops.square_root(Vector([4, 10])) == Vector([2, 3])

    def test_square_root_empty_returns_same_vector(self):
        arith = CountingArithmetic()
        v = Vector([], arithmetic=arith)
        result = ops.square_root(v)
        assert result is v
        assert result.dimensions == 0
        assert arith.sqrt_calls == 0

    def test_square_root_negative_propagates(self):
        with pytest.raises(ValueError):
            ops.square_root(Vector([4.0, -1.0]))


class TestDotProduct:

    def test_known(self):
        assert ops.dot_product(Vector([1, 2, 3]), Vector([4, 5, 6])) == 32

    def test_orthogonal_is_zero(self):
        v = Vector([1, 0, 0])
        result = ops.dot_product(v, Vector([0, 1, 0]))
        assert result == v.arithmetic.zero

    def test_commutative(self):
        left, right = random_pair()
        assert ops.dot_product(left, right) == ops.dot_product(right, left)

    def test_empty_is_zero(self):
        assert ops.dot_product(Vector(), Vector()) == 0.0
        assert ops.dot_product(Vector([]), Vector([])) == 0.0

    def test_single_element(self):
        assert ops.dot_product(Vector([3]), Vector([4])) == 12

    def test_fold_seeded_with_first_product(self):
        # 0.0 + -0.0 is +0.0, so only a first-term seed keeps the sign
        result = ops.dot_product(Vector([-0.0]), Vector([1.0]))
        assert math.copysign(1.0, result) == -1.0

    def test_zero_not_used_when_non_empty(self):
        arith = SentinelZeroArithmetic()
        v = Vector([1.0, 2.0], arithmetic=arith)
        assert ops.dot_product(v, v.clone()) == 5.0
        assert arith.zero_reads == 0

    def test_sum_of_squares_seeded_with_zero(self):
        arith = SentinelZeroArithmetic()
        ops.sum_of_squares(Vector([1.0, 2.0], arithmetic=arith))
        assert arith.zero_reads == 1

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            ops.dot_product(Vector([1, 2]), Vector([1, 2, 3]))

    def test_decimal(self):
        result = ops.dot_product(
            Vector([Decimal('0.1'), Decimal('0.2')]),
            Vector([Decimal('10'), Decimal('10')]),
        )
        assert result == Decimal('3.0')


class TestSumOfSquares:

    def test_known(self):
        assert ops.sum_of_squares(Vector([1, 2, 3])) == 14

    def test_empty_is_zero(self):
        assert ops.sum_of_squares(Vector()) == 0.0

    def test_matches_self_dot(self):
        v, _ = random_pair()
        assert ops.sum_of_squares(v) == pytest.approx(ops.dot_product(v, v))


class TestNorm:

    def test_known(self):
        assert ops.norm(Vector([3.0, 4.0])) == 5.0

    def test_integer(self):
        assert ops.norm(Vector([3, 4])) == 5

    def test_non_negative(self):
        v, _ = random_pair()
        assert ops.norm(v) >= 0.0

    def test_normalize_unit_length(self):
        v, _ = random_pair(n=5, seed=7)
        assert ops.norm(ops.normalize(v)) == pytest.approx(1.0)

    def test_normalize_known(self):
        result = ops.normalize(Vector([3.0, 4.0]))
        assert result[0] == pytest.approx(0.6)
        assert result[1] == pytest.approx(0.8)

    def test_normalize_zero_vector_float(self):
        with pytest.raises(ZeroDivisionError):
            ops.normalize(Vector([0.0, 0.0]))

    def test_normalize_zero_vector_decimal(self):
        with pytest.raises(decimal.InvalidOperation):
            ops.normalize(Vector([Decimal(0), Decimal(0)]))

    def test_normalize_zero_vector_numpy(self):
        with pytest.raises(FloatingPointError):
            ops.normalize(Vector([np.float64(0.0), np.float64(0.0)]))


class TestCosineSimilarity:

    def test_identical(self):
        v = Vector([1.0, 2.0, 3.0])
        assert ops.cosine_similarity(v, v.clone()) == pytest.approx(1.0)

    def test_opposite(self):
        assert ops.cosine_similarity(Vector([1.0, 0.0]), Vector([-1.0, 0.0])) == pytest.approx(-1.0)

    def test_orthogonal(self):
        assert ops.cosine_similarity(Vector([1.0, 0.0]), Vector([0.0, 1.0])) == pytest.approx(0.0)

    def test_scale_invariant(self):
        a = Vector([1.0, 2.0, 3.0])
        b = Vector([2.0, 1.0, 0.5])
        scaled = ops.scalar_multiply(a, 10.0)
        assert ops.cosine_similarity(scaled, b) == pytest.approx(ops.cosine_similarity(a, b))

    def test_zero_vector_propagates(self):
        with pytest.raises(ZeroDivisionError):
            ops.cosine_similarity(Vector([0.0, 0.0]), Vector([1.0, 2.0]))

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            ops.cosine_similarity(Vector([1.0, 2.0]), Vector([1.0, 2.0, 3.0]))


class TestReflect:

    def test_scales_normal_by_twice_dot(self):
        result = ops.reflect(Vector([1.0, 1.0]), Vector([0.0, 1.0]))
        assert result == Vector([0.0, 2.0])

    def test_input_only_enters_through_dot(self):
        normal = Vector([0.0, 1.0])
        a = ops.reflect(Vector([5.0, 1.0]), normal)
        b = ops.reflect(Vector([-3.0, 1.0]), normal)
        assert a == b

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            ops.reflect(Vector([1.0, 2.0]), Vector([1.0]))


class TestLerp:

    def test_midpoint(self):
        assert ops.lerp(Vector([0, 0]), Vector([10, 10]), 0.5) == Vector([5, 5])

    def test_endpoints(self):
        a = Vector([1.0, 2.0])
        b = Vector([3.0, 6.0])
        assert ops.lerp(a, b, 0.0) == a
        assert ops.lerp(a, b, 1.0) == b

    def test_extrapolates(self):
        assert ops.lerp(Vector([0.0]), Vector([10.0]), 2.0) == Vector([20.0])

    def test_rational_exact(self):
        result = ops.lerp(Vector([Fraction(0)]), Vector([Fraction(1)]), Fraction(1, 3))
        assert result == Vector([Fraction(1, 3)])


class TestDistance:

    def test_distance_known(self):
        assert ops.distance(Vector([0, 0]), Vector([3, 4])) == 5

    def test_distance_same_point(self):
        assert ops.distance(Vector([1.0, 2.0, 3.0]), Vector([1.0, 2.0, 3.0])) == 0.0

    def test_distance_squared(self):
        assert ops.distance_squared(Vector([1, 2]), Vector([4, 6])) == 25

    def test_symmetric(self):
        a, b = random_pair()
        assert ops.distance(a, b) == pytest.approx(ops.distance(b, a))

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            ops.distance(Vector([1, 2]), Vector([1, 2, 3]))


class TestLength:

    def test_length_squared_is_dot_product(self):
        a = Vector([1, 2])
        b = Vector([3, 4])
        assert ops.length_squared(a, b) == ops.dot_product(a, b) == 11

    def test_length(self):
        assert ops.length(Vector([1.0, 2.0]), Vector([3.0, 4.0])) == pytest.approx(11.0 ** 0.5)

    def test_length_of_vector_with_itself_is_norm(self):
        v = Vector([3.0, 4.0])
        assert ops.length(v, v) == ops.norm(v)
