"""
Generic Vector
==============
Fixed-length ordered sequence of numbers of any type that has an
Arithmetic Provider. The vector only handles shape and iteration; every
scalar computation is delegated to its provider.

Usage:
    from genvector import Vector

    v = Vector([1, 2, 3])
    v + Vector([4, 5, 6])      # → Vector([5, 7, 9])
    str(v)                     # → '[ 1, 2, 3 ]'
"""

import operator
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

from genvector import config
from genvector.arithmetic import Arithmetic
from genvector.errors import DimensionMismatchError, IndexOutOfRangeError
from genvector.registry import get_registry

T = TypeVar('T')


class Vector(Generic[T]):
    """
    A generic vector.

    The element list is private: construction copies its input, `elements`
    returns a tuple snapshot, and every operation returns a new Vector.
    Only item assignment mutates a vector in place.
    """

    __hash__ = None
    # numpy scalars on the left defer to the reflected operators
    __array_ufunc__ = None

    def __init__(
        self,
        elements: Optional[Iterable[T]] = None,
        arithmetic: Optional[Arithmetic] = None,
    ):
        self._elements = list(elements) if elements is not None else []
        if arithmetic is None:
            arithmetic = get_registry().resolve(self._elements)
        self._arithmetic = arithmetic

    @classmethod
    def factory(cls, *elements: T, arithmetic: Optional[Arithmetic] = None) -> 'Vector[T]':
        """Vector.factory(1, 2, 3) is Vector([1, 2, 3])."""
        return cls(elements, arithmetic)

    def clone(self) -> 'Vector[T]':
        """Independent copy with the same provider."""
        return Vector(self._elements, self._arithmetic)

    @property
    def arithmetic(self) -> Arithmetic:
        return self._arithmetic

    @property
    def dimensions(self) -> int:
        """Number of elements."""
        return len(self._elements)

    @property
    def elements(self) -> Tuple[T, ...]:
        """Snapshot of the elements at call time."""
        return tuple(self._elements)

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._elements):
            raise IndexOutOfRangeError(index, len(self._elements))
        return index

    def __getitem__(self, index: int) -> T:
        return self._elements[self._check_index(index)]

    def __setitem__(self, index: int, value: T):
        self._elements[self._check_index(index)] = value

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._elements))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._elements == other._elements

    def __str__(self) -> str:
        fmt = config.CONFIG['format']
        body = fmt['separator'].join(str(e) for e in self._elements)
        return f"{fmt['open']}{body}{fmt['close']}"

    def __repr__(self) -> str:
        return f"Vector({self._elements!r}, arithmetic={self._arithmetic.name})"

    # -----------------------------------------------------------------
    # Operators. Vector operands are elementwise; anything else is a
    # scalar broadcast to this vector's dimension.
    # -----------------------------------------------------------------

    def _broadcast(self, scalar: T) -> 'Vector[T]':
        return Vector([scalar] * len(self._elements), self._arithmetic)

    def _binary(self, other: Any, operation: Callable[[T, T], T]) -> 'Vector[T]':
        if not isinstance(other, Vector):
            other = self._broadcast(other)
        return pairwise_for_each(self, other, operation)

    def _reflected(self, other: Any, operation: Callable[[T, T], T]) -> 'Vector[T]':
        return pairwise_for_each(self._broadcast(other), self, operation)

    def __add__(self, other):
        return self._binary(other, self._arithmetic.add)

    def __radd__(self, other):
        return self._reflected(other, self._arithmetic.add)

    def __sub__(self, other):
        return self._binary(other, self._arithmetic.subtract)

    def __rsub__(self, other):
        return self._reflected(other, self._arithmetic.subtract)

    def __mul__(self, other):
        return self._binary(other, self._arithmetic.multiply)

    def __rmul__(self, other):
        return self._reflected(other, self._arithmetic.multiply)

    def __truediv__(self, other):
        return self._binary(other, self._arithmetic.divide)

    def __rtruediv__(self, other):
        return self._reflected(other, self._arithmetic.divide)

    def __neg__(self):
        arith = self._arithmetic
        return self._binary(arith.subtract(arith.zero, arith.one), arith.multiply)


def pairwise_for_each(
    left: Vector[T],
    right: Vector[T],
    operation: Callable[[T, T], T],
) -> Vector[T]:
    """
    Apply `operation` to each index-aligned pair, in index order,
    collecting the results in a new vector with the left provider.
    """
    if left.dimensions != right.dimensions:
        raise DimensionMismatchError(left.dimensions, right.dimensions)

    results = []
    for index in range(left.dimensions):
        results.append(operation(left[index], right[index]))
    return Vector(results, left.arithmetic)


def for_each(vector: Vector[T], operation: Callable[[T], T]) -> Vector[T]:
    """Apply `operation` to every element. An empty vector is returned as-is."""
    if vector.dimensions == 0:
        return vector

    return Vector([operation(e) for e in vector], vector.arithmetic)
