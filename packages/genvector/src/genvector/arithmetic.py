"""
Arithmetic Provider
===================
The capability an element type must supply before vectors of it can be
combined. Vector code never does numeric work itself; every scalar-level
step goes through one of these methods.

    add, subtract, multiply, divide   (a, b) → T
    square_root                       (a)    → T
    zero, one, two                    constants of T

Providers raise whatever their number system raises (ZeroDivisionError,
ValueError, ...). Callers see those errors unchanged.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar('T')


class Arithmetic(ABC, Generic[T]):
    """Elementary operations and constants for one numeric type."""

    name: str = 'abstract'

    @classmethod
    def for_type(cls, tp: type) -> 'Arithmetic':
        """Build a provider for a concrete Python type."""
        return cls()

    @abstractmethod
    def add(self, a: T, b: T) -> T:
        ...

    @abstractmethod
    def subtract(self, a: T, b: T) -> T:
        ...

    @abstractmethod
    def multiply(self, a: T, b: T) -> T:
        ...

    @abstractmethod
    def divide(self, a: T, b: T) -> T:
        ...

    @abstractmethod
    def square_root(self, a: T) -> T:
        ...

    @property
    @abstractmethod
    def zero(self) -> T:
        ...

    @property
    @abstractmethod
    def one(self) -> T:
        ...

    @property
    def two(self) -> T:
        return self.add(self.one, self.one)

    def __eq__(self, other: Any) -> bool:
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash((type(self), tuple(sorted(self.__dict__.items()))))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
