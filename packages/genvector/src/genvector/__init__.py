"""
genvector — Generic Vectors
===========================

One vector type, any number system:

    genvector.Vector(elements, arithmetic=None)
        → Fixed-length vector. Provider resolved from the element types
          when not given.

    genvector.operations
        → add/subtract/multiply/divide, scalar_*, square_root,
          dot_product, norm, normalize, cosine_similarity, reflect,
          lerp, distance, length.

Provider registry:
    genvector.registry.get_registry()
        → Registry of arithmetic providers, YAML-configured, lazily loaded.
"""

__version__ = '0.1.0'

from genvector.arithmetic import Arithmetic
from genvector.errors import DimensionMismatchError, IndexOutOfRangeError
from genvector.registry import get_registry, Registry
from genvector.vector import Vector, for_each, pairwise_for_each
from genvector import operations

__all__ = [
    'Arithmetic',
    'DimensionMismatchError',
    'IndexOutOfRangeError',
    'Registry',
    'Vector',
    'for_each',
    'get_registry',
    'operations',
    'pairwise_for_each',
]
