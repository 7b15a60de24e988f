"""Error kinds raised by vector operations.

Provider failures (ZeroDivisionError, ValueError, FloatingPointError,
decimal.InvalidOperation) are not wrapped; they reach the caller as raised.
"""


class DimensionMismatchError(ValueError):
    """Two operand vectors of an elementwise operation differ in length."""

    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(
            f"Both vector dimensions must be the same: {left} vs {right}"
        )


class IndexOutOfRangeError(IndexError):
    """Element index outside [0, dimensions)."""

    def __init__(self, index: int, dimensions: int):
        self.index = index
        self.dimensions = dimensions
        super().__init__(
            f"Index {index} out of range for vector of dimension {dimensions}"
        )
