"""Exceptions raised by the simulation engine."""


class LifeGridError(Exception):
    """Base class for engine errors."""


class OutOfBounds(LifeGridError, IndexError):
    """Coordinate outside the grid."""

    def __init__(self, row: int, col: int, shape):
        self.row = row
        self.col = col
        self.shape = tuple(shape)
        super().__init__(f"Cell ({row}, {col}) is outside grid of shape {self.shape}")


class UnknownPattern(LifeGridError, KeyError):
    """Pattern key not present in the library."""

    def __init__(self, key, available):
        self.key = key
        self.available = list(available)
        super().__init__(key)

    def __str__(self):
        return f"Pattern '{self.key}' not found. Available patterns: {self.available}"


class PatternTooLarge(LifeGridError, ValueError):
    """Pattern does not fit on the grid in at least one dimension."""

    def __init__(self, pattern_shape, grid_shape):
        self.pattern_shape = tuple(pattern_shape)
        self.grid_shape = tuple(grid_shape)
        super().__init__(
            f"Pattern of shape {self.pattern_shape} cannot fit on grid of shape {self.grid_shape}"
        )


class DimensionMismatch(LifeGridError, ValueError):
    """Two grids that must share a shape do not."""

    def __init__(self, left_shape, right_shape):
        self.left_shape = tuple(left_shape)
        self.right_shape = tuple(right_shape)
        super().__init__(f"Grid shapes differ: {self.left_shape} vs {self.right_shape}")
