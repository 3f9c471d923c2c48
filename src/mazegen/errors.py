# src/mazegen/errors.py
# Failure taxonomy for maze construction and generation.


class MazeError(Exception):
    """Base class for every error raised by mazegen."""


class InvalidDimensions(MazeError, ValueError):
    """Width or height is not a positive integer."""


class IndexOutOfRange(MazeError, IndexError):
    """A wall or cell index fell outside its grid domain."""


class AlgorithmInvariantViolated(MazeError, RuntimeError):
    """Generation exhausted its draw budget before the grid became one partition."""
