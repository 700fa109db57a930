"""Exceptions raised by the data structures in this package."""


class DataStructureError(Exception):
    """Base class for errors reported by the containers."""


class UnderflowError(DataStructureError, IndexError):
    """Raised when an item is requested from an empty container."""


class IllegalArgumentError(DataStructureError, ValueError):
    """Raised when an argument is outside the range an operation accepts."""


class ArrayIndexOutOfBoundsError(DataStructureError, IndexError):
    """Raised when an index lies outside the valid range of a container."""