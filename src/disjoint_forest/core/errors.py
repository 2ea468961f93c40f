"""Error types raised by the disjoint-set forest."""


class DisjointSetError(Exception):
    """Base class for all disjoint-set forest errors."""


class InvalidArgumentError(DisjointSetError, ValueError):
    """Raised when a forest is created with an invalid size."""


class IndexOutOfRangeError(DisjointSetError, IndexError):
    """Raised when an element index falls outside ``[0, size)``.

    Attributes:
        index: The offending element index.
        size: Number of elements in the forest.
    """

    def __init__(self, index: object, size: int) -> None:
        self.index = index
        self.size = size
        if size == 0:
            message = f"Index {index!r} is out of range: forest is empty"
        else:
            message = f"Index {index!r} is out of range: valid indices are [0, {size})"
        super().__init__(message)
