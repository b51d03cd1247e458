from typing import Any


class LinqyError(Exception):
    """base class for every error raised by a query operation."""
    pass


class EmptySequenceError(LinqyError, ValueError):
    """the operand sequence (after any predicate) has no elements."""

    def __init__(self, message: str = "sequence contains no elements"):
        super().__init__(message)


class IndexOutOfRangeError(LinqyError, IndexError):
    """an index is negative or past the end of the sequence."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"index {index} is out of range for a sequence of length {length}")


class MultipleMatchesError(LinqyError, ValueError):
    """more than one element satisfies a single-element query."""

    def __init__(self, message: str = "sequence contains more than one matching element"):
        super().__init__(message)


class DuplicateKeyError(LinqyError, ValueError):
    """two elements map to the same dictionary key."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"an element with the key {key!r} has already been added")


class NonNumericError(LinqyError, TypeError):
    """a value cannot be coerced to a number for a numeric aggregate."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"cannot coerce {value!r} of type {type(value).__name__} to a number")
