from typing import Optional


class QueryError(Exception):
    """base class for every failure raised by a query operator."""

    def __init__(self, message: str, inner_exception: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.inner_exception = inner_exception
        if inner_exception is not None:
            self.__cause__ = inner_exception

    def __str__(self) -> str:
        return self.message


class EmptySequenceError(QueryError, ValueError):
    """the (filtered) sequence had no elements where at least one was required."""


class CardinalityError(QueryError, ValueError):
    """more than one element matched where exactly one was required."""


class IndexOutOfRangeError(QueryError, IndexError):
    """an index fell outside the sequence."""

    def __init__(self, index: int, length: int):
        super().__init__(f"index {index} lies outside a sequence of length {length}")
        self.index = index
        self.length = length


class MissingCapabilityError(QueryError, TypeError):
    """an element lacks the comparable, cloneable or numeric capability an operator needs."""


class NullSourceError(EmptySequenceError):
    """a primary or secondary sequence was absent rather than merely empty."""
