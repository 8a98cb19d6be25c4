from __future__ import annotations
import typing
from ..capabilities import equals, require_comparable
from ..exceptions import NullSourceError
from ..types import *

if typing.TYPE_CHECKING:
    from ..queryable import Queryable

class _SetOperations(Generic[T]):
    """
    set-theoretic operations over comparison equality. two elements are equal
    when their three-way comparison returns zero, so every element involved
    must be comparable. results keep duplicates and order as documented per
    operation; nothing here hashes elements.
    """

    def _comparable_data(self: 'Queryable[T]') -> List[T]:
        data = self._get_data()
        for item in data:
            require_comparable(item)
        return data

    def _other_items(self: 'Queryable[T]', other: Iterable[T]) -> List[T]:
        if other is None:
            raise self._fail(NullSourceError("input sequence is absent"))
        return list(other)

    def contains(self: 'Queryable[T]', value: T) -> bool:
        """true if some element compares equal to value"""
        return any(equals(item, value) for item in self._comparable_data())

    def distinct(self: 'Queryable[T]') -> 'Queryable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..queryable import Queryable
        result = []
        for item in self._comparable_data():
            if not any(equals(kept, item) for kept in result):
                result.append(item)
        return Queryable._wrap(result)

    def except_(self: 'Queryable[T]', other: Iterable[T]) -> 'Queryable[T]':
        """elements of this sequence equal to no element of other. every match is removed."""
        from ..queryable import Queryable
        data = self._comparable_data()
        others = self._other_items(other)
        return Queryable._wrap([u for u in data if not any(equals(u, t) for t in others)])

    def intersect(self: 'Queryable[T]', other: Iterable[T]) -> 'Queryable[T]':
        """elements of other that equal some element of this sequence, in other's order."""
        from ..queryable import Queryable
        data = self._comparable_data()
        others = self._other_items(other)
        return Queryable._wrap([t for t in others if any(equals(u, t) for u in data)])

    def union(self: 'Queryable[T]', other: Iterable[T]) -> 'Queryable[T]':
        """
        each element of this sequence, repeated once for every element of
        other it compares equal to. this is intersection-like with
        multiplicity, not a set union; see set_union for that.
        ex: [1, 2, 2, 3].union([2, 3, 3]) -> [2, 2, 3, 3]
        """
        from ..queryable import Queryable
        data = self._comparable_data()
        others = self._other_items(other)
        return Queryable._wrap([t for t in data for u in others if equals(t, u)])

    def set_union(self: 'Queryable[T]', other: Iterable[T]) -> 'Queryable[T]':
        """
        the mathematical union: distinct elements of this sequence followed by
        the distinct elements of other not already present.
        ex: [1, 2, 2].set_union([3, 2, 3]) -> [1, 2, 3]
        """
        from ..queryable import Queryable
        others = self._other_items(other)
        for item in others:
            require_comparable(item)
        result = self.distinct().to_list()
        for item in others:
            if not any(equals(kept, item) for kept in result):
                result.append(item)
        return Queryable._wrap(result)
