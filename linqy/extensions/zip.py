from __future__ import annotations
import typing
from ..exceptions import NullSourceError
from ..types import *

if typing.TYPE_CHECKING:
    from ..queryable import Queryable


class _ZipOperations(Generic[T]):
    def zip(self: 'Queryable[T]', other: Iterable[U], combine: Combiner[T, U, V]) -> 'Queryable[V]':
        """zip two sequences with a combining function, stopping at the shorter one"""
        from ..queryable import Queryable
        if self._is_absent:
            raise self._fail(NullSourceError("source sequence is absent"))
        if other is None:
            raise self._fail(NullSourceError("input sequence is absent"))
        return Queryable._wrap([combine(t, u) for t, u in zip(self._get_data(), list(other))])
