from __future__ import annotations
import typing
from collections import defaultdict
from ..exceptions import NullSourceError
from ..types import *

if typing.TYPE_CHECKING:
    from ..queryable import Queryable

class _JoinOperations(Generic[T]):
    def join(self: 'Queryable[T]', inner: Iterable[U], outer_key_selector: KeySelector[T, K],
             inner_key_selector: KeySelector[U, K],
             result_selector: Callable[[T, U], V]) -> 'Queryable[V]':
        """inner join two sequences based on matching keys"""
        from ..queryable import Queryable
        if inner is None:
            raise self._fail(NullSourceError("inner sequence is absent"))
        inner_lookup = defaultdict(list)
        for inner_item in inner:
            inner_lookup[inner_key_selector(inner_item)].append(inner_item)
        result = []
        for outer_item in self._get_data():
            outer_key = outer_key_selector(outer_item)
            # .get avoids growing the lookup with unmatched outer keys
            for inner_item in inner_lookup.get(outer_key, ()):
                result.append(result_selector(outer_item, inner_item))
        return Queryable._wrap(result)
