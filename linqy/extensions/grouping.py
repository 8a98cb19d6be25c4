from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..queryable import Queryable

class _GroupingOperations(Generic[T]):
    def group_by(self: 'Queryable[T]', key_selector: KeySelector[T, K],
                 element_selector: Optional[Selector[T, U]] = None) -> 'Queryable[Grouping[K, U]]':
        """
        group elements by a hashable key. groups come out in order of first key
        appearance, elements within a group in source order.
        """
        from ..queryable import Queryable
        element_sel = element_selector if element_selector else lambda item: item
        groups = defaultdict(list)
        for item in self._get_data():
            groups[key_selector(item)].append(element_sel(item))
        return Queryable._wrap([Grouping(key, elements) for key, elements in groups.items()])
