from __future__ import annotations
import typing
from functools import cmp_to_key
from itertools import takewhile, dropwhile
from ..capabilities import compare, require_comparable
from ..exceptions import NullSourceError
from ..types import *
from ..types import _MISSING

if typing.TYPE_CHECKING:
    from ..queryable import Queryable

class _CoreOperations(Generic[T]):
    def where(self: 'Queryable[T]', predicate: Predicate[T]) -> 'Queryable[T]':
        """filter elements based on a predicate"""
        from ..queryable import Queryable
        return Queryable._wrap([x for x in self._get_data() if predicate(x)])

    def select(self: 'Queryable[T]', selector: Selector[T, U]) -> 'Queryable[U]':
        """project each element to a new form"""
        from ..queryable import Queryable
        return Queryable._wrap([selector(x) for x in self._get_data()])

    def select_many(self: 'Queryable[T]', selector: Selector[T, Iterable[U]]) -> 'Queryable[U]':
        """project and flatten sequences"""
        from ..queryable import Queryable
        return Queryable._wrap([item for x in self._get_data() for item in selector(x)])

    def order_by(self: 'Queryable[T]', compare_fn: Optional[Comparer[T]] = None) -> 'Queryable[T]':
        """
        stable sort using a three-way comparator. without one, the elements'
        own comparison is used and every element must be comparable.
        """
        from ..queryable import Queryable
        data = self.to_list()
        if compare_fn is None:
            for item in data:
                require_comparable(item)
            compare_fn = compare
        # list.sort is stable, ties keep their source order
        data.sort(key=cmp_to_key(compare_fn))
        return Queryable._wrap(data)

    def order_by_descending(self: 'Queryable[T]', compare_fn: Optional[Comparer[T]] = None) -> 'Queryable[T]':
        """ascending sort, then reversed. ties come out in reverse source order."""
        return self.order_by(compare_fn).reverse()

    def reverse(self: 'Queryable[T]') -> 'Queryable[T]':
        """inverts the order of the elements in a sequence"""
        from ..queryable import Queryable
        return Queryable._wrap(list(reversed(self._get_data())))

    def take(self: 'Queryable[T]', count: int) -> 'Queryable[T]':
        """take the first 'count' elements"""
        from ..queryable import Queryable
        return Queryable._wrap(self._get_data()[:count] if count > 0 else [])

    def skip(self: 'Queryable[T]', count: int) -> 'Queryable[T]':
        """skip the first 'count' elements"""
        from ..queryable import Queryable
        data = self._get_data()
        return Queryable._wrap(data[count:] if count > 0 else list(data))

    def take_while(self: 'Queryable[T]', predicate: Predicate[T]) -> 'Queryable[T]':
        """take elements while predicate is true"""
        from ..queryable import Queryable
        return Queryable._wrap(list(takewhile(predicate, self._get_data())))

    def skip_while(self: 'Queryable[T]', predicate: Predicate[T]) -> 'Queryable[T]':
        """skip elements while predicate is true"""
        from ..queryable import Queryable
        # dropwhile stops calling the predicate once it first fails
        return Queryable._wrap(list(dropwhile(predicate, self._get_data())))

    def concat(self: 'Queryable[T]', other: Iterable[T]) -> 'Queryable[T]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..queryable import Queryable
        if other is None:
            raise self._fail(NullSourceError("input sequence is absent"))
        return Queryable._wrap(self._get_data() + list(other))

    def default_if_empty(self: 'Queryable[T]', default_value: T = _MISSING) -> 'Queryable[T]':
        """
        returns the sequence, or a singleton of default_value if it is empty.
        an empty sequence stays empty when no default is given.
        """
        from ..queryable import Queryable
        data = self._get_data()
        if data:
            return Queryable._wrap(list(data))
        return Queryable._wrap([] if default_value is _MISSING else [default_value])
