from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..exceptions import EmptySequenceError, CardinalityError, IndexOutOfRangeError
from ..types import *
from ..types import _MISSING

if typing.TYPE_CHECKING:
    from ..queryable import Queryable

class _TerminalOperations(Generic[T]):
    def to_list(self: 'Queryable[T]') -> List[T]:
        """a new list snapshot of the sequence, in current order"""
        return list(self._get_data())

    def as_collection(self: 'Queryable[T]') -> Optional[Iterable[T]]:
        """
        the originally wrapped source, in its own collection shape. one-pass
        sources (generators, iterators) were consumed by the snapshot, so a
        list of their elements is returned instead; so is a list built by
        an operator, which the queryable keeps private.
        """
        if self._owns_source or isinstance(self._source, Iterator):
            return self.to_list()
        return self._source

    def count(self: 'Queryable[T]', predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._get_data())
        return sum(1 for x in self._get_data() if predicate(x))

    def any(self: 'Queryable[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        if self._is_absent: return False
        data = self._get_data()
        if predicate is None: return len(data) > 0
        return any(predicate(x) for x in data)

    def all(self: 'Queryable[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition. true for an empty sequence."""
        return self.where(predicate).count() == self.count()

    def _find(self: 'Queryable[T]', predicate: Optional[Predicate[T]], from_end: bool = False) -> Any:
        data = self._get_data()
        ordered = reversed(data) if from_end else data
        if predicate is None:
            return next(iter(ordered), _MISSING)
        for item in ordered:
            if predicate(item): return item
        return _MISSING

    def first(self: 'Queryable[T]', predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        found = self._find(predicate)
        if found is _MISSING:
            message = "sequence contains no elements" if predicate is None else "no element satisfies the condition"
            raise self._fail(EmptySequenceError(message))
        return found

    def first_or_default(self: 'Queryable[T]', predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        found = self._find(predicate)
        return default if found is _MISSING else found

    def last(self: 'Queryable[T]', predicate: Optional[Predicate[T]] = None) -> T:
        """get last element"""
        found = self._find(predicate, from_end=True)
        if found is _MISSING:
            message = "sequence contains no elements" if predicate is None else "no element satisfies the condition"
            raise self._fail(EmptySequenceError(message))
        return found

    def last_or_default(self: 'Queryable[T]', predicate: Optional[Predicate[T]] = None,
                        default: Optional[T] = None) -> Optional[T]:
        """get last element or default"""
        found = self._find(predicate, from_end=True)
        return default if found is _MISSING else found

    def element_at(self: 'Queryable[T]', index: int) -> T:
        """element at a zero-based index. negative indices are out of range."""
        data = self._get_data()
        if index < 0 or index >= len(data):
            raise self._fail(IndexOutOfRangeError(index, len(data)))
        return data[index]

    def element_at_or_default(self: 'Queryable[T]', index: int, default: Optional[T] = None) -> Optional[T]:
        data = self._get_data()
        if index < 0 or index >= len(data): return default
        return data[index]

    def single(self: 'Queryable[T]', predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        data = [x for x in self._get_data() if predicate(x)] if predicate else self._get_data()
        if len(data) == 0: raise self._fail(EmptySequenceError("sequence contains no matching elements"))
        if len(data) > 1: raise self._fail(CardinalityError("sequence contains more than one matching element"))
        return data[0]

    def single_or_default(self: 'Queryable[T]', predicate: Optional[Predicate[T]] = None,
                          default: Optional[T] = None) -> Optional[T]:
        """single element, or default when there are zero or several"""
        data = [x for x in self._get_data() if predicate(x)] if predicate else self._get_data()
        return data[0] if len(data) == 1 else default

    def for_each(self: 'Queryable[T]', action: Action[T]) -> None:
        """run action on each element, left to right"""
        for item in self._get_data():
            action(item)

    def aggregate(self: 'Queryable[T]', accumulator: Accumulator[T, T], seed: Any = _MISSING) -> Any:
        """applies accumulator function over sequence"""
        data = self._get_data()
        if seed is not _MISSING: return reduce(accumulator, data, seed)
        if not data: raise self._fail(EmptySequenceError("cannot aggregate empty sequence without seed"))
        return reduce(accumulator, data)


class ConversionAccessor(Generic[T]):
    """builds plain python, numpy and pandas objects from a sequence"""

    def __init__(self, queryable_instance: 'Queryable[T]'):
        self._queryable = queryable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._queryable.to_list()

    def tuple(self) -> Tuple[T, ...]:
        return tuple(self._queryable._get_data())

    def set(self) -> Set[T]:
        """convert to set. elements must be hashable."""
        return set(self._queryable._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary. later keys overwrite earlier ones."""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._queryable._get_data()}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._queryable.to_list())

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._queryable.to_list())

    def frame(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._queryable.to_list())
