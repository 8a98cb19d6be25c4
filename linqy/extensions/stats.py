from __future__ import annotations
import typing
from numbers import Number
from ..exceptions import EmptySequenceError, MissingCapabilityError, NullSourceError
from ..types import *

if typing.TYPE_CHECKING:
    from ..queryable import Queryable

class _AggregateOperations(Generic[T]):
    def _get_values(self: 'Queryable[T]', selector: Optional[Selector[T, Numeric]] = None) -> List[Numeric]:
        """numeric values for an aggregate, the selector called once per element."""
        data = self._get_data()
        values = [selector(x) for x in data] if selector else data
        for value in values:
            if not isinstance(value, Number):
                raise self._fail(MissingCapabilityError(
                    f"sequence contains non-numeric value of type {type(value).__name__}"))
        return values

    def sum(self: 'Queryable[T]', selector: Optional[Selector[T, Numeric]] = None) -> Numeric:
        """left-to-right sum. zero for an empty sequence."""
        if self._is_absent: raise self._fail(NullSourceError("source sequence is absent"))
        total = 0
        for value in self._get_values(selector):
            total += value
        return total

    def average(self: 'Queryable[T]', selector: Optional[Selector[T, Numeric]] = None) -> float:
        """calc average"""
        values = self._get_values(selector)
        if not values: raise self._fail(EmptySequenceError("sequence contains no elements"))
        total = 0
        for value in values:
            total += value
        return total / len(values)

    def max(self: 'Queryable[T]', selector: Optional[Selector[T, Numeric]] = None) -> Numeric:
        """largest extracted value; the first one wins ties"""
        values = self._get_values(selector)
        if not values: raise self._fail(EmptySequenceError("cannot find maximum of empty sequence"))
        result = values[0]
        for value in values[1:]:
            if value > result: result = value
        return result

    def min(self: 'Queryable[T]', selector: Optional[Selector[T, Numeric]] = None) -> Numeric:
        """smallest extracted value; the first one wins ties"""
        values = self._get_values(selector)
        if not values: raise self._fail(EmptySequenceError("cannot find minimum of empty sequence"))
        result = values[0]
        for value in values[1:]:
            if value < result: result = value
        return result
