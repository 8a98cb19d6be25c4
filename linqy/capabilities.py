"""
element contracts used by the capability-gated operators.

comparison-based operators (contains, distinct, except_, intersect, union,
set_union and order_by without a comparator) need a three-way comparison on
the element type. repeat needs independent copies. both are checked at run
time and fail fast with MissingCapabilityError, never falling back to
identity.
"""
import logging
from abc import ABC, abstractmethod
from numbers import Number
from .config import get_settings
from .exceptions import MissingCapabilityError
from .types import *

logger = logging.getLogger(__name__)

_IMMUTABLE_SCALARS = (type(None), bool, Number, str, bytes)


def _has_method(cls: type, name: str) -> bool:
    return any(callable(klass.__dict__.get(name)) for klass in cls.__mro__)


class Comparable(ABC):
    """three-way comparison: negative, zero or positive"""

    @abstractmethod
    def compare_to(self, other: Any) -> int:
        pass

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is Comparable:
            return _has_method(subclass, 'compare_to')
        return NotImplemented


class Cloneable(ABC):
    """produces an independent deep copy of itself"""

    @abstractmethod
    def clone(self) -> Any:
        pass

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is Cloneable:
            return _has_method(subclass, 'clone')
        return NotImplemented


def _is_naturally_ordered(value: Any) -> bool:
    return type(value).__lt__ is not object.__lt__


def is_comparable(value: Any) -> bool:
    if isinstance(value, Comparable):
        return True
    return get_settings().natural_ordering and _is_naturally_ordered(value)


def compare(a: Any, b: Any) -> int:
    """three-way compare two elements using their comparable capability"""
    if isinstance(a, Comparable):
        return a.compare_to(b)
    if not get_settings().natural_ordering:
        raise MissingCapabilityError(f"{type(a).__name__} does not implement compare_to")
    if not _is_naturally_ordered(a):
        raise MissingCapabilityError(f"{type(a).__name__} is not comparable")
    try:
        if a == b: return 0
        if a < b: return -1
        if a > b: return 1
    except TypeError as e:
        logger.debug("natural ordering failed between %s and %s", type(a).__name__, type(b).__name__)
        raise MissingCapabilityError(
            f"cannot compare {type(a).__name__} with {type(b).__name__}", e) from e
    # partial orders (nan, sets) leave some pairs neither equal nor ordered
    logger.debug("unordered pair of %s and %s", type(a).__name__, type(b).__name__)
    raise MissingCapabilityError(f"{a!r} and {b!r} are neither equal nor ordered")


def equals(a: Any, b: Any) -> bool:
    return compare(a, b) == 0


def require_comparable(value: Any) -> None:
    if not is_comparable(value):
        raise MissingCapabilityError(f"{type(value).__name__} is not comparable")


def is_cloneable(value: Any) -> bool:
    if isinstance(value, Cloneable):
        return True
    return get_settings().clone_immutables and isinstance(value, _IMMUTABLE_SCALARS)


def require_cloneable(value: Any) -> None:
    if not is_cloneable(value):
        raise MissingCapabilityError(f"{type(value).__name__} does not implement clone")


def clone(value: T) -> T:
    """independent copy of value via its cloneable capability"""
    require_cloneable(value)
    if isinstance(value, Cloneable):
        return value.clone()
    logger.debug("treating immutable %s as its own clone", type(value).__name__)
    return value
