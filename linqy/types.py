from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]
Combiner = Callable[[T, U], V]
Action = Callable[[T], None]
Numeric = Union[int, float]

# marks an omitted optional argument where None is a legitimate value
_MISSING: Any = object()


class Grouping(Generic[K, T]):
    """a key together with the elements that produced it, in source order"""

    def __init__(self, key: K, elements: List[T]):
        self.key = key
        self.elements = elements

    def __iter__(self) -> Iterator[T]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __repr__(self) -> str:
        return f"Grouping(key={self.key!r}, elements={len(self.elements)})"
