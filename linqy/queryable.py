from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *
from .exceptions import QueryError

# --- operations ---
from .extensions.core import _CoreOperations
from .extensions.terminal import _TerminalOperations, ConversionAccessor
from .extensions.stats import _AggregateOperations
from .extensions.set import _SetOperations
from .extensions.zip import _ZipOperations
from .extensions.grouping import _GroupingOperations
from .extensions.join import _JoinOperations

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IQueryable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the backing sequence as a list"""
        pass

# --- base queryable implementation ---

class _BaseQueryable(IQueryable[T]):
    def __init__(self, source: Optional[Iterable[T]] = None):
        """wrap a source collection, snapshotting it into a private list"""
        self._source = source
        # true when _source is the backing list itself and must not be handed out
        self._owns_source = False
        if source is None:
            logger.debug("wrapping an absent source as an empty sequence")
            self._items: List[T] = []
        else:
            self._items = list(source)

    @classmethod
    def _wrap(cls, items: List[T]):
        """adopt a list an operator just built, without copying it again"""
        instance = cls([])
        instance._source = items
        instance._items = items
        instance._owns_source = True
        return instance

    def _get_data(self) -> List[T]:
        """the private backing list. operators read it, never mutate it."""
        return self._items

    @property
    def _is_absent(self) -> bool:
        return self._source is None

    def _fail(self, error: QueryError) -> QueryError:
        logger.debug("%s: %s", type(error).__name__, error)
        return error

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

# --- main queryable class ---

class Queryable(
    _BaseQueryable[T],
    _CoreOperations[T],
    _TerminalOperations[T],
    _AggregateOperations[T],
    _SetOperations[T],
    _ZipOperations[T],
    _GroupingOperations[T],
    _JoinOperations[T]
):
    """an eager, linq-inspired query engine over an in-memory sequence."""
    def __init__(self, source: Optional[Iterable[T]] = None):
        super().__init__(source)
        # --- initialize accessors ---
        self.to = ConversionAccessor(self)

    @staticmethod
    def repeat(element: T, count: int) -> 'Queryable[T]':
        """sequence of count independent clones of element"""
        from .factories import repeat
        return repeat(element, count)
