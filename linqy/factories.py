import typing
from .capabilities import clone, require_cloneable
from .types import *

if typing.TYPE_CHECKING:
    from .queryable import Queryable

def from_iterable(data: Optional[Iterable[T]]) -> 'Queryable[T]':
    """create queryable from iterable. None gives an absent source."""
    from .queryable import Queryable
    return Queryable(data)

def from_range(start: int, count: int) -> 'Queryable[int]':
    """create queryable from range"""
    from .queryable import Queryable
    return Queryable(range(start, start + count))

def repeat(element: T, count: int) -> 'Queryable[T]':
    """
    create queryable holding count independent clones of element.
    element must be cloneable even when count is zero.
    """
    from .queryable import Queryable
    require_cloneable(element)
    return Queryable._wrap([clone(element) for _ in range(count)])

def empty() -> 'Queryable[Any]':
    """create empty queryable"""
    from .queryable import Queryable
    return Queryable([])

# --- aliases ---
query = from_iterable
Q = from_iterable
