import typing
from .types import *

if typing.TYPE_CHECKING:
    from .queryable import Queryable

def from_iterable(data: Iterable[T]) -> 'Queryable[T]':
    """create queryable from iterable, copying it into a new list"""
    from .queryable import Queryable
    return Queryable(list(data))

def from_range(start: int, count: int) -> 'Queryable[int]':
    """create queryable from range"""
    from .queryable import Queryable
    return Queryable(list(range(start, start + count)))

def repeat(item: T, count: int) -> 'Queryable[T]':
    """create queryable with repeated item"""
    from .queryable import Queryable
    return Queryable([item] * count)

def empty() -> 'Queryable[Any]':
    """create empty queryable"""
    from .queryable import Queryable
    return Queryable([])

# --- aliases ---
Q = from_iterable
query = from_iterable
