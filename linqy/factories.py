import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable, EnumerableList

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable"""
    from .enumerable import Enumerable
    return Enumerable(data)

def from_range(start: int, count: int, step: int = 1) -> 'Enumerable[int]':
    """create enumerable of 'count' numbers: start, start + step, ..."""
    from .enumerable import Enumerable
    if count < 0: raise ValueError(f"count must not be negative, got {count}")
    return Enumerable(start + i * step for i in range(count))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    if count < 0: raise ValueError(f"count must not be negative, got {count}")
    return Enumerable([item] * count)

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable()

def generate(generator_func: Callable[[], T], count: int) -> 'Enumerable[T]':
    """generate sequence using a function"""
    from .enumerable import Enumerable
    return Enumerable(generator_func() for _ in range(count))

def mutable(data: Iterable[T] = ()) -> 'EnumerableList[T]':
    """create a list that supports add/insert/remove in place"""
    from .enumerable import EnumerableList
    return EnumerableList(data)

# --- aliases ---
linqy = from_iterable
P = from_iterable
