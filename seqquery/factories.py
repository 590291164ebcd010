import typing
from .types import *

if typing.TYPE_CHECKING:
    from .query import SequenceQuery


def from_iterable(data: Iterable[T]) -> 'SequenceQuery[T]':
    """create a query over a copy of an iterable (the constructor keeps lists by reference)"""
    from .query import SequenceQuery
    return SequenceQuery(list(data))


def from_range(start: int, count: int) -> 'SequenceQuery[int]':
    """create a query over count consecutive integers"""
    from .query import SequenceQuery
    if count < 0:
        raise ValueError("count must not be negative")
    return SequenceQuery(list(range(start, start + count)))


def repeat(item: T, count: int) -> 'SequenceQuery[T]':
    """create a query with item repeated count times"""
    from .query import SequenceQuery
    if count < 0:
        raise ValueError("count must not be negative")
    return SequenceQuery([item] * count)


def empty() -> 'SequenceQuery[Any]':
    """create an empty query"""
    from .query import SequenceQuery
    return SequenceQuery([])


def generate(generator_func: Callable[[], T], count: int) -> 'SequenceQuery[T]':
    """build a sequence by calling generator_func count times"""
    from .query import SequenceQuery
    if count < 0:
        raise ValueError("count must not be negative")
    return SequenceQuery([generator_func() for _ in range(count)])


# --- aliases ---
query = from_iterable
Q = from_iterable
