from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Hashable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K', bound=Hashable)
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]
Number = Union[int, float]


class _Absent:
    """marker for 'no value', distinct from None which may be a real element"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return "ABSENT"

    def __reduce__(self):
        return (_Absent, ())


ABSENT: Any = _Absent()


class Group(Generic[K, T]):
    """a key together with the elements that share it, in original order"""

    def __init__(self, key: K, values: List[T]):
        self.key = key
        self.values = values

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "values": self.values}

    def __iter__(self) -> Iterator[T]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.key == other.key and self.values == other.values

    __hash__ = None

    def __repr__(self) -> str:
        return f"Group(key={self.key!r}, values={len(self.values)})"
