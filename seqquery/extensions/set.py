from __future__ import annotations
import typing
from itertools import chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import SequenceQuery


class _SetOperations(Generic[T]):
    """
    distinct and concatenation, plus the order-preserving set operations.
    keys and elements compared here must be hashable.
    """

    def distinct(self: 'SequenceQuery[T]', key_selector: Optional[KeySelector[T, K]] = None) -> 'SequenceQuery[T]':
        """keep the first element seen for each key, in original order"""
        data = self._get_data()
        if key_selector is None:
            # dicts are ordered, so fromkeys is an order-preserving unique filter
            return self._set_data(list(dict.fromkeys(data)))
        seen = set()
        # 'and not seen.add(key)' records the key inside the comprehension
        return self._set_data([item for item in data
                               if (key := key_selector(item)) not in seen and not seen.add(key)])

    def concat(self: 'SequenceQuery[T]', *others: Any) -> 'SequenceQuery[T]':
        """append each argument's elements in argument order; non-sequences are appended as one element"""
        return self._set_data(list(chain(self._get_data(), *(self._normalize(other) for other in others))))

    def union(self: 'SequenceQuery[T]', other: Iterable[T]) -> 'SequenceQuery[T]':
        """distinct elements of both sequences, first appearance wins"""
        return self._set_data(list(dict.fromkeys(chain(self._get_data(), self._normalize(other)))))

    def intersect(self: 'SequenceQuery[T]', other: Iterable[T]) -> 'SequenceQuery[T]':
        """distinct elements also present in other, in this sequence's order"""
        other_set = set(self._normalize(other))
        return self._set_data([x for x in dict.fromkeys(self._get_data()) if x in other_set])

    def except_(self: 'SequenceQuery[T]', other: Iterable[T]) -> 'SequenceQuery[T]':
        """distinct elements not present in other"""
        other_set = set(self._normalize(other))
        return self._set_data([x for x in dict.fromkeys(self._get_data()) if x not in other_set])
