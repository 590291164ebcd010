from __future__ import annotations
import logging
import typing
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import SequenceQuery

logger = logging.getLogger(__name__)


class _GroupingOperations(Generic[T]):
    def group_by(self: 'SequenceQuery[T]', key_selector: KeySelector[T, K],
                 element_selector: Optional[Selector[T, U]] = None) -> 'SequenceQuery[Group[K, U]]':
        """
        replace the sequence with one Group per distinct key.
        groups come out in the order their key was first seen and each group's
        values keep the original relative order of its members.
        """
        # defaultdict keeps insertion order, which gives first-seen-key order
        groups = defaultdict(list)
        for item in self._get_data():
            groups[key_selector(item)].append(element_selector(item) if element_selector else item)
        logger.debug("grouped %d elements into %d groups", len(self._get_data()), len(groups))
        return self._set_data([Group(key, values) for key, values in groups.items()])

    def chunk(self: 'SequenceQuery[T]', size: int) -> 'SequenceQuery[List[T]]':
        """split into lists of 'size' consecutive elements; the last may be shorter"""
        if size <= 0:
            raise ValueError("chunk size must be positive")
        data = self._get_data()
        return self._set_data([data[i:i + size] for i in range(0, len(data), size)])

    def partition(self: 'SequenceQuery[T]', predicate: Predicate[T]) -> Tuple['SequenceQuery[T]', 'SequenceQuery[T]']:
        """split into (matching, rest) as two new queries, leaving this one untouched"""
        true_items, false_items = [], []
        for item in self._get_data():
            (true_items if predicate(item) else false_items).append(item)
        return type(self)(true_items), type(self)(false_items)
