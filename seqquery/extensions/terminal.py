from __future__ import annotations
import json
import logging
import typing
from functools import reduce

import numpy as np

from ..errors import EmptySequenceError, SerializationError
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import SequenceQuery

logger = logging.getLogger(__name__)


def _json_default(obj: Any) -> Any:
    """encode the few non-json types a query commonly ends up holding"""
    if isinstance(obj, Group):
        return obj.to_dict()
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"object of type {type(obj).__name__} is not json serializable")


class _TerminalOperations(Generic[T]):
    def to_list(self: 'SequenceQuery[T]') -> List[T]:
        """the live working list, not a copy"""
        return self._get_data()

    def to_json(self: 'SequenceQuery[T]', indent: Optional[int] = None, sort_keys: bool = False) -> str:
        """serialize the working list; keys keep insertion order unless sort_keys is set"""
        try:
            return json.dumps(self._get_data(), default=_json_default, indent=indent,
                              sort_keys=sort_keys, allow_nan=False)
        except (TypeError, ValueError, RecursionError) as e:
            logger.debug("json serialization failed: %s", e)
            raise SerializationError(f"cannot serialize sequence to json: {e}") from e

    def first(self: 'SequenceQuery[T]', predicate: Optional[Predicate[T]] = None, default: Any = ABSENT) -> T:
        """first element (matching predicate if given), or default when there is none"""
        data = self._get_data()
        if predicate is None:
            return data[0] if data else default
        for item in data:
            if predicate(item): return item
        return default

    def last(self: 'SequenceQuery[T]', predicate: Optional[Predicate[T]] = None, default: Any = ABSENT) -> T:
        """last element (matching predicate if given), or default when there is none"""
        data = self._get_data()
        if predicate is None:
            return data[-1] if data else default
        # the predicate sees every element, in order, like a filter would
        matches = [item for item in data if predicate(item)]
        return matches[-1] if matches else default

    def single(self: 'SequenceQuery[T]', predicate: Optional[Predicate[T]] = None) -> T:
        """the only element (matching predicate if given), erroring if not exactly one"""
        data = [x for x in self._get_data() if predicate(x)] if predicate else self._get_data()
        if len(data) == 0: raise EmptySequenceError("sequence contains no matching elements")
        if len(data) > 1: raise ValueError("sequence contains more than one matching element")
        return data[0]

    def element_at(self: 'SequenceQuery[T]', index: int, default: Any = ABSENT) -> T:
        """element at a zero-based index, or default when out of range"""
        data = self._get_data()
        return data[index] if 0 <= index < len(data) else default

    def count(self: 'SequenceQuery[T]', predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._get_data())
        return sum(1 for x in self._get_data() if predicate(x))

    def any(self: 'SequenceQuery[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        data = self._get_data()
        if predicate is None: return len(data) > 0
        return any(predicate(x) for x in data)

    def all(self: 'SequenceQuery[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition; true for an empty sequence"""
        return all(predicate(x) for x in self._get_data())

    def contains(self: 'SequenceQuery[T]', value: T) -> bool:
        return value in self._get_data()

    def aggregate(self: 'SequenceQuery[T]', accumulator: Accumulator[U, T], seed: Any = ABSENT) -> U:
        """left fold over the sequence"""
        data = self._get_data()
        if seed is ABSENT:
            if not data: raise EmptySequenceError("cannot aggregate empty sequence without seed")
            return reduce(accumulator, data)
        return reduce(accumulator, data, seed)

    to_array = to_list
