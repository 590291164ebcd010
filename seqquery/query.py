from __future__ import annotations

import logging
from collections.abc import Iterable as _Iterable, Mapping

from .types import *

# --- operations ---
from .extensions.core import _CoreOperations
from .extensions.set import _SetOperations
from .extensions.grouping import _GroupingOperations
from .extensions.join import _JoinOperations
from .extensions.terminal import _TerminalOperations
from .extensions.stats import _StatsOperations

# --- accessors ---
from .extensions.convert import ConversionAccessor

logger = logging.getLogger(__name__)

# iterables that are treated as a single value rather than spread into elements
_SCALAR_ITERABLES = (str, bytes, bytearray, Mapping)


class SequenceQuery(
    _CoreOperations[T],
    _SetOperations[T],
    _GroupingOperations[T],
    _JoinOperations[T],
    _TerminalOperations[T],
    _StatsOperations[T],
):
    """
    a fluent, eager query over an in-memory list.

    chainable operations replace the working list and return the same instance,
    terminal operations read it and return a plain value. a list passed in is
    kept by reference, so the query owns it for the lifetime of the pipeline.
    """

    def __init__(self, data: Any = ABSENT):
        self._data: List[T] = self._normalize(data)
        self.to = ConversionAccessor(self)

    @staticmethod
    def _normalize(data: Any) -> List[Any]:
        """turn constructor or concat input into a list"""
        if data is ABSENT:
            return []
        if isinstance(data, list):
            return data
        if isinstance(data, SequenceQuery):
            return data._data
        if isinstance(data, _Iterable) and not isinstance(data, _SCALAR_ITERABLES):
            return list(data)
        logger.debug("wrapping %s as a single element", type(data).__name__)
        return [data]

    def _get_data(self) -> List[T]:
        return self._data

    def _set_data(self, data: List[Any]) -> 'SequenceQuery[Any]':
        self._data = data
        return self

    @property
    def data(self) -> List[T]:
        """the current working list"""
        return self._data

    def copy(self) -> 'SequenceQuery[T]':
        """branch the pipeline: a new query over a shallow copy of the working list"""
        return type(self)(list(self._data))

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        shown = ", ".join(repr(item) for item in self._data[:10])
        if len(self._data) > 10:
            shown += f", ... ({len(self._data) - 10} more)"
        return f"SequenceQuery([{shown}])"
