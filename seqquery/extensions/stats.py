from __future__ import annotations
import numbers
import typing

import numpy as np

from ..types import *

if typing.TYPE_CHECKING:
    from ..query import SequenceQuery


class _StatsOperations(Generic[T]):
    def _get_values(self: 'SequenceQuery[T]', selector: Optional[Selector[T, Any]] = None) -> List[Any]:
        """project the sequence through selector (identity when none)"""
        data = self._get_data()
        return [selector(x) for x in data] if selector else list(data)

    def _get_numeric_values(self: 'SequenceQuery[T]',
                            selector: Optional[Selector[T, Number]] = None) -> List[Number]:
        """helper to extract numeric values for arithmetic aggregates."""
        values = self._get_values(selector)
        if not all(isinstance(x, numbers.Number) for x in values):
            raise TypeError("sequence contains non-numeric types for statistical operation.")
        return values

    @staticmethod
    def _total(values: List[Number]) -> Number:
        """numpy sum, with python ints kept as objects so they cannot overflow int64"""
        if any(isinstance(x, int) for x in values):
            return np.sum(np.asarray(values, dtype=object))
        return np.sum(values)

    def sum(self: 'SequenceQuery[T]', selector: Optional[Selector[T, Number]] = None) -> Number:
        """sum of projected values, 0 for an empty sequence"""
        values = self._get_numeric_values(selector)
        if not values: return 0
        result = self._total(values)
        # hand back a plain python number rather than a numpy scalar
        return result.item() if isinstance(result, np.generic) else result

    def average(self: 'SequenceQuery[T]', selector: Optional[Selector[T, Number]] = None) -> Number:
        """mean of projected values; defined as 0 for an empty sequence"""
        values = self._get_numeric_values(selector)
        if not values: return 0
        total = self._total(values)
        return (total / len(values)).item() if isinstance(total, np.generic) else total / len(values)

    def max(self: 'SequenceQuery[T]', selector: Optional[Selector[T, Any]] = None) -> Any:
        """largest projected value, ABSENT for an empty sequence"""
        values = self._get_values(selector)
        return max(values) if values else ABSENT

    def min(self: 'SequenceQuery[T]', selector: Optional[Selector[T, Any]] = None) -> Any:
        """smallest projected value, ABSENT for an empty sequence"""
        values = self._get_values(selector)
        return min(values) if values else ABSENT
