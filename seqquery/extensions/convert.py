from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import SequenceQuery


class ConversionAccessor(Generic[T]):
    """materializes the working list into other python, numpy and pandas containers."""

    def __init__(self, query_instance: 'SequenceQuery[T]'):
        self._query = query_instance

    def _rows(self) -> List[Any]:
        return [item.to_dict() if isinstance(item, Group) else item for item in self._query._get_data()]

    def list(self) -> List[T]:
        """convert to list (a copy, unlike to_list())"""
        return list(self._query._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._query._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary; later duplicates of a key overwrite earlier ones"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._query._get_data()}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._query._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._query._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe; groups become key/values rows"""
        return pd.DataFrame(self._rows())

    def json(self, indent: Optional[int] = None, sort_keys: bool = False) -> str:
        """same as to_json()"""
        return self._query.to_json(indent=indent, sort_keys=sort_keys)
