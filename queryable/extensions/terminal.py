from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..queryable import Queryable

class TerminalAccessor(Generic[T]):
    """conversions out of a queryable. every method returns a new container"""

    def __init__(self, queryable_instance: 'Queryable[T]'):
        self._queryable = queryable_instance

    def list(self) -> List[T]:
        """convert to list (a copy, unlike to_array())"""
        return list(self._queryable._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._queryable._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._queryable._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary. later elements win on duplicate keys"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._queryable._get_data()}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._queryable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._queryable._get_data())
