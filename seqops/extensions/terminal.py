from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..array import Array

class TerminalAccessor(Generic[T]):
    def __init__(self, array_instance: 'Array[T]'):
        self._array = array_instance

    def list(self) -> List[T]:
        """convert to a fresh list"""
        return list(self._array._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._array._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._array._get_data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._array._get_data())
        return sum(1 for x in self._array._get_data() if predicate(x))
