from __future__ import annotations
import pandas as pd
from ..types import *


def map_keys(mapping: MaybeMapping) -> List[K]:
    """every key of the mapping once, in no particular order"""
    if is_absent(mapping):
        return []
    if isinstance(mapping, pd.Series):
        # a series index may repeat labels
        return mapping.index.unique().tolist()
    return list(mapping.keys())


def map_values(mapping: MaybeMapping) -> List[V]:
    """one value per entry, duplicates kept"""
    if is_absent(mapping):
        return []
    return [value for _, value in mapping.items()]
