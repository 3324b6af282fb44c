import typing
from .types import *

if typing.TYPE_CHECKING:
    from .array import Array

def from_iterable(data: Optional[Iterable[T]]) -> 'Array[T]':
    """create array from iterable; none gives an empty array"""
    from .array import Array
    return Array(data)

def from_mapping(mapping: MaybeMapping, values: bool = False) -> 'Array[Any]':
    """create array from the keys (or values) of a mapping"""
    from .array import Array
    from .extensions.mapping import map_keys, map_values
    return Array(map_values(mapping) if values else map_keys(mapping))

def empty() -> 'Array[Any]':
    """create empty array"""
    from .array import Array
    return Array([])

def repeat(item: T, count: int) -> 'Array[T]':
    """create array with repeated item"""
    from .array import Array
    return Array([item] * count)

# --- aliases ---
A = from_iterable
