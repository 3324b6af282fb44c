from __future__ import annotations

from .types import *

from .extensions.transform import map_, filter_, filter_errors, for_each
from .extensions.search import every, some, index, index_func, contains, find, reduce_
from .extensions.mutation import fill, reverse, range_
from .extensions.terminal import TerminalAccessor


class Array(Generic[T]):
    """
    an eager, chainable wrapper around a list.
    every call runs immediately; transforms return a new array, the in-place
    operations (fill, reverse) mutate this one and return it.
    """

    def __init__(self, data: Optional[Iterable[T]] = None):
        self._data: List[T] = [] if data is None else list(data)
        self.to = TerminalAccessor(self)

    def _get_data(self) -> List[T]:
        return self._data

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Array):
            return self._data == other._data
        if isinstance(other, list):
            return self._data == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Array({self._data!r})"

    # --- transformation ---

    def map(self, selector: Selector[T, U]) -> 'Array[U]':
        return Array(map_(self._data, selector))

    def filter(self, predicate: Predicate[T]) -> 'Array[T]':
        return Array(filter_(self._data, predicate))

    def filter_errors(self, func: FallibleSelector) -> 'Array[U]':
        """transform with a (value, error) callback, dropping failures"""
        return Array(filter_errors(self._data, func))

    def for_each(self, action: Action[T]) -> 'Array[T]':
        """eager side effects; returns this array for chaining"""
        for_each(self._data, action)
        return self

    # --- predicates and search ---

    def every(self, predicate: Predicate[T]) -> bool:
        return every(self._data, predicate)

    def some(self, predicate: Predicate[T]) -> bool:
        return some(self._data, predicate)

    def index(self, item: T) -> int:
        return index(self._data, item)

    def index_func(self, predicate: Predicate[T]) -> int:
        return index_func(self._data, predicate)

    def contains(self, item: T) -> bool:
        return contains(self._data, item)

    def find(self, predicate: Predicate[T], default: Optional[T] = None) -> Tuple[Optional[T], bool]:
        return find(self._data, predicate, default)

    def reduce(self, initial: U, accumulator: Accumulator[U, T]) -> U:
        return reduce_(self._data, initial, accumulator)

    # --- structural ---

    def fill(self, value: T, start: int, end: int) -> 'Array[T]':
        fill(self._data, value, start, end)
        return self

    def reverse(self) -> 'Array[T]':
        reverse(self._data)
        return self

    def range(self, start: int, n: int) -> 'Array[T]':
        return Array(range_(self._data, start, n))
