from typing import (
    TypeVar, Generic, Callable, Iterable, Iterator, Any, Optional, Union,
    List, Tuple, Mapping, Sequence
)

import numpy as np

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
Action = Callable[[T], Any]
Accumulator = Callable[[U, T], U]

# a fallible selector reports failure through its second slot instead of raising.
# (value, None) is a success, (anything, error) is a failure.
Outcome = Tuple[U, Optional[Any]]
FallibleSelector = Callable[[T], Outcome]

# none is the absent sequence / mapping, distinct from an empty one
MaybeSequence = Optional[Union[Sequence[T], np.ndarray]]
MaybeMapping = Optional[Mapping[K, V]]


def is_absent(data: Any) -> bool:
    """true only for the absent (none) collection, never for an empty one"""
    return data is None


def items_of(seq: MaybeSequence) -> Iterable[T]:
    """iterable over a possibly absent sequence; absent reads as empty"""
    return () if seq is None else seq


def attempt(func: Callable[[T], U]) -> FallibleSelector:
    """
    adapts a callable that raises into the (value, error) protocol used by filter_errors.
    e.g. filter_errors(['1', 'x'], attempt(int)) -> [1]
    """
    def wrapped(item: T) -> Outcome:
        try:
            return func(item), None
        except Exception as e:
            return None, e

    return wrapped


class FilterReport(Generic[U]):
    """successes and failures collected by one fallible transform pass"""

    def __init__(self, successes: List[U], failures: List[Tuple[Any, Any]]):
        self.successes = successes
        self.failures = failures  # (original element, error) pairs

    @property
    def has_failures(self) -> bool: return len(self.failures) > 0

    @property
    def success_count(self) -> int: return len(self.successes)

    @property
    def failure_count(self) -> int: return len(self.failures)

    def failed_items(self) -> List[Any]:
        return [item for item, _ in self.failures]

    def __repr__(self) -> str:
        return f"FilterReport(successes={self.success_count}, failures={self.failure_count})"
