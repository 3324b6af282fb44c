from __future__ import annotations
import numpy as np
from ..types import *


def every(seq: MaybeSequence, predicate: Predicate[T]) -> bool:
    """
    true if every element satisfies the predicate.
    an absent sequence is false, while an empty one is vacuously true.
    """
    if is_absent(seq):
        return False
    for item in seq:
        if not predicate(item):
            return False
    return True


def some(seq: MaybeSequence, predicate: Predicate[T]) -> bool:
    """true if at least one element satisfies the predicate"""
    for item in items_of(seq):
        if predicate(item):
            return True
    return False


def index(seq: MaybeSequence, item: T) -> int:
    """position of the first element equal to item, or -1"""
    for position, element in enumerate(items_of(seq)):
        if _equals(element, item):
            return position
    return -1


def _equals(element: Any, item: Any) -> bool:
    # == on arrays is elementwise, reduce it to a single answer
    if isinstance(element, np.ndarray) or isinstance(item, np.ndarray):
        return bool(np.array_equal(element, item))
    return element == item


def index_func(seq: MaybeSequence, predicate: Predicate[T]) -> int:
    """position of the first element satisfying the predicate, or -1"""
    for position, element in enumerate(items_of(seq)):
        if predicate(element):
            return position
    return -1


def contains(seq: MaybeSequence, item: T) -> bool:
    return index(seq, item) >= 0


def find(seq: MaybeSequence, predicate: Predicate[T],
         default: Optional[T] = None) -> Tuple[Optional[T], bool]:
    """
    first element satisfying the predicate and whether one was found.
    on a miss returns (default, False); check the flag, since default
    may itself be a legitimate element.
    """
    for element in items_of(seq):
        if predicate(element):
            return element, True
    return default, False


def reduce_(seq: MaybeSequence, initial: U, accumulator: Accumulator[U, T]) -> U:
    """left fold starting from initial"""
    acc = initial
    for item in items_of(seq):
        acc = accumulator(acc, item)
    return acc
