from __future__ import annotations
import numpy as np
from ..types import *


def fill(seq: MaybeSequence, value: T, start: int, end: int) -> MaybeSequence:
    """
    sets seq[i] = value for start <= i <= end (both inclusive), in place.
    indices outside the sequence are ignored. returns the same sequence,
    or none when given none.
    """
    if is_absent(seq):
        return seq
    for i in range(max(start, 0), min(end, len(seq) - 1) + 1):
        seq[i] = value
    return seq


def reverse(seq: MaybeSequence) -> MaybeSequence:
    """reverses in place by swapping from both ends; returns the same sequence"""
    if is_absent(seq):
        return seq
    i, j = 0, len(seq) - 1
    while i < j:
        # rows of a 2-d array are views, copy before overwriting
        left = seq[i].copy() if isinstance(seq, np.ndarray) and seq.ndim > 1 else seq[i]
        seq[i] = seq[j]
        seq[j] = left
        i, j = i + 1, j - 1
    return seq


def range_(seq: MaybeSequence, start: int, n: int) -> MaybeSequence:
    """
    window of at most n elements beginning at start.
    start <= 0 is read as 0, n <= 0 means "to the end" and a start past the
    end gives an empty result. never raises for out-of-range arguments.
    """
    if is_absent(seq):
        return []
    length = len(seq)

    if start <= 0:
        if 0 < n < length:
            return _window(seq, slice(None, n))
        return _window(seq, slice(None))

    if start < length:
        if n > 0 and start + n < length:
            return _window(seq, slice(start, start + n))
        return _window(seq, slice(start, None))

    return _window(seq, slice(0, 0))


def _window(seq, bounds: slice):
    """slice seq; numpy slices are views, so they come back read-only"""
    result = seq[bounds]
    if isinstance(result, np.ndarray):
        result.flags.writeable = False
    return result
