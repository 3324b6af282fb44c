from __future__ import annotations
import logging
from ..types import *

logger = logging.getLogger(__name__)


def map_(seq: MaybeSequence, selector: Selector[T, U]) -> List[U]:
    """project each element to a new form; absent input gives an empty list"""
    return [selector(item) for item in items_of(seq)]


def filter_(seq: MaybeSequence, predicate: Predicate[T]) -> List[T]:
    """keep the elements the predicate accepts, in original order"""
    return [item for item in items_of(seq) if predicate(item)]


def filter_errors(seq: MaybeSequence, func: FallibleSelector) -> List[U]:
    """
    transform and filter in one pass.
    func returns a (value, error) pair; elements whose error is not none are
    skipped without surfacing the error to the caller.
    """
    result = []
    for item in items_of(seq):
        value, error = func(item)
        if error is None:
            result.append(value)
        else:
            logger.debug("skipping %r: %s", item, error)
    return result


def filter_errors_report(seq: MaybeSequence, func: FallibleSelector) -> FilterReport[U]:
    """like filter_errors, but keeps the skipped elements and their errors"""
    successes, failures = [], []
    for item in items_of(seq):
        value, error = func(item)
        if error is None:
            successes.append(value)
        else:
            logger.debug("skipping %r: %s", item, error)
            failures.append((item, error))
    return FilterReport(successes, failures)


def for_each(seq: MaybeSequence, action: Action[T]) -> None:
    """run action on every element for its side effects"""
    for item in items_of(seq):
        action(item)
