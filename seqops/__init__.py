r"""
'      ___  ___  __ _  ___  _ __  ___
'     / __|/ _ \/ _` |/ _ \| '_ \/ __|
'     \__ \  __/ (_| | (_) | |_) \__ \
'     |___/\___|\__, |\___/| .__/|___/
'                  |_|     |_|
"""
import logging

# library logger; the application decides where records go
logging.getLogger(__name__).addHandler(logging.NullHandler())

# expose the function library
from .extensions.transform import map_, filter_, filter_errors, filter_errors_report, for_each
from .extensions.search import every, some, index, index_func, contains, find, reduce_
from .extensions.mutation import fill, reverse, range_
from .extensions.mapping import map_keys, map_values

# expose the fluent wrapper and its factories
from .array import Array
from .factories import from_iterable, from_mapping, empty, repeat, A

# expose supporting types and helpers
from .types import FilterReport, attempt, is_absent

# define what `import *` does
__all__ = [
    "map_",
    "filter_",
    "filter_errors",
    "filter_errors_report",
    "for_each",
    "every",
    "some",
    "index",
    "index_func",
    "contains",
    "find",
    "reduce_",
    "fill",
    "reverse",
    "range_",
    "map_keys",
    "map_values",
    "Array",
    "from_iterable",
    "from_mapping",
    "empty",
    "repeat",
    "A",
    "FilterReport",
    "attempt",
    "is_absent",
]
