"""
linqy: eager, linq-style queries over python sequences.

    from linqy import P
    P(people).order_by(lambda p: p.age).then_by(lambda p: p.name).select(lambda p: p.name).to.list()
"""

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable, EnumerableList

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    mutable,
    linqy,
    P
)

# expose comparer building blocks
from .comparers import for_key, compose, sort_with
from .extensions.core import negate

# expose supporting types, errors and configuration
from .types import Maybe, NOTHING, NO_SEED, Lookup
from .errors import (
    LinqyError,
    EmptySequenceError,
    IndexOutOfRangeError,
    MultipleMatchesError,
    DuplicateKeyError,
    NonNumericError
)
from .config import QueryConfig, get_config, configure, config_override

# define what `import *` does
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "EnumerableList",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "mutable",
    "linqy",
    "P",
    "for_key",
    "compose",
    "sort_with",
    "negate",
    "Maybe",
    "NOTHING",
    "NO_SEED",
    "Lookup",
    "LinqyError",
    "EmptySequenceError",
    "IndexOutOfRangeError",
    "MultipleMatchesError",
    "DuplicateKeyError",
    "NonNumericError",
    "QueryConfig",
    "get_config",
    "configure",
    "config_override"
]
