import logging
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryConfig:
    """process-wide options for query operations"""
    use_numpy_aggregates: bool = True  # sum/average through numpy when values fit an array
    coerce_numeric_strings: bool = True  # '3' and '2.5' count as numbers in sum/average


_active = QueryConfig()


def get_config() -> QueryConfig:
    return _active


def configure(**overrides) -> QueryConfig:
    """
    replace the active options, returning the previous ones.
    unknown option names raise TypeError.
    """
    global _active
    known = {f.name for f in fields(QueryConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"unknown query option(s): {', '.join(sorted(unknown))}")
    previous = _active
    _active = replace(_active, **overrides)
    logger.debug("query config changed: %s", _active)
    return previous


@contextmanager
def config_override(**overrides) -> Iterator[QueryConfig]:
    """temporarily apply options for the duration of a with-block"""
    global _active
    previous = configure(**overrides)
    try:
        yield _active
    finally:
        _active = previous
