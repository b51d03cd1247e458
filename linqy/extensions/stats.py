from __future__ import annotations
import logging
import math
import numbers
import typing
from decimal import Decimal
import numpy as np
from ..types import *
from ..config import get_config
from ..errors import EmptySequenceError, NonNumericError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)

Number = Union[int, float]


def _finite(number: float, value: Any) -> float:
    if not math.isfinite(number):
        raise NonNumericError(value)
    return number


def coerce_number(value: Any) -> Number:
    """
    coerce a value to int or float for numeric aggregates.
    bools and integrals become int, other reals and decimals become float,
    numeric strings are parsed when the config allows it. nan, inf and
    anything else raise NonNumericError.
    """
    if isinstance(value, (bool, numbers.Integral)):
        return int(value)
    if isinstance(value, (numbers.Real, Decimal)):
        return _finite(float(value), value)
    if isinstance(value, str) and get_config().coerce_numeric_strings:
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            raise NonNumericError(value) from None
        return _finite(number, value)
    raise NonNumericError(value)


class StatsAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _get_values(self, selector: Optional[Selector[T, Any]] = None) -> List[Number]:
        """helper to extract coerced numeric values for statistical operations."""
        data = self._enumerable._get_data()
        if selector:
            return [coerce_number(selector(x)) for x in data]
        return [coerce_number(x) for x in data]

    def sum(self, selector: Optional[Selector[T, Any]] = None) -> Number:
        """calc sum; 0 for an empty sequence"""
        values = self._get_values(selector)
        # integer sums stay exact; numpy only handles float data
        if get_config().use_numpy_aggregates and any(isinstance(v, float) for v in values):
            try:
                return np.sum(np.asarray(values, dtype=np.float64)).item()
            except (OverflowError, TypeError, ValueError):
                logger.debug("numpy sum failed, falling back to python arithmetic")
        return sum(values)

    def average(self, selector: Optional[Selector[T, Any]] = None) -> float:
        """calc average"""
        values = self._get_values(selector)
        if not values: raise EmptySequenceError("cannot calculate average of empty sequence")
        if get_config().use_numpy_aggregates:
            try:
                return np.mean(np.asarray(values, dtype=np.float64)).item()
            except (OverflowError, TypeError, ValueError):
                logger.debug("numpy mean failed, falling back to python arithmetic")
        return sum(values) / len(values)

    def min(self, selector: Optional[Selector[T, Any]] = None) -> T:
        """find minimum; with a selector, the element with the smallest key"""
        data = self._enumerable._get_data()
        if not data: raise EmptySequenceError("cannot find minimum of empty sequence")
        return min(data, key=selector) if selector else min(data)

    def max(self, selector: Optional[Selector[T, Any]] = None) -> T:
        """find maximum; with a selector, the element with the largest key"""
        data = self._enumerable._get_data()
        if not data: raise EmptySequenceError("cannot find maximum of empty sequence")
        return max(data, key=selector) if selector else max(data)
