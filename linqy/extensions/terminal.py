from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..types import *
from ..errors import (
    DuplicateKeyError, EmptySequenceError, IndexOutOfRangeError, MultipleMatchesError
)

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _matching(self, predicate: Optional[Predicate[T]]) -> List[T]:
        data = self._enumerable._get_data()
        return data if predicate is None else [x for x in data if predicate(x)]

    # --- materialization ---

    def list(self) -> List[T]:
        """convert to a new list"""
        return list(self._enumerable._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary, raising DuplicateKeyError when two elements share a key"""
        val_sel = value_selector if value_selector else lambda item: item
        result = {}
        for item in self._enumerable._get_data():
            key = key_selector(item)
            if key in result: raise DuplicateKeyError(key)
            result[key] = val_sel(item)
        return result

    def lookup(self, key_selector: KeySelector[T, K],
               element_selector: Optional[Selector[T, V]] = None) -> Lookup[K, V]:
        """read-only grouping of elements by key"""
        return Lookup(self._enumerable.group.group_by(key_selector, element_selector))

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    # --- quantifiers ---

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._enumerable._get_data())
        return sum(1 for x in self._enumerable._get_data() if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        data = self._enumerable._get_data()
        if predicate is None: return len(data) > 0
        return any(predicate(x) for x in data)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(predicate(x) for x in self._enumerable._get_data())

    def contains(self, element: T) -> bool:
        """check whether an element equal to the given one is present"""
        return element in self._enumerable._get_data()

    def index_of(self, element: T) -> int:
        """index of the first equal element, or -1"""
        for index, item in enumerate(self._enumerable._get_data()):
            if item == element: return index
        return -1

    def sequence_equal(self, other: Iterable[T]) -> bool:
        """same length and equal elements at every index"""
        return self._enumerable._get_data() == list(other)

    # --- element access ---

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        data = self._enumerable._get_data()
        if predicate is None:
            if not data: raise EmptySequenceError()
            return data[0]
        for item in data:
            if predicate(item): return item
        raise EmptySequenceError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None) -> Maybe[T]:
        """get first element, or NOTHING"""
        try: return Maybe.of(self.first(predicate))
        except EmptySequenceError: return NOTHING

    def last(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get last element"""
        data = self._enumerable._get_data()
        if predicate is None:
            if not data: raise EmptySequenceError()
            return data[-1]
        for item in reversed(data):
            if predicate(item): return item
        raise EmptySequenceError("no element satisfies the condition")

    def last_or_default(self, predicate: Optional[Predicate[T]] = None) -> Maybe[T]:
        """get last element, or NOTHING"""
        try: return Maybe.of(self.last(predicate))
        except EmptySequenceError: return NOTHING

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        data = self._matching(predicate)
        if len(data) == 0: raise EmptySequenceError("sequence contains no matching elements")
        if len(data) > 1: raise MultipleMatchesError()
        return data[0]

    def single_or_default(self, predicate: Optional[Predicate[T]] = None) -> Maybe[T]:
        """single element, NOTHING when none match; still raises when several match"""
        try: return Maybe.of(self.single(predicate))
        except EmptySequenceError: return NOTHING

    def element_at(self, index: int) -> T:
        """element at a 0-based index; negative indices are out of range"""
        data = self._enumerable._get_data()
        if index < 0 or index >= len(data): raise IndexOutOfRangeError(index, len(data))
        return data[index]

    def element_at_or_default(self, index: int) -> Maybe[T]:
        """element at index, or NOTHING when the index is out of range"""
        try: return Maybe.of(self.element_at(index))
        except IndexOutOfRangeError: return NOTHING

    # --- folds and side effects ---

    def aggregate(self, accumulator: Accumulator[U, T], seed: Any = NO_SEED) -> U:
        """applies accumulator function over sequence; without a seed the first element seeds the fold"""
        data = self._enumerable._get_data()
        if seed is NO_SEED:
            if not data: raise EmptySequenceError("cannot aggregate empty sequence without seed")
            return reduce(accumulator, data)
        return reduce(accumulator, data, seed)

    def aggregate_with_selector(self, seed: U, accumulator: Accumulator[U, T],
                                result_selector: Selector[U, V]) -> V:
        """aggregate with seed and final transformation"""
        return result_selector(reduce(accumulator, self._enumerable._get_data(), seed))

    def for_each(self, action: Callable[[T], Any]) -> 'Enumerable[T]':
        """
        performs the specified action on each element for side-effects.
        returns the original enumerable to allow chaining.
        """
        for item in self._enumerable._get_data():
            action(item)
        return self._enumerable
