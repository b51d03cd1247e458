from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *
from .comparers import compose, for_key, sort_with
from .errors import IndexOutOfRangeError

# --- core functionality ---
from .extensions.core import _CoreOperations, negate

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.join import JoinAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.terminal import TerminalAccessor
from .extensions.zip import ZipAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, elements: Iterable[T] = ()):
        """init with a private copy of the source elements"""
        self._elements: List[T] = list(elements)

    def _get_data(self) -> List[T]:
        return self._elements

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.count()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._get_data()!r})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """an eager, linq-inspired query sequence over python iterables."""
    def __init__(self, elements: Iterable[T] = ()):
        super().__init__(elements)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.join = JoinAccessor(self)
        self.zip = ZipAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.to = TerminalAccessor(self)

# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T]):
    """
    represents a sorted sequence, allowing for subsequent orderings.

    the source order is kept untouched next to the sorted data, so every
    then_by re-sorts that source under the composed comparer instead of
    re-sorting an already sorted list. ties under all keys keep source order.
    """

    def __init__(self, source: Iterable[T], comparer: Comparer[T], key_count: int = 1):
        self._source: List[T] = list(source)
        self._comparer = comparer
        self._key_count = key_count
        logger.debug("sorting %d elements under %d key(s)", len(self._source), key_count)
        super().__init__(sort_with(self._source, comparer))

    @property
    def comparer(self) -> Comparer[T]:
        """the (possibly composed) comparer that produced this order"""
        return self._comparer

    def _then(self, key_selector: KeySelector[T, K], descending: bool) -> 'OrderedEnumerable[T]':
        composed = compose(self._comparer, for_key(key_selector, descending))
        return OrderedEnumerable(self._source, composed, self._key_count + 1)

    def then_by(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort ascending"""
        return self._then(key_selector, False)

    def then_by_descending(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        return self._then(key_selector, True)

# --- mutable list ---

class EnumerableList(Enumerable[T]):
    """
    the only sequence type that changes in place.
    query operations on it still return new, plain enumerables.
    """

    def add(self, element: T) -> None:
        """append an element to the end of the list"""
        self._elements.append(element)
        logger.debug("added element at index %d", len(self._elements) - 1)

    def add_range(self, elements: Iterable[T]) -> None:
        """append every element of an iterable"""
        new_items = list(elements)
        self._elements.extend(new_items)
        logger.debug("added %d element(s)", len(new_items))

    def insert(self, index: int, element: T) -> None:
        """insert at index; index == len(self) appends"""
        if index < 0 or index > len(self._elements):
            raise IndexOutOfRangeError(index, len(self._elements))
        self._elements.insert(index, element)
        logger.debug("inserted element at index %d", index)

    def remove(self, element: T) -> bool:
        """remove the first occurrence of element, reporting whether one was found"""
        index = self.to.index_of(element)
        if index == -1:
            return False
        self.remove_at(index)
        return True

    def remove_at(self, index: int) -> None:
        """remove the element at index"""
        if index < 0 or index >= len(self._elements):
            raise IndexOutOfRangeError(index, len(self._elements))
        del self._elements[index]
        logger.debug("removed element at index %d", index)

    def remove_all(self, predicate: Predicate[T]) -> 'Enumerable[T]':
        """a new sequence without the elements matching predicate; the list itself is untouched"""
        return self.where(negate(predicate))
