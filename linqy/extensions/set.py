from __future__ import annotations
import typing
from itertools import chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _ValueSet(Generic[T]):
    """
    membership by value equality.
    hashable values go through a set; unhashable ones (dicts, lists) fall back to a linear scan.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._hashed: Set[T] = set()
        self._unhashable: List[T] = []
        for item in items:
            self.add(item)

    def add(self, item: T) -> None:
        try:
            self._hashed.add(item)
        except TypeError:
            self._unhashable.append(item)

    def __contains__(self, item: object) -> bool:
        try:
            if item in self._hashed:
                return True
        except TypeError:
            pass
        # hashable values can still equal unhashable ones, e.g. frozenset({1}) == {1}
        return item in self._unhashable


class SetAccessor(Generic[T]):
    """
    set-theoretic operations. all of them compare elements by value (==)
    and keep the order of the first sequence.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        if key_selector is not None:
            return self.distinct_by(key_selector)
        seen = _ValueSet()
        result = []
        for item in self._enumerable._get_data():
            if item not in seen:
                seen.add(item)
                result.append(item)
        return Enumerable(result)

    def distinct_by(self, key_selector: KeySelector[T, K]) -> 'Enumerable[T]':
        """one element per key: the first of each group, in order of first key occurrence."""
        from ..enumerable import Enumerable
        groups = self._enumerable.group.group_by(key_selector)
        return Enumerable(items[0] for items in groups.values())

    def union(self, other: Iterable[T]) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        return self.concat(other).set.distinct()

    def intersect(self, other: Iterable[T]) -> 'Enumerable[T]':
        """elements of this sequence that also occur in other."""
        from ..enumerable import Enumerable
        other_set = _ValueSet(other)
        return Enumerable(x for x in self._enumerable._get_data() if x in other_set)

    def except_(self, other: Iterable[T]) -> 'Enumerable[T]':
        """return elements from the first sequence not in the second (set difference)."""
        from ..enumerable import Enumerable
        other_set = _ValueSet(other)
        return Enumerable(x for x in self._enumerable._get_data() if x not in other_set)

    def concat(self, other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..enumerable import Enumerable
        return Enumerable(chain(self._enumerable._get_data(), other))
