from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class JoinAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    @staticmethod
    def _build_lookup(inner: Iterable[U], inner_key_selector: KeySelector[U, K]) -> Dict[K, List[U]]:
        inner_lookup = defaultdict(list)
        for inner_item in inner:
            inner_lookup[inner_key_selector(inner_item)].append(inner_item)
        return inner_lookup

    def join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
             inner_key_selector: KeySelector[U, K],
             result_selector: Callable[[T, U], V]) -> 'Enumerable[V]':
        """inner join two sequences based on matching keys"""
        from ..enumerable import Enumerable
        inner_lookup = self._build_lookup(inner, inner_key_selector)
        result = []
        for outer_item in self._enumerable._get_data():
            for inner_item in inner_lookup.get(outer_key_selector(outer_item), []):
                result.append(result_selector(outer_item, inner_item))
        return Enumerable(result)

    def group_join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                   inner_key_selector: KeySelector[U, K],
                   result_selector: Callable[[T, 'Enumerable[U]'], V]) -> 'Enumerable[V]':
        """
        pairs each outer element with the sequence of inner elements sharing its key.
        outer elements without matches get an empty sequence.
        """
        from ..enumerable import Enumerable
        inner_lookup = self._build_lookup(inner, inner_key_selector)
        return Enumerable(
            result_selector(o, Enumerable(inner_lookup.get(outer_key_selector(o), [])))
            for o in self._enumerable._get_data()
        )
