from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class ZipAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def zip_with(self, other: Iterable[U], result_selector: Callable[[T, U], V]) -> 'Enumerable[V]':
        """zip two sequences with custom result selector, stopping at the shorter one"""
        from ..enumerable import Enumerable
        return Enumerable(result_selector(t, u) for t, u in zip(self._enumerable._get_data(), other))

    def pairs(self, other: Iterable[U]) -> 'Enumerable[Tuple[T, U]]':
        """zip into (self, other) tuples"""
        return self.zip_with(other, lambda t, u: (t, u))
