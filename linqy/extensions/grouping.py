from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K],
                 element_selector: Optional[Selector[T, U]] = None) -> Dict[K, List[U]]:
        """group elements by a key, keys in first-occurrence order"""
        el_sel = element_selector if element_selector else lambda item: item
        groups = defaultdict(list)
        for item in self._enumerable._get_data():
            groups[key_selector(item)].append(el_sel(item))
        return dict(groups)

    def group_by_with_aggregate(self, key_selector: KeySelector[T, K],
                                element_selector: Selector[T, U],
                                result_selector: Callable[[K, List[U]], V]) -> Dict[K, V]:
        """group by key then transform each group"""
        groups = self.group_by(key_selector, element_selector)
        return {key: result_selector(key, elements) for key, elements in groups.items()}
