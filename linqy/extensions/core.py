from __future__ import annotations
import typing
from itertools import chain, takewhile, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable


def negate(predicate: Callable[..., bool]) -> Callable[..., bool]:
    """returns a predicate that holds exactly where the given one does not"""
    def negated(*args, **kwargs) -> bool:
        return not predicate(*args, **kwargs)
    return negated


class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        # always return a base enumerable
        return Enumerable([x for x in self._get_data() if predicate(x)])

    def where_with_index(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        """filter elements with a predicate that also receives the 0-based index"""
        from ..enumerable import Enumerable
        return Enumerable([x for index, x in enumerate(self._get_data()) if predicate(x, index)])

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        return Enumerable([selector(x) for x in self._get_data()])

    def select_with_index(self: 'Enumerable[T]', selector: IndexedSelector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        from ..enumerable import Enumerable
        return Enumerable([selector(item, index) for index, item in enumerate(self._get_data())])

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        from ..enumerable import Enumerable
        return Enumerable([item for x in self._get_data() for item in selector(x)])

    def order_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """sort elements by a key"""
        from ..enumerable import OrderedEnumerable
        from ..comparers import for_key
        return OrderedEnumerable(self._get_data(), for_key(key_selector, False))

    def order_by_descending(self: 'Enumerable[T]', key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """sort elements by a key in descending order"""
        from ..enumerable import OrderedEnumerable
        from ..comparers import for_key
        return OrderedEnumerable(self._get_data(), for_key(key_selector, True))

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(self._get_data()[:max(count, 0)])

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(self._get_data()[max(count, 0):])

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        from ..enumerable import Enumerable
        return Enumerable(takewhile(predicate, self._get_data()))

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        from ..enumerable import Enumerable
        return Enumerable(dropwhile(predicate, self._get_data()))

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        from ..enumerable import Enumerable
        return Enumerable(reversed(self._get_data()))

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """appends a value to the end of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(chain(self._get_data(), [element]))

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """adds a value to the beginning of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(chain([element], self._get_data()))

    def default_if_empty(self: 'Enumerable[T]', default_value: T) -> 'Enumerable[T]':
        """returns the elements of a sequence, or a default value in a singleton collection if the sequence is empty"""
        from ..enumerable import Enumerable
        data = self._get_data()
        return Enumerable(data if data else [default_value])

    def cast(self: 'Enumerable[T]') -> 'Enumerable[U]':
        """same elements as a new sequence; only changes the static element type"""
        from ..enumerable import Enumerable
        return Enumerable(self._get_data())

    def of_type(self: 'Enumerable[T]', capability: Predicate[T]) -> 'Enumerable[U]':
        """
        keeps the elements for which a capability check holds,
        e.g. of_type(lambda x: hasattr(x, 'area')) or of_type(callable).
        """
        return self.where(capability)

    def of_kind(self: 'Enumerable[T]', tag: Any, discriminator: Callable[[T], Any]) -> 'Enumerable[T]':
        """keeps the members of a tagged union whose discriminator equals tag"""
        return self.where(lambda item: discriminator(item) == tag)
