from __future__ import annotations

import typing
from collections.abc import Mapping
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
IndexedPredicate = Callable[[T, int], bool]
Selector = Callable[[T], U]
IndexedSelector = Callable[[T, int], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]


class _NoSeed:
    """marks an aggregate call made without a seed (None is a valid seed)."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_SEED"


NO_SEED = _NoSeed()


class Maybe(Generic[T]):
    """
    an explicit present-or-absent result.

    returned by the *_or_default operations so that a present but falsy
    element (0, '', None, False) can be told apart from no element at all.
    """

    __slots__ = ('_value', '_has_value')

    def __init__(self, value: Optional[T] = None, has_value: bool = False):
        self._value = value
        self._has_value = has_value

    @classmethod
    def of(cls, value: T) -> 'Maybe[T]':
        return cls(value, True)

    @classmethod
    def nothing(cls) -> 'Maybe[Any]':
        return NOTHING

    @property
    def has_value(self) -> bool: return self._has_value

    @property
    def value(self) -> T:
        if not self._has_value:
            from .errors import EmptySequenceError
            raise EmptySequenceError("maybe has no value")
        return self._value

    def value_or(self, default: U) -> Union[T, U]:
        return self._value if self._has_value else default

    def map(self, selector: Selector[T, U]) -> 'Maybe[U]':
        return Maybe.of(selector(self._value)) if self._has_value else NOTHING

    def __bool__(self) -> bool:
        return self._has_value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if not self._has_value or not other._has_value:
            return self._has_value == other._has_value
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((self._has_value, self._value)) if self._has_value else hash(False)

    def __repr__(self) -> str:
        return f"Maybe.of({self._value!r})" if self._has_value else "NOTHING"


NOTHING: Maybe[Any] = Maybe()


class Lookup(Mapping, Generic[K, T]):
    """
    read-only grouping of elements by key.
    keys keep first-occurrence order; a missing key yields an empty sequence.
    """

    def __init__(self, groups: Dict[K, List[T]]):
        self._groups = groups

    def __getitem__(self, key: K) -> 'Enumerable[T]':
        from .enumerable import Enumerable
        return Enumerable(self._groups.get(key, []))

    def __contains__(self, key: object) -> bool:
        return key in self._groups

    def __iter__(self) -> Iterator[K]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def to_dict(self) -> Dict[K, List[T]]:
        """copy of the groups as a plain dict of lists"""
        return {key: list(items) for key, items in self._groups.items()}

    def __repr__(self) -> str:
        return f"Lookup(keys={len(self._groups)})"
