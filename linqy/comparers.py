from functools import cmp_to_key
from .types import *


def compare_keys(key_a: Any, key_b: Any, descending: bool = False) -> int:
    """natural-order comparison of two keys, inverted when descending"""
    if key_a > key_b:
        return -1 if descending else 1
    if key_a < key_b:
        return 1 if descending else -1
    return 0


def for_key(key_selector: KeySelector[T, K], descending: bool = False) -> Comparer[T]:
    """build a comparer that orders elements by a selected key"""
    def comparer(a: T, b: T) -> int:
        return compare_keys(key_selector(a), key_selector(b), descending)
    return comparer


def compose(outer: Comparer[T], inner: Comparer[T]) -> Comparer[T]:
    """chain two comparers: inner only breaks the ties left by outer"""
    def comparer(a: T, b: T) -> int:
        result = outer(a, b)
        return result if result != 0 else inner(a, b)
    return comparer


def sort_with(items: Iterable[T], comparer: Comparer[T]) -> List[T]:
    """stable sort into a new list"""
    return sorted(items, key=cmp_to_key(comparer))
