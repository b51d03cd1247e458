import time
from contextlib import contextmanager
from typing import List, Tuple, Dict, Any, Callable, Iterator, Optional, Type

_registered: List[Tuple[str, Callable]] = []

_OK, _FAIL, _INFO, _RESET = '\033[92m', '\033[91m', '\033[94m', '\033[0m'


class TestAssertionError(AssertionError):
    """failed assert_that / assert_raises, reported apart from unexpected exceptions."""
    __test__ = False


def test(description: str) -> Callable:
    """register a test case for run(). the function itself is returned, so pytest collects it too."""

    def decorator(func: Callable) -> Callable:
        _registered.append((description, func))
        return func

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


@contextmanager
def assert_raises(error_type: Type[BaseException], message: Optional[str] = None) -> Iterator[Dict[str, Any]]:
    """
    asserts that the with-block raises error_type.
    the yielded dict receives the caught exception under 'error'.
    """
    caught: Dict[str, Any] = {}
    try:
        yield caught
    except error_type as e:
        caught['error'] = e
        return
    raise TestAssertionError(message or f"expected {error_type.__name__} to be raised")


def run(title: str = "test run") -> None:
    """run every registered test in registration order and print a report."""
    print(f"\n{_INFO}--- {title} ---{_RESET}")
    start = time.perf_counter()
    failed = 0

    for description, func in _registered:
        try:
            func()
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
        else:
            print(f"  {_OK}pass{_RESET}  {description}")
            continue
        failed += 1
        print(f"  {_FAIL}fail{_RESET}  {description}\n    -> {error}")

    elapsed = (time.perf_counter() - start) * 1000
    color = _OK if failed == 0 else _FAIL
    print(f"{color}{len(_registered)} tests, {failed} failed, {elapsed:.2f}ms{_RESET}\n")
    _registered.clear()
