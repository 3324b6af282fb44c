import time
from contextlib import contextmanager
from functools import wraps
from typing import List, Dict, Any, Callable, Iterator, Type

_registry: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}


class _c:
    """ansi colour codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """raised by the assert helpers, reported as a failure rather than an error."""
    pass


# --- registration and assertions ---

def test(description: str) -> Callable:
    """register a function as a test case. the function stays callable as-is."""

    def decorator(func: Callable) -> Callable:
        _registry['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


# test modules alias this decorator as `test`; keep pytest from collecting it
test.__test__ = False


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_equal(actual: Any, expected: Any, message: str = "") -> None:
    """equality assertion that puts both values in the failure message"""
    if actual != expected:
        prefix = f"{message}: " if message else ""
        raise TestAssertionError(f"{prefix}expected {expected!r}, got {actual!r}")


@contextmanager
def assert_raises(error_type: Type[BaseException]) -> Iterator[None]:
    try:
        yield
    except error_type:
        return
    raise TestAssertionError(f"expected {error_type.__name__} to be raised")


# --- runner ---

def run(title: str = "test run") -> bool:
    """run every registered test, print a report and return true if all passed."""
    print(f"\n{_c.info}== {title} =={_c.reset}")
    started = time.perf_counter()

    results = []
    for case in _registry['tests']:
        error = None
        try:
            case['func']()
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        results.append({'passed': error is None, 'description': case['description'], 'error': error})
        if error is None:
            print(f"  {_c.ok}pass{_c.reset}  {case['description']}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {case['description']}")
            print(f"        {_c.grey}{error}{_c.reset}")

    _registry['results'] = results
    # clear so several suites can run from one script
    _registry['tests'] = []
    return _summarize(results, started)


def _summarize(results: List[Dict[str, Any]], started: float) -> bool:
    elapsed_ms = (time.perf_counter() - started) * 1000
    failed = sum(1 for r in results if not r['passed'])
    colour = _c.ok if failed == 0 else _c.fail

    print(f"\n{colour}{len(results) - failed}/{len(results)} passed{_c.reset}"
          f" in {_c.warn}{elapsed_ms:.2f}ms{_c.reset}\n")
    return failed == 0
