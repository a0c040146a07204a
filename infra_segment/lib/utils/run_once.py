from functools import wraps
from typing import Callable

_sentinel = object()


def run_once(func: Callable) -> Callable:
    """
    Decorator that restricts `func` to a single execution. Repeated calls return the value of the first call.

    The cached value can be dropped with `decorated.reset()`, which is mostly useful in tests.

    :param func: The decorated function
    """
    result = _sentinel

    @wraps(func)
    def func_run_once(*args, **kwargs):
        nonlocal result

        if result is _sentinel:
            result = func(*args, **kwargs)

        return result

    def reset() -> None:
        nonlocal result
        result = _sentinel

    func_run_once.reset = reset

    return func_run_once
