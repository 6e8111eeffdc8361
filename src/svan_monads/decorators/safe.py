"""@safe decorator: run a function through the Try fault boundary."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from svan_monads.try_ import Try, catching

__all__ = ['safe']

P = ParamSpec('P')
T = TypeVar('T')


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Try[T]]: ...


@overload
def safe(
    *,
    exceptions: tuple[type[Exception], ...],
) -> Callable[[Callable[P, T]], Callable[P, Try[T]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Exception], ...] | None = None,
) -> Any:
    """Decorator that returns a Try instead of raising.

    Every call runs through ``catching``, so the same rules apply: MemoryError
    and RecursionError always propagate.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to capture. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Try[T] instead of T.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Try(result=Success(value=5.0))
        divide(10, 0)
        # Try(result=Error(error=ZeroDivisionError('division by zero')))
        ```
    """
    capture = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Try[T]:
        return catching(lambda: wrapped(*args, **kwargs), exceptions=capture)

    if func is not None:
        return wrapper(func)
    return wrapper
