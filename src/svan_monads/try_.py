"""Try type: a Result whose error channel holds a captured exception.

``Try.catching`` is the one place in the library where a raised exception is
turned into a value. Every other combinator, including ``Try.map`` and
``Try.bind``, lets exceptions from the supplied function propagate; use
``map_catching`` to capture them instead.

Example:
    ```python
    from svan_monads import Try

    parsed = Try.catching(lambda: int(raw)).map(lambda n: n * 2)
    parsed.fold(lambda exc: f'bad input: {exc}', str)
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

from svan_monads._config import get_config
from svan_monads._internal.zipping import Merged
from svan_monads._logging import LIBRARY, get_logger
from svan_monads.errors import FATAL_EXCEPTIONS
from svan_monads.option import NothingType, Some
from svan_monads.result import Error, Success

__all__ = ['Try', 'catching']


def _log_fault(event: str, exc: BaseException) -> None:
    config = get_config()
    if config.log_level is None or not config.log_captured_faults:
        return
    get_logger(__name__, library=LIBRARY).debug(event, error_type=type(exc).__qualname__, error_message=str(exc))


def catching[T](
    block: Callable[[], T],
    *,
    exceptions: tuple[type[Exception], ...] = (Exception,),
) -> Try[T]:
    """Run ``block`` now and capture any exception it raises.

    MemoryError and RecursionError always propagate, as do exceptions outside
    ``exceptions`` and BaseExceptions such as KeyboardInterrupt.

    Args:
        block: Zero-argument callable to run immediately.
        exceptions: Exception types to capture. Defaults to (Exception,).

    Returns:
        A success Try holding the return value, or an error Try holding the
        captured exception.

    Examples:
        >>> catching(lambda: 42)
        Try(result=Success(value=42))
        >>> catching(lambda: 1 / 0).is_error()
        True
    """
    try:
        value = block()
    except FATAL_EXCEPTIONS as exc:
        _log_fault('try.fatal_fault', exc)
        raise
    except exceptions as exc:
        _log_fault('try.fault_captured', exc)
        return Try(Error(exc))
    return Try(Success(value))


def _as_try[U](value: Try[U] | Success[U] | Error[Exception], operation: str) -> Try[U]:
    if isinstance(value, Try):
        return value
    if isinstance(value, Success):
        return Try(value)
    if isinstance(value, Error):
        if isinstance(value.error, Exception):
            return Try(value)
        msg = f'{operation} needs an exception in the error channel, got {type(value.error).__name__}'
        raise TypeError(msg)
    msg = f'{operation} needs a Try or a Result, got {type(value).__name__}'
    raise TypeError(msg)


class Try[T](msgspec.Struct, frozen=True, gc=False):
    """Outcome of a computation that may have raised.

    Wraps a ``Result[Exception, T]``; ``to_result()`` hands it back. All
    combinators mirror Result and re-wrap their output so the error channel
    stays exception-typed.

    Attributes:
        result: The wrapped Success or Error.
    """

    result: Success[T] | Error[Exception]

    @classmethod
    def catching(
        cls,
        block: Callable[[], T],
        *,
        exceptions: tuple[type[Exception], ...] = (Exception,),
    ) -> Try[T]:
        """Run ``block`` now and capture any exception it raises.

        See the module-level ``catching`` for the capture rules.
        """
        return catching(block, exceptions=exceptions)

    @classmethod
    def success(cls, value: T) -> Try[T]:
        """Build a success Try from a plain value."""
        return cls(Success(value))

    @classmethod
    def failure(cls, error: Exception) -> Try[Any]:
        """Build an error Try from an exception instance."""
        return cls(Error(error))

    @classmethod
    def from_result(cls, result: Success[T] | Error[Exception]) -> Try[T]:
        """Wrap an existing exception-typed Result."""
        return cls(result)

    def is_success(self) -> bool:
        return self.result.is_success()

    def is_error(self) -> bool:
        return self.result.is_error()

    def success_value(self) -> T:
        """Return the value; raises InvalidStateError on an error Try."""
        return self.result.success_value()

    def error_value(self) -> Exception:
        """Return the exception; raises InvalidStateError on a success Try."""
        return self.result.error_value()

    def bind[U](self, f: Callable[[T], Try[U] | Success[U] | Error[Exception]]) -> Try[U]:
        """Chain a computation returning a Try (or an exception-typed Result).

        Exceptions raised by ``f`` itself are not captured.
        """
        if isinstance(self.result, Error):
            return self  # type: ignore[return-value]
        return _as_try(f(self.result.value), 'Try.bind binder')

    def map[U](self, f: Callable[[T], U]) -> Try[U]:
        """Transform the value. Exceptions raised by ``f`` propagate."""
        return Try(self.result.map(f))

    def map_catching[U](self, f: Callable[[T], U]) -> Try[U]:
        """Transform the value, capturing any exception raised by ``f``.

        Examples:
            >>> Try.success('x').map_catching(int).is_error()
            True
        """
        if isinstance(self.result, Error):
            return self  # type: ignore[return-value]
        value = self.result.value
        return catching(lambda: f(value))

    def map_error(self, f: Callable[[Exception], Exception]) -> Try[T]:
        """Replace the captured exception, e.g. to wrap it in a domain error."""
        return Try(self.result.map_error(f))

    def fold[U](self, on_error: Callable[[Exception], U], on_success: Callable[[T], U]) -> U:
        return self.result.fold(on_error, on_success)

    def default_with(self, fallback: Callable[[Exception], T]) -> T:
        return self.result.default_with(fallback)

    def do(self, action: Callable[[T], Any]) -> Try[T]:
        self.result.do(action)
        return self

    def do_if_error(self, action: Callable[[Exception], Any]) -> Try[T]:
        self.result.do_if_error(action)
        return self

    def zip[U](
        self,
        *others: Try[Any] | Success[Any] | Error[Exception],
        combine: Callable[..., U] | None = None,
    ) -> Try[Any]:
        """Combine with other tries or exception-typed results; the leftmost error wins."""
        operands = [_as_try(other, 'Try.zip operand').result for other in others]
        return Try(self.result.zip(*operands, combine=combine))

    def merge(self, other: Try[Any] | Success[Any] | Error[Exception]) -> Try[Merged]:
        """Accumulate ``other`` into a Merged tuple; the leftmost error wins."""
        return Try(self.result.merge(_as_try(other, 'Try.merge operand').result))

    def to_result(self) -> Success[T] | Error[Exception]:
        """Return the wrapped Result."""
        return self.result

    def to_option(self) -> Some[T] | NothingType:
        """Convert to Option, discarding any exception."""
        return self.result.to_option()