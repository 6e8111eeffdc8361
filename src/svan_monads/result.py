"""Result type: Error[E] | Success[T] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from svan_monads._internal.zipping import Merged, combine_values, merged
from svan_monads.errors import InvalidStateError

if TYPE_CHECKING:
    from svan_monads.option import NothingType, Some

__all__ = ['Error', 'Result', 'Success', 'into_result']


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Success represents the successful outcome of an operation. It wraps a value
    that can be transformed or chained through further Result-returning
    operations; an Error anywhere in the chain short-circuits the rest.

    Examples:
        >>> Success(2).bind(lambda x: Success(x * 10))
        Success(value=20)
        >>> Success(2).map(str)
        Success(value='2')
    """

    value: T

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True since this is Success.

        This method provides type narrowing - after checking is_success(),
        the type checker knows the result is Success[T].
        """
        return True

    def is_error(self) -> TypeIs[Error[Any]]:
        """Return False since this is Success."""
        return False

    def success_value(self) -> T:
        """Return the contained value."""
        return self.value

    def error_value(self) -> NoReturn:
        """Raise since Success has no error.

        Raises:
            InvalidStateError: Always.
        """
        raise InvalidStateError('error_value', f'Success({self.value!r})')

    def bind[U, E, F](
        self,
        f: Callable[[T], Success[U] | Error[F]],
        map_error: Callable[[E], F] | None = None,  # noqa: ARG002
    ) -> Success[U] | Error[F]:
        """Chain a computation that may fail.

        Args:
            f: Function that takes the value and returns a Result.
            map_error: Error mapper, only used on the Error path.

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def bind_error[F](self, _f: Callable[[Any], Success[T] | Error[F]]) -> Success[T]:
        """Return self unchanged since there is no error to recover from."""
        return self

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        """Apply a function to the contained value."""
        return Success(f(self.value))

    def map_error[F](self, _f: Callable[[Any], F]) -> Success[T]:
        """Return self unchanged since this is Success."""
        return self

    def bimap[U, F](self, on_error: Callable[[Any], F], on_success: Callable[[T], U]) -> Success[U]:  # noqa: ARG002
        """Map the value with ``on_success``; ``on_error`` is not called."""
        return Success(on_success(self.value))

    def fold[U](self, on_error: Callable[[Any], U], on_success: Callable[[T], U]) -> U:  # noqa: ARG002
        """Eliminate the result into a plain value.

        Args:
            on_error: Called with the error when this is Error.
            on_success: Called with the value when this is Success.

        Returns:
            The result of ``on_success(value)``.
        """
        return on_success(self.value)

    def default_with(self, _fallback: Callable[[Any], T]) -> T:
        """Return the contained value without calling the fallback."""
        return self.value

    def do(self, action: Callable[[T], Any]) -> Success[T]:
        """Call ``action`` with the value for its side effects and return self."""
        action(self.value)
        return self

    def do_if_error(self, _action: Callable[[Any], Any]) -> Success[T]:
        """Return self without calling the action."""
        return self

    def zip[U, E](
        self,
        *others: Success[Any] | Error[E],
        combine: Callable[..., U] | None = None,
    ) -> Success[Any] | Error[E]:
        """Combine this result with any number of others.

        Operands are inspected left to right and the first Error found is
        returned unchanged; ``combine`` is then never called and any later
        errors are discarded. When every operand is Success, ``combine``
        receives all values positionally, self first. Without ``combine`` the
        values are returned as a tuple.

        Args:
            *others: Results to combine with this one. All share one error type.
            combine: Function applied to the values when all are Success.

        Returns:
            Success(combine(...)) or the first Error.

        Examples:
            >>> Success(1).zip(Error('E1'), Error('E2'), combine=max)
            Error(error='E1')
        """
        values: list[Any] = [self.value]
        for other in others:
            if isinstance(other, Error):
                return other
            values.append(other.value)
        return Success(combine_values(values, combine))

    def merge[E](self, other: Success[Any] | Error[E]) -> Success[Merged] | Error[E]:
        """Accumulate ``other`` into a Merged tuple, or return its Error."""
        if isinstance(other, Error):
            return other
        return Success(merged(self.value, other.value))

    def to_option(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        from svan_monads.option import Some

        return Some(self.value)


class Error[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Error represents the failure outcome of an operation. It is an ordinary
    value: it passes through ``bind``/``map`` untouched and can be recovered
    with ``bind_error``/``default_with`` or eliminated with ``fold``.

    Examples:
        >>> Error('boom').map(lambda x: x + 1)
        Error(error='boom')
        >>> Error('boom').default_with(len)
        4
    """

    error: E

    def is_success(self) -> TypeIs[Success[Any]]:
        """Return False since this is Error."""
        return False

    def is_error(self) -> TypeIs[Error[E]]:
        """Return True since this is Error.

        This method provides type narrowing - after checking is_error(),
        the type checker knows the result is Error[E].
        """
        return True

    def success_value(self) -> NoReturn:
        """Raise since Error has no success value.

        Raises:
            InvalidStateError: Always.
        """
        raise InvalidStateError('success_value', f'Error({self.error!r})')

    def error_value(self) -> E:
        """Return the contained error."""
        return self.error

    def bind[F](
        self,
        _f: Callable[[Any], Any],
        map_error: Callable[[E], F] | None = None,
    ) -> Error[E] | Error[F]:
        """Short-circuit without calling the binder.

        Args:
            _f: Ignored binder.
            map_error: If given, called once with the error and its return
                value becomes the new error.

        Returns:
            Self, or a new Error holding ``map_error(error)``.
        """
        if map_error is None:
            return self
        return Error(map_error(self.error))

    def bind_error[T, F](self, f: Callable[[E], Success[T] | Error[F]]) -> Success[T] | Error[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f, possibly a Success.
        """
        return f(self.error)

    def map[T, U](self, _f: Callable[[T], U]) -> Error[E]:
        """Return self unchanged since this is Error."""
        return self

    def map_error[F](self, f: Callable[[E], F]) -> Error[F]:
        """Apply a function to the contained error."""
        return Error(f(self.error))

    def bimap[T, U, F](self, on_error: Callable[[E], F], on_success: Callable[[T], U]) -> Error[F]:  # noqa: ARG002
        """Map the error with ``on_error``; ``on_success`` is not called."""
        return Error(on_error(self.error))

    def fold[T, U](self, on_error: Callable[[E], U], on_success: Callable[[T], U]) -> U:  # noqa: ARG002
        """Eliminate the result into a plain value.

        Returns:
            The result of ``on_error(error)``.
        """
        return on_error(self.error)

    def default_with[T](self, fallback: Callable[[E], T]) -> T:
        """Recover a success value from the error."""
        return fallback(self.error)

    def do[T](self, _action: Callable[[T], Any]) -> Error[E]:
        """Return self without calling the action."""
        return self

    def do_if_error(self, action: Callable[[E], Any]) -> Error[E]:
        """Call ``action`` with the error for its side effects and return self."""
        action(self.error)
        return self

    def zip[U](self, *_others: Success[Any] | Error[E], combine: Callable[..., U] | None = None) -> Error[E]:  # noqa: ARG002
        """Return self; as the leftmost operand its error wins."""
        return self

    def merge(self, _other: Success[Any] | Error[E]) -> Error[E]:
        """Return self; as the leftmost operand its error wins."""
        return self

    def to_option(self) -> NothingType:
        """Convert to Option, discarding the error."""
        from svan_monads.option import Nothing

        return Nothing


type Result[E, T] = Error[E] | Success[T]


def into_result[T, E](
    value: T | E,
    error_types: type[E] | tuple[type[E], ...] = Exception,  # type: ignore[assignment]
) -> Success[T] | Error[E]:
    """Lift a bare value into a Result by its type.

    Values that are instances of ``error_types`` become Error, everything else
    becomes Success.

    Args:
        value: The value to lift.
        error_types: Type or tuple of types treated as errors.

    Examples:
        >>> into_result(3)
        Success(value=3)
        >>> into_result('bad input', error_types=str)
        Error(error='bad input')
    """
    if isinstance(value, error_types):
        return Error(value)
    return Success(value)  # type: ignore[arg-type]
