"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from svan_monads._internal.zipping import Merged, combine_values, merged
from svan_monads.errors import InvalidStateError

if TYPE_CHECKING:
    from svan_monads.result import Error, Success

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'to_option']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. The value can be transformed with
    ``map``/``bind``, narrowed with ``filter`` and finally eliminated with
    ``fold`` or a ``match`` statement.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(4).filter(lambda x: x % 2 == 1)
        NothingType()
        >>> match Some(1):
        ...     case Some(v):
        ...         print(v)
        1
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def default_with(self, on_none: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    def bind[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate holds for the value, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def fold[U](self, on_none: Callable[[], U], on_some: Callable[[T], U]) -> U:  # noqa: ARG002
        """Eliminate the option into a plain value.

        Args:
            on_none: Called with no arguments when this is Nothing.
            on_some: Called with the value when this is Some.

        Returns:
            The result of ``on_some(value)``.
        """
        return on_some(self.value)

    def do(self, action: Callable[[T], Any]) -> Some[T]:
        """Call ``action`` with the value for its side effects and return self."""
        action(self.value)
        return self

    def do_if_none(self, _action: Callable[[], Any]) -> Some[T]:
        """Return self without calling the action."""
        return self

    def zip[U](self, *others: Some[Any] | NothingType, combine: Callable[..., U] | None = None) -> Some[Any] | NothingType:
        """Combine this option with any number of others.

        The result is Some only if every operand is Some. ``combine`` receives
        all values positionally, self first. Without ``combine`` the values are
        returned as a tuple.

        Args:
            *others: Options to combine with this one.
            combine: Function applied to the values when all are Some.

        Returns:
            Some(combine(...)) if every operand is Some, else Nothing.

        Examples:
            >>> Some(1).zip(Some(2), combine=lambda a, b: a + b)
            Some(value=3)
            >>> Some(1).zip(Nothing, Some(3))
            NothingType()
        """
        values: list[Any] = [self.value]
        for other in others:
            if not isinstance(other, Some):
                return Nothing
            values.append(other.value)
        return Some(combine_values(values, combine))

    def merge(self, other: Some[Any] | NothingType) -> Some[Merged] | NothingType:
        """Accumulate ``other`` into a Merged tuple.

        Examples:
            >>> Some(1).merge(Some(2)).merge(Some(3))
            Some(value=Merged((1, 2, 3)))
        """
        if isinstance(other, Some):
            return Some(merged(self.value, other.value))
        return Nothing

    def to_result[E](self, _error_factory: Callable[[], E]) -> Success[T]:
        """Convert to Result, returning Success(value)."""
        from svan_monads.result import Success

        return Success(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Use the ``Nothing`` constant instead of instantiating directly; every
    instance compares equal to it anyway.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.default_with(lambda: 0)
        0
    """

    @property
    def value(self) -> NoReturn:
        """Raise since Nothing has no value.

        Raises:
            InvalidStateError: Always.
        """
        raise InvalidStateError('value', 'Nothing')

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Nothing has no value.

        Raises:
            InvalidStateError: Always.
        """
        raise InvalidStateError('unwrap', 'Nothing')

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            InvalidStateError: Always, with the custom message.
        """
        raise InvalidStateError('expect', 'Nothing', msg)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value."""
        return default

    def default_with[T](self, on_none: Callable[[], T]) -> T:
        """Compute and return the fallback value."""
        return on_none()

    def bind[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing without calling the binder."""
        return self

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing without calling the mapper."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing without calling the predicate."""
        return self

    def fold[T, U](self, on_none: Callable[[], U], on_some: Callable[[T], U]) -> U:  # noqa: ARG002
        """Eliminate the option into a plain value.

        Returns:
            The result of ``on_none()``.
        """
        return on_none()

    def do[T](self, _action: Callable[[T], Any]) -> NothingType:
        """Return self without calling the action."""
        return self

    def do_if_none(self, action: Callable[[], Any]) -> NothingType:
        """Call ``action`` for its side effects and return self."""
        action()
        return self

    def zip[U](self, *_others: Some[Any] | NothingType, combine: Callable[..., U] | None = None) -> NothingType:  # noqa: ARG002
        """Return Nothing; ``combine`` is never called."""
        return self

    def merge(self, _other: Some[Any] | NothingType) -> NothingType:
        """Return Nothing."""
        return self

    def to_result[E](self, error_factory: Callable[[], E]) -> Error[E]:
        """Convert to Result, computing the error.

        Args:
            error_factory: Function that produces the error value.

        Returns:
            Error containing the computed error.
        """
        from svan_monads.result import Error

        return Error(error_factory())


Nothing: NothingType = NothingType()
"""Shared instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def to_option[T](value: T | None) -> Some[T] | NothingType:
    """Lift a plain value into an Option.

    ``None`` is the only absent value. Falsy values such as ``0``, ``''`` or
    ``[]`` are present and become Some.

    Examples:
        >>> to_option(None)
        NothingType()
        >>> to_option(0)
        Some(value=0)
    """
    if value is None:
        return Nothing
    return Some(value)
