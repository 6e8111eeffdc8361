"""Error types raised by the containers themselves."""

from __future__ import annotations

__all__ = [
    'FATAL_EXCEPTIONS',
    'InvalidStateError',
]


# Never captured by the fault boundary, even though they subclass Exception.
FATAL_EXCEPTIONS: tuple[type[BaseException], ...] = (MemoryError, RecursionError)


class InvalidStateError(RuntimeError):
    """A payload accessor was called on the wrong variant.

    Raised by ``unwrap()`` / ``.value`` on Nothing, ``success_value()`` on an
    Error and ``error_value()`` on a Success. This is a programmer error, not a
    domain failure, so it is raised instead of returned.
    """

    def __init__(self, operation: str, variant: str, message: str | None = None) -> None:
        self.operation = operation
        self.variant = variant
        super().__init__(message or f'Called {operation} on {variant}')
