"""Helpers shared by the zip and merge combinators of Option, Result and Try."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

__all__ = ['Merged', 'combine_values', 'merged']


class Merged(tuple):
    """Tuple produced by ``merge``.

    Merging onto a Merged payload appends to it instead of nesting, so a chain
    of merges yields one flat tuple. A plain tuple payload is treated as a
    single value.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f'Merged({tuple.__repr__(self)})'


def merged(left: Any, right: Any) -> Merged:
    """Accumulate ``right`` onto ``left``."""
    if isinstance(left, Merged):
        return Merged((*left, right))
    return Merged((left, right))


def combine_values[U](values: Sequence[Any], combine: Callable[..., U] | None) -> U | tuple[Any, ...]:
    """Apply ``combine`` positionally, or return the values as a tuple."""
    if combine is None:
        return tuple(values)
    return combine(*values)
