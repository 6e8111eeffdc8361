"""Decorators: @safe."""

from svan_monads.decorators.safe import safe

__all__ = [
    'safe',
]
