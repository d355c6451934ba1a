"""Function contracts supplied by callers.

Plain callables satisfy these protocols structurally; nothing has to
subclass them.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)
A_contra = TypeVar("A_contra", contravariant=True)
R_co = TypeVar("R_co", covariant=True)


class Producer(Protocol[T_co]):
    """Zero-argument callable returning a value (may have side effects)."""

    def __call__(self) -> T_co: ...


class Transformer(Protocol[T_contra, R_co]):
    """Unary callable mapping one value to another."""

    def __call__(self, value: T_contra, /) -> R_co: ...


class Combiner(Protocol[A_contra, T_contra, R_co]):
    """Binary callable folding an element into an accumulator."""

    def __call__(self, accumulator: A_contra, element: T_contra, /) -> R_co: ...


class BooleanCondition(Protocol[T_contra]):
    """Unary predicate."""

    def __call__(self, value: T_contra, /) -> bool: ...


__all__ = ["BooleanCondition", "Combiner", "Producer", "Transformer"]
