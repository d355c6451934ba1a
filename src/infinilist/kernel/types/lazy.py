"""Lazy[T] — a memoizing deferred value.

A cell is either already evaluated (:meth:`Lazy.of`) or holds a producer
(:meth:`Lazy.defer`). The first :meth:`Lazy.get` runs the producer and caches
its result; every later call returns the cached value. Composition
(:meth:`map`, :meth:`flat_map`, :meth:`filter`, :meth:`combine`) builds a new
unforced cell and never forces ``self``.

Not safe for concurrent forcing; callers sharing a cell across threads must
serialise access themselves.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar, cast

from infinilist.kernel.errors import ReentrantForceError
from infinilist.kernel.functions import BooleanCondition, Combiner, Producer, Transformer
from infinilist.observability.logging import get_logger

T = TypeVar("T")
U = TypeVar("U")
S = TypeVar("S")
R = TypeVar("R")

_log = get_logger(__name__)


class _State(Enum):
    PENDING = "pending"
    FORCING = "forcing"
    DONE = "done"


class Lazy(Generic[T]):
    """One-shot memoizing cell: ``pending`` → ``forcing`` → ``done``.

    ``Lazy(producer)`` is the same as :meth:`Lazy.defer`.
    """

    __slots__ = ("_producer", "_state", "_value")

    def __init__(self, producer: Producer[T]) -> None:
        if not callable(producer):
            raise TypeError(f"producer must be callable, got {type(producer).__name__}")
        self._producer: Producer[T] | None = producer
        self._value: Any = None
        self._state = _State.PENDING

    # Construction -----------------------------------------------------
    @classmethod
    def of(cls, value: T) -> "Lazy[T]":
        """Return a cell that is already evaluated to ``value``."""
        cell = cls.__new__(cls)
        cell._producer = None
        cell._value = value
        cell._state = _State.DONE
        return cell

    @classmethod
    def defer(cls, producer: Producer[T]) -> "Lazy[T]":
        """Return a cell that runs ``producer`` on first :meth:`get`."""
        return cls(producer)

    # Forcing ----------------------------------------------------------
    @property
    def is_evaluated(self) -> bool:
        return self._state is _State.DONE

    def get(self) -> T:
        """Force the cell, running the producer at most once.

        If the producer raises, nothing is cached and the cell can be forced
        again. A producer that forces its own cell raises
        :class:`ReentrantForceError`.
        """
        if self._state is _State.DONE:
            return cast(T, self._value)
        if self._state is _State.FORCING:
            _log.warning("lazy.reentrant_force", producer=repr(self._producer))
            raise ReentrantForceError("Lazy value forced while its producer was running")

        producer = cast("Producer[T]", self._producer)
        self._state = _State.FORCING
        try:
            value = producer()
        except BaseException:
            self._state = _State.PENDING
            raise
        self._value = value
        self._producer = None
        self._state = _State.DONE
        return value

    # Composition ------------------------------------------------------
    def map(self, func: Transformer[T, U]) -> "Lazy[U]":
        return Lazy.defer(lambda: func(self.get()))

    def flat_map(self, func: "Transformer[T, Lazy[U]]") -> "Lazy[U]":
        return Lazy.defer(lambda: func(self.get()).get())

    def filter(self, predicate: BooleanCondition[T]) -> "Lazy[bool]":
        return Lazy.defer(lambda: bool(predicate(self.get())))

    def combine(self, other: "Lazy[S]", combiner: Combiner[T, S, R]) -> "Lazy[R]":
        """Combine two cells; forcing the result forces (and memoizes) both."""
        return Lazy.defer(lambda: combiner(self.get(), other.get()))

    # Dunder -----------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        # Forces both sides.
        if not isinstance(other, Lazy):
            return NotImplemented
        return bool(self.get() == other.get())

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self._value) if self._state is _State.DONE else "?"

    def __repr__(self) -> str:
        return f"Lazy({self._value!r})" if self._state is _State.DONE else "Lazy(?)"


__all__ = ["Lazy"]
