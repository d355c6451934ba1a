"""InfiniteList[T] — a lazily evaluated, possibly unbounded cons list.

Each node holds a ``Lazy[Maybe[T]]`` head and a ``Lazy[InfiniteList[T]]``
tail. :meth:`InfiniteList.filter` never shortens the chain: a rejected
element becomes a ``Nothing`` head, and :meth:`head`/:meth:`tail` skip
forward over such nodes. The chain ends at the shared sentinel.

Example::

    evens = InfiniteList.iterate(1, lambda x: x + 1).filter(lambda x: x % 2 == 0)
    evens.limit(3).to_list()    # [2, 4, 6]

``reduce``, ``count`` and ``to_list`` only terminate on finite lists; bound
the list with :meth:`limit` or :meth:`take_while` first.
"""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar, cast

from infinilist.kernel.errors import ExhaustedError
from infinilist.kernel.functions import BooleanCondition, Combiner, Producer, Transformer
from infinilist.kernel.types.lazy import Lazy
from infinilist.kernel.types.maybe import NOTHING, Maybe, Nothing, Some
from infinilist.observability.logging import get_logger

T = TypeVar("T")
R = TypeVar("R")
U = TypeVar("U")

_log = get_logger(__name__)


class InfiniteList(Generic[T]):
    """Lazy cons list; see the module docstring.

    The sentinel is the one instance without cells, so every variant check
    is ``self is _SENTINEL``.
    """

    __slots__ = ("__weakref__", "_head", "_tail")

    def __init__(
        self,
        head: Lazy[Maybe[T]],
        tail: "Lazy[InfiniteList[T]]",
    ) -> None:
        if not isinstance(head, Lazy) or not isinstance(tail, Lazy):
            raise TypeError("InfiniteList cells must be Lazy; use InfiniteList.sentinel() for the empty list")
        self._head: Lazy[Maybe[T]] | None = head
        self._tail: Lazy[InfiniteList[T]] | None = tail

    # Construction -----------------------------------------------------
    @classmethod
    def generate(cls, producer: Producer[T]) -> "InfiniteList[T]":
        """Every element is an independent call to ``producer``, made lazily."""
        return cls(
            Lazy.defer(lambda: Some(producer())),
            Lazy.defer(lambda: cls.generate(producer)),
        )

    @classmethod
    def iterate(cls, seed: T, step: Transformer[T, T]) -> "InfiniteList[T]":
        """``seed``, ``step(seed)``, ``step(step(seed))``, ..."""
        return cls(
            Lazy.of(Some(seed)),
            Lazy.defer(lambda: cls.iterate(step(seed), step)),
        )

    @staticmethod
    def sentinel() -> "InfiniteList[Any]":
        """Return the shared terminal list."""
        return _SENTINEL

    def is_sentinel(self) -> bool:
        return self is _SENTINEL

    # Traversal --------------------------------------------------------
    def _first_retained(self) -> "InfiniteList[T]":
        """Skip forward to the first node with a ``Some`` head, or the sentinel."""
        node = self
        while node is not _SENTINEL:
            if cast("Lazy[Maybe[T]]", node._head).get().is_some():
                return node
            node = cast("Lazy[InfiniteList[T]]", node._tail).get()
        return node

    def _next(self) -> "InfiniteList[T]":
        # Tail of a retained node, itself skipped forward.
        return cast("Lazy[InfiniteList[T]]", self._tail).get()._first_retained()

    def _value(self) -> T:
        return cast("Lazy[Maybe[T]]", self._head).get().unwrap()

    def head(self) -> T:
        """Return the first retained element.

        Raises:
            ExhaustedError: the list has no retained element.
        """
        node = self._first_retained()
        if node is _SENTINEL:
            _log.debug("infinite_list.exhausted", op="head")
            raise ExhaustedError("head")
        return node._value()

    def tail(self) -> "InfiniteList[T]":
        """Return the list after the first retained element.

        Raises:
            ExhaustedError: the list has no retained element.
        """
        node = self._first_retained()
        if node is _SENTINEL:
            _log.debug("infinite_list.exhausted", op="tail")
            raise ExhaustedError("tail")
        return node._next()

    # Transformation ---------------------------------------------------
    def map(self, mapper: Transformer[T, R]) -> "InfiniteList[R]":
        if self is _SENTINEL:
            return _SENTINEL
        head = cast("Lazy[Maybe[T]]", self._head)
        tail = cast("Lazy[InfiniteList[T]]", self._tail)
        return InfiniteList(
            head.map(lambda m: m.map(mapper)),
            tail.map(lambda t: t.map(mapper)),
        )

    def filter(self, predicate: BooleanCondition[T]) -> "InfiniteList[T]":
        if self is _SENTINEL:
            return self
        head = cast("Lazy[Maybe[T]]", self._head)
        tail = cast("Lazy[InfiniteList[T]]", self._tail)
        return InfiniteList(
            head.map(lambda m: m.filter(predicate)),
            tail.map(lambda t: t.filter(predicate)),
        )

    def limit(self, n: int) -> "InfiniteList[T]":
        """Keep at most ``n`` retained elements.

        Filtered-out nodes do not use up the budget. The underlying tail is
        not forced once the budget runs out.
        """
        if self is _SENTINEL or n <= 0:
            return _SENTINEL
        head = cast("Lazy[Maybe[T]]", self._head)
        tail = cast("Lazy[InfiniteList[T]]", self._tail)

        def rest() -> InfiniteList[T]:
            remaining = n - 1 if head.get().is_some() else n
            if remaining <= 0:
                return _SENTINEL
            return tail.get().limit(remaining)

        return InfiniteList(head, Lazy.defer(rest))

    def take_while(self, predicate: BooleanCondition[T]) -> "InfiniteList[T]":
        """Keep elements up to (excluding) the first one failing ``predicate``.

        Nothing past the first failing element is evaluated. A source with
        no retained element yields an empty list rather than raising
        :class:`ExhaustedError`, so the result can always be reduced.
        """
        if self is _SENTINEL:
            return self
        current = Lazy.defer(self._first_retained)

        def first() -> Maybe[T]:
            node = current.get()
            if node is _SENTINEL:
                return NOTHING
            return cast("Lazy[Maybe[T]]", node._head).get().filter(predicate)

        head = Lazy.defer(first)

        def rest() -> InfiniteList[T]:
            match head.get():
                case Some():
                    return cast("Lazy[InfiniteList[T]]", current.get()._tail).get().take_while(predicate)
                case Nothing():
                    return _SENTINEL

        return InfiniteList(head, Lazy.defer(rest))

    # Terminal operations ----------------------------------------------
    def reduce(self, identity: U, accumulator: Combiner[U, T, U]) -> U:
        """Left fold over the retained elements. Diverges on unbounded lists."""
        result = identity
        elements = 0
        node = self._first_retained()
        while node is not _SENTINEL:
            result = accumulator(result, node._value())
            elements += 1
            node = node._next()
        _log.debug("infinite_list.reduced", elements=elements)
        return result

    def count(self) -> int:
        return self.reduce(0, lambda acc, _: acc + 1)

    def to_list(self) -> list[T]:
        def collect(acc: list[T], x: T) -> list[T]:
            acc.append(x)
            return acc

        return self.reduce([], collect)

    # Iteration & rendering --------------------------------------------
    # Static so the running generator only references the current node and
    # the consumed prefix can be garbage collected.
    @staticmethod
    def _iter(node: "InfiniteList[T]") -> Iterator[T]:
        node = node._first_retained()
        while node is not _SENTINEL:
            yield node._value()
            node = node._next()

    def __iter__(self) -> Iterator[T]:
        return self._iter(self)

    def __str__(self) -> str:
        heads: list[str] = []
        node: InfiniteList[T] = self
        while node is not _SENTINEL:
            heads.append(str(node._head))
            tail = cast("Lazy[InfiniteList[T]]", node._tail)
            if not tail.is_evaluated:
                end = "?"
                break
            node = tail.get()
        else:
            end = "-"
        return "".join(f"[{h} " for h in heads) + end + "]" * len(heads)

    def __repr__(self) -> str:
        return f"InfiniteList({self})"


def _make_sentinel() -> InfiniteList[Any]:
    node: InfiniteList[Any] = object.__new__(InfiniteList)
    node._head = None
    node._tail = None
    return node


_SENTINEL: InfiniteList[Any] = _make_sentinel()


__all__ = ["InfiniteList"]
