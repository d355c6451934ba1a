"""Maybe[T] — Some and Nothing variants.

``Nothing`` is a single shared instance; ``Some`` never wraps ``None``.
Build values with the module-level factories::

    from infinilist.kernel.types import maybe

    maybe.some(1).map(str)          # Some('1')
    maybe.of(None).or_else(0)       # 0
"""

from __future__ import annotations

from typing import Any, Generic, Iterator, NoReturn, TypeAlias, TypeVar, final

from infinilist.kernel.errors import EmptyValueError, NullPayloadError
from infinilist.kernel.functions import BooleanCondition, Producer, Transformer

T = TypeVar("T")
U = TypeVar("U")


@final
class Some(Generic[T]):
    """Maybe with a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        if value is None:
            raise NullPayloadError()
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def map(self, func: Transformer[T, U]) -> "Some[U]":
        return Some(func(self._value))

    def flat_map(self, func: "Transformer[T, Maybe[U]]") -> "Maybe[U]":
        return func(self._value)

    def filter(self, predicate: BooleanCondition[T]) -> "Maybe[T]":
        return self if predicate(self._value) else NOTHING

    def or_else(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def or_else_get(self, producer: Producer[T]) -> T:  # noqa: ARG002
        return self._value

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Some):
            return NotImplemented
        return bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def __str__(self) -> str:
        return f"[{self._value}]"

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


@final
class Nothing:
    """Empty Maybe. There is exactly one instance, :data:`NOTHING`."""

    __slots__ = ()
    __match_args__ = ()

    _instance: "Nothing | None" = None

    def __new__(cls) -> "Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise EmptyValueError("Called unwrap() on Nothing")

    def map(self, func: Transformer[Any, Any]) -> "Nothing":  # noqa: ARG002
        return self

    def flat_map(self, func: Transformer[Any, Any]) -> "Nothing":  # noqa: ARG002
        return self

    def filter(self, predicate: BooleanCondition[Any]) -> "Nothing":  # noqa: ARG002
        return self

    def or_else(self, default: T) -> T:
        return default

    def or_else_get(self, producer: Producer[T]) -> T:
        return producer()

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __reduce__(self) -> str:
        return "NOTHING"

    def __str__(self) -> str:
        return "[]"

    def __repr__(self) -> str:
        return "Nothing"


NOTHING = Nothing()

Maybe: TypeAlias = Some[T] | Nothing


def none() -> Nothing:
    """Return the shared empty Maybe."""
    return NOTHING


def some(value: T) -> Some[T]:
    """Wrap a present value; raises :class:`NullPayloadError` for ``None``."""
    return Some(value)


def of(value: T | None) -> "Maybe[T]":
    """Null-safe constructor: ``None`` becomes :data:`NOTHING`."""
    return NOTHING if value is None else Some(value)


__all__ = ["NOTHING", "Maybe", "Nothing", "Some", "none", "of", "some"]
