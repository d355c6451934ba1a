"""Value errors — direct payload access and evaluation failures."""

from __future__ import annotations

from typing import Any

from infinilist.kernel.errors.base import BaseError


class ValueAccessError(BaseError):
    """An optional payload was accessed or built illegally."""

    default_code = "value_access_error"


class EmptyValueError(ValueAccessError):
    """The payload of ``Nothing`` was accessed directly."""

    default_code = "empty_value"

    def __init__(self, message: str = "Nothing holds no value", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class NullPayloadError(ValueAccessError):
    """``Some`` was asked to wrap ``None``."""

    default_code = "null_payload"

    def __init__(self, message: str = "Some() cannot wrap None; use maybe.of()", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class EvaluationError(BaseError):
    """A deferred computation could not be evaluated."""

    default_code = "evaluation_error"


class ReentrantForceError(EvaluationError):
    """A Lazy producer tried to force the cell it is computing."""

    default_code = "reentrant_force"


__all__ = [
    "EmptyValueError",
    "EvaluationError",
    "NullPayloadError",
    "ReentrantForceError",
    "ValueAccessError",
]
