"""Sequence errors — traversal past the end of an InfiniteList."""

from __future__ import annotations

from typing import Any

from infinilist.kernel.errors.base import BaseError


class SequenceError(BaseError):
    """Raised when a sequence operation cannot be satisfied."""

    default_code = "sequence_error"


class ExhaustedError(SequenceError):
    """``head()``/``tail()`` found no retained element before the sentinel.

    ``operation`` names the traversal that ran off the end.
    """

    default_code = "exhausted"

    def __init__(self, operation: str, **kwargs: Any) -> None:
        detail = {"operation": operation, **kwargs.pop("detail", {})}
        super().__init__(f"{operation}() reached the end of the list", detail=detail, **kwargs)
        self.operation = operation


__all__ = ["ExhaustedError", "SequenceError"]
