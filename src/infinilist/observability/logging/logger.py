"""Observability – get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger backed by a stdlib logger.

    The stdlib logger decides whether an event is emitted, so a library
    that never had :class:`LoggingConfigurator` applied stays quiet below
    ``WARNING``. Binding is lazy: the processor chain is resolved on first
    use, after any later ``structlog.configure`` call.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values,
    )


__all__ = ["get_logger"]
