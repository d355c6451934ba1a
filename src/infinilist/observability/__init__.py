"""Observability – structured logging."""
from infinilist.observability.logging import LoggingConfigurator, get_logger

__all__ = ["LoggingConfigurator", "get_logger"]
