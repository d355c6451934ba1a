"""Observability – structlog configuration and loggers."""
from infinilist.observability.logging.factory import LoggingConfigurator
from infinilist.observability.logging.logger import get_logger

__all__ = ["LoggingConfigurator", "get_logger"]
