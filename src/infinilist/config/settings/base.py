"""Config settings – Settings base class and InfinilistSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from infinilist.config.settings.validator import SettingsValidator
from infinilist.observability.logging import LoggingConfigurator

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclasses.dataclass
class Settings:
    """Base class for environment-driven settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class InfinilistSettings(Settings):
    """Library settings, read from ``INFINILIST_*`` variables.

    ``log_level`` is a stdlib level name; ``log_json`` switches the
    rendered output from console lines to JSON.
    """

    _prefix: ClassVar[str] = "INFINILIST"

    log_level: str = dataclasses.field(default="WARNING", metadata={"choices": LOG_LEVELS})
    log_json: bool = False

    def _validate(self) -> None:
        if isinstance(self.log_level, str):
            self.log_level = self.log_level.upper()
        SettingsValidator().check(self)


def configure_from_settings(settings: InfinilistSettings) -> None:
    """Validate ``settings`` again (fields may have been reassigned) and apply them to logging.

    Raises:
        InvalidSettingValueError: a field no longer holds a valid value.
    """
    SettingsValidator().check(settings)
    LoggingConfigurator.configure(logging.getLevelName(settings.log_level), json=settings.log_json)


__all__ = ["LOG_LEVELS", "InfinilistSettings", "Settings", "configure_from_settings"]
