"""Config – env-driven settings and their validation errors."""

from infinilist.config.settings import (
    EnvSettingsLoader,
    InfinilistSettings,
    Settings,
    SettingsLoader,
    SettingsValidator,
    configure_from_settings,
)
from infinilist.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InfinilistSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "SettingsValidator",
    "configure_from_settings",
]
