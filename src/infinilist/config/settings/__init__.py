"""Config settings – env-based configuration."""
from infinilist.config.settings.base import InfinilistSettings, Settings, configure_from_settings
from infinilist.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from infinilist.config.settings.validator import SettingsValidator

__all__ = [
    "EnvSettingsLoader",
    "InfinilistSettings",
    "Settings",
    "SettingsLoader",
    "SettingsValidator",
    "configure_from_settings",
]
