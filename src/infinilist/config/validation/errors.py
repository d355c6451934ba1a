"""Config validation errors.

Each error records the offending setting in ``detail`` so it shows up in
``to_dict()`` and in the JSON ``str()``.
"""
from __future__ import annotations

from typing import Any

from infinilist.kernel.errors import BaseError


class ConfigError(BaseError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, **kwargs: Any) -> None:
        detail = {"setting": setting_name, **kwargs.pop("detail", {})}
        super().__init__(f"Required setting '{setting_name}' is missing", detail=detail, **kwargs)
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but fails validation."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, **kwargs: Any) -> None:
        detail = {"setting": setting_name, "value": value, "reason": reason, **kwargs.pop("detail", {})}
        super().__init__(f"Setting '{setting_name}' has invalid value {value!r}: {reason}", detail=detail, **kwargs)
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
