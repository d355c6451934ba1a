"""Config settings – SettingsValidator.

Checks every dataclass field of a settings instance against its declared
type and, when the field's metadata carries ``choices``, against that set.
"""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

from infinilist.config.validation import InvalidSettingValueError

if TYPE_CHECKING:
    from infinilist.config.settings.base import Settings

_SCALARS: dict[str, type] = {"str": str, "int": int, "float": float, "bool": bool}


class SettingsValidator:
    """Validate a populated settings instance."""

    def validate(self, settings: Settings) -> list[InvalidSettingValueError]:
        """Return one error per invalid field, in field order."""
        errors: list[InvalidSettingValueError] = []
        for field in dataclasses.fields(settings):
            value = getattr(settings, field.name)
            reason = self._check(field, value)
            if reason is not None:
                errors.append(InvalidSettingValueError(field.name, value, reason))
        return errors

    def check(self, settings: Settings) -> None:
        """Raise the first validation error, if any."""
        errors = self.validate(settings)
        if errors:
            raise errors[0]

    def _check(self, field: dataclasses.Field[Any], value: Any) -> str | None:
        if value is None:
            if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                return "required but None"
            return None
        expected = _SCALARS.get(field.type if isinstance(field.type, str) else getattr(field.type, "__name__", ""))
        if expected is not None and not _is_instance(value, expected):
            return f"expected {expected.__name__}"
        choices = field.metadata.get("choices")
        if choices is not None and value not in choices:
            return f"expected one of {', '.join(map(str, choices))}"
        return None


def _is_instance(value: Any, expected: type) -> bool:
    # bool is an int subclass; keep the two apart.
    if isinstance(value, bool) or expected is bool:
        return type(value) is bool and expected is bool
    if expected is float:
        return isinstance(value, (int, float))
    return isinstance(value, expected)


__all__ = ["SettingsValidator"]
