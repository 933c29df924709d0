"""Config errors – raised while reading collector settings."""

from __future__ import annotations

from typing import Any

from mp_metrics.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be read from their source."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting is present but its value cannot be used."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: Any, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": value},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
