"""Config – environment loading and configuration errors."""
from mp_metrics.config.env import EnvSettingsLoader
from mp_metrics.config.errors import ConfigError, InvalidSettingValueError

__all__ = ["ConfigError", "EnvSettingsLoader", "InvalidSettingValueError"]
