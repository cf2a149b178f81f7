"""Environment-backed configuration helpers."""

from .errors import ConfigurationError
from .runtime import ReloadSettings, env_bool, env_str, load_settings

__all__ = [
    "ConfigurationError",
    "ReloadSettings",
    "env_bool",
    "env_str",
    "load_settings",
]
