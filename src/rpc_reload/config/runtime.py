from __future__ import annotations

"""Runtime helpers for working with environment-backed configuration."""


import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}


def _default_dotenv_candidates() -> tuple[Path, ...]:
    """Only the operator's own file; a .env in the working directory belongs to whatever project is there."""
    return (Path.home() / ".env",)


_DOTENV_CANDIDATES = _default_dotenv_candidates()

_DEFAULT_VALUES: dict[str, str] | None = None

DEBUG_ENV = "RPC_RELOAD_DEBUG"
QUIET_ENV = "RPC_RELOAD_QUIET"


def _load_default_values() -> dict[str, str]:
    """Load configuration values from .env-style files."""
    from .runtime_helpers import DotenvLoader

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is not None:
        return _DEFAULT_VALUES

    defaults: dict[str, str] = {}
    for path in _DOTENV_CANDIDATES:
        for key, value in DotenvLoader.load_from_file(path).items():
            # First file wins
            defaults.setdefault(key, value)

    _DEFAULT_VALUES = defaults
    return defaults


def _default_value(name: str) -> Optional[str]:
    """Return the default value for *name* if declared in a .env file."""

    return _load_default_values().get(name)


def _normalize(value: str | None, *, strip: bool) -> str | None:
    if value is None:
        return None
    return value.strip() if strip else value


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Fetch an environment variable as a string, falling back to .env defaults."""

    value = _normalize(os.getenv(name), strip=strip)

    if value is None or (not allow_blank and value == ""):
        configured_default = _default_value(name)
        if configured_default is not None:
            value = _normalize(configured_default, strip=strip)

    if value is None or (not allow_blank and value == ""):
        return or_value
    return value


def env_bool(name: str, or_value: bool | None = None) -> bool | None:
    """Fetch an environment variable and coerce it to ``bool``."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        return or_value

    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError.invalid_boolean(name, raw, _TRUE_VALUES | _FALSE_VALUES)


@dataclass(frozen=True)
class ReloadSettings:
    debug: bool = False
    quiet: bool = False


def load_settings() -> ReloadSettings:
    """Read the reload tool's settings from the environment."""

    return ReloadSettings(
        debug=bool(env_bool(DEBUG_ENV, or_value=False)),
        quiet=bool(env_bool(QUIET_ENV, or_value=False)),
    )
