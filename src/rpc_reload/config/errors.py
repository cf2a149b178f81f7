from __future__ import annotations

"""Exception types for configuration handling."""

class ConfigurationError(RuntimeError):
    """Raised when configuration values are missing or malformed."""

    @classmethod
    def invalid_boolean(cls, name: str, raw_value: str, allowed) -> "ConfigurationError":
        """Create error for a boolean setting that cannot be parsed."""
        return cls(f"Environment variable {name!r} must be a boolean (allowed: {sorted(allowed)}, got {raw_value!r})")

    @classmethod
    def load_failed(cls, path) -> "ConfigurationError":
        """Create error for a defaults file that cannot be read."""
        return cls(f"Failed to load configuration from {path}")

__all__ = ["ConfigurationError"]
