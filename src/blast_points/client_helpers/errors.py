"""Shared error types for Blast points API helpers."""

from typing import Any


class BlastPointsError(RuntimeError):
    """Base error that attaches provided keyword fields as attributes."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class AuthError(BlastPointsError):
    """Raised when the challenge or solve step of authentication fails."""


class RequestError(BlastPointsError):
    """Raised when a balance or transfer call fails."""


class ConfigError(BlastPointsError):
    """Raised when session configuration values are missing or malformed."""

    @classmethod
    def missing_value(cls, param_name: str, context: str = "") -> "ConfigError":
        """Create error for missing value."""
        msg = f"{param_name} is missing or empty"
        if context:
            msg += f": {context}"
        return cls(msg)

    @classmethod
    def invalid_value(cls, param_name: str, value, reason: str = "") -> "ConfigError":
        """Create error for invalid value."""
        msg = f"Invalid value for {param_name}: {value!r}"
        if reason:
            msg += f". {reason}"
        return cls(msg)
