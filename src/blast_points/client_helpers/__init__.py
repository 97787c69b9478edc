"""Helper modules for the Blast points session."""

from __future__ import annotations

from .errors import AuthError, BlastPointsError, ConfigError, RequestError

__all__ = [
    "AuthError",
    "BlastPointsError",
    "ConfigError",
    "RequestError",
]
