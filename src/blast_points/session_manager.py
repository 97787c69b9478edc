"""Shared aiohttp session for points API calls."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Dict, Optional

import aiohttp

if TYPE_CHECKING:
    from .client import BlastPointsConfig

logger = logging.getLogger(__name__)


class SessionManager:
    """Opens one ClientSession on demand and closes it on shutdown."""

    def __init__(self, config: BlastPointsConfig) -> None:
        self._config = config
        self._session: Optional[aiohttp.ClientSession] = None
        self._lock = asyncio.Lock()

    def _timeout_overrides(self) -> Dict[str, float]:
        configured = {
            "total": self._config.request_timeout_seconds,
            "connect": self._config.connect_timeout_seconds,
            "sock_read": self._config.sock_read_timeout_seconds,
        }
        return {field: seconds for field, seconds in configured.items() if seconds is not None}

    def _client_timeout(self, overrides: Dict[str, float]) -> aiohttp.ClientTimeout:
        defaults = aiohttp.client.DEFAULT_TIMEOUT
        fields = {
            "total": defaults.total,
            "connect": defaults.connect,
            "sock_read": defaults.sock_read,
            "sock_connect": defaults.sock_connect,
        }
        fields.update(overrides)
        return aiohttp.ClientTimeout(**fields)

    async def initialize(self) -> None:
        async with self._lock:
            if self._session is not None and not self._session.closed:
                return
            overrides = self._timeout_overrides()
            if overrides:
                logger.debug("Opening points HTTP session with timeouts %s", overrides)
                self._session = aiohttp.ClientSession(timeout=self._client_timeout(overrides))
            else:
                self._session = aiohttp.ClientSession()

    async def close(self) -> None:
        async with self._lock:
            session, self._session = self._session, None
            if session is not None:
                await session.close()

    def get_session(self) -> aiohttp.ClientSession:
        """Return the open session; ``initialize`` must have run first."""
        if self._session is None:
            raise RuntimeError("HTTP session not initialized")
        return self._session

    @property
    def session(self) -> Optional[aiohttp.ClientSession]:
        return self._session
