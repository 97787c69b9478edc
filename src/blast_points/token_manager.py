"""Bearer token caching and single-flight refresh."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Union

from .constants import BEARER_TOKEN_VALIDITY_SECONDS
from .data_models import BearerToken

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenIdle:
    """No refresh in flight; ``token`` is the cached credential, if any."""

    token: Optional[BearerToken]


@dataclass(frozen=True)
class TokenRefreshing:
    """A refresh is in flight; every caller awaits ``task``."""

    task: "asyncio.Task[BearerToken]"


TokenState = Union[TokenIdle, TokenRefreshing]


class TokenManager:
    """
    Hands out a non-expired bearer token, refreshing at most once at a time.

    Callers that arrive while a refresh is running share its outcome, success
    or failure. A failed refresh leaves no cached token, so the next call
    starts a new exchange.
    """

    def __init__(
        self,
        fetch_token: Callable[[], Awaitable[str]],
        *,
        clock: Callable[[], float] = time.time,
        validity_seconds: int = BEARER_TOKEN_VALIDITY_SECONDS,
    ) -> None:
        self._fetch_token = fetch_token
        self._clock = clock
        self._validity_seconds = validity_seconds
        self._state: TokenState = TokenIdle(None)

    @property
    def state(self) -> TokenState:
        return self._state

    def _now(self) -> int:
        return int(self._clock())

    async def get_token(self) -> BearerToken:
        """Return the cached token, refreshing first if it is missing or expired."""
        state = self._state
        if isinstance(state, TokenRefreshing):
            return await asyncio.shield(state.task)
        if state.token is not None and not state.token.is_expired(self._now()):
            return state.token
        return await self.refresh()

    async def refresh(self) -> BearerToken:
        """Start a refresh unless one is already running, and await its result."""
        state = self._state
        if isinstance(state, TokenRefreshing):
            return await asyncio.shield(state.task)
        task = asyncio.ensure_future(self._run_refresh())
        self._state = TokenRefreshing(task)
        return await asyncio.shield(task)

    async def _run_refresh(self) -> BearerToken:
        try:
            raw_token = await self._fetch_token()
            token = BearerToken(token=raw_token, expiry=self._now() + self._validity_seconds)
        except BaseException:
            self._state = TokenIdle(None)
            raise
        self._state = TokenIdle(token)
        logger.info("Obtained points API bearer token valid until %d", token.expiry)
        return token


__all__ = ["TokenIdle", "TokenManager", "TokenRefreshing", "TokenState"]
