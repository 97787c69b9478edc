"""Authenticated Blast points session - slim coordinator."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from .client_helpers.component_initializer import ComponentInitializer
from .client_helpers.credential_validator import CredentialValidator
from .client_helpers.errors import ConfigError
from .client_helpers.key_loader import KeyLoader
from .constants import BLAST_MAINNET_POINTS_URL, BLAST_TESTNET_POINTS_URL
from .data_models import (
    BearerToken,
    PointsBalancesAcross,
    PointsTransfer,
    PointType,
    TransferBatch,
    TransferBatchList,
    TransferPage,
)

__all__ = ["BlastPointsConfig", "BlastPointsSession"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlastPointsConfig:
    """Configuration for the Blast points session."""

    base_url: str = BLAST_MAINNET_POINTS_URL
    # Unset timeouts fall back to aiohttp's own defaults.
    request_timeout_seconds: Optional[float] = None
    connect_timeout_seconds: Optional[float] = None
    sock_read_timeout_seconds: Optional[float] = None
    seconds_to_finalize: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.base_url or not self.base_url.strip():
            raise ConfigError.missing_value("base_url")
        object.__setattr__(self, "base_url", self.base_url.strip().rstrip("/"))
        for name in ("request_timeout_seconds", "connect_timeout_seconds", "sock_read_timeout_seconds"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ConfigError.invalid_value(name, value, "Timeouts must be positive")
        _validate_seconds_to_finalize(self.seconds_to_finalize)

    @classmethod
    def testnet(cls, **overrides: Any) -> "BlastPointsConfig":
        """Config targeting the testnet points service."""
        return cls(base_url=BLAST_TESTNET_POINTS_URL, **overrides)


def _validate_seconds_to_finalize(seconds: Optional[int]) -> None:
    if seconds is None:
        return
    if not isinstance(seconds, int) or isinstance(seconds, bool):
        raise ConfigError.invalid_value("seconds_to_finalize", seconds, "Must be an integer")
    if seconds < 0:
        raise ConfigError.invalid_value("seconds_to_finalize", seconds, "Must be non-negative")


class BlastPointsSession:
    """
    Operator session against the Blast points API for a single contract.

    Every operation resolves a valid bearer token first, authenticating lazily
    on first use and again whenever the cached token expires.

    Usage::

        async with BlastPointsSession(contract, operator_key) as session:
            balances = await session.query_points()
    """

    def __init__(
        self,
        contract_address: str,
        operator_key: Optional[str],
        config: BlastPointsConfig | None = None,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        key = CredentialValidator.extract_and_validate(operator_key)
        if not contract_address:
            raise ConfigError.missing_value("contract_address")
        self._config = config if config else BlastPointsConfig()
        self._contract_address = contract_address

        operator_account = KeyLoader.load_operator_account(key)
        components = ComponentInitializer(self._config, clock).initialize(contract_address, operator_account)
        self._session_manager = components["session_manager"]
        self._request_builder = components["request_builder"]
        self._auth_helper = components["auth_helper"]
        self._token_manager = components["token_manager"]
        self._balance_ops = components["balance_ops"]
        self._transfer_ops = components["transfer_ops"]
        self._history_ops = components["history_ops"]
        self._seconds_to_finalize = self._config.seconds_to_finalize
        logger.debug("Points session for contract %s against %s", contract_address, self._config.base_url)

    @property
    def contract_address(self) -> str:
        return self._contract_address

    @property
    def operator_address(self) -> str:
        return self._auth_helper.operator_address

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def seconds_to_finalize(self) -> Optional[int]:
        return self._seconds_to_finalize

    def set_seconds_to_finalize(self, seconds: Optional[int]) -> "BlastPointsSession":
        """Set the finalize delay sent with subsequent transfers; returns self for chaining."""
        _validate_seconds_to_finalize(seconds)
        self._seconds_to_finalize = seconds
        return self

    async def initialize(self) -> None:
        """Open the HTTP session. Operations also do this on demand."""
        await self._session_manager.initialize()

    async def close(self) -> None:
        """Close the HTTP session."""
        await self._session_manager.close()

    async def __aenter__(self) -> "BlastPointsSession":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def bearer_token(self) -> BearerToken:
        """Return a bearer token valid at call time."""
        return await self._token_manager.get_token()

    async def query_points(self) -> PointsBalancesAcross:
        return await self._balance_ops.query_points()

    async def query_transfer(self, batch_id: str) -> TransferBatchList:
        return await self._transfer_ops.query_transfer(batch_id)

    async def cancel_transfer(self, batch_id: str) -> Dict[str, Any]:
        return await self._transfer_ops.cancel_transfer(batch_id)

    async def query_transfers_page(self, cursor: Optional[str] = None) -> TransferPage:
        return await self._history_ops.query_transfers_page(cursor)

    async def query_transfer_history(self) -> List[TransferBatch]:
        return await self._history_ops.query_transfer_history()

    async def transfer_points(
        self,
        point_type: PointType,
        transfers: Sequence[PointsTransfer],
        batch_id: Optional[str] = None,
    ) -> str:
        """Submit a transfer batch using the session's finalize delay; returns the batch id."""
        return await self._transfer_ops.transfer_points(
            point_type,
            transfers,
            batch_id=batch_id,
            seconds_to_finalize=self._seconds_to_finalize,
        )

    async def transfer_liquidity_points(self, transfers: Sequence[PointsTransfer], batch_id: Optional[str] = None) -> str:
        return await self.transfer_points(PointType.LIQUIDITY, transfers, batch_id)

    async def transfer_developer_points(self, transfers: Sequence[PointsTransfer], batch_id: Optional[str] = None) -> str:
        return await self.transfer_points(PointType.DEVELOPER, transfers, batch_id)
