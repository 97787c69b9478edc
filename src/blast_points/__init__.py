"""Blast points API client library.

This module provides the operator session for the Blast points service.
Import BlastPointsSession and BlastPointsConfig from here for API access.

Internal modules:
- authentication: Challenge signing with ERC-191 and bearer token exchange
- token_manager: Bearer token caching with single-flight refresh
- balance_operations: Point balance queries
- transfer_operations: Batch query, cancel and submit
- history_operations: Cursor-paginated batch history
- request_builder: HTTP request construction
- request_executor: Request execution and error handling
- response_parser: API response parsing
- session_manager: HTTP session lifecycle
"""

from .client import BlastPointsConfig, BlastPointsSession
from .client_helpers.errors import AuthError, BlastPointsError, ConfigError, RequestError
from .constants import BLAST_MAINNET_POINTS_URL, BLAST_TESTNET_POINTS_URL
from .data_models import (
    BearerToken,
    PointBalances,
    PointsBalancesAcross,
    PointsTransfer,
    PointType,
    TransferBatch,
    TransferBatchList,
    TransferPage,
    TransferStatus,
)

__all__ = [
    "AuthError",
    "BLAST_MAINNET_POINTS_URL",
    "BLAST_TESTNET_POINTS_URL",
    "BearerToken",
    "BlastPointsConfig",
    "BlastPointsError",
    "BlastPointsSession",
    "ConfigError",
    "PointBalances",
    "PointType",
    "PointsBalancesAcross",
    "PointsTransfer",
    "RequestError",
    "TransferBatch",
    "TransferBatchList",
    "TransferPage",
    "TransferStatus",
]

