"""
Point and transfer-batch data models for the Blast points API.

All models are transient views rebuilt from each response. Point amounts stay
decimal strings exactly as the service reports them; nothing here converts them
to floats.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .data_model_validators import validate_batch_counts, validate_bearer_token, validate_points_transfer


class PointType(Enum):
    """Point category a transfer batch draws from"""

    LIQUIDITY = "LIQUIDITY"
    DEVELOPER = "DEVELOPER"


class TransferStatus(Enum):
    """Server-owned lifecycle of a transfer batch"""

    PENDING = "PENDING"
    CANCELLED = "CANCELLED"
    FINALIZING = "FINALIZING"
    FINALIZED = "FINALIZED"


@dataclass(frozen=True)
class BearerToken:
    """Bearer credential plus the unix time after which it must be refreshed."""

    token: str
    expiry: int

    def __post_init__(self):
        validate_bearer_token(self.token, self.expiry)

    def is_expired(self, now: int) -> bool:
        return now > self.expiry

    @property
    def authorization_header(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@dataclass(frozen=True)
class PointsTransfer:
    """
    A single transfer of points to a chain address.

    ``points`` is a decimal string and is sent to the service verbatim.
    """

    to_address: str
    points: str

    def __post_init__(self):
        validate_points_transfer(self.to_address, self.points)

    def to_payload(self) -> Dict[str, str]:
        return {"toAddress": self.to_address, "points": self.points}


@dataclass(frozen=True)
class PointBalances:
    """
    Balances for one point type.

    The cumulative counters never decrease, but a batch may reach FINALIZED
    before they are updated.
    """

    available: str
    pending_sent: str
    earned_cumulative: str
    received_cumulative: str
    finalized_sent_cumulative: str


@dataclass(frozen=True)
class PointsBalancesAcross:
    liquidity: PointBalances
    developer: PointBalances


@dataclass(frozen=True)
class TransferBatch:
    """Metadata for a transfer batch. Identity is ``id``."""

    contract_address: str
    id: str
    point_type: PointType
    created_at: str
    updated_at: Optional[str]
    status: TransferStatus
    points: str
    transfer_count: int

    def __post_init__(self):
        validate_batch_counts(self.transfer_count)


@dataclass(frozen=True)
class TransferBatchList(TransferBatch):
    """Transfer batch together with its constituent transfers."""

    transfers: List[PointsTransfer] = field(default_factory=list)


@dataclass(frozen=True)
class TransferPage:
    """One page of the batch listing and the cursor for the next one."""

    batches: List[TransferBatch]
    cursor: Optional[str]


@dataclass(frozen=True)
class TransferRequest:
    point_type: PointType
    transfers: List[PointsTransfer]
    seconds_to_finalize: Optional[int] = None

    def to_payload(self) -> Dict[str, Any]:
        return {
            "pointType": self.point_type.value,
            "transfers": [transfer.to_payload() for transfer in self.transfers],
            "secondsToFinalize": self.seconds_to_finalize,
        }


__all__ = [
    "BearerToken",
    "PointBalances",
    "PointType",
    "PointsBalancesAcross",
    "PointsTransfer",
    "TransferBatch",
    "TransferBatchList",
    "TransferPage",
    "TransferRequest",
    "TransferStatus",
]
