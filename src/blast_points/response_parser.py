"""Response parsing for the Blast points API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .data_models import (
    PointBalances,
    PointsBalancesAcross,
    PointsTransfer,
    PointType,
    TransferBatch,
    TransferBatchList,
    TransferPage,
    TransferStatus,
)
from .exceptions import ResponseFieldInvalidError, ResponseFieldMissingError

_BALANCE_FIELDS = {
    "available": "available",
    "pendingSent": "pending_sent",
    "earnedCumulative": "earned_cumulative",
    "receivedCumulative": "received_cumulative",
    "finalizedSentCumulative": "finalized_sent_cumulative",
}

_BATCH_REQUIRED_FIELDS = (
    "contractAddress",
    "id",
    "pointType",
    "createdAt",
    "status",
    "points",
    "transferCount",
)


def _require(payload: Dict[str, Any], field: str) -> Any:
    if field not in payload:
        raise ResponseFieldMissingError(field, payload)
    return payload[field]


def _require_object(value: Any, field: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ResponseFieldInvalidError(field, value)
    return value


def _require_list(value: Any, field: str) -> List[Any]:
    if not isinstance(value, list):
        raise ResponseFieldInvalidError(field, value)
    return value


class ResponseParser:
    """Parses points API responses into data models."""

    @staticmethod
    def parse_point_balances(payload: Any, field: str = "balances") -> PointBalances:
        """Parse one point type's balances, keeping decimal strings untouched."""
        raw = _require_object(payload, field)
        values = {attr: _require(raw, key) for key, attr in _BALANCE_FIELDS.items()}
        return PointBalances(**values)

    @staticmethod
    def parse_balances_across(payload: Dict[str, Any]) -> PointsBalancesAcross:
        """Reshape ``balancesByPointType`` into liquidity/developer balances."""
        by_type = _require_object(_require(payload, "balancesByPointType"), "balancesByPointType")
        return PointsBalancesAcross(
            liquidity=ResponseParser.parse_point_balances(
                _require(by_type, PointType.LIQUIDITY.value), PointType.LIQUIDITY.value
            ),
            developer=ResponseParser.parse_point_balances(
                _require(by_type, PointType.DEVELOPER.value), PointType.DEVELOPER.value
            ),
        )

    @staticmethod
    def parse_transfer(payload: Any) -> PointsTransfer:
        raw = _require_object(payload, "transfers")
        to_address = _require(raw, "toAddress")
        points = _require(raw, "points")
        try:
            return PointsTransfer(to_address=to_address, points=points)
        except (TypeError, ValueError) as exc:
            raise ResponseFieldInvalidError("transfers", raw, exc) from exc

    @staticmethod
    def _batch_fields(payload: Any) -> Dict[str, Any]:
        raw = _require_object(payload, "batch")
        for field in _BATCH_REQUIRED_FIELDS:
            _require(raw, field)
        try:
            point_type = PointType(raw["pointType"])
        except ValueError as exc:
            raise ResponseFieldInvalidError("pointType", raw["pointType"], exc) from exc
        try:
            status = TransferStatus(raw["status"])
        except ValueError as exc:
            raise ResponseFieldInvalidError("status", raw["status"], exc) from exc
        return {
            "contract_address": raw["contractAddress"],
            "id": raw["id"],
            "point_type": point_type,
            "created_at": raw["createdAt"],
            "updated_at": raw.get("updatedAt"),
            "status": status,
            "points": raw["points"],
            "transfer_count": raw["transferCount"],
        }

    @staticmethod
    def parse_transfer_batch(payload: Any) -> TransferBatch:
        """Parse batch metadata from a listing entry."""
        fields = ResponseParser._batch_fields(payload)
        try:
            return TransferBatch(**fields)
        except (TypeError, ValueError) as exc:
            raise ResponseFieldInvalidError("batch", payload, exc) from exc

    @staticmethod
    def parse_transfer_batch_list(payload: Any) -> TransferBatchList:
        """Parse batch metadata together with its transfers."""
        fields = ResponseParser._batch_fields(payload)
        raw_transfers = _require_list(_require(payload, "transfers"), "transfers")
        transfers = [ResponseParser.parse_transfer(item) for item in raw_transfers]
        try:
            return TransferBatchList(transfers=transfers, **fields)
        except (TypeError, ValueError) as exc:
            raise ResponseFieldInvalidError("batch", payload, exc) from exc

    @staticmethod
    def parse_transfer_page(payload: Dict[str, Any]) -> TransferPage:
        """Parse one listing page; an absent or empty cursor is treated as null."""
        raw_batches = _require_list(_require(payload, "batches"), "batches")
        cursor: Optional[str] = payload.get("cursor")
        if cursor is not None and not isinstance(cursor, str):
            raise ResponseFieldInvalidError("cursor", cursor)
        if cursor == "":
            cursor = None
        batches = [ResponseParser.parse_transfer_batch(item) for item in raw_batches]
        return TransferPage(batches=batches, cursor=cursor)


__all__ = ["ResponseParser"]
