"""Transfer batch operations for the Blast points API."""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence

from .constants import batch_path
from .data_models import PointsTransfer, PointType, TransferBatchList, TransferRequest
from .exceptions import (
    ResponseFieldMissingError,
    TransferCancelFailedError,
    TransferQueryFailedError,
    TransferRequestFailedError,
)
from .response_parser import ResponseParser

if TYPE_CHECKING:
    from .request_builder import RequestBuilder

logger = logging.getLogger(__name__)


class TransferOperations:
    """Handles single-batch query, cancel and submit operations."""

    def __init__(self, request_builder: RequestBuilder, contract_address: str) -> None:
        self._request_builder = request_builder
        self._contract_address = contract_address

    async def query_transfer(self, batch_id: str) -> TransferBatchList:
        """Get a batch and its transfers by id."""
        payload = await self._request_builder.execute_authenticated(
            method="GET",
            path=batch_path(self._contract_address, batch_id),
            operation_name="query_transfer",
        )
        if not payload.get("success"):
            raise TransferQueryFailedError(batch_id)
        if "batch" not in payload:
            raise ResponseFieldMissingError("batch", payload)
        return ResponseParser.parse_transfer_batch_list(payload["batch"])

    async def cancel_transfer(self, batch_id: str) -> Dict[str, Any]:
        """
        Cancel a batch by id.

        Only PENDING or FINALIZING batches can be cancelled; the service
        enforces this and reports failure otherwise.
        """
        payload = await self._request_builder.execute_authenticated(
            method="DELETE",
            path=batch_path(self._contract_address, batch_id),
            operation_name="cancel_transfer",
        )
        if not payload.get("success"):
            raise TransferCancelFailedError(batch_id)
        logger.info("Cancelled points transfer batch %s", batch_id)
        return payload

    async def transfer_points(
        self,
        point_type: PointType,
        transfers: Sequence[PointsTransfer],
        *,
        batch_id: Optional[str] = None,
        seconds_to_finalize: Optional[int] = None,
    ) -> str:
        """
        Submit a transfer batch and return its id.

        A fresh random id is used when ``batch_id`` is not given. Reusing an
        id is how callers make retries safe; no deduplication happens here.
        """
        if not isinstance(point_type, PointType):
            raise TypeError(f"Point type must be PointType enum, got: {type(point_type)}")
        for transfer in transfers:
            if not isinstance(transfer, PointsTransfer):
                raise TypeError(f"Transfers must be PointsTransfer instances, got: {type(transfer)}")

        resolved_id = batch_id if batch_id else str(uuid.uuid4())
        request = TransferRequest(
            point_type=point_type,
            transfers=list(transfers),
            seconds_to_finalize=seconds_to_finalize,
        )
        payload = await self._request_builder.execute_authenticated(
            method="PUT",
            path=batch_path(self._contract_address, resolved_id),
            json_payload=request.to_payload(),
            operation_name="transfer_points",
        )
        if not payload.get("success"):
            raise TransferRequestFailedError(resolved_id)
        if "batchId" not in payload:
            raise ResponseFieldMissingError("batchId", payload)
        logger.info("Submitted %s points transfer batch %s (%d transfers)", point_type.value, payload["batchId"], len(request.transfers))
        return payload["batchId"]
