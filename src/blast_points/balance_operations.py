"""Point balance operations for the Blast points API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import point_balances_path
from .data_models import PointsBalancesAcross
from .exceptions import PointQueryFailedError
from .response_parser import ResponseParser

if TYPE_CHECKING:
    from .request_builder import RequestBuilder


class BalanceOperations:
    """Handles balance-related API operations."""

    def __init__(self, request_builder: RequestBuilder, contract_address: str) -> None:
        self._request_builder = request_builder
        self._contract_address = contract_address

    async def query_points(self) -> PointsBalancesAcross:
        """Get liquidity and developer point balances for the contract."""
        payload = await self._request_builder.execute_authenticated(
            method="GET",
            path=point_balances_path(self._contract_address),
            operation_name="query_points",
        )
        if not payload.get("success"):
            raise PointQueryFailedError(self._contract_address)
        return ResponseParser.parse_balances_across(payload)
