"""Cursor-paginated transfer history for the Blast points API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Set

from .constants import batches_path
from .data_models import TransferBatch, TransferPage
from .exceptions import PaginationCursorRepeatedError, TransferQueryFailedError
from .response_parser import ResponseParser

if TYPE_CHECKING:
    from .request_builder import RequestBuilder

logger = logging.getLogger(__name__)


class HistoryOperations:
    """Handles batch listing and full-history traversal."""

    def __init__(self, request_builder: RequestBuilder, contract_address: str) -> None:
        self._request_builder = request_builder
        self._contract_address = contract_address

    async def query_transfers_page(self, cursor: Optional[str] = None) -> TransferPage:
        """Get one page of transfer batches, starting from ``cursor`` when given."""
        params = {"cursor": cursor} if cursor else None
        payload = await self._request_builder.execute_authenticated(
            method="GET",
            path=batches_path(self._contract_address),
            params=params,
            operation_name="query_transfers_page",
        )
        if not payload.get("success"):
            raise TransferQueryFailedError()
        return ResponseParser.parse_transfer_page(payload)

    async def query_transfer_history(self) -> List[TransferBatch]:
        """
        Collect every transfer batch by following cursors until one is null.

        Batches keep server page order. Any page failure aborts the traversal
        and nothing partial is returned.
        """
        page = await self.query_transfers_page()
        full_set: List[TransferBatch] = list(page.batches)
        seen_cursors: Set[str] = set()
        pages = 1

        while page.cursor is not None:
            if page.cursor in seen_cursors:
                raise PaginationCursorRepeatedError(page.cursor)
            seen_cursors.add(page.cursor)
            page = await self.query_transfers_page(page.cursor)
            full_set.extend(page.batches)
            pages += 1

        logger.debug("Fetched %d transfer batches across %d pages", len(full_set), pages)
        return full_set
