"""Request execution for the Blast points API."""

import asyncio
import logging
from typing import Any, Dict

import aiohttp

from .client_helpers.errors import RequestError

logger = logging.getLogger(__name__)

_SUCCESS_STATUSES = {200, 201, 202}


class RequestExecutor:
    """Execute HTTP requests and decode their JSON bodies. Never retries."""

    def __init__(self, session_manager):
        self._session_manager = session_manager

    async def execute_request(
        self, method_upper: str, url: str, request_kwargs: Dict[str, Any], path: str, operation_name: str
    ) -> Dict[str, Any]:
        """Execute HTTP request and return the decoded JSON object."""
        await self._session_manager.initialize()
        session = self._session_manager.get_session()
        logger.debug("Points API %s %s (%s)", method_upper, path, operation_name)
        try:
            async with session.request(method_upper, url, **request_kwargs) as response:
                return await self._parse_json_response(response, await response.text(), path=path)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.warning("Points API request %s failed: %s", operation_name, exc)
            raise RequestError(f"Points API request failed for {operation_name}: {exc}", path=path) from exc

    async def _parse_json_response(self, response: aiohttp.ClientResponse, text: str, *, path: str) -> Dict[str, Any]:
        try:
            payload = await response.json()
        except (aiohttp.ContentTypeError, ValueError) as exc:
            raise RequestError(f"Points API response was not JSON for {path}: {text}", path=path) from exc
        if response.status not in _SUCCESS_STATUSES:
            raise RequestError(
                f"Points API request {path} returned {response.status}: {payload}",
                path=path,
                status=response.status,
            )
        if not isinstance(payload, dict):
            raise RequestError(f"Points API response for {path} was not a JSON object", path=path)
        return payload
