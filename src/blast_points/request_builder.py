"""Request building and execution for the Blast points API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from .client_helpers.errors import RequestError
from .request_executor import RequestExecutor

if TYPE_CHECKING:
    from .session_manager import SessionManager
    from .token_manager import TokenManager


class RequestBuilder:
    """Builds and executes points API requests - slim coordinator."""

    def __init__(self, base_url: str, session_manager: SessionManager) -> None:
        self._base_url = base_url
        self._executor = RequestExecutor(session_manager)
        self._token_manager: Optional[TokenManager] = None

    def attach_token_manager(self, token_manager: TokenManager) -> None:
        """Set the token source used by authenticated requests."""
        self._token_manager = token_manager

    def build_request_context(
        self,
        *,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]],
        json_payload: Optional[Dict[str, Any]],
        operation_name: Optional[str],
    ) -> Tuple[str, str, Dict[str, Any], str]:
        """Build request context from parameters."""
        if not path.startswith("/"):
            raise RequestError("Path must begin with '/' for points API requests")

        method_upper = method.upper()
        url = f"{self._base_url}{path}"
        op = operation_name if operation_name else path

        request_kwargs: Dict[str, Any] = {}
        if params:
            request_kwargs["params"] = params
        if json_payload is not None:
            request_kwargs["json"] = json_payload

        return method_upper, url, request_kwargs, op

    async def execute_request(
        self,
        method_upper: str,
        url: str,
        request_kwargs: Dict[str, Any],
        path: str,
        operation_name: str,
    ) -> Dict[str, Any]:
        """Execute an unauthenticated HTTP request."""
        return await self._executor.execute_request(method_upper, url, request_kwargs, path, operation_name)

    async def execute_authenticated(
        self,
        *,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_payload: Optional[Dict[str, Any]] = None,
        operation_name: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Resolve a valid bearer token, then execute the request with it attached."""
        if self._token_manager is None:
            raise RuntimeError("Token manager not attached")
        token = await self._token_manager.get_token()
        method_upper, url, kwargs, op = self.build_request_context(
            method=method,
            path=path,
            params=params,
            json_payload=json_payload,
            operation_name=operation_name,
        )
        kwargs["headers"] = token.authorization_header
        return await self._executor.execute_request(method_upper, url, kwargs, path, op)
