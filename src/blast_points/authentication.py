"""Challenge-response authentication for the Blast points API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict

from eth_account.messages import encode_defunct
from eth_account.signers.local import LocalAccount

from .client_helpers.errors import RequestError
from .constants import CHALLENGE_PATH, SOLVE_PATH
from .exceptions import BearerTokenRequestFailedError, ChallengeRequestFailedError

if TYPE_CHECKING:
    from .request_builder import RequestBuilder

logger = logging.getLogger(__name__)


class AuthenticationHelper:
    """Exchanges an ERC-191 signature over a server challenge for a bearer token."""

    def __init__(self, contract_address: str, operator_account: LocalAccount, request_builder: RequestBuilder) -> None:
        """
        Initialize authentication helper.

        Args:
            contract_address: Contract whose points the operator manages
            operator_account: Local account holding the operator private key
            request_builder: Builder used for the unauthenticated auth calls
        """
        self._contract_address = contract_address
        self._operator_account = operator_account
        self._request_builder = request_builder

    @property
    def operator_address(self) -> str:
        """Checksummed address derived from the operator key."""
        return self._operator_account.address

    def sign_message(self, message: str) -> str:
        """
        Sign a message under ERC-191 personal-message rules.

        Args:
            message: Challenge text issued by the service

        Returns:
            0x-prefixed hex signature
        """
        signable = encode_defunct(text=message)
        signed = self._operator_account.sign_message(signable)
        signature = signed.signature.hex()
        if not signature.startswith("0x"):
            signature = f"0x{signature}"
        return signature

    async def request_challenge(self) -> Dict[str, Any]:
        """Ask the service for a challenge bound to this contract and operator."""
        payload = await self._post(
            CHALLENGE_PATH,
            {"contractAddress": self._contract_address, "operatorAddress": self.operator_address},
            "request_challenge",
            ChallengeRequestFailedError,
        )
        if not payload.get("success"):
            raise ChallengeRequestFailedError()
        if "challengeData" not in payload or not isinstance(payload.get("message"), str):
            raise ChallengeRequestFailedError()
        return payload

    async def solve_challenge(self, challenge: Dict[str, Any]) -> str:
        """Submit the signed challenge and return the issued bearer token string."""
        request_data = {
            "challengeData": challenge["challengeData"],
            "signature": self.sign_message(challenge["message"]),
        }
        payload = await self._post(SOLVE_PATH, request_data, "solve_challenge", BearerTokenRequestFailedError)
        if not payload.get("success"):
            raise BearerTokenRequestFailedError()
        bearer_token = payload.get("bearerToken")
        if not bearer_token:
            raise BearerTokenRequestFailedError()
        return bearer_token

    async def fetch_bearer_token(self) -> str:
        """Run the full challenge then solve exchange."""
        logger.debug("Requesting points API challenge for operator %s", self.operator_address)
        challenge = await self.request_challenge()
        return await self.solve_challenge(challenge)

    async def _post(self, path: str, body: Dict[str, Any], operation_name: str, error_cls) -> Dict[str, Any]:
        method_upper, url, kwargs, op = self._request_builder.build_request_context(
            method="POST",
            path=path,
            params=None,
            json_payload=body,
            operation_name=operation_name,
        )
        try:
            return await self._request_builder.execute_request(method_upper, url, kwargs, path, op)
        except RequestError as exc:
            raise error_cls(exc) from exc
