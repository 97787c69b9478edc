"""Fixed-message exception classes raised at each failure site."""

from typing import Any, Optional

from .client_helpers.errors import AuthError, ConfigError, RequestError


# Credential exceptions
class MissingOperatorKeyError(ConfigError):
    """Operator private key was not supplied."""

    def __init__(self) -> None:
        super().__init__("Operator private key is missing or empty")


class InvalidOperatorKeyError(ConfigError):
    """Operator private key could not be loaded."""

    def __init__(self, cause: Optional[BaseException] = None) -> None:
        super().__init__("Operator private key is not a valid secp256k1 key")
        self.__cause__ = cause


# Authentication exceptions
class ChallengeRequestFailedError(AuthError):
    """Auth challenge endpoint reported failure."""

    def __init__(self, cause: Optional[BaseException] = None) -> None:
        super().__init__("Challenge request failed")
        self.__cause__ = cause


class BearerTokenRequestFailedError(AuthError):
    """Auth solve endpoint did not issue a bearer token."""

    def __init__(self, cause: Optional[BaseException] = None) -> None:
        super().__init__("Obtain bearer failed")
        self.__cause__ = cause


# Operation exceptions
class PointQueryFailedError(RequestError):
    """Point balance query reported failure."""

    def __init__(self, contract_address: str) -> None:
        super().__init__("Point query request failed")
        self.contract_address = contract_address


class TransferQueryFailedError(RequestError):
    """Transfer batch query reported failure."""

    def __init__(self, batch_id: Optional[str] = None) -> None:
        super().__init__("Transfer query request failed")
        self.batch_id = batch_id


class TransferCancelFailedError(RequestError):
    """Transfer batch cancellation reported failure."""

    def __init__(self, batch_id: str) -> None:
        super().__init__("Transfer cancel request failed")
        self.batch_id = batch_id


class TransferRequestFailedError(RequestError):
    """Transfer submission reported failure."""

    def __init__(self, batch_id: str) -> None:
        super().__init__("Transfer request failed")
        self.batch_id = batch_id


class PaginationCursorRepeatedError(RequestError):
    """Batch listing returned a cursor that was already followed."""

    def __init__(self, cursor: str) -> None:
        super().__init__(f"Transfer history cursor repeated: {cursor}")
        self.cursor = cursor


# Payload exceptions
class ResponseFieldMissingError(RequestError):
    """Successful response is missing a required field."""

    def __init__(self, field: str, payload: Any = None) -> None:
        super().__init__(f"Response missing required field '{field}'")
        self.field = field
        self.payload = payload


class ResponseFieldInvalidError(RequestError):
    """Successful response carries a field of the wrong shape."""

    def __init__(self, field: str, value: Any, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"Response field '{field}' is invalid: {value!r}")
        self.field = field
        self.value = value
        self.__cause__ = cause


__all__ = [
    "MissingOperatorKeyError",
    "InvalidOperatorKeyError",
    "ChallengeRequestFailedError",
    "BearerTokenRequestFailedError",
    "PointQueryFailedError",
    "TransferQueryFailedError",
    "TransferCancelFailedError",
    "TransferRequestFailedError",
    "PaginationCursorRepeatedError",
    "ResponseFieldMissingError",
    "ResponseFieldInvalidError",
]
