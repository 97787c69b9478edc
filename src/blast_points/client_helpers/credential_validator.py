"""Validate operator credentials."""

from typing import Optional

from ..exceptions import MissingOperatorKeyError


class CredentialValidator:
    """Extract and validate credentials."""

    @staticmethod
    def extract_and_validate(operator_key: Optional[str]) -> str:
        """Return the stripped operator key, failing before any network call if absent."""
        if operator_key is None:
            raise MissingOperatorKeyError()
        stripped = operator_key.strip()
        if not stripped:
            raise MissingOperatorKeyError()
        return stripped
