"""Load operator signing keys."""

from __future__ import annotations

import binascii

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_keys.exceptions import ValidationError as KeyValidationError

from ..exceptions import InvalidOperatorKeyError


class KeyLoader:
    """Load and validate secp256k1 operator keys."""

    @staticmethod
    def load_operator_account(private_key_value: str) -> LocalAccount:
        """Load the operator account from a hex private key, with or without ``0x``."""
        try:
            return Account.from_key(private_key_value)
        except (ValueError, TypeError, binascii.Error, KeyValidationError) as exc:
            raise InvalidOperatorKeyError(exc) from exc
