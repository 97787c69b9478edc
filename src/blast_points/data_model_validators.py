"""Validation helpers for point and transfer data models."""

from __future__ import annotations

import re
from typing import Any

_DECIMAL_STRING = re.compile(r"^\d+(\.\d+)?$")


def validate_points_amount(points: Any) -> None:
    """
    Validate a points amount is a plain non-negative decimal string.

    Args:
        points: Amount as sent to or received from the service

    Raises:
        TypeError: If points is not a string
        ValueError: If points is not a plain decimal
    """
    if not isinstance(points, str):
        raise TypeError(f"Points must be a decimal string, got: {type(points)}")

    if not _DECIMAL_STRING.match(points):
        raise ValueError(f"Points must be a non-negative decimal string: {points!r}")


def validate_points_transfer(to_address: Any, points: Any) -> None:
    """
    Validate a single points transfer.

    Args:
        to_address: Recipient chain address
        points: Decimal string amount

    Raises:
        TypeError: If the recipient or amount is not a string
        ValueError: If the recipient is empty or the amount is malformed
    """
    if not isinstance(to_address, str):
        raise TypeError(f"Transfer recipient address must be a string, got: {type(to_address)}")

    if not to_address:
        raise ValueError("Transfer recipient address must be specified")

    validate_points_amount(points)


def validate_bearer_token(token: Any, expiry: Any) -> None:
    if not token:
        raise ValueError("Bearer token must be specified")

    if not isinstance(expiry, int):
        raise TypeError(f"Bearer token expiry must be integer unix seconds, got: {type(expiry)}")


def validate_batch_counts(transfer_count: Any) -> None:
    if not isinstance(transfer_count, int) or isinstance(transfer_count, bool):
        raise TypeError(f"Transfer count must be an integer, got: {type(transfer_count)}")

    if transfer_count < 0:
        raise ValueError(f"Transfer count cannot be negative: {transfer_count}")
