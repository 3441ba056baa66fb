"""Order signing helpers."""

import hashlib

from ..exceptions import ValidationError
from .constants import (
    NONCE_UPPER_BOUND_EXCLUSIVE,
    ONE_HOUR_IN_SECONDS,
    ORDER_SIGNATURE_EXPIRATION_BUFFER_HOURS,
)


def nonce_from_client_id(client_id: str) -> str:
    """
    Derive the settlement-layer nonce for an order from its client id.

    SHA-256 of the UTF-8 client id, read as a big-endian integer and reduced
    into the 32-bit nonce field. The same client id always yields the same
    nonce, so re-signing a retried order produces an identical payload.

    Args:
        client_id: Caller-supplied client order id

    Returns:
        Nonce as a decimal string

    Raises:
        ValidationError: If client_id is empty

    Example:
        >>> nonce_from_client_id("order-1") == nonce_from_client_id("order-1")
        True
    """
    if not isinstance(client_id, str) or not client_id:
        raise ValidationError("client_id must be a non-empty string", {"client_id": client_id})

    digest = hashlib.sha256(client_id.encode("utf-8")).digest()
    return str(int.from_bytes(digest, byteorder="big") % NONCE_UPPER_BOUND_EXCLUSIVE)


def expiration_epoch_hours(expiration_epoch_seconds: int) -> int:
    """
    Signed expiration in hours, including the protocol buffer.

    Orders may have a short time-to-live on the orderbook, but their
    signatures must still be valid when they reach the settlement layer.
    """
    if isinstance(expiration_epoch_seconds, bool) or not isinstance(expiration_epoch_seconds, int):
        raise ValidationError(
            f"expiration_epoch_seconds must be an integer, got {expiration_epoch_seconds!r}",
            {"expiration_epoch_seconds": expiration_epoch_seconds},
        )
    if expiration_epoch_seconds < 0:
        raise ValidationError(
            f"expiration_epoch_seconds must be non-negative, got {expiration_epoch_seconds}",
            {"expiration_epoch_seconds": expiration_epoch_seconds},
        )

    hours = -(-expiration_epoch_seconds // ONE_HOUR_IN_SECONDS)  # ceiling
    return hours + ORDER_SIGNATURE_EXPIRATION_BUFFER_HOURS
