"""StarkEx quantum conversion and order signature payloads."""

from .registry import AssetRegistry, DEFAULT_REGISTRY
from .quantums import (
    to_quantums_exact,
    to_quantums_round_up,
    to_quantums_round_down,
    from_quantums,
)
from .helpers import nonce_from_client_id, expiration_epoch_hours
from .order import OrderSignaturePayloadBuilder, to_starkware_order, to_starkware_message

__all__ = [
    "AssetRegistry",
    "DEFAULT_REGISTRY",
    "to_quantums_exact",
    "to_quantums_round_up",
    "to_quantums_round_down",
    "from_quantums",
    "nonce_from_client_id",
    "expiration_epoch_hours",
    "OrderSignaturePayloadBuilder",
    "to_starkware_order",
    "to_starkware_message",
]
