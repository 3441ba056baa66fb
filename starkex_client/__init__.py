"""
StarkEx Client Library

Request authentication and order signing for a StarkEx-settled perpetuals
exchange:
- HMAC signatures for private REST calls
- Quantum conversion and order signature payloads for the settlement layer

All signing operations are pure and thread-safe.
"""

from .models import (
    Side,
    OrderType,
    TimeInForce,
    Credentials,
    OrderSigningRequest,
    OrderSignaturePayload,
    StarkwareOrder,
    StarkwareOrderMessage,
    RequestSignatureHeaders,
    OrderRequest,
)
from .exceptions import (
    StarkexClientError,
    ConfigurationError,
    UnknownMarketError,
    UnknownNetworkError,
    UnknownAssetError,
    MissingCredentialError,
    MissingSignerError,
    ValidationError,
    NotAMultipleOfQuantumError,
    InvalidDecimalLiteralError,
    UnserializablePayloadError,
    FieldOutOfRangeError,
    CredentialError,
    InvalidCredentialsError,
)
from .auth import RequestAuthenticator, StarkexRequestAuth, canonicalize_body
from .starkex import (
    AssetRegistry,
    DEFAULT_REGISTRY,
    OrderSignaturePayloadBuilder,
    to_quantums_exact,
    to_quantums_round_up,
    to_quantums_round_down,
    from_quantums,
    nonce_from_client_id,
    to_starkware_order,
    to_starkware_message,
)
from .trading import OrderBuilder
from .config import StarkexSettings, get_settings
from .metrics import Metrics

__version__ = "0.1.0"

__all__ = [
    # Types
    "Side",
    "OrderType",
    "TimeInForce",
    "Credentials",
    "OrderSigningRequest",
    "OrderSignaturePayload",
    "StarkwareOrder",
    "StarkwareOrderMessage",
    "RequestSignatureHeaders",
    "OrderRequest",

    # Exceptions
    "StarkexClientError",
    "ConfigurationError",
    "UnknownMarketError",
    "UnknownNetworkError",
    "UnknownAssetError",
    "MissingCredentialError",
    "MissingSignerError",
    "ValidationError",
    "NotAMultipleOfQuantumError",
    "InvalidDecimalLiteralError",
    "UnserializablePayloadError",
    "FieldOutOfRangeError",
    "CredentialError",
    "InvalidCredentialsError",

    # Request authentication
    "RequestAuthenticator",
    "StarkexRequestAuth",
    "canonicalize_body",

    # Order signing
    "AssetRegistry",
    "DEFAULT_REGISTRY",
    "OrderSignaturePayloadBuilder",
    "to_quantums_exact",
    "to_quantums_round_up",
    "to_quantums_round_down",
    "from_quantums",
    "nonce_from_client_id",
    "to_starkware_order",
    "to_starkware_message",
    "OrderBuilder",

    # Config and observability
    "StarkexSettings",
    "get_settings",
    "Metrics",
]
