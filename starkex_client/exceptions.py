"""
Custom exceptions for the StarkEx client.

Three families, none of them retriable:
- ConfigurationError: unknown market/network/asset, missing credential or signer
- ValidationError: caller input that cannot be signed as given
- CredentialError: API secret that cannot be used as an HMAC key
"""

from typing import Optional, Any


class StarkexClientError(Exception):
    """Base exception for all StarkEx client errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# Configuration errors
class ConfigurationError(StarkexClientError):
    """Code or configuration defect. Fatal."""
    pass


class UnknownMarketError(ConfigurationError):
    """Market has no synthetic asset mapping."""

    def __init__(self, message: str, market: Optional[str] = None):
        super().__init__(message, {"market": market})
        self.market = market


class UnknownNetworkError(ConfigurationError):
    """Network id has no collateral asset id."""

    def __init__(self, message: str, network_id: Optional[int] = None):
        super().__init__(message, {"network_id": network_id})
        self.network_id = network_id


class UnknownAssetError(ConfigurationError):
    """Asset has no resolution or asset id entry."""

    def __init__(self, message: str, asset: Optional[str] = None):
        super().__init__(message, {"asset": asset})
        self.asset = asset


class MissingCredentialError(ConfigurationError):
    """API key, passphrase or secret is empty."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, {"field": field})
        self.field = field


class MissingSignerError(ConfigurationError):
    """Order has no signature and no settlement-layer signer was configured."""
    pass


# Validation errors
class ValidationError(StarkexClientError):
    """Input validation failed."""
    pass


class NotAMultipleOfQuantumError(ValidationError):
    """Amount does not land on an integer number of quantums."""

    def __init__(self, message: str, amount: Optional[str] = None,
                 asset: Optional[str] = None, resolution: Optional[int] = None):
        super().__init__(message, {"amount": amount, "asset": asset, "resolution": resolution})
        self.amount = amount
        self.asset = asset
        self.resolution = resolution


class InvalidDecimalLiteralError(ValidationError):
    """Field is not a finite decimal literal."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Optional[str] = None):
        super().__init__(message, {"field": field, "value": value})
        self.field = field
        self.value = value


class UnserializablePayloadError(ValidationError):
    """Request body is not a JSON object."""
    pass


class FieldOutOfRangeError(ValidationError):
    """Order field does not fit its settlement-layer bit length."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Optional[int] = None, bits: Optional[int] = None):
        super().__init__(message, {"field": field, "value": value, "bits": bits})
        self.field = field
        self.value = value
        self.bits = bits


# Credential errors
class CredentialError(StarkexClientError):
    """Credentials are present but unusable. Fatal at startup."""
    pass


class InvalidCredentialsError(CredentialError):
    """API secret is not valid base64."""
    pass
