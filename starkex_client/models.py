"""
Type definitions for the StarkEx client.

Uses Pydantic for runtime validation and type safety.
DECIMAL PRECISION: Human-readable amounts travel as decimal strings and are
only parsed by the signing code, which uses exact Decimal arithmetic.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .exceptions import MissingCredentialError


class Side(str, Enum):
    """Order side."""
    BUY = "BUY"
    SELL = "SELL"


class OrderType(str, Enum):
    """Exchange order type."""
    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP_LIMIT = "STOP_LIMIT"
    TRAILING_STOP = "TRAILING_STOP"
    TAKE_PROFIT = "TAKE_PROFIT"


class TimeInForce(str, Enum):
    """Order time in force."""
    GTT = "GTT"  # Good-til-time
    FOK = "FOK"  # Fill-or-kill
    IOC = "IOC"  # Immediate-or-cancel


def _coerce_literal(v: Any) -> Any:
    """Turn numeric inputs into the decimal strings the wire uses."""
    if isinstance(v, bool):
        return v
    if isinstance(v, Decimal):
        return format(v, "f")
    if isinstance(v, (int, float)):
        return str(v)  # Convert via string to avoid float precision loss
    return v


@dataclass(frozen=True)
class Credentials:
    """
    API key credentials.

    SECURITY: passphrase and secret are hidden from repr to prevent leakage in logs.
    """
    api_key: str
    passphrase: str = field(repr=False)
    secret: str = field(repr=False)  # base64-encoded HMAC key

    def __post_init__(self):
        for name in ("api_key", "passphrase", "secret"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise MissingCredentialError(f"API credential '{name}' is missing", field=name)


# Request Models
class OrderSigningRequest(BaseModel):
    """Everything needed to build the settlement-layer payload of one order."""
    model_config = ConfigDict(frozen=True)

    network_id: int = Field(..., description="Ethereum network id (1 = mainnet)")
    market: str = Field(..., description="Market symbol, e.g. ETH-USD")
    side: Side = Field(..., description="BUY or SELL")
    position_id: str = Field(..., description="Settlement-layer position id")
    size: str = Field(..., description="Order size in synthetic asset (decimal string)")
    price: str = Field(..., description="Limit price in collateral asset (decimal string)")
    limit_fee: str = Field(..., description="Maximum fee as a fraction, e.g. 0.01 = 1%")
    client_id: str = Field(..., description="Caller-supplied order id")
    expiration_epoch_seconds: int = Field(..., description="Order expiration (unix seconds)")

    @field_validator("size", "price", "limit_fee", "position_id", mode="before")
    @classmethod
    def validate_literal(cls, v: Any) -> Any:
        """Accept numbers, keep strings untouched."""
        return _coerce_literal(v)


# Settlement-layer payload
class OrderSignaturePayload(BaseModel):
    """
    StarkEx-level signable order.

    Field names and types are fixed by the settlement protocol.
    """
    model_config = ConfigDict(frozen=True)

    order_type: str
    asset_id_synthetic: str
    asset_id_collateral: str
    asset_id_fee: str
    quantums_amount_synthetic: int
    quantums_amount_collateral: int
    quantums_amount_fee: int
    is_buying_synthetic: Literal["true", "false"]
    position_id: str
    nonce: str
    expiration_epoch_hours: int

    @property
    def is_buy(self) -> bool:
        return self.is_buying_synthetic == "true"

    def to_wire(self) -> dict[str, Any]:
        """Payload as a plain dict with protocol field names."""
        return self.model_dump()


class StarkwareOrder(BaseModel):
    """Payload oriented by what the trader sells and buys."""
    model_config = ConfigDict(frozen=True)

    order_type: str
    asset_id_sell: str
    asset_id_buy: str
    asset_id_fee: str
    quantums_amount_sell: int
    quantums_amount_buy: int
    quantums_amount_fee: int
    position_id: int
    nonce: int
    expiration_epoch_hours: int


class StarkwareOrderMessage(BaseModel):
    """
    Canonical message the trader's settlement-layer key signs.

    The message hash is
        H(H(H(H(asset_id_sell, asset_id_buy), asset_id_fee), part_1), part_2)
    where H is the settlement layer's two-to-one field hash (Pedersen).
    """
    model_config = ConfigDict(frozen=True)

    asset_id_sell: int
    asset_id_buy: int
    asset_id_fee: int
    part_1: int
    part_2: int

    def hash_with(self, field_hash: Callable[[int, int], int]) -> int:
        """Apply an external two-to-one hash in the protocol's chaining order."""
        assets_hash = field_hash(field_hash(self.asset_id_sell, self.asset_id_buy), self.asset_id_fee)
        return field_hash(field_hash(assets_hash, self.part_1), self.part_2)


# HTTP authentication
class RequestSignatureHeaders(BaseModel):
    """Authentication headers for a single HTTP request. Never persisted."""
    model_config = ConfigDict(frozen=True)

    signature: str
    api_key: str
    timestamp: str
    passphrase: str = Field(..., repr=False)

    def to_http(self, prefix: str = "") -> dict[str, str]:
        """
        Header dict ready to attach to a request.

        Args:
            prefix: Optional header name prefix (e.g. "DYDX-")
        """
        return {
            f"{prefix}SIGNATURE": self.signature,
            f"{prefix}API-KEY": self.api_key,
            f"{prefix}TIMESTAMP": self.timestamp,
            f"{prefix}PASSPHRASE": self.passphrase,
        }


# Outbound order body
class OrderRequest(BaseModel):
    """Order placement request body."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    market: str
    side: Side
    type: OrderType = OrderType.LIMIT
    post_only: bool = Field(default=False, alias="postOnly")
    size: str
    price: str
    limit_fee: str = Field(..., alias="limitFee")
    expiration: datetime
    time_in_force: TimeInForce = Field(default=TimeInForce.GTT, alias="timeInForce")
    client_id: str = Field(..., alias="clientId", min_length=1)
    cancel_id: Optional[str] = Field(None, alias="cancelId")
    trigger_price: Optional[str] = Field(None, alias="triggerPrice")
    trailing_percent: Optional[str] = Field(None, alias="trailingPercent")
    reduce_only: Optional[bool] = Field(None, alias="reduceOnly")
    signature: Optional[str] = None

    @field_validator("size", "price", "limit_fee", "trigger_price", "trailing_percent", mode="before")
    @classmethod
    def validate_literal(cls, v: Any) -> Any:
        """Accept numbers, keep strings untouched."""
        return _coerce_literal(v)

    @field_validator("expiration")
    @classmethod
    def validate_expiration(cls, v: datetime) -> datetime:
        """Require timezone-aware expiration, normalized to UTC."""
        if v.tzinfo is None:
            raise ValueError("expiration must be timezone-aware")
        return v.astimezone(timezone.utc)

    @field_serializer("expiration")
    def serialize_expiration(self, v: datetime) -> str:
        return v.strftime("%Y-%m-%dT%H:%M:%S.") + f"{v.microsecond // 1000:03d}Z"

    @property
    def expiration_epoch_seconds(self) -> int:
        # Signed hours are rounded up, so sub-second precision is dropped upward
        seconds = int(self.expiration.timestamp())
        return seconds + 1 if self.expiration.microsecond else seconds

    def to_body(self) -> dict[str, Any]:
        """JSON-ready body with camelCase names and nulls dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
