"""
StarkEx order signature payloads.

Turns a human-readable order into the integer fields the settlement layer
signs, and packs those fields into the message the trader's key signs.
The signing primitive itself is external.
"""

from decimal import ROUND_CEILING, ROUND_DOWN, Decimal, Inexact, InvalidOperation, Overflow
import logging
from typing import Optional

from ..exceptions import FieldOutOfRangeError, ValidationError
from ..metrics import Metrics
from ..models import (
    OrderSignaturePayload,
    OrderSigningRequest,
    Side,
    StarkwareOrder,
    StarkwareOrderMessage,
)
from ..utils.numeric import (
    EXACT_CONTEXT,
    ROUNDING_CONTEXT,
    decimal_to_str,
    exact_multiply,
    parse_decimal,
)
from .constants import (
    LIMIT_FEE_DECIMALS,
    ORDER_FIELD_BIT_LENGTHS,
    ORDER_PADDING_BITS,
    ORDER_PREFIX,
    ORDER_TYPE_LIMIT_WITH_FEES,
)
from .helpers import expiration_epoch_hours, nonce_from_client_id
from .quantums import to_quantums_exact, to_quantums_round_down, to_quantums_round_up
from .registry import DEFAULT_REGISTRY, AssetRegistry

logger = logging.getLogger(__name__)

LIMIT_FEE_QUANTUM = Decimal(1).scaleb(-LIMIT_FEE_DECIMALS)


class OrderSignaturePayloadBuilder:
    """
    Builds OrderSignaturePayload from OrderSigningRequest.

    Pure and deterministic for a fixed registry; safe to share across threads.
    """

    def __init__(self, registry: Optional[AssetRegistry] = None, metrics: Optional[Metrics] = None):
        """
        Initialize builder.

        Args:
            registry: Asset registry (default tables if None)
            metrics: Optional metrics collector
        """
        self.registry = registry or DEFAULT_REGISTRY
        self._metrics = metrics

    def build(self, request: OrderSigningRequest) -> OrderSignaturePayload:
        """
        Build the settlement-layer payload for one order.

        Args:
            request: Order signing request

        Returns:
            Immutable OrderSignaturePayload

        Raises:
            UnknownMarketError, UnknownNetworkError: Unlisted market or network
            InvalidDecimalLiteralError: price, size or limit_fee unparsable
            NotAMultipleOfQuantumError: price off the synthetic asset's quantum grid
            ValidationError: Other invalid input
        """
        try:
            payload = self._build(request)
        except Exception as e:
            if self._metrics:
                self._metrics.track_failure("order", type(e).__name__)
            logger.warning(
                f"Rejected order {request.client_id} on {request.market}: {type(e).__name__}"
            )
            raise

        if self._metrics:
            self._metrics.track_payload_built(request.side.value)
        logger.debug(
            f"Built payload for {request.side.value} {request.size} {request.market} "
            f"@ {request.price} (client_id={request.client_id}, nonce={payload.nonce})"
        )
        return payload

    def _build(self, request: OrderSigningRequest) -> OrderSignaturePayload:
        synthetic_asset = self.registry.synthetic_asset_for(request.market)
        synthetic_asset_id = self.registry.synthetic_asset_id_for(synthetic_asset)
        collateral_asset_id = self.registry.collateral_asset_id_for(request.network_id)
        collateral_asset = self.registry.collateral_asset

        price = parse_decimal(request.price, "price")
        size = parse_decimal(request.size, "size")
        limit_fee = parse_decimal(request.limit_fee, "limit_fee")

        if price <= 0:
            raise ValidationError(f"price must be positive, got {request.price}", {"price": request.price})
        if size <= 0:
            raise ValidationError(f"size must be positive, got {request.size}", {"size": request.size})
        if limit_fee < 0:
            raise ValidationError(
                f"limit_fee must be non-negative, got {request.limit_fee}",
                {"limit_fee": request.limit_fee}
            )
        if not (request.position_id.isascii() and request.position_id.isdigit()):
            raise ValidationError(
                f"position_id must be a non-negative integer, got {request.position_id!r}",
                {"position_id": request.position_id}
            )

        # Price must land exactly on the synthetic asset's quantum grid
        quantums_amount_synthetic = to_quantums_exact(price, synthetic_asset, self.registry)

        is_buying_synthetic = request.side == Side.BUY
        try:
            notional = exact_multiply(price, size)
        except (Inexact, Overflow):
            raise ValidationError(
                "price * size exceeds supported precision",
                {"price": request.price, "size": request.size}
            ) from None

        # Never under-charge a buyer or over-credit a seller
        if is_buying_synthetic:
            quantums_amount_collateral = to_quantums_round_up(notional, collateral_asset, self.registry)
        else:
            quantums_amount_collateral = to_quantums_round_down(notional, collateral_asset, self.registry)

        quantums_amount_fee = self._fee_quantums(quantums_amount_collateral, limit_fee)

        return OrderSignaturePayload(
            order_type=ORDER_TYPE_LIMIT_WITH_FEES,
            asset_id_synthetic=synthetic_asset_id,
            asset_id_collateral=collateral_asset_id,
            # Fees are only supported in the collateral asset
            asset_id_fee=collateral_asset_id,
            quantums_amount_synthetic=quantums_amount_synthetic,
            quantums_amount_collateral=quantums_amount_collateral,
            quantums_amount_fee=quantums_amount_fee,
            is_buying_synthetic="true" if is_buying_synthetic else "false",
            position_id=request.position_id,
            nonce=nonce_from_client_id(request.client_id),
            expiration_epoch_hours=expiration_epoch_hours(request.expiration_epoch_seconds),
        )

    @staticmethod
    def _fee_quantums(quantums_amount_collateral: int, limit_fee: Decimal) -> int:
        """
        Maximum fee in collateral quantums.

        The fee fraction is truncated to six decimals, then the fee amount is
        rounded up.

        Raises:
            ValidationError: If the fee does not fit the exact context
        """
        try:
            fee = limit_fee.quantize(LIMIT_FEE_QUANTUM, rounding=ROUND_DOWN, context=ROUNDING_CONTEXT)
            fee_raw = exact_multiply(Decimal(quantums_amount_collateral), fee)
        except (InvalidOperation, Inexact, Overflow):
            raise ValidationError(
                "limit_fee exceeds supported precision",
                {"limit_fee": decimal_to_str(limit_fee)}
            ) from None
        return int(fee_raw.to_integral_value(rounding=ROUND_CEILING, context=EXACT_CONTEXT))


def to_starkware_order(payload: OrderSignaturePayload) -> StarkwareOrder:
    """Orient a payload by the assets the trader sells and buys."""
    if payload.is_buy:
        sell_id, buy_id = payload.asset_id_collateral, payload.asset_id_synthetic
        sell_amount, buy_amount = payload.quantums_amount_collateral, payload.quantums_amount_synthetic
    else:
        sell_id, buy_id = payload.asset_id_synthetic, payload.asset_id_collateral
        sell_amount, buy_amount = payload.quantums_amount_synthetic, payload.quantums_amount_collateral

    return StarkwareOrder(
        order_type=payload.order_type,
        asset_id_sell=sell_id,
        asset_id_buy=buy_id,
        asset_id_fee=payload.asset_id_fee,
        quantums_amount_sell=sell_amount,
        quantums_amount_buy=buy_amount,
        quantums_amount_fee=payload.quantums_amount_fee,
        position_id=int(payload.position_id),
        nonce=int(payload.nonce),
        expiration_epoch_hours=payload.expiration_epoch_hours,
    )


def _check_bits(field: str, value: int, bits: int) -> int:
    if value < 0 or value >= 1 << bits:
        raise FieldOutOfRangeError(
            f"{field}={value} does not fit in {bits} bits",
            field=field, value=value, bits=bits
        )
    return value


def to_starkware_message(payload: OrderSignaturePayload) -> StarkwareOrderMessage:
    """
    Pack a payload into the message signed by the trader's settlement-layer key.

    part_1 = sell | buy | fee | nonce
    part_2 = prefix | position_id x3 | expiration_epoch_hours | padding

    Raises:
        FieldOutOfRangeError: If a field exceeds its bit length
    """
    order = to_starkware_order(payload)
    bits = ORDER_FIELD_BIT_LENGTHS
    synthetic_bits = bits["asset_id_synthetic"]
    collateral_bits = bits["asset_id_collateral"]

    if payload.is_buy:
        sell_bits, buy_bits = collateral_bits, synthetic_bits
    else:
        sell_bits, buy_bits = synthetic_bits, collateral_bits

    asset_id_sell = _check_bits("asset_id_sell", int(order.asset_id_sell, 16), sell_bits)
    asset_id_buy = _check_bits("asset_id_buy", int(order.asset_id_buy, 16), buy_bits)
    asset_id_fee = _check_bits("asset_id_fee", int(order.asset_id_fee, 16), bits["asset_id_fee"])

    amount_bits = bits["quantums_amount"]
    part_1 = _check_bits("quantums_amount_sell", order.quantums_amount_sell, amount_bits)
    part_1 <<= amount_bits
    part_1 += _check_bits("quantums_amount_buy", order.quantums_amount_buy, amount_bits)
    part_1 <<= amount_bits
    part_1 += _check_bits("quantums_amount_fee", order.quantums_amount_fee, amount_bits)
    part_1 <<= bits["nonce"]
    part_1 += _check_bits("nonce", order.nonce, bits["nonce"])

    position_id = _check_bits("position_id", order.position_id, bits["position_id"])
    part_2 = ORDER_PREFIX
    for _ in range(3):
        part_2 <<= bits["position_id"]
        part_2 += position_id
    part_2 <<= bits["expiration_epoch_hours"]
    part_2 += _check_bits(
        "expiration_epoch_hours", order.expiration_epoch_hours, bits["expiration_epoch_hours"]
    )
    part_2 <<= ORDER_PADDING_BITS

    return StarkwareOrderMessage(
        asset_id_sell=asset_id_sell,
        asset_id_buy=asset_id_buy,
        asset_id_fee=asset_id_fee,
        part_1=part_1,
        part_2=part_2,
    )
