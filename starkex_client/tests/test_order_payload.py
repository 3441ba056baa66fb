"""
Tests for order signature payloads.

Covers the settlement-layer rules: exact price quantums, collateral rounding
by side, fee truncation and ceiling, nonce derivation and expiration buffer.
"""

import pytest

from starkex_client.exceptions import (
    FieldOutOfRangeError,
    InvalidDecimalLiteralError,
    NotAMultipleOfQuantumError,
    UnknownMarketError,
    UnknownNetworkError,
    ValidationError,
)
from starkex_client.models import OrderSignaturePayload, OrderSigningRequest, Side
from starkex_client.starkex.constants import (
    COLLATERAL_ASSET_ID_BY_NETWORK_ID,
    ORDER_SIGNATURE_EXPIRATION_BUFFER_HOURS,
    SYNTHETIC_ASSET_ID_MAP,
)
from starkex_client.starkex.helpers import expiration_epoch_hours, nonce_from_client_id
from starkex_client.starkex.order import (
    OrderSignaturePayloadBuilder,
    to_starkware_message,
    to_starkware_order,
)

MAINNET_USDC = COLLATERAL_ASSET_ID_BY_NETWORK_ID[1]
ETH_ID = SYNTHETIC_ASSET_ID_MAP["ETH"]


def make_request(**overrides) -> OrderSigningRequest:
    fields = dict(
        network_id=1,
        market="ETH-USD",
        side=Side.BUY,
        position_id="12345",
        size="1",
        price="100",
        limit_fee="0.01",
        client_id="client-1",
        expiration_epoch_seconds=1_700_000_000,
    )
    fields.update(overrides)
    return OrderSigningRequest(**fields)


@pytest.fixture
def builder():
    return OrderSignaturePayloadBuilder()


class TestNonce:
    """Nonce derivation from client id."""

    def test_known_values(self):
        """Low 32 bits of SHA-256(client_id)."""
        assert nonce_from_client_id("client-1") == "1011538290"
        assert nonce_from_client_id("client-2") == "76616706"

    def test_deterministic(self):
        assert nonce_from_client_id("abc") == nonce_from_client_id("abc")

    def test_distinct_client_ids(self):
        nonces = {nonce_from_client_id(f"order-{i}") for i in range(100)}
        assert len(nonces) == 100

    def test_in_range(self):
        for i in range(100):
            assert 0 <= int(nonce_from_client_id(str(i))) < 2 ** 32

    def test_empty_client_id(self):
        with pytest.raises(ValidationError):
            nonce_from_client_id("")


class TestExpiration:
    """Signed expiration hours include the buffer."""

    @pytest.mark.parametrize("seconds,hours", [
        (0, 0),
        (1, 1),
        (3600, 1),
        (3601, 2),
        (1_700_000_000, 472223),
    ])
    def test_ceiling_plus_buffer(self, seconds, hours):
        assert expiration_epoch_hours(seconds) == hours + ORDER_SIGNATURE_EXPIRATION_BUFFER_HOURS

    def test_buffer_is_seven_days(self):
        assert ORDER_SIGNATURE_EXPIRATION_BUFFER_HOURS == 168

    def test_negative(self):
        with pytest.raises(ValidationError):
            expiration_epoch_hours(-1)


class TestPayloadEndToEnd:
    """Full payload for simple orders."""

    def test_buy_one_at_100(self, builder):
        payload = builder.build(make_request())

        assert payload.order_type == "LIMIT_ORDER_WITH_FEES"
        assert payload.asset_id_synthetic == ETH_ID
        assert payload.asset_id_collateral == MAINNET_USDC
        assert payload.asset_id_fee == MAINNET_USDC
        assert payload.quantums_amount_synthetic == 100 * 10 ** 9
        assert payload.quantums_amount_collateral == 100_000_000
        assert payload.quantums_amount_fee == 1_000_000
        assert payload.is_buying_synthetic == "true"
        assert payload.position_id == "12345"
        assert payload.nonce == "1011538290"
        assert payload.expiration_epoch_hours == 472223 + 168

    def test_sell(self, builder):
        payload = builder.build(make_request(side=Side.SELL))

        assert payload.is_buying_synthetic == "false"
        assert payload.quantums_amount_collateral == 100_000_000

    def test_wire_field_names(self, builder):
        wire = builder.build(make_request()).to_wire()

        assert set(wire) == {
            "order_type", "asset_id_synthetic", "asset_id_collateral", "asset_id_fee",
            "quantums_amount_synthetic", "quantums_amount_collateral", "quantums_amount_fee",
            "is_buying_synthetic", "position_id", "nonce", "expiration_epoch_hours",
        }
        assert isinstance(wire["quantums_amount_collateral"], int)

    def test_deterministic(self, builder):
        """Re-signing a retried order yields an identical payload."""
        assert builder.build(make_request()) == builder.build(make_request())

    def test_goerli_collateral(self, builder):
        payload = builder.build(make_request(network_id=5))
        assert payload.asset_id_collateral == COLLATERAL_ASSET_ID_BY_NETWORK_ID[5]

    def test_payload_is_immutable(self, builder):
        payload = builder.build(make_request())
        with pytest.raises(Exception):
            payload.nonce = "0"


class TestCollateralRounding:
    """Buyers round up, sellers round down."""

    def test_buy_rounds_up(self, builder):
        # notional 100.0000015 USDC = 100000001.5 quantums
        payload = builder.build(make_request(price="100.0000015"))
        assert payload.quantums_amount_collateral == 100000002

    def test_sell_rounds_down(self, builder):
        payload = builder.build(make_request(price="100.0000015", side=Side.SELL))
        assert payload.quantums_amount_collateral == 100000001

    def test_fractional_size(self, builder):
        # 0.333 * 1234.5 = 411.0885 USDC
        buy = builder.build(make_request(size="0.333", price="1234.5"))
        sell = builder.build(make_request(size="0.333", price="1234.5", side=Side.SELL))

        assert buy.quantums_amount_collateral == 411088500
        assert sell.quantums_amount_collateral == 411088500


class TestFee:
    """Fee truncation and rounding."""

    def test_fee_rounds_up(self, builder):
        # 100000002 * 0.001 = 100000.002 -> 100001
        payload = builder.build(make_request(price="100.0000015", limit_fee="0.001"))
        assert payload.quantums_amount_fee == 100001

    def test_fee_rounds_up_for_sell(self, builder):
        # 100000001 * 0.001 = 100000.001 -> 100001
        payload = builder.build(
            make_request(price="100.0000015", limit_fee="0.001", side=Side.SELL)
        )
        assert payload.quantums_amount_fee == 100001

    def test_fee_truncated_to_six_decimals(self, builder):
        """0.0100009 is signed as 0.010000."""
        payload = builder.build(make_request(limit_fee="0.0100009"))
        assert payload.quantums_amount_fee == 1_000_000

    def test_tiny_fee_truncation(self, builder):
        payload = builder.build(make_request(limit_fee="0.0000019"))
        assert payload.quantums_amount_fee == 100

    def test_zero_fee(self, builder):
        payload = builder.build(make_request(limit_fee="0"))
        assert payload.quantums_amount_fee == 0


class TestRejections:
    """Invalid orders are rejected, never defaulted."""

    def test_price_not_on_quantum_grid(self, builder):
        with pytest.raises(NotAMultipleOfQuantumError):
            builder.build(make_request(price="100.0000000001"))

    def test_unknown_market(self, builder):
        with pytest.raises(UnknownMarketError):
            builder.build(make_request(market="FOO-USD"))

    def test_unknown_network(self, builder):
        with pytest.raises(UnknownNetworkError):
            builder.build(make_request(network_id=42))

    @pytest.mark.parametrize("limit_fee", ["1e250", "1E+199"])
    def test_limit_fee_beyond_precision(self, builder, limit_fee):
        with pytest.raises(ValidationError) as exc_info:
            builder.build(make_request(limit_fee=limit_fee))
        assert "limit_fee" in exc_info.value.details

    @pytest.mark.parametrize("field", ["price", "size", "limit_fee"])
    def test_invalid_decimal(self, builder, field):
        with pytest.raises(InvalidDecimalLiteralError) as exc_info:
            builder.build(make_request(**{field: "abc"}))
        assert exc_info.value.field == field

    @pytest.mark.parametrize("overrides", [
        {"price": "0"},
        {"price": "-1"},
        {"size": "0"},
        {"limit_fee": "-0.01"},
        {"position_id": "abc"},
        {"position_id": "-1"},
        {"client_id": ""},
        {"expiration_epoch_seconds": -5},
    ])
    def test_invalid_values(self, builder, overrides):
        with pytest.raises(ValidationError):
            builder.build(make_request(**overrides))


class TestStarkwareMessage:
    """Orientation and bit packing of the signed message."""

    def test_buy_orientation(self, builder):
        order = to_starkware_order(builder.build(make_request()))

        assert order.asset_id_sell == MAINNET_USDC
        assert order.asset_id_buy == ETH_ID
        assert order.quantums_amount_sell == 100_000_000
        assert order.quantums_amount_buy == 100 * 10 ** 9
        assert order.position_id == 12345

    def test_sell_orientation(self, builder):
        order = to_starkware_order(builder.build(make_request(side=Side.SELL)))

        assert order.asset_id_sell == ETH_ID
        assert order.asset_id_buy == MAINNET_USDC
        assert order.quantums_amount_sell == 100 * 10 ** 9
        assert order.quantums_amount_buy == 100_000_000

    def test_packing(self, builder):
        payload = builder.build(make_request())
        message = to_starkware_message(payload)

        nonce = int(payload.nonce)
        hours = payload.expiration_epoch_hours
        expected_part_1 = (((100_000_000 << 64) + 100 * 10 ** 9 << 64) + 1_000_000 << 32) + nonce
        expected_part_2 = (
            ((((3 << 64) + 12345 << 64) + 12345 << 64) + 12345 << 32) + hours
        ) << 17

        assert message.asset_id_sell == int(MAINNET_USDC, 16)
        assert message.asset_id_buy == int(ETH_ID, 16)
        assert message.asset_id_fee == int(MAINNET_USDC, 16)
        assert message.part_1 == expected_part_1
        assert message.part_2 == expected_part_2

    def test_hash_chaining_order(self, builder):
        message = to_starkware_message(builder.build(make_request()))
        calls = []

        def fake_hash(a, b):
            calls.append((a, b))
            return (a * 31 + b) % (2 ** 251)

        result = message.hash_with(fake_hash)

        assert calls[0] == (message.asset_id_sell, message.asset_id_buy)
        assert calls[1][1] == message.asset_id_fee
        assert calls[2][1] == message.part_1
        assert calls[3][1] == message.part_2
        assert result == fake_hash(calls[3][0], message.part_2)

    def test_out_of_range_amount(self, builder):
        payload = builder.build(make_request())
        oversized = OrderSignaturePayload(**{**payload.to_wire(), "quantums_amount_fee": 2 ** 64})

        with pytest.raises(FieldOutOfRangeError) as exc_info:
            to_starkware_message(oversized)
        assert exc_info.value.field == "quantums_amount_fee"

    def test_out_of_range_position(self, builder):
        payload = builder.build(make_request(position_id=str(2 ** 64)))

        with pytest.raises(FieldOutOfRangeError):
            to_starkware_message(payload)
