"""Tests for canonical request bodies."""

from decimal import Decimal

import pytest

from starkex_client.auth.canonical_json import canonicalize_body, strip_nulls
from starkex_client.exceptions import UnserializablePayloadError, ValidationError


class TestStripNulls:
    """Null removal."""

    def test_top_level(self):
        assert strip_nulls({"a": 1, "b": None}) == {"a": 1}

    def test_nested(self):
        assert strip_nulls({"a": {"b": None, "c": {"d": None}}}) == {"a": {"c": {}}}

    def test_mappings_inside_lists(self):
        assert strip_nulls({"orders": [{"id": "1", "cancelId": None}]}) == {"orders": [{"id": "1"}]}

    def test_list_elements_kept(self):
        assert strip_nulls({"values": [1, None, 2]}) == {"values": [1, None, 2]}

    def test_falsy_values_kept(self):
        body = {"postOnly": False, "size": "0", "count": 0, "note": ""}
        assert strip_nulls(body) == body


class TestCanonicalizeBody:
    """Compact, null-free JSON."""

    @pytest.mark.parametrize("body", [None, b"", "", bytearray()])
    def test_no_body(self, body):
        assert canonicalize_body(body) == ""

    def test_compact(self):
        raw = b'{ "market" : "ETH-USD",\n  "size": "1" }'
        assert canonicalize_body(raw) == '{"market":"ETH-USD","size":"1"}'

    def test_insertion_order_preserved(self):
        assert canonicalize_body({"b": 1, "a": 2}) == '{"b":1,"a":2}'

    def test_nulls_removed(self):
        assert canonicalize_body('{"market":"ETH-USD","cancelId":null}') == '{"market":"ETH-USD"}'

    def test_empty_object(self):
        assert canonicalize_body({}) == "{}"

    def test_non_ascii_kept_as_utf8(self):
        assert canonicalize_body({"note": "café"}) == '{"note":"café"}'

    def test_numbers_reserialized_compactly(self):
        assert canonicalize_body(b'{"size":1.50}') == '{"size":1.5}'

    def test_idempotent(self):
        once = canonicalize_body(b'{"a": null, "b": [{"c": null, "d": 1}]}')
        assert canonicalize_body(once) == once == '{"b":[{"d":1}]}'

    @pytest.mark.parametrize("body", ["[1, 2]", '"text"', "42", "null", b"true"])
    def test_non_object_rejected(self, body):
        with pytest.raises(UnserializablePayloadError):
            canonicalize_body(body)

    def test_invalid_json_rejected(self):
        with pytest.raises(UnserializablePayloadError) as exc_info:
            canonicalize_body(b'{"market": ')
        assert isinstance(exc_info.value, ValidationError)

    def test_unserializable_value_rejected(self):
        with pytest.raises(UnserializablePayloadError):
            canonicalize_body({"size": Decimal("1.5")})


class TestNumberRange:
    """Numbers that would change on re-serialization are rejected."""

    @pytest.mark.parametrize("body", [
        b'{"a": 123456789012345678901234567890, "b": 1.10}',
        b'{"a": [18446744073709551616]}',
        b'{"a": -9223372036854775809}',
        '{"a": ' + "9" * 5000 + "}",
        b'{"a": 1e400}',
    ])
    def test_lossy_literal_rejected(self, body):
        with pytest.raises(UnserializablePayloadError):
            canonicalize_body(body)

    @pytest.mark.parametrize("body,expected", [
        (b'{"a": 18446744073709551615}', '{"a":18446744073709551615}'),
        (b'{"a": -9223372036854775808}', '{"a":-9223372036854775808}'),
    ])
    def test_64_bit_bounds_accepted(self, body, expected):
        assert canonicalize_body(body) == expected

    def test_digits_inside_strings_ignored(self):
        body = b'{"id": "123456789012345678901234567890", "note": "say \\"99999999999999999999999\\""}'
        assert canonicalize_body(body).startswith('{"id":"123456789012345678901234567890"')

    def test_non_finite_mapping_value_rejected(self):
        with pytest.raises(UnserializablePayloadError):
            canonicalize_body({"a": [float("inf")]})
