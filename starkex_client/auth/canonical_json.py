"""
Canonical JSON for request signing.

The server recomputes the signature over the body it receives with all
null-valued fields removed, so the signer must produce the same bytes:
same null-stripped structure in, same compact JSON out.
"""

import math
import re
from typing import Any, Mapping, Optional, Union

import orjson

from ..exceptions import UnserializablePayloadError

Body = Union[bytes, bytearray, str, Mapping[str, Any], None]

# orjson parses integers in the signed or unsigned 64-bit range exactly
INT_MIN = -(1 << 63)
INT_MAX = (1 << 64) - 1

# String literals are matched first so digits inside them are skipped
_JSON_TOKEN = re.compile(r'"(?:[^"\\]|\\.)*"|(-?\d+)(\.\d+)?([eE][+-]?\d+)?')


def strip_nulls(value: Any) -> Any:
    """
    Recursively drop null-valued entries from mappings.

    Mappings nested inside lists are stripped too; list elements themselves
    are positional and are kept as-is.
    """
    if isinstance(value, Mapping):
        return {
            key: strip_nulls(item)
            for key, item in value.items()
            if item is not None
        }
    if isinstance(value, (list, tuple)):
        return [strip_nulls(item) for item in value]
    return value


def check_number_literals(text: str) -> None:
    """
    Reject number literals that would not survive a parse and re-serialize.

    Raises:
        UnserializablePayloadError: On an integer outside the 64-bit range or a
            float that overflows to infinity
    """
    for match in _JSON_TOKEN.finditer(text):
        integer, fraction, exponent = match.groups()
        if integer is None:
            continue
        literal = match.group(0)
        if fraction is None and exponent is None:
            # Length check first: int() refuses very long digit strings
            if len(integer.lstrip("-")) > 20 or not INT_MIN <= int(literal) <= INT_MAX:
                raise UnserializablePayloadError(
                    f"Integer {literal} in request body exceeds the 64-bit range",
                    {"literal": literal}
                )
        elif not math.isfinite(float(literal)):
            raise UnserializablePayloadError(
                f"Number {literal} in request body overflows a float",
                {"literal": literal}
            )


def _check_floats(value: Any) -> None:
    # orjson writes NaN and infinity as null
    if isinstance(value, float) and not math.isfinite(value):
        raise UnserializablePayloadError(f"Request body holds non-finite number {value}")
    if isinstance(value, Mapping):
        for item in value.values():
            _check_floats(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _check_floats(item)


def canonicalize_body(body: Body) -> str:
    """
    Canonical string for a request body.

    Args:
        body: Raw JSON (bytes/str), an already-parsed mapping, or None

    Returns:
        Compact JSON with nulls stripped, or "" when there is no body

    Raises:
        UnserializablePayloadError: If body is not a JSON object, or holds a
            number that cannot be re-serialized unchanged
    """
    if body is None or (isinstance(body, (bytes, bytearray, str)) and not body):
        return ""

    if isinstance(body, (bytes, bytearray, str)):
        try:
            parsed: Optional[Any] = orjson.loads(body)
        except orjson.JSONDecodeError as e:
            raise UnserializablePayloadError(
                f"Request body is not valid JSON: {e.msg}", {"position": e.pos}
            ) from None
        text = body if isinstance(body, str) else bytes(body).decode("utf-8")
        check_number_literals(text)
    else:
        parsed = body
        _check_floats(parsed)

    if not isinstance(parsed, Mapping):
        raise UnserializablePayloadError(
            f"Request body must be a JSON object, got {type(parsed).__name__}"
        )

    try:
        return orjson.dumps(strip_nulls(parsed)).decode("utf-8")
    except TypeError as e:
        # orjson.JSONEncodeError subclasses TypeError
        raise UnserializablePayloadError(f"Request body cannot be serialized: {e}") from None
