"""
Numeric type utilities for Decimal precision.

Settlement-layer amounts must be bit-exact, so every helper here either
produces an exact result or raises. Nothing silently rounds.
"""

from typing import Any
from decimal import Context, Decimal, Inexact, InvalidOperation, Overflow, Underflow
import logging

from ..exceptions import InvalidDecimalLiteralError

logger = logging.getLogger(__name__)

# Enough digits for any product of two order fields scaled by a resolution.
# Inexact is trapped, so a result that would need more digits raises.
EXACT_PRECISION = 200

EXACT_CONTEXT = Context(
    prec=EXACT_PRECISION,
    Emax=999999,
    Emin=-999999,
    traps=[InvalidOperation, Inexact, Overflow, Underflow],
)

# Same precision, for operations whose rounding is deliberate (quantize, truncation)
ROUNDING_CONTEXT = Context(
    prec=EXACT_PRECISION,
    Emax=999999,
    Emin=-999999,
    traps=[InvalidOperation, Overflow],
)


def parse_decimal(value: Any, field_name: str = "value") -> Decimal:
    """
    Parse a finite decimal literal.

    Accepts str, int and Decimal. Floats are rejected since their binary
    representation is already lossy.

    Args:
        value: Literal to parse
        field_name: Field name for error messages

    Returns:
        Decimal value

    Raises:
        InvalidDecimalLiteralError: If value is not a finite decimal literal

    Examples:
        >>> parse_decimal("145.000600001")
        Decimal('145.000600001')
        >>> parse_decimal("1e-3", "price")
        Decimal('0.001')
    """
    if isinstance(value, bool) or value is None:
        raise InvalidDecimalLiteralError(
            f"Missing or invalid value for {field_name}: {value!r}",
            field=field_name, value=repr(value)
        )

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, str):
        try:
            if "_" in value:
                raise InvalidOperation(value)
            result = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidDecimalLiteralError(
                f"Invalid decimal literal for {field_name}: {value!r}",
                field=field_name, value=value
            ) from None
    else:
        raise InvalidDecimalLiteralError(
            f"{field_name} must be a decimal string, got {type(value).__name__}",
            field=field_name, value=repr(value)
        )

    if not result.is_finite():
        raise InvalidDecimalLiteralError(
            f"{field_name} must be finite, got {value!r}",
            field=field_name, value=str(value)
        )

    return result


def exact_multiply(a: Decimal, b: Decimal) -> Decimal:
    """
    Multiply two decimals without rounding.

    Raises:
        decimal.Inexact: If the product does not fit EXACT_PRECISION digits
    """
    return EXACT_CONTEXT.multiply(a, b)


def scale(amount: Decimal, exponent: int) -> Decimal:
    """Exact `amount * 10 ** exponent`."""
    return amount.scaleb(exponent, context=EXACT_CONTEXT)


def decimal_to_str(value: Decimal, strip: bool = True) -> str:
    """
    Convert Decimal to plain (non-scientific) string representation.

    Args:
        value: Decimal to convert
        strip: Strip trailing zeros (default: True)

    Returns:
        String representation

    Examples:
        >>> decimal_to_str(Decimal("100.50"))
        '100.5'
        >>> decimal_to_str(Decimal("1E+2"))
        '100'
    """
    s = format(value, "f")
    if strip and "." in s:
        s = s.rstrip("0").rstrip(".")
    return s
