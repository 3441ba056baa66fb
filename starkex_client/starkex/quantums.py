"""
Conversion between human-readable amounts and settlement-layer quantums.

quantums = amount * 10 ** resolution(asset)

The settlement layer only accepts integers, and the rounding direction has
financial meaning: collateral debited from a buyer rounds up, collateral
credited to a seller rounds down, and prices must convert exactly.
"""

from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal, Inexact, Overflow
from typing import Any, Optional
import logging

from ..exceptions import NotAMultipleOfQuantumError, ValidationError
from ..utils.numeric import EXACT_CONTEXT, decimal_to_str, parse_decimal, scale
from .registry import DEFAULT_REGISTRY, AssetRegistry

logger = logging.getLogger(__name__)


def _scaled(amount: Any, asset: str, registry: Optional[AssetRegistry]) -> tuple[Decimal, int]:
    registry = registry or DEFAULT_REGISTRY
    resolution = registry.resolution_for(asset)
    value = parse_decimal(amount, "amount")
    try:
        return scale(value, resolution), resolution
    except (Inexact, Overflow):
        raise ValidationError(
            f"Amount {decimal_to_str(value)} exceeds supported precision",
            {"amount": str(value), "asset": asset},
        ) from None


def _integral(value: Decimal, rounding: str) -> int:
    return int(value.to_integral_value(rounding=rounding, context=EXACT_CONTEXT))


def to_quantums_exact(amount: Any, asset: str, registry: Optional[AssetRegistry] = None) -> int:
    """
    Convert an amount to quantums, requiring an integer result.

    Args:
        amount: Human-readable amount (Decimal, int or decimal string)
        asset: Asset symbol whose resolution applies
        registry: Asset registry (default tables if None)

    Returns:
        Quantum count

    Raises:
        NotAMultipleOfQuantumError: If amount is not a whole number of quantums
        UnknownAssetError: If asset has no resolution

    Examples:
        >>> to_quantums_exact(Decimal("145.000600001"), "ETH")
        145000600001
    """
    scaled, resolution = _scaled(amount, asset, registry)
    quantums = _integral(scaled, ROUND_FLOOR)

    if scaled != quantums:
        raise NotAMultipleOfQuantumError(
            f"Amount {decimal_to_str(parse_decimal(amount, 'amount'))} is not a multiple "
            f"of the quantum size 1e-{resolution} for {asset}",
            amount=str(amount),
            asset=asset,
            resolution=resolution,
        )
    return quantums


def to_quantums_round_up(amount: Any, asset: str, registry: Optional[AssetRegistry] = None) -> int:
    """
    Convert an amount to quantums, taking the ceiling.

    Examples:
        >>> to_quantums_round_up(Decimal("145.0006000011"), "ETH")
        145000600002
    """
    scaled, _ = _scaled(amount, asset, registry)
    return _integral(scaled, ROUND_CEILING)


def to_quantums_round_down(amount: Any, asset: str, registry: Optional[AssetRegistry] = None) -> int:
    """
    Convert an amount to quantums, taking the floor.

    Examples:
        >>> to_quantums_round_down(Decimal("145.0006000001"), "ETH")
        145000600000
    """
    scaled, _ = _scaled(amount, asset, registry)
    return _integral(scaled, ROUND_FLOOR)


def from_quantums(quantums: int, asset: str, registry: Optional[AssetRegistry] = None) -> Decimal:
    """Convert a quantum count back to a human-readable Decimal."""
    registry = registry or DEFAULT_REGISTRY
    return scale(Decimal(quantums), -registry.resolution_for(asset))
