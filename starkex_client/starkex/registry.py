"""
Asset registry.

Static lookup tables mapping markets, assets and networks to the values the
settlement layer needs. Registries are immutable; extending one returns a copy.
"""

from dataclasses import dataclass, field
import re
from types import MappingProxyType
from typing import Mapping, Optional

from ..exceptions import UnknownAssetError, UnknownMarketError, UnknownNetworkError
from . import constants


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


HEX_ASSET_ID = re.compile(r"0x[0-9a-fA-F]+")


def _is_hex_id(value) -> bool:
    return isinstance(value, str) and HEX_ASSET_ID.fullmatch(value) is not None


@dataclass(frozen=True, eq=False)
class AssetRegistry:
    """
    Immutable market/asset/network lookup tables.

    Construction validates that every market's synthetic asset has both a
    resolution and an asset id.
    """
    synthetic_assets: Mapping[str, str] = field(
        default_factory=lambda: constants.SYNTHETIC_ASSET_MAP
    )
    resolutions: Mapping[str, int] = field(
        default_factory=lambda: constants.ASSET_RESOLUTION
    )
    synthetic_asset_ids: Mapping[str, str] = field(
        default_factory=lambda: constants.SYNTHETIC_ASSET_ID_MAP
    )
    collateral_asset_ids: Mapping[int, str] = field(
        default_factory=lambda: constants.COLLATERAL_ASSET_ID_BY_NETWORK_ID
    )
    collateral_asset: str = constants.COLLATERAL_ASSET

    def __post_init__(self):
        # Read-only copies
        object.__setattr__(self, "synthetic_assets", _frozen(self.synthetic_assets))
        object.__setattr__(self, "resolutions", _frozen(self.resolutions))
        object.__setattr__(self, "synthetic_asset_ids", _frozen(self.synthetic_asset_ids))
        object.__setattr__(self, "collateral_asset_ids", _frozen(self.collateral_asset_ids))

        if self.collateral_asset not in self.resolutions:
            raise UnknownAssetError(
                f"Collateral asset {self.collateral_asset} has no resolution",
                asset=self.collateral_asset,
            )

        for market, asset in self.synthetic_assets.items():
            if asset not in self.resolutions:
                raise UnknownAssetError(
                    f"Synthetic asset {asset} of market {market} has no resolution",
                    asset=asset,
                )
            if asset not in self.synthetic_asset_ids:
                raise UnknownAssetError(
                    f"Synthetic asset {asset} of market {market} has no asset id",
                    asset=asset,
                )

        for asset, resolution in self.resolutions.items():
            if not isinstance(resolution, int) or isinstance(resolution, bool) or resolution < 0:
                raise UnknownAssetError(
                    f"Resolution for {asset} must be a non-negative integer, got {resolution!r}",
                    asset=asset,
                )

        for asset, asset_id in self.synthetic_asset_ids.items():
            if not _is_hex_id(asset_id):
                raise UnknownAssetError(
                    f"Asset id for {asset} must be a 0x-prefixed hex string, got {asset_id!r}",
                    asset=asset,
                )

        for network_id, asset_id in self.collateral_asset_ids.items():
            if not _is_hex_id(asset_id):
                raise UnknownAssetError(
                    f"Collateral asset id for network {network_id} must be a 0x-prefixed "
                    f"hex string, got {asset_id!r}",
                    asset=self.collateral_asset,
                )

    def synthetic_asset_for(self, market: str) -> str:
        """Synthetic asset symbol traded in `market`."""
        try:
            return self.synthetic_assets[market]
        except KeyError:
            raise UnknownMarketError(f"Unknown market: {market}", market=market) from None

    def synthetic_asset_id_for(self, asset: str) -> str:
        """Settlement-layer asset id (hex string) of a synthetic asset."""
        try:
            return self.synthetic_asset_ids[asset]
        except KeyError:
            raise UnknownAssetError(f"Unknown synthetic asset: {asset}", asset=asset) from None

    def resolution_for(self, asset: str) -> int:
        """Quantum exponent of `asset`."""
        try:
            return self.resolutions[asset]
        except KeyError:
            raise UnknownAssetError(f"No resolution for asset: {asset}", asset=asset) from None

    def collateral_asset_id_for(self, network_id: int) -> str:
        """Collateral asset id (hex string) on `network_id`."""
        try:
            return self.collateral_asset_ids[network_id]
        except KeyError:
            raise UnknownNetworkError(
                f"Unknown network id: {network_id}", network_id=network_id
            ) from None

    def with_market(
        self,
        market: str,
        asset: str,
        resolution: int,
        asset_id: str,
        collateral_asset_ids: Optional[Mapping[int, str]] = None,
    ) -> "AssetRegistry":
        """
        Return a copy of this registry that also lists `market`.

        Args:
            market: Market symbol (e.g. "PEPE-USD")
            asset: Synthetic asset symbol (e.g. "PEPE")
            resolution: Quantum exponent of the asset
            asset_id: Settlement-layer asset id (hex string)
            collateral_asset_ids: Optional extra network -> collateral id entries

        Returns:
            New AssetRegistry
        """
        networks = dict(self.collateral_asset_ids)
        if collateral_asset_ids:
            networks.update(collateral_asset_ids)

        return AssetRegistry(
            synthetic_assets={**self.synthetic_assets, market: asset},
            resolutions={**self.resolutions, asset: resolution},
            synthetic_asset_ids={**self.synthetic_asset_ids, asset: asset_id},
            collateral_asset_ids=networks,
            collateral_asset=self.collateral_asset,
        )


DEFAULT_REGISTRY = AssetRegistry()
