"""
Configuration management for the StarkEx client.

Loads settings from environment variables with validation.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .starkex.constants import NETWORK_ID_MAINNET


class StarkexSettings(BaseSettings):
    """
    StarkEx client settings.

    Loads from environment variables with STARKEX_ prefix.
    """
    model_config = SettingsConfigDict(
        env_prefix="STARKEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # API
    api_host: str = Field(
        default="https://api.dydx.exchange",
        description="Exchange REST API host"
    )
    network_id: int = Field(default=NETWORK_ID_MAINNET, description="Ethereum network id")

    # API key credentials
    api_key: Optional[str] = Field(None, description="API key")
    api_passphrase: Optional[str] = Field(None, repr=False, description="API passphrase")
    api_secret: Optional[str] = Field(None, repr=False, description="API secret (base64)")

    # Authentication headers, e.g. "DYDX-" -> DYDX-SIGNATURE
    header_prefix: str = Field(default="", description="Auth header name prefix")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="JSON log output")

    # Metrics
    enable_metrics: bool = Field(default=False, description="Enable Prometheus metrics")
    metrics_port: int = Field(default=9090, ge=1024, le=65535, description="Metrics server port")

    def __repr__(self) -> str:
        """Safe repr without sensitive data."""
        return (
            f"StarkexSettings("
            f"api_host={self.api_host}, "
            f"network_id={self.network_id}, "
            f"api_key={self.api_key}"
            ")"
        )


def get_settings() -> StarkexSettings:
    """
    Get StarkEx settings.

    Returns:
        Validated settings instance
    """
    return StarkexSettings()
