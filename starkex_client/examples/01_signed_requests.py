"""
Example 1: Signed REST Requests and Order Payloads

Shows how to:
- Load API credentials from STARKEX_* environment variables
- Sign private REST calls through a requests.Session
- Build the settlement-layer payload and message for an order

The settlement-layer signature itself comes from your own Stark key signer.
"""

from datetime import datetime, timedelta, timezone

import requests

from starkex_client import (
    Metrics,
    OrderBuilder,
    OrderRequest,
    RequestAuthenticator,
    Side,
    StarkexRequestAuth,
    get_settings,
    to_starkware_message,
)
from starkex_client.logging_config import setup_logging_from_settings


def main():
    """Signed request example."""
    settings = get_settings()
    setup_logging_from_settings(settings)

    metrics = Metrics(enabled=settings.enable_metrics)
    if settings.enable_metrics:
        metrics.start_server(settings.metrics_port)

    # 1. Sign private REST calls
    if settings.api_key:
        authenticator = RequestAuthenticator.from_settings(settings, metrics=metrics)
        print(f"Authenticator: {authenticator!r}")

        session = requests.Session()
        session.auth = StarkexRequestAuth(authenticator, header_prefix=settings.header_prefix)

        response = session.get(f"{settings.api_host}/v3/accounts", timeout=10)
        print(f"GET /v3/accounts -> {response.status_code}")
    else:
        print("STARKEX_API_KEY not set, skipping REST call\n")

    # 2. Build an order payload
    order = OrderRequest(
        market="ETH-USD",
        side=Side.BUY,
        size="0.5",
        price="1800.5",
        limit_fee="0.0005",
        expiration=datetime.now(timezone.utc) + timedelta(days=1),
        client_id="example-order-1",
    )
    builder = OrderBuilder(network_id=settings.network_id, position_id="12345")

    payload = builder.build_payload(order)
    print("Order signature payload:")
    for name, value in payload.to_wire().items():
        print(f"  {name}: {value}")

    message = to_starkware_message(payload)
    print(f"\npart_1: {message.part_1:#x}")
    print(f"part_2: {message.part_2:#x}")
    print("\nSign message.hash_with(pedersen_hash) with your Stark key, then:")
    print("  body = builder.build_order(order.model_copy(update={'signature': sig}))")


if __name__ == "__main__":
    main()
