"""
Order builder.

Assembles the outbound order body for POST /v3/orders: builds the StarkEx
payload, obtains the settlement-layer signature from an external signer and
attaches it as the `signature` field.
"""

import logging
from typing import Any, Callable, Dict, Optional

from ..exceptions import MissingSignerError
from ..models import OrderRequest, OrderSignaturePayload, OrderSigningRequest
from ..starkex.order import OrderSignaturePayloadBuilder

logger = logging.getLogger(__name__)

# Settlement-layer signing primitive: payload -> signature string
OrderSigner = Callable[[OrderSignaturePayload], str]


class OrderBuilder:
    """
    Builds signed order bodies for one trading account.

    Handles:
    - OrderRequest -> OrderSigningRequest translation
    - Payload construction (quantums, fee, nonce, expiration)
    - Settlement-layer signature via an injected signer
    """

    def __init__(
        self,
        network_id: int,
        position_id: str,
        signer: Optional[OrderSigner] = None,
        payload_builder: Optional[OrderSignaturePayloadBuilder] = None
    ):
        """
        Initialize order builder.

        Args:
            network_id: Ethereum network id
            position_id: Settlement-layer position id of the account
            signer: Callable producing the settlement-layer signature of a payload
            payload_builder: Payload builder (default registry if None)
        """
        self.network_id = network_id
        self.position_id = str(position_id)
        self.signer = signer
        self.payload_builder = payload_builder or OrderSignaturePayloadBuilder()

    def signing_request(self, order: OrderRequest) -> OrderSigningRequest:
        """Translate an order body into a signing request."""
        return OrderSigningRequest(
            network_id=self.network_id,
            market=order.market,
            side=order.side,
            position_id=self.position_id,
            size=order.size,
            price=order.price,
            limit_fee=order.limit_fee,
            client_id=order.client_id,
            expiration_epoch_seconds=order.expiration_epoch_seconds,
        )

    def build_payload(self, order: OrderRequest) -> OrderSignaturePayload:
        """Settlement-layer payload for an order."""
        return self.payload_builder.build(self.signing_request(order))

    def build_order(self, order: OrderRequest) -> Dict[str, Any]:
        """
        Build the signed order body.

        A signature already present on `order` is kept as-is; otherwise the
        configured signer signs the payload.

        Args:
            order: Order request

        Returns:
            Order body dict ready for submission

        Raises:
            MissingSignerError: If order has no signature and no signer is configured
            ValidationError: If order parameters are invalid
            ConfigurationError: If market or network is unknown
        """
        if not order.signature and self.signer is None:
            raise MissingSignerError(
                "No signature provided and no settlement-layer signer configured"
            )

        # Validated even when a signature is supplied
        payload = self.build_payload(order)

        signature = order.signature
        if not signature:
            signature = self.signer(payload)

        body = order.model_copy(update={"signature": signature}).to_body()

        logger.info(
            f"Built order: {order.side.value} {order.size} {order.market} @ {order.price} "
            f"(client_id={order.client_id}, nonce={payload.nonce})"
        )
        return body
