"""Outbound order assembly."""

from .order_builder import OrderBuilder, OrderSigner

__all__ = ["OrderBuilder", "OrderSigner"]
