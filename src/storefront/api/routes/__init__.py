"""Route group exports."""

from . import health, orders, payments, products, shipping, store_settings

__all__ = ["health", "products", "orders", "store_settings", "shipping", "payments"]
