"""Storefront backend: catalog, orders, settings, shipping quotes and payments."""

__version__ = "1.0.0"
