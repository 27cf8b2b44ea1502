"""Shipping estimation services."""

from .geocoding import Geocoder, GoogleGeocoder
from .pricing import ShippingRates, calculate_shipping_cost
from .service import ShippingEstimator, build_destination

__all__ = [
    "Geocoder",
    "GoogleGeocoder",
    "ShippingEstimator",
    "ShippingRates",
    "build_destination",
    "calculate_shipping_cost",
]
