"""Shipping quote assembly: resolve destination, measure distance, price it."""

from __future__ import annotations

import logging

from ...errors import AddressResolutionError, ValidationError
from ...models.domain import DestinationAddress, ShippingQuote, StoreLocation
from ..geospatial import distance_between
from .geocoding import Geocoder
from .pricing import Number, ShippingRates, calculate_shipping_cost, round_half_up

logger = logging.getLogger(__name__)


def build_destination(
    street: str | None,
    city: str | None,
    state: str | None,
    zip_code: str | None,
    country: str | None = None,
    default_country: str = "USA",
) -> DestinationAddress:
    if not street or not city or not state or not zip_code:
        raise ValidationError("Incomplete shipping address")
    return DestinationAddress(
        street=street,
        city=city,
        state=state,
        zip_code=zip_code,
        country=country or default_country,
    )


class ShippingEstimator:
    def __init__(self, store: StoreLocation, geocoder: Geocoder, rates: ShippingRates | None = None) -> None:
        self.store = store
        self.geocoder = geocoder
        self.rates = rates or ShippingRates()

    def quote(self, destination: DestinationAddress, subtotal: Number | None = None) -> ShippingQuote:
        full_address = destination.formatted()
        coords = self.geocoder.resolve(full_address)
        if coords is None:
            logger.warning(f"Unable to validate shipping address '{full_address}'")
            raise AddressResolutionError()

        distance = distance_between(self.store.coordinate, coords)
        cost = calculate_shipping_cost(distance, subtotal, self.rates)

        if cost == 0:
            message = "Free shipping!"
        else:
            message = f"Shipping for {int(round_half_up(distance))} miles"

        if coords.approximate:
            logger.warning(
                f"Shipping quote for '{full_address}' uses approximate coordinates: {distance:.1f} miles, cost {cost}"
            )

        return ShippingQuote(
            distance_miles=float(round_half_up(distance, 1)),
            cost=cost,
            message=message,
            approximate=coords.approximate,
        )
