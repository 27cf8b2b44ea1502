"""Distance-based shipping cost policy."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from ...config import Settings

Number = Union[Decimal, float, int, str]

CENT = Decimal("0.01")


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps binary float noise (e.g. 149.99) out of the comparison
    return Decimal(str(value))


def round_half_up(value: Number, places: int = 0) -> Decimal:
    exponent = Decimal(1).scaleb(-places)
    return to_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


@dataclass(slots=True, frozen=True)
class ShippingRates:
    base_rate: Decimal = Decimal("5.00")
    cost_per_mile: Decimal = Decimal("0.50")
    max_rate: Decimal = Decimal("50.00")
    free_shipping_threshold: Decimal = Decimal("150.00")

    @classmethod
    def from_settings(cls, config: Settings) -> "ShippingRates":
        return cls(
            base_rate=config.shipping_base_rate,
            cost_per_mile=config.shipping_cost_per_mile,
            max_rate=config.shipping_max_rate,
            free_shipping_threshold=config.free_shipping_threshold,
        )


def calculate_shipping_cost(
    distance: Number,
    subtotal: Number | None,
    rates: ShippingRates | None = None,
) -> Decimal:
    """Return the shipping cost for an order, rounded to the cent.

    Orders whose subtotal reaches the free-shipping threshold ship free.
    Otherwise the cost is the base rate plus a per-mile charge, capped at
    the maximum rate.
    """

    rates = rates or ShippingRates()
    if subtotal is not None and to_decimal(subtotal) >= rates.free_shipping_threshold:
        return Decimal("0.00")

    cost = rates.base_rate + to_decimal(distance) * rates.cost_per_mile
    if cost > rates.max_rate:
        cost = rates.max_rate
    return round_half_up(cost, 2)
