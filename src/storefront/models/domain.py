"""Domain models for shipping quotes and payments."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(slots=True, frozen=True)
class GeoCoordinate:
    latitude: float
    longitude: float
    approximate: bool = False


@dataclass(slots=True, frozen=True)
class StoreLocation:
    """Fixed origin point from which shipping distance is measured."""

    latitude: float
    longitude: float
    address: str

    @property
    def coordinate(self) -> GeoCoordinate:
        return GeoCoordinate(self.latitude, self.longitude)


@dataclass(slots=True)
class DestinationAddress:
    street: str
    city: str
    state: str
    zip_code: str
    country: str = "USA"

    def formatted(self) -> str:
        return f"{self.street}, {self.city}, {self.state} {self.zip_code}, {self.country}"


@dataclass(slots=True, frozen=True)
class ShippingQuote:
    distance_miles: float
    cost: Decimal
    message: str
    approximate: bool = False


@dataclass(slots=True, frozen=True)
class PaymentResult:
    payment_id: str
    status: str
    receipt_url: Optional[str] = None

    @property
    def completed(self) -> bool:
        return self.status in {"COMPLETED", "APPROVED"}
