"""Shipping quote request/response schemas."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class ShippingRequest(BaseModel):
    address: Optional[str] = Field(default=None, description="Street address of the destination.")
    city: Optional[str] = None
    state: Optional[str] = None
    zipCode: Optional[str] = None
    country: Optional[str] = Field(default=None, description="Defaults to the configured country.")
    subtotal: Optional[Decimal] = Field(default=None, description="Order subtotal; missing counts as zero.")


class ShippingResponse(BaseModel):
    distance: float
    shippingCost: float
    message: str
    approximateLocation: bool = False
