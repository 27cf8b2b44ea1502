"""Payment request/response schemas."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class PaymentRequest(BaseModel):
    sourceId: Optional[str] = None
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    orderId: Optional[str] = None
    customerEmail: Optional[str] = None
    customerName: Optional[str] = None


class PaymentResponse(BaseModel):
    success: bool
    paymentId: str
    status: str
    message: str


class PaymentConfigResponse(BaseModel):
    squareApplicationId: str
    locationId: str
