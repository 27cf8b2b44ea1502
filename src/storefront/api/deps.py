"""Request-scoped collaborators resolved from application state."""

from __future__ import annotations

from fastapi import Request

from ..config import Settings, settings
from ..persistence.base import StoreHandle, UnavailableStore
from ..services.payments.square import PaymentGateway
from ..services.shipping.service import ShippingEstimator


def get_config(request: Request) -> Settings:
    return getattr(request.app.state, "config", None) or settings


def get_store(request: Request) -> StoreHandle:
    store = getattr(request.app.state, "store", None)
    return store if store is not None else UnavailableStore()


def get_shipping_estimator(request: Request) -> ShippingEstimator:
    return request.app.state.shipping_estimator


def get_payment_gateway(request: Request) -> PaymentGateway:
    return request.app.state.payment_gateway
