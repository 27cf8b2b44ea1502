"""Shipping estimation endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from ...config import Settings
from ...errors import StorefrontError, UnexpectedError
from ...schemas.shipping import ShippingRequest, ShippingResponse
from ...services.shipping.service import ShippingEstimator, build_destination
from ..deps import get_config, get_shipping_estimator

router = APIRouter(prefix="/shipping", tags=["shipping"])

logger = logging.getLogger(__name__)


@router.post("/calculate", response_model=ShippingResponse, status_code=status.HTTP_200_OK)
def calculate_shipping(
    payload: ShippingRequest,
    estimator: ShippingEstimator = Depends(get_shipping_estimator),
    config: Settings = Depends(get_config),
) -> ShippingResponse:
    """Quote shipping from the store to the given address.

    Incomplete addresses are rejected before any geocoding happens.
    """
    try:
        destination = build_destination(
            payload.address,
            payload.city,
            payload.state,
            payload.zipCode,
            payload.country,
            default_country=config.default_country,
        )
        quote = estimator.quote(destination, payload.subtotal)
        return ShippingResponse(
            distance=quote.distance_miles,
            shippingCost=float(quote.cost),
            message=quote.message,
            approximateLocation=quote.approximate,
        )
    except StorefrontError:
        raise
    except Exception as exc:
        logger.exception(f"Shipping calculation error: {exc}")
        raise UnexpectedError(str(exc)) from exc
