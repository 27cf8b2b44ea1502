"""Payment endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ...config import Settings
from ...errors import StorefrontError
from ...persistence.base import StoreHandle
from ...schemas.payments import PaymentConfigResponse, PaymentRequest, PaymentResponse
from ...services.payments import PaymentGateway, process_payment
from ..deps import get_config, get_payment_gateway, get_store

router = APIRouter(prefix="/payments", tags=["payments"])

logger = logging.getLogger(__name__)


@router.post("/square", response_model=PaymentResponse, status_code=status.HTTP_200_OK)
def pay_with_square(
    payload: PaymentRequest,
    store: StoreHandle = Depends(get_store),
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    """Charge a card nonce produced by the Square web payments form."""
    try:
        return process_payment(store, gateway, payload)
    except StorefrontError as exc:
        logger.warning(f"Payment rejected ({exc.status_code}): {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"success": False, **exc.to_body()})
    except Exception as exc:
        logger.exception(f"Payment error: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "Payment processing failed"},
        )


@router.get("/config", response_model=PaymentConfigResponse, status_code=status.HTTP_200_OK)
def payment_config(config: Settings = Depends(get_config)) -> PaymentConfigResponse:
    return PaymentConfigResponse(
        squareApplicationId=config.square_application_id or "YOUR_APP_ID",
        locationId=config.square_location_id or "YOUR_LOCATION_ID",
    )
