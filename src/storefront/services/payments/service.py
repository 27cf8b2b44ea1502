"""Card payment submission and order bookkeeping."""

from __future__ import annotations

import logging

from ...errors import PaymentNotCompletedError, ValidationError
from ...persistence.base import StoreHandle, is_document_id, parse_document_id
from ...schemas.payments import PaymentRequest
from ..orders import mark_order_paid
from ..shipping.pricing import to_decimal
from .square import PaymentGateway

logger = logging.getLogger(__name__)


def process_payment(store: StoreHandle, gateway: PaymentGateway, payload: PaymentRequest) -> dict:
    """Charge the card for an order and record the payment on it.

    The order is only touched once the processor reports the payment as
    completed or approved.
    """

    if not payload.sourceId or not payload.amount or not payload.orderId:
        raise ValidationError("Missing required payment fields")

    result = gateway.submit_payment(
        source_id=payload.sourceId,
        amount=to_decimal(payload.amount),
        currency=payload.currency or "USD",
        idempotency_key=payload.orderId,
        customer_email=payload.customerEmail,
        note=f"Order {payload.orderId}" + (f" for {payload.customerName}" if payload.customerName else ""),
    )

    if not result.completed:
        logger.warning(f"Payment {result.payment_id} for order {payload.orderId} not completed: {result.status}")
        raise PaymentNotCompletedError(f"Payment {result.status}", extra={"message": f"Payment {result.status}"})

    logger.info(f"Payment {result.payment_id} completed for order {payload.orderId}")
    _record_payment(store, payload.orderId, result.payment_id)

    return {
        "success": True,
        "paymentId": result.payment_id,
        "status": result.status,
        "message": "Payment processed successfully",
    }


def _record_payment(store: StoreHandle, order_id: str, payment_id: str) -> None:
    if not store.connected:
        logger.warning(f"Database not connected; payment {payment_id} not recorded on order {order_id}")
        return
    if not is_document_id(order_id):
        logger.warning(f"Order id {order_id!r} is not a stored order; payment {payment_id} not recorded")
        return
    order_id = parse_document_id(order_id, "order")
    try:
        if not mark_order_paid(store, order_id, payment_id):
            logger.warning(f"Order {order_id} not found while recording payment {payment_id}")
    except Exception:
        # the charge already went through; keep the success response
        logger.exception(f"Failed to record payment {payment_id} on order {order_id}")
