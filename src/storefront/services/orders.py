"""Order lifecycle operations."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any

from ..errors import NotFoundError, ValidationError
from ..persistence.base import Document, StoreHandle, parse_document_id

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "pending"


def generate_order_number() -> str:
    return f"ORD-{int(time.time() * 1000)}"


def create_order(store: StoreHandle, payload: dict[str, Any]) -> Document:
    order = {key: value for key, value in payload.items() if key != "_id"}
    if not order.get("orderNumber"):
        order["orderNumber"] = generate_order_number()
    order.setdefault("createdAt", datetime.now(timezone.utc).isoformat())
    order.setdefault("status", DEFAULT_STATUS)

    logger.debug(f"Received order: {order}")
    created = store.create_order(order)
    logger.info(f"New order received: {order.get('customerName')} - Order ID: {created.get('_id')}")
    return created


def list_orders(store: StoreHandle, status: str | None = None) -> list[Document]:
    return store.list_orders(status=status)


def update_order_status(store: StoreHandle, order_id: str, status: str | None) -> None:
    order_id = parse_document_id(order_id, "order")
    if not status:
        raise ValidationError("Status is required")

    fields = {"status": status, "updatedAt": datetime.now(timezone.utc).isoformat()}
    if not store.update_order(order_id, fields):
        raise NotFoundError("Order not found")


def delete_order(store: StoreHandle, order_id: str) -> None:
    order_id = parse_document_id(order_id, "order")
    if not store.delete_order(order_id):
        raise NotFoundError("Order not found")


def mark_order_paid(store: StoreHandle, order_id: str, payment_id: str, method: str = "square") -> bool:
    fields = {
        "paymentStatus": "completed",
        "paymentId": payment_id,
        "paymentMethod": method,
        "updatedAt": datetime.now(timezone.utc).isoformat(),
    }
    return store.update_order(order_id, fields)
