"""Order lifecycle endpoints."""

from __future__ import annotations

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, status

from ...errors import StorefrontError, UnexpectedError
from ...persistence.base import StoreHandle
from ...schemas.orders import OrderStatusUpdate
from ...services import orders as order_service
from ..deps import get_store

router = APIRouter(prefix="/orders", tags=["orders"])

logger = logging.getLogger(__name__)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_order(payload: dict[str, Any] = Body(...), store: StoreHandle = Depends(get_store)) -> dict:
    try:
        return order_service.create_order(store, payload)
    except StorefrontError:
        raise
    except Exception as exc:
        logger.exception(f"Order creation error: {exc}")
        raise UnexpectedError(str(exc)) from exc


@router.get("", status_code=status.HTTP_200_OK)
def list_orders(store: StoreHandle = Depends(get_store)) -> List[dict]:
    """All orders, newest first."""
    try:
        return order_service.list_orders(store)
    except StorefrontError:
        raise
    except Exception as exc:
        logger.exception(f"Error fetching orders: {exc}")
        raise UnexpectedError(str(exc)) from exc


@router.get("/status/{order_status}", status_code=status.HTTP_200_OK)
def list_orders_by_status(order_status: str, store: StoreHandle = Depends(get_store)) -> List[dict]:
    try:
        return order_service.list_orders(store, status=order_status)
    except StorefrontError:
        raise
    except Exception as exc:
        logger.exception(f"Error fetching {order_status} orders: {exc}")
        raise UnexpectedError(str(exc)) from exc


@router.put("/{order_id}/status", status_code=status.HTTP_200_OK)
def update_order_status(
    order_id: str,
    payload: OrderStatusUpdate,
    store: StoreHandle = Depends(get_store),
) -> dict:
    try:
        order_service.update_order_status(store, order_id, payload.status)
        return {"message": "Order status updated"}
    except StorefrontError:
        raise
    except Exception as exc:
        logger.exception(f"Error updating order {order_id}: {exc}")
        raise UnexpectedError(str(exc)) from exc


@router.delete("/{order_id}", status_code=status.HTTP_200_OK)
def delete_order(order_id: str, store: StoreHandle = Depends(get_store)) -> dict:
    try:
        order_service.delete_order(store, order_id)
        return {"message": "Order deleted"}
    except StorefrontError:
        raise
    except Exception as exc:
        logger.exception(f"Error deleting order {order_id}: {exc}")
        raise UnexpectedError(str(exc)) from exc
