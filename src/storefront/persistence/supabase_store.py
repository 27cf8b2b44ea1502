"""Supabase-backed store for products, orders and settings."""

from __future__ import annotations

import logging
from typing import Any, Callable

from supabase import Client

from ..db.supabase import get_supabase_client
from .base import Document, StoreHandle, UnavailableStore

logger = logging.getLogger(__name__)

SETTINGS_ID = "store"

# document field -> table column
PRODUCT_COLUMNS = {
    "name": "name",
    "description": "description",
    "price": "price",
    "emoji": "emoji",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}
ORDER_COLUMNS = {
    "orderNumber": "order_number",
    "status": "status",
    "customerName": "customer_name",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "paymentStatus": "payment_status",
    "paymentId": "payment_id",
    "paymentMethod": "payment_method",
}
SETTINGS_COLUMNS = {
    "theme": "theme",
    "updatedAt": "updated_at",
}


def _to_row(document: Document, columns: dict[str, str], extra_column: str | None = None) -> dict[str, Any]:
    row: dict[str, Any] = {}
    extras: dict[str, Any] = {}
    for key, value in document.items():
        if key == "_id":
            continue
        if key in columns:
            row[columns[key]] = value
        else:
            extras[key] = value
    if extra_column is not None:
        row[extra_column] = extras
    return row


def _to_document(row: dict[str, Any], columns: dict[str, str], extra_column: str | None = None) -> Document:
    document: Document = {}
    if extra_column is not None:
        document.update(row.get(extra_column) or {})
    document["_id"] = row.get("id")
    for key, column in columns.items():
        value = row.get(column)
        if value is not None:
            document[key] = value
    return document


class SupabaseStore(StoreHandle):
    """Store handle over three Supabase tables.

    Orders are free-form documents: known fields live in dedicated columns
    so they can be filtered and sorted, everything else in ``details`` (JSONB).
    """

    connected = True

    def __init__(self, client: Client) -> None:
        self.client = client

    # products

    def list_products(self) -> list[Document]:
        response = self.client.table("products").select("*").order("created_at").execute()
        products = [_to_document(row, PRODUCT_COLUMNS) for row in (response.data or [])]
        logger.info(f"Fetched {len(products)} products")
        return products

    def create_product(self, product: Document) -> Document:
        response = self.client.table("products").insert(_to_row(product, PRODUCT_COLUMNS)).execute()
        return _to_document(response.data[0], PRODUCT_COLUMNS)

    def update_product(self, product_id: str, fields: Document) -> bool:
        return self._update("products", product_id, _to_row(fields, PRODUCT_COLUMNS))

    def delete_product(self, product_id: str) -> bool:
        return self._delete("products", product_id)

    # orders

    def create_order(self, order: Document) -> Document:
        row = _to_row(order, ORDER_COLUMNS, extra_column="details")
        response = self.client.table("orders").insert(row).execute()
        return _to_document(response.data[0], ORDER_COLUMNS, extra_column="details")

    def list_orders(self, status: str | None = None) -> list[Document]:
        query = self.client.table("orders").select("*")
        if status is not None:
            query = query.eq("status", status)
        response = query.order("created_at", desc=True).execute()
        return [_to_document(row, ORDER_COLUMNS, extra_column="details") for row in (response.data or [])]

    def update_order(self, order_id: str, fields: Document) -> bool:
        unknown = [key for key in fields if key not in ORDER_COLUMNS]
        if unknown:
            raise ValueError(f"Cannot update order fields: {', '.join(sorted(unknown))}")
        return self._update("orders", order_id, _to_row(fields, ORDER_COLUMNS))

    def delete_order(self, order_id: str) -> bool:
        return self._delete("orders", order_id)

    # settings

    def get_settings(self) -> Document | None:
        response = self.client.table("settings").select("*").eq("id", SETTINGS_ID).limit(1).execute()
        if not response.data:
            return None
        return _to_document(response.data[0], SETTINGS_COLUMNS)

    def save_settings(self, fields: Document) -> Document:
        row = {"id": SETTINGS_ID, **_to_row(fields, SETTINGS_COLUMNS)}
        response = self.client.table("settings").upsert(row).execute()
        return _to_document(response.data[0] if response.data else row, SETTINGS_COLUMNS)

    # lifecycle

    def verify(self) -> None:
        """Touch every table once so a missing table fails at startup."""
        for table in ("products", "orders", "settings"):
            self.client.table(table).select("id").limit(1).execute()

    def ensure_default_settings(self) -> None:
        if self.get_settings() is None:
            self.client.table("settings").insert({"id": SETTINGS_ID, "theme": "default"}).execute()
            logger.info("Initialized store settings")

    def _update(self, table: str, document_id: str, row: dict[str, Any]) -> bool:
        if not row:
            # nothing to set; report whether the document exists
            response = self.client.table(table).select("id").eq("id", document_id).limit(1).execute()
            return bool(response.data)
        response = self.client.table(table).update(row).eq("id", document_id).execute()
        return bool(response.data)

    def _delete(self, table: str, document_id: str) -> bool:
        response = self.client.table(table).delete().eq("id", document_id).execute()
        return bool(response.data)


def connect_store(client_factory: Callable[[], Client | None] = get_supabase_client) -> StoreHandle:
    """Connect to Supabase and return a ready store, or the unavailable variant."""
    logger.info("Attempting to connect to Supabase...")
    client = client_factory()
    if client is None:
        logger.warning("Server will continue without database - API calls will return 503")
        return UnavailableStore(reason="not configured")

    store = SupabaseStore(client)
    try:
        store.verify()
        store.ensure_default_settings()
    except Exception as exc:
        logger.error(f"Supabase connection failed: {exc}")
        logger.warning("Server will continue without database - API calls will return 503")
        return UnavailableStore(reason=str(exc))

    logger.info("Connected to Supabase; collections verified")
    return store
