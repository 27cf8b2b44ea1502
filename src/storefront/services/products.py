"""Product catalog operations."""

from __future__ import annotations

from datetime import datetime, timezone

from ..errors import NotFoundError, ValidationError
from ..persistence.base import Document, StoreHandle, parse_document_id
from ..schemas.products import ProductCreate, ProductUpdate

DEFAULT_EMOJI = "🎨"


def list_products(store: StoreHandle) -> list[Document]:
    return store.list_products()


def create_product(store: StoreHandle, payload: ProductCreate) -> Document:
    if not payload.name or not payload.description or payload.price is None:
        raise ValidationError("Missing required fields")

    product = {
        "name": payload.name,
        "description": payload.description,
        "price": payload.price,
        "emoji": payload.emoji or DEFAULT_EMOJI,
        "createdAt": datetime.now(timezone.utc).isoformat(),
    }
    return store.create_product(product)


def update_product(store: StoreHandle, product_id: str, payload: ProductUpdate) -> None:
    product_id = parse_document_id(product_id, "product")

    fields: Document = {}
    if payload.name:
        fields["name"] = payload.name
    if payload.description:
        fields["description"] = payload.description
    if payload.price is not None:
        fields["price"] = payload.price
    if payload.emoji:
        fields["emoji"] = payload.emoji

    if not store.update_product(product_id, fields):
        raise NotFoundError("Product not found")


def delete_product(store: StoreHandle, product_id: str) -> None:
    product_id = parse_document_id(product_id, "product")
    if not store.delete_product(product_id):
        raise NotFoundError("Product not found")
