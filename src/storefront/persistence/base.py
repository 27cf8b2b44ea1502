"""Store handle contract shared by request handlers."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import Any

from ..errors import UnavailableError, ValidationError

Document = dict[str, Any]


def parse_document_id(value: str, kind: str) -> str:
    """Return the canonical form of ``value`` or raise when it is not a valid id."""
    try:
        return str(uuid.UUID(str(value)))
    except (ValueError, TypeError, AttributeError) as exc:
        raise ValidationError(f"Invalid {kind} ID") from exc


def is_document_id(value: Any) -> bool:
    try:
        uuid.UUID(str(value))
    except (ValueError, TypeError, AttributeError):
        return False
    return True


class StoreHandle(ABC):
    """Collections backing the storefront.

    Update and delete methods return ``False`` when no document matched.
    """

    connected: bool = True

    @abstractmethod
    def list_products(self) -> list[Document]:
        raise NotImplementedError

    @abstractmethod
    def create_product(self, product: Document) -> Document:
        raise NotImplementedError

    @abstractmethod
    def update_product(self, product_id: str, fields: Document) -> bool:
        raise NotImplementedError

    @abstractmethod
    def delete_product(self, product_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def create_order(self, order: Document) -> Document:
        raise NotImplementedError

    @abstractmethod
    def list_orders(self, status: str | None = None) -> list[Document]:
        """Orders sorted newest first, optionally filtered by status."""
        raise NotImplementedError

    @abstractmethod
    def update_order(self, order_id: str, fields: Document) -> bool:
        raise NotImplementedError

    @abstractmethod
    def delete_order(self, order_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_settings(self) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def save_settings(self, fields: Document) -> Document:
        raise NotImplementedError


class UnavailableStore(StoreHandle):
    """Store handle used until (or unless) the database connects."""

    connected = False

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason

    def _fail(self) -> Any:
        raise UnavailableError()

    def list_products(self) -> list[Document]:
        return self._fail()

    def create_product(self, product: Document) -> Document:
        return self._fail()

    def update_product(self, product_id: str, fields: Document) -> bool:
        return self._fail()

    def delete_product(self, product_id: str) -> bool:
        return self._fail()

    def create_order(self, order: Document) -> Document:
        return self._fail()

    def list_orders(self, status: str | None = None) -> list[Document]:
        return self._fail()

    def update_order(self, order_id: str, fields: Document) -> bool:
        return self._fail()

    def delete_order(self, order_id: str) -> bool:
        return self._fail()

    def get_settings(self) -> Document | None:
        return self._fail()

    def save_settings(self, fields: Document) -> Document:
        return self._fail()
