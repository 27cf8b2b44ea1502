"""Store-wide settings such as the storefront theme."""

from __future__ import annotations

from datetime import datetime, timezone

from ..errors import ValidationError
from ..persistence.base import Document, StoreHandle

DEFAULT_SETTINGS: Document = {"_id": "store", "theme": "default"}


def get_store_settings(store: StoreHandle) -> Document:
    return store.get_settings() or dict(DEFAULT_SETTINGS)


def update_theme(store: StoreHandle, theme: str | None) -> str:
    if not theme:
        raise ValidationError("Theme is required")
    store.save_settings({"theme": theme, "updatedAt": datetime.now(timezone.utc).isoformat()})
    return theme
