"""Store settings endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from ...errors import StorefrontError, UnexpectedError
from ...persistence.base import StoreHandle
from ...schemas.settings import ThemeUpdate, ThemeUpdateResponse
from ...services import store_settings as settings_service
from ..deps import get_store

router = APIRouter(prefix="/settings", tags=["settings"])

logger = logging.getLogger(__name__)


@router.get("", status_code=status.HTTP_200_OK)
def get_settings(store: StoreHandle = Depends(get_store)) -> dict:
    try:
        return settings_service.get_store_settings(store)
    except StorefrontError:
        raise
    except Exception as exc:
        logger.exception(f"Error loading store settings: {exc}")
        raise UnexpectedError(str(exc)) from exc


@router.put("/theme", response_model=ThemeUpdateResponse, status_code=status.HTTP_200_OK)
def update_theme(payload: ThemeUpdate, store: StoreHandle = Depends(get_store)) -> ThemeUpdateResponse:
    try:
        theme = settings_service.update_theme(store, payload.theme)
        return ThemeUpdateResponse(message="Theme updated successfully", theme=theme)
    except StorefrontError:
        raise
    except Exception as exc:
        logger.exception(f"Error updating theme: {exc}")
        raise UnexpectedError(str(exc)) from exc
