"""Health endpoints."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status

from ...persistence.base import StoreHandle
from ...schemas.health import HealthResponse
from ..deps import get_store

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK)
def health_root(store: StoreHandle = Depends(get_store)) -> HealthResponse:
    """Liveness check that also reports whether the database is connected."""
    return HealthResponse(
        status="Server is running",
        db="Connected" if store.connected else "Not Connected",
        timestamp=datetime.now(timezone.utc),
    )
