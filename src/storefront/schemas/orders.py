"""Order request schemas. Orders themselves are free-form documents."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class OrderStatusUpdate(BaseModel):
    status: Optional[str] = None
