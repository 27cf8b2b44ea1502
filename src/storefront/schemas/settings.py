"""Store settings schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class ThemeUpdate(BaseModel):
    theme: Optional[str] = None


class ThemeUpdateResponse(BaseModel):
    message: str
    theme: str
