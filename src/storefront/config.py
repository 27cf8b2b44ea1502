"""Application configuration and settings management."""

from decimal import Decimal
from pathlib import Path
from typing import Annotated, Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Storefront API"
    api_prefix: str = "/api"
    host: str = "0.0.0.0"
    port: int = Field(default=5000, ge=1, le=65535)
    log_level: str = Field(default="INFO", description="Root log level used by `python -m storefront`.")
    static_root: Optional[Path] = Field(
        default=Path("public"),
        description="Directory holding the storefront pages (index.html, admin.html, assets).",
    )
    index_document: str = "index.html"
    frontend_allowed_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=("*",),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Store location (origin of every shipping quote)
    store_address: str = "339873 E US 62 Meeker OK 74855"
    store_lat: float = Field(default=35.8456, ge=-90.0, le=90.0)
    store_lng: float = Field(default=-103.3181, ge=-180.0, le=180.0)

    # Shipping rates
    shipping_base_rate: Decimal = Field(default=Decimal("5.00"), ge=0)
    shipping_cost_per_mile: Decimal = Field(default=Decimal("0.50"), ge=0)
    shipping_max_rate: Decimal = Field(default=Decimal("50.00"), ge=0)
    free_shipping_threshold: Decimal = Field(
        default=Decimal("150.00"),
        ge=0,
        description="Order subtotal at or above which shipping is free.",
    )

    # Geocoding
    google_maps_api_key: Optional[str] = Field(
        default=None,
        description="Google Maps Geocoding API key. Without it quotes use the fallback coordinate.",
    )
    geocoding_url: str = "https://maps.googleapis.com/maps/api/geocode/json"
    geocoding_timeout_seconds: float = Field(default=5.0, gt=0.0)
    geocoding_fallback_lat: float = 35.0
    geocoding_fallback_lng: float = -97.0
    default_country: str = "USA"

    # Supabase configuration
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co).",
    )
    supabase_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key for backend operations.",
    )

    # Square payments
    square_access_token: Optional[str] = None
    square_application_id: Optional[str] = None
    square_location_id: Optional[str] = None
    square_environment: Literal["production", "sandbox"] = "production"
    square_api_version: str = "2024-07-17"
    square_timeout_seconds: float = Field(default=15.0, gt=0.0)
    square_statement_descriptor: Optional[str] = Field(default="LayerMonster", max_length=20)

    @field_validator("static_root", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Optional[Path]:
        if value is None or value == "":
            return None
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @property
    def square_base_url(self) -> str:
        if self.square_environment == "sandbox":
            return "https://connect.squareupsandbox.com"
        return "https://connect.squareup.com"


settings = Settings()
