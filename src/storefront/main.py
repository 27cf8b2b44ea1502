"""FastAPI application entry point."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api.handlers import api_not_found_response, register_exception_handlers
from .api.routes import health, orders, payments, products, shipping, store_settings
from .config import Settings, settings
from .models.domain import StoreLocation
from .persistence.base import StoreHandle, UnavailableStore
from .persistence.supabase_store import connect_store
from .services.payments.square import PaymentGateway, SquarePaymentGateway
from .services.shipping.geocoding import Geocoder, GoogleGeocoder
from .services.shipping.pricing import ShippingRates
from .services.shipping.service import ShippingEstimator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _connect_store_in_background(app: FastAPI):
    """Connect to the database after startup without blocking it.

    Requests arriving before the connection completes see the unavailable
    store and get 503 responses.
    """

    def _install(future: asyncio.Future) -> None:
        if future.cancelled():
            return
        if future.exception() is not None:
            logger.error(f"Database connection task failed: {future.exception()}")
            return
        app.state.store = future.result()

    task = None
    if app.state.connect_store:
        loop = asyncio.get_running_loop()
        task = loop.run_in_executor(None, connect_store)
        task.add_done_callback(_install)
    yield
    if task is not None and not task.done():
        task.cancel()
    logger.info("Server closed")


def create_app(
    config: Settings | None = None,
    *,
    store: StoreHandle | None = None,
    geocoder: Geocoder | None = None,
    payment_gateway: PaymentGateway | None = None,
) -> FastAPI:
    config = config or settings
    app = FastAPI(title=config.app_name, lifespan=_connect_store_in_background)

    app.state.config = config
    app.state.store = store if store is not None else UnavailableStore(reason="connecting")
    app.state.connect_store = store is None
    app.state.shipping_estimator = ShippingEstimator(
        store=StoreLocation(config.store_lat, config.store_lng, config.store_address),
        geocoder=geocoder or GoogleGeocoder(config=config),
        rates=ShippingRates.from_settings(config),
    )
    app.state.payment_gateway = payment_gateway or SquarePaymentGateway(config=config)

    if config.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(config.frontend_allowed_origins),
            allow_methods=["GET", "POST", "PUT", "DELETE"],
            allow_headers=["Content-Type"],
        )

    app.include_router(health.router, prefix=config.api_prefix)
    app.include_router(products.router, prefix=config.api_prefix)
    app.include_router(orders.router, prefix=config.api_prefix)
    app.include_router(store_settings.router, prefix=config.api_prefix)
    app.include_router(shipping.router, prefix=config.api_prefix)
    app.include_router(payments.router, prefix=config.api_prefix)

    @app.api_route(
        f"{config.api_prefix}/{{path:path}}",
        methods=["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD"],
        include_in_schema=False,
    )
    def api_not_found(path: str, request: Request):
        return api_not_found_response(request)

    index_file = None
    if config.static_root is not None and config.static_root.is_dir():
        index_file = config.static_root / config.index_document
        # Mounted last so API routes win
        app.mount("/", StaticFiles(directory=config.static_root, html=True), name="storefront")
    else:
        logger.info(f"No static root at {config.static_root}; serving API only")

    register_exception_handlers(app, api_prefix=config.api_prefix, index_file=index_file)
    return app


app = create_app()
