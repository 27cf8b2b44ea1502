"""Exception handlers mapping errors to JSON bodies."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..errors import StorefrontError

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"Invalid request: {location}: {message}" if location else f"Invalid request: {message}"


def api_not_found_response(request: Request) -> JSONResponse:
    logger.warning(f"API Route not found: {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "API endpoint not found", "path": request.url.path, "method": request.method},
    )


def register_exception_handlers(app: FastAPI, *, api_prefix: str, index_file: Path | None) -> None:
    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        else:
            logger.warning(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _describe_validation_error(exc)
        logger.warning(f"{request.method} {request.url.path} rejected (400): {message}")
        content = {"error": message}
        if request.url.path.startswith(f"{api_prefix}/payments"):
            # payment clients branch on the success flag
            content = {"success": False, **content}
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        path = request.url.path
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            if path == api_prefix or path.startswith(f"{api_prefix}/"):
                return api_not_found_response(request)
            if index_file is not None and index_file.is_file():
                return FileResponse(index_file, status_code=status.HTTP_404_NOT_FOUND)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )
