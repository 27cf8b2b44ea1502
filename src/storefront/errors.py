"""Error taxonomy shared by services and API handlers.

Every error carries the HTTP status it maps to so request handlers can let
them propagate to the application-level exception handlers.
"""

from __future__ import annotations

from typing import Any


class StorefrontError(Exception):
    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra or {}

    def to_body(self) -> dict[str, Any]:
        return {"error": self.message, **self.extra}


class ValidationError(StorefrontError):
    """Missing or malformed input."""

    status_code = 400


class NotFoundError(StorefrontError):
    status_code = 404


class UnavailableError(StorefrontError):
    """Backing store (or another collaborator) is not connected."""

    status_code = 503

    def __init__(self, message: str = "Database not connected", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class ExternalServiceError(StorefrontError):
    """A third-party provider failed. Status depends on the cause."""


class AddressResolutionError(ExternalServiceError):
    status_code = 400

    def __init__(self, message: str = "Unable to validate address", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class PaymentNotCompletedError(ExternalServiceError):
    status_code = 400


class PaymentProcessorError(ExternalServiceError):
    status_code = 500


class UnexpectedError(StorefrontError):
    status_code = 500
