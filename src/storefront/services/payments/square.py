"""HTTP client for the Square Payments API."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Protocol

import httpx

from ...config import Settings, settings
from ...errors import PaymentProcessorError
from ...models.domain import PaymentResult
from ..shipping.pricing import round_half_up

logger = logging.getLogger(__name__)


class PaymentGateway(Protocol):
    def submit_payment(
        self,
        *,
        source_id: str,
        amount: Decimal,
        currency: str,
        idempotency_key: str,
        customer_email: str | None = None,
        note: str | None = None,
    ) -> PaymentResult: ...


def to_minor_units(amount: Decimal) -> int:
    """Convert a currency amount to cents, rounding half-up."""
    return int(round_half_up(amount * 100))


class SquarePaymentGateway:
    def __init__(
        self,
        access_token: str | None = None,
        base_url: str | None = None,
        location_id: str | None = None,
        api_version: str | None = None,
        statement_descriptor: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
        config: Settings | None = None,
    ) -> None:
        config = config or settings
        self.access_token = access_token if access_token is not None else config.square_access_token
        self.base_url = (base_url or config.square_base_url).rstrip("/")
        self.location_id = location_id if location_id is not None else config.square_location_id
        self.api_version = api_version or config.square_api_version
        self.statement_descriptor = (
            statement_descriptor if statement_descriptor is not None else config.square_statement_descriptor
        )
        self.timeout = timeout if timeout is not None else config.square_timeout_seconds
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout, connect=5.0),
            headers={
                "Authorization": f"Bearer {self.access_token}",
                "Square-Version": self.api_version,
                "Content-Type": "application/json",
            },
            transport=self._transport,
        )

    def build_request(
        self,
        *,
        source_id: str,
        amount: Decimal,
        currency: str,
        idempotency_key: str,
        customer_email: str | None = None,
        note: str | None = None,
    ) -> dict:
        body: dict = {
            "source_id": source_id,
            "idempotency_key": idempotency_key,
            "amount_money": {"amount": to_minor_units(amount), "currency": currency},
        }
        if customer_email:
            body["buyer_email_address"] = customer_email
        if note:
            body["note"] = note
        if self.location_id:
            body["location_id"] = self.location_id
        if self.statement_descriptor:
            body["statement_description_identifier"] = self.statement_descriptor
        return body

    def submit_payment(
        self,
        *,
        source_id: str,
        amount: Decimal,
        currency: str,
        idempotency_key: str,
        customer_email: str | None = None,
        note: str | None = None,
    ) -> PaymentResult:
        if not self.access_token:
            raise PaymentProcessorError("Square access token is not configured")

        body = self.build_request(
            source_id=source_id,
            amount=amount,
            currency=currency,
            idempotency_key=idempotency_key,
            customer_email=customer_email,
            note=note,
        )
        try:
            with self._get_client() as client:
                response = client.post("/v2/payments", json=body)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            detail = _square_error_detail(exc.response)
            logger.error(f"Square rejected payment {idempotency_key}: HTTP {exc.response.status_code} {detail}")
            raise PaymentProcessorError(detail or "Payment processing failed") from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.error(f"Square request failed for payment {idempotency_key}: {exc}")
            raise PaymentProcessorError("Payment processing failed") from exc

        payment = payload.get("payment") if isinstance(payload, dict) else None
        if not isinstance(payment, dict) or "id" not in payment:
            raise PaymentProcessorError("Square response missing payment")
        return PaymentResult(
            payment_id=str(payment["id"]),
            status=str(payment.get("status", "UNKNOWN")),
            receipt_url=payment.get("receipt_url"),
        )


def _square_error_detail(response: httpx.Response) -> str | None:
    try:
        errors = response.json().get("errors") or []
    except (ValueError, AttributeError):
        return None
    if not errors:
        return None
    first = errors[0]
    return first.get("detail") or first.get("code")
