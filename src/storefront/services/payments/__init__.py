"""Payment processing services."""

from .service import process_payment
from .square import PaymentGateway, SquarePaymentGateway

__all__ = ["PaymentGateway", "SquarePaymentGateway", "process_payment"]
