"""Gateway adapter implementations."""

from .paypal_adapter import PayPalPaymentService

__all__ = ["PayPalPaymentService"]
