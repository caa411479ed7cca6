"""Payment gateway adapters."""

from .base_adapter import BasePaymentAdapter
from .health import HealthTracker
from .models import (
    CheckoutParams, ErrorEntry, LineItem, OrderSummary, PayPalConfig,
    PayPalMethodType, PaymentRequest, PaymentResponse, ServiceStatusType,
    TransactionType,
)

__all__ = [
    "BasePaymentAdapter",
    "HealthTracker",
    "CheckoutParams",
    "ErrorEntry",
    "LineItem",
    "OrderSummary",
    "PayPalConfig",
    "PayPalMethodType",
    "PaymentRequest",
    "PaymentResponse",
    "ServiceStatusType",
    "TransactionType",
]
