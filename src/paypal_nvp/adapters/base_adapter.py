"""Base class for payment gateway adapters."""

from abc import ABC, abstractmethod
from typing import Any, Dict

from .health import HealthTracker
from .models import PaymentRequest, PaymentResponse, ServiceStatusType


class BasePaymentAdapter(ABC):
    """Base class for gateway adapters that report an up/down status."""

    def __init__(self, health: HealthTracker):
        self.health = health

    @abstractmethod
    def process(self, request: PaymentRequest) -> PaymentResponse:
        """Send a payment request to the gateway and return its answer."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release transport resources."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @property
    def service_name(self) -> str:
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    def get_service_status(self) -> ServiceStatusType:
        return self.health.get_status()

    def health_check(self) -> Dict[str, Any]:
        """Perform health check on the adapter."""
        health_data = self.health.snapshot()
        health_data["service"] = self.service_name
        return health_data
