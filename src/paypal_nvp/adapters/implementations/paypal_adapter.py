"""PayPal NVP payment adapter implementation."""

import logging
from typing import List, Optional
from urllib.parse import urlencode

import httpx

from paypal_nvp.adapters.base_adapter import BasePaymentAdapter
from paypal_nvp.adapters.health import HealthTracker
from paypal_nvp.adapters.models import (
    AdapterInfo, IdGenerationService, PayPalConfig,
    PaymentRequest, PaymentResponse,
)
from paypal_nvp.adapters.nvp import NVPair, build_request_pairs, build_response
from paypal_nvp.core.exceptions import TransportError


logger = logging.getLogger(__name__)


class PayPalPaymentService(BasePaymentAdapter):
    """Adapter for the PayPal Express Checkout NVP API.

    One call to :meth:`process` is one blocking POST with no retry. Transport
    failures are counted by the health tracker; any successful round trip
    resets it.
    """

    def __init__(
        self,
        config: PayPalConfig,
        client: Optional[httpx.Client] = None,
        health: Optional[HealthTracker] = None,
        id_generation_service: Optional[IdGenerationService] = None,
    ):
        super().__init__(health or HealthTracker(config.failure_reporting_threshold))
        self.config = config
        # Not used by the checkout flow; kept for the flows that need order ids.
        self.id_generation_service = id_generation_service

        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=config.timeout_seconds)

    @property
    def server_url(self) -> str:
        return self.config.server_url

    def close(self) -> None:
        if self._owns_client:
            self.client.close()
        logger.info("PayPal adapter shutdown")

    def process(self, request: PaymentRequest) -> PaymentResponse:
        try:
            raw_response = self.communicate_with_vendor(request)
        except Exception as e:
            self.health.record_failure()
            logger.error(f"PayPal call failed: {str(e)}")
            # The request may be the reason the call failed
            method_type = getattr(getattr(request, "method_type", None), "value", None)
            raise TransportError(
                f"PayPal call failed: {str(e)}",
                details={"server_url": self.server_url, "method_type": method_type},
            ) from e
        self.health.record_success()

        response = PaymentResponse(
            transaction_type=request.transaction_type,
            method_type=request.method_type,
        )
        return build_response(raw_response, response)

    def communicate_with_vendor(self, request: PaymentRequest) -> str:
        pairs = build_request_pairs(request, self.config)
        logger.debug(
            f"Posting {len(pairs)} NVP fields to {self.server_url} "
            f"(method={request.method_type.value})"
        )
        http_response = self.client.post(
            self.server_url,
            content=self._encode(pairs),
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        http_response.raise_for_status()
        logger.debug(f"PayPal answered with HTTP {http_response.status_code}")
        return http_response.text

    @staticmethod
    def _encode(pairs: List[NVPair]) -> str:
        return urlencode(pairs)

    def get_info(self) -> AdapterInfo:
        """Get adapter information."""
        snapshot = self.health.snapshot()
        return AdapterInfo(
            name=self.config.name,
            service_name=self.service_name,
            version=self.config.version,
            server_url=self.server_url,
            status=snapshot["status"],
            failure_count=snapshot["failure_count"],
            failure_reporting_threshold=snapshot["failure_reporting_threshold"],
        )
