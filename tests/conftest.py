"""Pytest configuration for tests."""

from decimal import Decimal

import httpx
import pytest

from paypal_nvp.adapters.models import (
    CheckoutParams, LineItem, OrderSummary, PayPalConfig,
    PayPalMethodType, PaymentRequest, TransactionType,
)


@pytest.fixture
def paypal_config():
    """Create test adapter configuration."""
    return PayPalConfig(
        user="merchant_api1.example.com",
        password="s3cret",
        signature="sig-abc",
        lib_version="2.3",
        server_url="https://nvp.test/nvp",
        timeout_seconds=5.0,
        failure_reporting_threshold=3,
    )


@pytest.fixture
def line_items():
    return [
        LineItem(
            short_description="Mug",
            system_id="SKU-1",
            description="Ceramic mug",
            unit_price=Decimal("9.99"),
            quantity=2,
        ),
        LineItem(
            short_description="Tee",
            system_id="SKU-2",
            description="Cotton t-shirt",
            unit_price=Decimal("15.00"),
            quantity=1,
        ),
    ]


@pytest.fixture
def order_summary():
    return OrderSummary(
        sub_total=Decimal("34.98"),
        total_tax=Decimal("2.80"),
        total_shipping=Decimal("5.00"),
        shipping_discount=Decimal("1.00"),
        grand_total=Decimal("41.78"),
    )


@pytest.fixture
def checkout_request(line_items, order_summary):
    return PaymentRequest(
        transaction_type=TransactionType.AUTHORIZEANDDEBIT,
        method_type=PayPalMethodType.CHECKOUT,
        items=line_items,
        summary=order_summary,
        params=CheckoutParams(
            return_url="https://shop.test/return",
            cancel_url="https://shop.test/cancel",
            additional_params={"LOCALECODE": "US", "NOSHIPPING": "1"},
        ),
    )


@pytest.fixture
def recorded_requests():
    return []


@pytest.fixture
def gateway_reply(recorded_requests):
    """Build an httpx client whose transport answers with a fixed reply."""

    def _build(body: str = "ACK=Success&TOKEN=EC-123&", status_code: int = 200):
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return httpx.Response(status_code, text=body)

        return httpx.Client(transport=httpx.MockTransport(handler))

    return _build
