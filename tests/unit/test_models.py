"""Unit tests for the payment request models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from paypal_nvp.adapters.models import CheckoutParams, LineItem


class TestPaymentRequestImmutability:
    """Test suite for requests that must not change once handed over."""

    def test_items_are_a_tuple(self, checkout_request):
        assert isinstance(checkout_request.items, tuple)
        with pytest.raises(AttributeError):
            checkout_request.items.append(checkout_request.items[0])

    def test_fields_cannot_be_reassigned(self, checkout_request):
        with pytest.raises(ValidationError):
            checkout_request.items = ()

    def test_additional_params_are_read_only(self, checkout_request):
        with pytest.raises(TypeError):
            checkout_request.params.additional_params["EXTRA"] = "1"
        assert "EXTRA" not in checkout_request.params.additional_params

    def test_additional_params_are_copied(self):
        source = {"LOCALECODE": "US"}
        params = CheckoutParams(
            return_url="https://shop.test/return",
            cancel_url="https://shop.test/cancel",
            additional_params=source,
        )
        source["NOSHIPPING"] = "1"
        assert dict(params.additional_params) == {"LOCALECODE": "US"}

    def test_default_additional_params_are_read_only(self):
        params = CheckoutParams(
            return_url="https://shop.test/return",
            cancel_url="https://shop.test/cancel",
        )
        with pytest.raises(TypeError):
            params.additional_params["EXTRA"] = "1"

    def test_additional_params_serialize_as_dict(self, checkout_request):
        dumped = checkout_request.params.model_dump()
        assert dumped["additional_params"] == {"LOCALECODE": "US", "NOSHIPPING": "1"}

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError):
            LineItem(
                short_description="Mug",
                system_id="SKU-1",
                description="Ceramic mug",
                unit_price=Decimal("9.99"),
                quantity=-1,
            )
