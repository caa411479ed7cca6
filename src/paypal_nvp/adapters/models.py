"""Adapter models and schemas."""

from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Protocol, Tuple

from pydantic import (
    BaseModel, ConfigDict, Field, SecretStr, field_serializer, field_validator,
)

from paypal_nvp.core.config import Settings


class PayPalMethodType(str, Enum):
    """NVP flows the adapter knows about. Only CHECKOUT is implemented."""
    CHECKOUT = "checkout"
    DETAILS = "details"
    PROCESS = "process"


class TransactionType(str, Enum):
    """Transaction types of the enclosing order framework."""
    AUTHORIZE = "AUTHORIZE"
    DEBIT = "DEBIT"
    AUTHORIZEANDDEBIT = "AUTHORIZEANDDEBIT"
    CREDIT = "CREDIT"
    VOIDPAYMENT = "VOIDPAYMENT"
    BALANCE = "BALANCE"
    REVERSEAUTHORIZE = "REVERSEAUTHORIZE"
    PARTIALPAYMENT = "PARTIALPAYMENT"


class ServiceStatusType(str, Enum):
    """Remote service status."""
    UP = "UP"
    DOWN = "DOWN"


class LineItem(BaseModel):
    """One line of the order sent to the gateway."""
    model_config = ConfigDict(frozen=True)

    short_description: str
    system_id: str
    description: str
    unit_price: Decimal
    quantity: int = Field(ge=0)


class OrderSummary(BaseModel):
    """Order totals."""
    model_config = ConfigDict(frozen=True)

    sub_total: Decimal
    total_tax: Decimal
    total_shipping: Decimal
    shipping_discount: Decimal = Decimal("0")
    grand_total: Decimal


class CheckoutParams(BaseModel):
    """Redirect URLs and vendor-specific extras."""
    model_config = ConfigDict(frozen=True)

    return_url: str
    cancel_url: str
    additional_params: Mapping[str, str] = Field(default={}, validate_default=True)

    @field_validator("additional_params", mode="after")
    @classmethod
    def _freeze_additional_params(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("additional_params")
    def _serialize_additional_params(self, value: Mapping[str, str]) -> Dict[str, str]:
        return dict(value)


class PaymentRequest(BaseModel):
    """Request handed to the adapter by the order framework."""
    model_config = ConfigDict(frozen=True)

    transaction_type: TransactionType
    method_type: PayPalMethodType = PayPalMethodType.CHECKOUT
    items: Tuple[LineItem, ...] = ()
    summary: OrderSummary
    params: CheckoutParams


class ErrorEntry(BaseModel):
    """A structured error reported by the gateway."""
    error_code: Optional[str] = None
    short_message: Optional[str] = None
    long_message: Optional[str] = None
    severity_code: Optional[str] = None


class PaymentResponse(BaseModel):
    """Result of one call to the gateway."""
    transaction_type: TransactionType
    method_type: PayPalMethodType
    successful: bool = False
    error_detected: bool = False
    response_token: Optional[str] = None
    error_responses: List[ErrorEntry] = Field(default_factory=list)
    pass_through_errors: Dict[str, Optional[str]] = Field(default_factory=dict)


class PayPalConfig(BaseModel):
    """Configuration for a PayPal adapter instance."""
    name: str = "paypal"
    version: str = "1.0.0"

    # Authentication
    user: str
    password: SecretStr
    signature: SecretStr
    lib_version: str = "2.3"

    # Connection settings
    server_url: str
    timeout_seconds: float = 30.0

    # Health reporting
    failure_reporting_threshold: int = Field(default=3, ge=0)

    @classmethod
    def from_settings(cls, settings: Settings) -> "PayPalConfig":
        return cls(
            user=settings.PAYPAL_USER,
            password=settings.PAYPAL_PASSWORD,
            signature=settings.PAYPAL_SIGNATURE,
            lib_version=settings.PAYPAL_LIB_VERSION,
            server_url=settings.PAYPAL_SERVER_URL,
            timeout_seconds=settings.PAYPAL_TIMEOUT_SECONDS,
            failure_reporting_threshold=settings.PAYPAL_FAILURE_REPORTING_THRESHOLD,
        )


class IdGenerationService(Protocol):
    """Identifier source provided by the order framework."""

    def find_next_id(self, id_type: str) -> int:
        ...


class AdapterInfo(BaseModel):
    """Information about a running adapter."""
    name: str
    service_name: str
    version: str
    server_url: str
    status: ServiceStatusType
    failure_count: int
    failure_reporting_threshold: int
