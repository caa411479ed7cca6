"""Health check endpoints."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from paypal_nvp.adapters.base_adapter import BasePaymentAdapter
from paypal_nvp.adapters.models import ServiceStatusType
from paypal_nvp.schemas.common import ServiceHealthResponse

router = APIRouter()


def get_payment_service(request: Request) -> BasePaymentAdapter:
    return request.app.state.payment_service


@router.get("/health/paypal", response_model=ServiceHealthResponse)
def paypal_health(service: BasePaymentAdapter = Depends(get_payment_service)):
    """Report whether the PayPal gateway is considered up.

    Answers 503 while the adapter reports the service down so that load
    balancers and pollers can act on the status code alone.
    """
    health = ServiceHealthResponse(**service.health_check())
    status_code = 200 if health.status == ServiceStatusType.UP.value else 503
    return JSONResponse(status_code=status_code, content=health.model_dump(mode="json"))
