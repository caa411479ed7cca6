"""FastAPI application exposing the adapter's health to pollers."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from paypal_nvp.adapters.base_adapter import BasePaymentAdapter
from paypal_nvp.adapters.implementations.paypal_adapter import PayPalPaymentService
from paypal_nvp.adapters.models import PayPalConfig
from paypal_nvp.api import health
from .config import Settings, get_cached_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format=settings.LOG_FORMAT,
    )


def create_app(
    service: Optional[BasePaymentAdapter] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create the FastAPI application instance.

    When no service is given one is built from settings and closed again on
    shutdown.
    """
    settings = settings or get_cached_settings()
    owns_service = service is None
    if service is None:
        service = PayPalPaymentService(PayPalConfig.from_settings(settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION}")
        yield
        if owns_service:
            service.close()

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)
    app.state.payment_service = service
    app.include_router(health.router, tags=["health"])
    return app
