"""Common Pydantic schemas."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class ServiceHealthResponse(BaseModel):
    """Health of one remote payment service."""
    service: str
    status: str
    failure_count: int
    failure_reporting_threshold: int
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
