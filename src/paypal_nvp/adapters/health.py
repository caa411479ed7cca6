"""Failure tracking for a remote payment service."""

import logging
import threading

from .models import ServiceStatusType


logger = logging.getLogger(__name__)


class HealthTracker:
    """Counts consecutive failures and flips the service down at a threshold.

    The counter never grows past ``failure_reporting_threshold``. Once the
    counter reaches the threshold the service is reported down and stays
    down until ``record_success`` is called. Every read and write happens
    under a single lock so threads sharing an adapter cannot interleave
    updates of the counter and the flag.
    """

    def __init__(self, failure_reporting_threshold: int):
        if failure_reporting_threshold < 0:
            raise ValueError("failure_reporting_threshold must be >= 0")
        self.failure_reporting_threshold = failure_reporting_threshold
        self._failure_count = 0
        self._is_up = True
        self._lock = threading.Lock()

    def record_failure(self) -> None:
        with self._lock:
            if self._failure_count < self.failure_reporting_threshold:
                self._failure_count += 1
            if self._failure_count >= self.failure_reporting_threshold and self._is_up:
                self._is_up = False
                logger.warning(
                    f"Service marked DOWN after {self._failure_count} consecutive failures"
                )

    def record_success(self) -> None:
        with self._lock:
            if not self._is_up:
                logger.info("Service marked UP after successful call")
            self._is_up = True
            self._failure_count = 0

    def get_status(self) -> ServiceStatusType:
        with self._lock:
            return ServiceStatusType.UP if self._is_up else ServiceStatusType.DOWN

    @property
    def failure_count(self) -> int:
        with self._lock:
            return self._failure_count

    def snapshot(self) -> dict:
        """Return counter, threshold and status read under one lock."""
        with self._lock:
            return {
                "status": (ServiceStatusType.UP if self._is_up else ServiceStatusType.DOWN).value,
                "failure_count": self._failure_count,
                "failure_reporting_threshold": self.failure_reporting_threshold,
            }
