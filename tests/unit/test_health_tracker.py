"""Unit tests for the gateway health tracker."""

import threading

import pytest

from paypal_nvp.adapters.health import HealthTracker
from paypal_nvp.adapters.models import ServiceStatusType


class TestHealthTracker:
    """Test suite for HealthTracker."""

    def test_starts_up(self):
        tracker = HealthTracker(3)
        assert tracker.get_status() == ServiceStatusType.UP
        assert tracker.failure_count == 0

    @pytest.mark.parametrize("threshold", [1, 2, 3, 10])
    def test_down_after_threshold_failures(self, threshold):
        tracker = HealthTracker(threshold)
        for _ in range(threshold - 1):
            tracker.record_failure()
        assert tracker.get_status() == ServiceStatusType.UP

        tracker.record_failure()
        assert tracker.get_status() == ServiceStatusType.DOWN

    def test_zero_threshold_goes_down_on_first_failure(self):
        tracker = HealthTracker(0)
        assert tracker.get_status() == ServiceStatusType.UP
        tracker.record_failure()
        assert tracker.get_status() == ServiceStatusType.DOWN
        assert tracker.failure_count == 0

    def test_counter_freezes_at_threshold(self):
        tracker = HealthTracker(2)
        for _ in range(5):
            tracker.record_failure()
        assert tracker.failure_count == 2
        assert tracker.get_status() == ServiceStatusType.DOWN

    def test_success_resets(self):
        tracker = HealthTracker(2)
        tracker.record_failure()
        tracker.record_failure()
        tracker.record_success()
        assert tracker.get_status() == ServiceStatusType.UP
        assert tracker.failure_count == 0

    def test_success_resets_partial_count(self):
        tracker = HealthTracker(3)
        tracker.record_failure()
        tracker.record_failure()
        tracker.record_success()
        tracker.record_failure()
        tracker.record_failure()
        assert tracker.get_status() == ServiceStatusType.UP

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValueError):
            HealthTracker(-1)

    def test_snapshot(self):
        tracker = HealthTracker(1)
        tracker.record_failure()
        assert tracker.snapshot() == {
            "status": "DOWN",
            "failure_count": 1,
            "failure_reporting_threshold": 1,
        }

    def test_logs_transition_to_down(self, caplog):
        tracker = HealthTracker(1)
        tracker.record_failure()
        tracker.record_failure()
        assert caplog.text.count("marked DOWN") == 1

    def test_concurrent_failures(self):
        threshold = 500
        tracker = HealthTracker(threshold)

        def fail_many():
            for _ in range(100):
                tracker.record_failure()

        threads = [threading.Thread(target=fail_many) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert tracker.failure_count == 400
        assert tracker.get_status() == ServiceStatusType.UP
