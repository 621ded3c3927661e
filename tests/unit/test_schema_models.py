"""Unit tests for webhook payloads and result models."""

import time

import pytest
from pydantic import ValidationError as PydanticValidationError

from schemas.models.requests import Priority, SupportRequest, VerificationRequest
from schemas.models.results import HealthReport, ServiceResult, WorkflowResult


# ── VerificationRequest ───────────────────────────────────────────────────────


class TestVerificationRequest:
    def _make(self, **overrides):
        base = {
            "domain": "stanford.edu",
            "institution_name": "Stanford University",
            "requester_email": "admin@stanford.edu",
        }
        base.update(overrides)
        return VerificationRequest(**base)

    def test_defaults(self):
        r = self._make()
        assert r.request_type == "domain_verification"
        assert r.extra_fields == {}

    def test_created_at_is_epoch_millis(self):
        before = int(time.time() * 1000)
        r = self._make()
        after = int(time.time() * 1000)
        assert before <= r.created_at_ms <= after

    def test_payload_uses_wire_names(self):
        r = self._make(extra_fields={"note": "urgent"}, created_at_ms=1700000000000)
        assert r.to_payload() == {
            "domain": "stanford.edu",
            "institutionName": "Stanford University",
            "requesterEmail": "admin@stanford.edu",
            "requestType": "domain_verification",
            "timestamp": 1700000000000,
            "additionalInfo": {"note": "urgent"},
        }

    def test_accepts_wire_names(self):
        r = VerificationRequest.model_validate(
            {
                "domain": "mit.edu",
                "institutionName": "MIT",
                "requesterEmail": "a@mit.edu",
                "additionalInfo": {"k": "v"},
            }
        )
        assert r.institution_name == "MIT"
        assert r.extra_fields == {"k": "v"}

    def test_request_type_is_constant(self):
        with pytest.raises(PydanticValidationError):
            self._make(request_type="support")

    def test_is_frozen(self):
        r = self._make()
        with pytest.raises(PydanticValidationError):
            r.domain = "other.edu"


# ── SupportRequest ────────────────────────────────────────────────────────────


class TestSupportRequest:
    def test_defaults(self):
        r = SupportRequest(email="u@gmail.com", subject="Hi", message="Help")
        assert r.priority is Priority.NORMAL
        assert r.domain is None
        assert r.request_type == "support"

    def test_payload(self):
        r = SupportRequest(
            email="u@gmail.com",
            domain="gmail.com",
            subject="Hi",
            message="Help",
            priority=Priority.HIGH,
            created_at_ms=1,
        )
        assert r.to_payload() == {
            "email": "u@gmail.com",
            "domain": "gmail.com",
            "subject": "Hi",
            "message": "Help",
            "priority": "HIGH",
            "requestType": "support",
            "timestamp": 1,
        }

    def test_priority_from_string(self):
        r = SupportRequest(email="u@x.org", subject="s", message="m", priority="URGENT")
        assert r.priority is Priority.URGENT

    def test_rejects_unknown_priority(self):
        with pytest.raises(PydanticValidationError):
            SupportRequest(email="u@x.org", subject="s", message="m", priority="CRITICAL")


# ── Results ───────────────────────────────────────────────────────────────────


class TestResults:
    def test_workflow_result_defaults(self):
        r = WorkflowResult(succeeded=False, message="HTTP 500: Internal Server Error")
        assert r.workflow_id is None
        assert r.data == {}

    def test_service_result_defaults(self):
        r = ServiceResult(succeeded=True, message="ok", pre_verified=False)
        assert r.matched_institution_names == []
        assert r.extra_data == {}


@pytest.mark.parametrize(
    "reachable, available, healthy, status",
    [
        (True, True, True, "healthy"),
        (False, True, False, "unhealthy"),
        (True, False, False, "unhealthy"),
        (False, False, False, "unhealthy"),
    ],
    ids=["all_ok", "delivery_down", "classifier_down", "all_down"],
)
def test_health_report(reachable, available, healthy, status):
    report = HealthReport(delivery_reachable=reachable, classification_available=available)
    assert report.overall_healthy is healthy
    assert report.status == status
    assert report.model_dump()["overall_healthy"] is healthy
