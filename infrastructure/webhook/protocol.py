"""WorkflowWebhook protocol: services depend on this, not the concrete implementation."""

from typing import Protocol

from schemas.models.requests import SupportRequest, VerificationRequest
from schemas.models.results import WorkflowResult


class WorkflowWebhook(Protocol):
    def deliver_verification(self, request: VerificationRequest) -> WorkflowResult: ...

    def deliver_support(self, request: SupportRequest) -> WorkflowResult: ...

    def probe_liveness(self) -> bool: ...
