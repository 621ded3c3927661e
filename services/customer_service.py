"""
Customer-service orchestration on top of the n8n workflows.

Each request is pre-screened with the domain classifier, enriched with the
classification outcome and handed to the workflow webhook. The message on
the returned ServiceResult describes the pre-check, not the delivery:
callers must read ``succeeded`` to learn whether the workflow was reached.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from infrastructure.classification.protocol import DomainClassifier
from infrastructure.webhook.protocol import WorkflowWebhook
from schemas.models.requests import Priority, SupportRequest, VerificationRequest
from schemas.models.results import HealthReport, ServiceResult
from shared.logging import get_logger

log = get_logger(__name__)

VERIFICATION_METHOD = "swot_library"

PRE_VERIFIED_MESSAGE = (
    "Domain is already verified as academic. Workflow triggered for processing."
)
MANUAL_REVIEW_MESSAGE = "Domain verification workflow initiated for manual review."
SUPPORT_SUBMITTED_MESSAGE = "Support request submitted successfully"


def domain_from_email(email: str) -> str:
    """Return the part of ``email`` after the first ``@`` (the whole string if none)."""
    _, sep, domain = email.partition("@")
    return domain if sep else email


class CustomerService:
    def __init__(self, webhook: WorkflowWebhook, classifier: DomainClassifier) -> None:
        self._webhook = webhook
        self._classifier = classifier

    def submit_verification(
        self,
        domain: str,
        institution_name: str,
        requester_email: str,
        extra: Optional[Mapping[str, str]] = None,
    ) -> ServiceResult:
        is_academic = self._classifier.is_academic(domain)
        school_names = list(self._classifier.matching_institutions(domain))

        request = VerificationRequest(
            domain=domain,
            institution_name=institution_name,
            requester_email=requester_email,
            extra_fields={
                **(extra or {}),
                "pre_verified": str(is_academic).lower(),
                "existing_school_names": ", ".join(school_names),
                "verification_method": VERIFICATION_METHOD,
            },
        )
        outcome = self._webhook.deliver_verification(request)

        log.info(
            "domain_verification_submitted",
            domain=domain,
            pre_verified=is_academic,
            delivered=outcome.succeeded,
            workflow_id=outcome.workflow_id,
        )
        return ServiceResult(
            succeeded=outcome.succeeded,
            message=PRE_VERIFIED_MESSAGE if is_academic else MANUAL_REVIEW_MESSAGE,
            pre_verified=is_academic,
            matched_institution_names=school_names,
            workflow_id=outcome.workflow_id,
            extra_data=outcome.data,
        )

    def submit_support(
        self,
        email: str,
        subject: str,
        message: str,
        priority: Priority = Priority.NORMAL,
        domain: Optional[str] = None,
    ) -> ServiceResult:
        actual_domain = domain if domain is not None else domain_from_email(email)
        is_academic = self._classifier.is_academic(actual_domain)
        school_names = (
            list(self._classifier.matching_institutions(actual_domain))
            if is_academic
            else []
        )

        request = SupportRequest(
            email=email,
            domain=actual_domain,
            subject=subject,
            message=message,
            priority=priority,
        )
        outcome = self._webhook.deliver_support(request)

        log.info(
            "support_request_submitted",
            domain=actual_domain,
            priority=request.priority.value,
            pre_verified=is_academic,
            delivered=outcome.succeeded,
        )
        return ServiceResult(
            succeeded=outcome.succeeded,
            message=SUPPORT_SUBMITTED_MESSAGE,
            pre_verified=is_academic,
            matched_institution_names=school_names,
            workflow_id=outcome.workflow_id,
            extra_data=outcome.data,
        )

    def submit_verification_batch(
        self, requests: Sequence[VerificationRequest]
    ) -> list[ServiceResult]:
        results = [
            self.submit_verification(
                domain=request.domain,
                institution_name=request.institution_name,
                requester_email=request.requester_email,
                extra=request.extra_fields,
            )
            for request in requests
        ]
        log.info(
            "domain_verification_batch_processed",
            total=len(results),
            delivered=sum(1 for r in results if r.succeeded),
        )
        return results

    def check_health(self) -> HealthReport:
        report = HealthReport(
            delivery_reachable=self._webhook.probe_liveness(),
            # The classifier is in-process; reaching this point means it loaded
            classification_available=True,
        )
        if not report.overall_healthy:
            log.warning(
                "health_check_unhealthy",
                delivery_reachable=report.delivery_reachable,
                classification_available=report.classification_available,
            )
        return report
