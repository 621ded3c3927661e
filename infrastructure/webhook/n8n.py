"""n8n implementation of WorkflowWebhook.

Every delivery is a single POST to the workflow's webhook URL. Whatever
happens on the wire is folded into a WorkflowResult: non-2xx statuses,
transport failures and unexpected errors all come back as
``succeeded=False`` with a descriptive message. Nothing is retried.
"""

from typing import Any, Optional

import httpx

from config import DeliveryConfig
from errors import DeliveryFailure, SerializationFailure, TransportFailure
from infrastructure.http_client import HttpClient
from schemas.models.requests import SupportRequest, VerificationRequest, WebhookPayload
from schemas.models.results import WorkflowResult
from shared.logging import get_logger

log = get_logger(__name__)

_SUCCESS_MESSAGE = "Workflow triggered successfully"


class N8nWebhookClient:
    def __init__(
        self, config: DeliveryConfig, http_client: Optional[HttpClient] = None
    ) -> None:
        self._config = config
        self._owns_http = http_client is None
        self._http = http_client or HttpClient(timeout=config.timeout_seconds)

    @property
    def config(self) -> DeliveryConfig:
        return self._config

    def deliver_verification(self, request: VerificationRequest) -> WorkflowResult:
        return self._deliver(self._config.verification_url(), request)

    def deliver_support(self, request: SupportRequest) -> WorkflowResult:
        return self._deliver(self._config.support_url(), request)

    def probe_liveness(self) -> bool:
        url = self._config.health_url()
        try:
            response = self._http.get(url)
        except Exception as e:
            log.warning(
                "workflow_liveness_failed",
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            return False
        if response.is_success:
            return True
        log.warning(
            "workflow_liveness_failed", url=url, status_code=response.status_code
        )
        return False

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "N8nWebhookClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._config.api_key:
            headers["Authorization"] = f"Bearer {self._config.api_key}"
        return headers

    def _post(self, url: str, payload: dict) -> httpx.Response:
        try:
            return self._http.post(url, json=payload, headers=self._headers())
        except httpx.TransportError as e:
            raise TransportFailure(str(e) or type(e).__name__) from e

    @staticmethod
    def _decode(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise SerializationFailure(
                "response body is not valid JSON", details=response.text[:200]
            ) from e
        if not isinstance(data, dict):
            raise SerializationFailure(
                "response body is not a JSON object", details=response.text[:200]
            )
        return data

    def _deliver(self, url: str, request: WebhookPayload) -> WorkflowResult:
        try:
            response = self._post(url, request.to_payload())
            if not response.is_success:
                raise DeliveryFailure(
                    response.status_code,
                    response.reason_phrase,
                    details=response.text[:200],
                )

            try:
                data = self._decode(response)
            except SerializationFailure as e:
                log.warning("workflow_response_not_json", url=url, reason=e.message)
                data = {"raw_response": response.text}

            workflow_id = data.get("workflowId")
            log.info(
                "workflow_delivered",
                url=url,
                status_code=response.status_code,
                workflow_id=workflow_id,
            )
            return WorkflowResult(
                succeeded=True,
                message=_SUCCESS_MESSAGE,
                workflow_id=str(workflow_id) if workflow_id is not None else None,
                data=data,
            )
        except DeliveryFailure as e:
            log.warning(
                "workflow_delivery_failed",
                url=url,
                status_code=e.status_code,
                response_text=e.details,
            )
            return WorkflowResult(succeeded=False, message=e.message)
        except TransportFailure as e:
            log.error("workflow_transport_error", url=url, error=e.message)
            return WorkflowResult(succeeded=False, message=f"Network error: {e.message}")
        except Exception as e:
            log.error(
                "workflow_unexpected_error",
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            return WorkflowResult(succeeded=False, message=f"Unexpected error: {e}")
