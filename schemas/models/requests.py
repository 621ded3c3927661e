"""
Outbound webhook payloads.

Field names are snake_case in Python; aliases carry the camelCase keys the
n8n workflows read. Dump with ``to_payload()`` to get the wire shape.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


def now_ms() -> int:
    return int(time.time() * 1000)


class Priority(str, Enum):
    LOW = "LOW"
    NORMAL = "NORMAL"
    HIGH = "HIGH"
    URGENT = "URGENT"


class WebhookPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class VerificationRequest(WebhookPayload):
    """Ask the verification workflow to review an institution's domain."""

    domain: str
    institution_name: str = Field(alias="institutionName")
    requester_email: str = Field(alias="requesterEmail")
    request_type: Literal["domain_verification"] = Field(
        default="domain_verification", alias="requestType"
    )
    created_at_ms: int = Field(default_factory=now_ms, alias="timestamp")
    extra_fields: dict[str, str] = Field(
        default_factory=dict, alias="additionalInfo"
    )


class SupportRequest(WebhookPayload):
    """A customer support ticket for the support workflow."""

    email: str
    domain: Optional[str] = None
    subject: str
    message: str
    priority: Priority = Priority.NORMAL
    request_type: Literal["support"] = Field(default="support", alias="requestType")
    created_at_ms: int = Field(default_factory=now_ms, alias="timestamp")
