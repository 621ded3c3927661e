"""
Result shapes returned by the webhook client and the customer service.

WorkflowResult  : one per delivery attempt, built by the webhook client
ServiceResult   : what callers of CustomerService receive
HealthReport    : delivery liveness + classifier availability
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class WorkflowResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    succeeded: bool
    message: str
    workflow_id: Optional[str] = None
    data: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    succeeded: bool
    message: str
    pre_verified: bool
    matched_institution_names: list[str] = Field(default_factory=list)
    workflow_id: Optional[str] = None
    extra_data: dict[str, Any] = Field(default_factory=dict)


class HealthReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    delivery_reachable: bool
    classification_available: bool

    @computed_field
    @property
    def overall_healthy(self) -> bool:
        return self.delivery_reachable and self.classification_available

    @computed_field
    @property
    def status(self) -> str:
        return "healthy" if self.overall_healthy else "unhealthy"
