"""
Application error hierarchy.

AppError is the base for all typed errors. ConfigError is raised at
construction time and is fatal. The delivery errors (DeliveryFailure,
TransportFailure, SerializationFailure) are raised inside the webhook
client and converted to a WorkflowResult before it returns; callers of
the client never see them.
"""

from __future__ import annotations

from typing import Any, Optional


class AppError(Exception):
    """Base application error. All typed errors inherit from this."""

    error_code: str = "internal_error"

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.field is not None:
            payload["field"] = self.field
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ConfigError(AppError):
    error_code = "config_error"


class DeliveryFailure(AppError):
    """The workflow engine answered with a non-2xx status."""

    error_code = "delivery_failed"

    def __init__(
        self, status_code: int, reason: str, *, details: Optional[Any] = None
    ) -> None:
        super().__init__(f"HTTP {status_code}: {reason}", details=details)
        self.status_code = status_code
        self.reason = reason


class TransportFailure(AppError):
    """DNS, connection or timeout failure before a response arrived."""

    error_code = "transport_error"


class SerializationFailure(AppError):
    error_code = "serialization_error"
