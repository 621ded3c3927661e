"""
Application configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file).

WebhookSettings is the mutable, env-driven view of the n8n integration.
DeliveryConfig is the immutable value the webhook client is built from;
use WebhookSettings.to_delivery_config() to get one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from errors import ConfigError


@dataclass(frozen=True)
class DeliveryConfig:
    """Resolved webhook endpoints plus timeout and credential for one client."""

    base_url: str = "http://localhost:5678"
    webhook_path: str = "/webhook"
    verification_workflow: str = "domain-verification"
    support_workflow: str = "support-request"
    api_key: Optional[str] = None
    timeout_ms: int = 30_000

    def __post_init__(self) -> None:
        if (
            not isinstance(self.timeout_ms, int)
            or isinstance(self.timeout_ms, bool)
            or self.timeout_ms <= 0
        ):
            raise ConfigError(
                f"timeout_ms must be a positive integer, got {self.timeout_ms!r}",
                field="timeout_ms",
            )

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    def _workflow_url(self, workflow: str) -> str:
        parts = [self.base_url.rstrip("/")]
        path = self.webhook_path.strip("/")
        if path:
            parts.append(path)
        parts.append(workflow.strip("/"))
        return "/".join(parts)

    def verification_url(self) -> str:
        return self._workflow_url(self.verification_workflow)

    def support_url(self) -> str:
        return self._workflow_url(self.support_workflow)

    def health_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/healthz"


class WebhookSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    n8n_base_url: str = "http://localhost:5678"
    n8n_webhook_path: str = "/webhook"
    n8n_verification_workflow: str = "domain-verification"
    n8n_support_workflow: str = "support-request"
    # Optional, sent as a bearer token when set
    n8n_api_key: Optional[str] = None
    n8n_timeout_ms: int = 30_000

    # JSON file mapping domains to institution names for the static classifier
    institutions_file: Optional[str] = None

    def to_delivery_config(self) -> DeliveryConfig:
        return DeliveryConfig(
            base_url=self.n8n_base_url,
            webhook_path=self.n8n_webhook_path,
            verification_workflow=self.n8n_verification_workflow,
            support_workflow=self.n8n_support_workflow,
            api_key=self.n8n_api_key or None,
            timeout_ms=self.n8n_timeout_ms,
        )


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "development"
    app_name: str = "customer-service"

    # Sub-configs (composed via model_validator below)
    webhook: Optional[WebhookSettings] = None
    logging: Optional[LoggingSettings] = None

    @model_validator(mode="after")
    def _populate_sub_configs(self) -> "AppSettings":
        # Populate sub-configs from the same env/dotenv source
        if self.webhook is None:
            self.webhook = WebhookSettings()
        if self.logging is None:
            self.logging = LoggingSettings()
        return self

    @property
    def is_production(self) -> bool:
        return self.env == "production"
