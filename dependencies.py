"""
Service wiring.

Builds a CustomerService from settings or an explicit DeliveryConfig.
Callers that already hold a classifier pass it in; otherwise the static
classifier is loaded from INSTITUTIONS_FILE (or left empty).
"""

from __future__ import annotations

from typing import Optional

from config import AppSettings, DeliveryConfig, WebhookSettings
from infrastructure.classification.protocol import DomainClassifier
from infrastructure.classification.static import StaticDomainClassifier
from infrastructure.webhook.n8n import N8nWebhookClient
from services.customer_service import CustomerService
from shared.logging import get_logger, setup_logging

log = get_logger(__name__)

TESTING_TIMEOUT_MS = 5_000


def get_settings() -> WebhookSettings:
    return WebhookSettings()


def get_classifier(settings: Optional[WebhookSettings] = None) -> DomainClassifier:
    settings = settings or get_settings()
    if settings.institutions_file:
        return StaticDomainClassifier.from_json_file(settings.institutions_file)
    log.warning("institutions_file_not_configured")
    return StaticDomainClassifier()


def create_customer_service(
    config: Optional[DeliveryConfig] = None,
    classifier: Optional[DomainClassifier] = None,
    settings: Optional[WebhookSettings] = None,
) -> CustomerService:
    """Wire a CustomerService; missing pieces come from WebhookSettings."""
    if config is None or classifier is None:
        settings = settings or get_settings()
    if config is None:
        config = settings.to_delivery_config()
    if classifier is None:
        classifier = get_classifier(settings)
    return CustomerService(N8nWebhookClient(config), classifier)


def bootstrap(app_settings: Optional[AppSettings] = None) -> CustomerService:
    """Process entry point: configure logging, then wire the service."""
    app_settings = app_settings or AppSettings()
    logging_settings = app_settings.logging
    # Production always logs JSON so the output stays machine-parseable
    if app_settings.is_production:
        logging_settings = logging_settings.model_copy(update={"log_format": "json"})
    setup_logging(logging_settings)
    log.info("customer_service_starting", env=app_settings.env)
    return create_customer_service(settings=app_settings.webhook)


def create_customer_service_for_url(
    base_url: str,
    api_key: Optional[str] = None,
    classifier: Optional[DomainClassifier] = None,
) -> CustomerService:
    config = DeliveryConfig(base_url=base_url, api_key=api_key)
    return create_customer_service(config, classifier)


def create_customer_service_for_testing(
    base_url: str = "http://localhost:5678",
    classifier: Optional[DomainClassifier] = None,
) -> CustomerService:
    config = DeliveryConfig(base_url=base_url, timeout_ms=TESTING_TIMEOUT_MS)
    return create_customer_service(config, classifier or StaticDomainClassifier())
