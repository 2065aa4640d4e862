"""Models module for the collection notifier.

Defines Pydantic v2 value models for gateway configuration, collection
events, SMTP relay settings and notification results.

Created: 2026-10-19
Version: 1.0.0
"""

from collection_notifier.models.email import (
    EmailBodyText,
    EmailFrom,
    EmailPassword,
    EmailTo,
    EmailUserName,
    SubjectTemplate,
)
from collection_notifier.models.result import Delivered, NotifyError, NotifyResult
from collection_notifier.models.service import ServiceEvent, ServiceType
from collection_notifier.models.smtp_config import (
    DEFAULT_RELAY,
    SMTPRelayConfig,
    SMTPSession,
)

__all__ = [
    # Enums
    "ServiceType",
    # Events
    "ServiceEvent",
    # Gateway values
    "EmailUserName",
    "EmailPassword",
    "EmailFrom",
    "EmailTo",
    "EmailBodyText",
    "SubjectTemplate",
    # SMTP
    "SMTPRelayConfig",
    "SMTPSession",
    "DEFAULT_RELAY",
    # Results
    "Delivered",
    "NotifyError",
    "NotifyResult",
]
