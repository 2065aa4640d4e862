"""Collection Notifier - email reminders for waste-collection days.

Sends a short email whenever the scheduling layer decides a Refuse or
Recycling collection is coming up:
- Subject rendered from a ``<<serviceType>>`` template
- Plain-text body, one sender, one recipient
- Authenticated STARTTLS session on a fixed SMTP relay
- Every failure reported as a single ``NotifyError`` value

Modules:
    - core: Exceptions, logger
    - config: Pydantic v2 settings
    - models: Value models (events, addresses, relay settings, results)
    - templates: Subject line rendering
    - clients: SMTP delivery
    - gateways: Notification port and email gateway
    - scripts: Relay validation command

Usage:
    from collection_notifier import ServiceEvent, ServiceType
    from collection_notifier.config import settings
    from collection_notifier.gateways import create_gateway_from_config

    gateway = create_gateway_from_config(settings)
    result = gateway.notify(ServiceEvent(service_type=ServiceType.RECYCLING))
    if not result.ok:
        ...

Version: 1.0.0
"""

__version__ = "1.0.0"

# Clients
from collection_notifier.clients import SMTPClient

# Configuration
from collection_notifier.config import NotifierConfig

# Core utilities
from collection_notifier.core import (
    CollectionNotifierError,
    GatewayConfigError,
    SMTPClientError,
    get_logger,
)

# Gateways
from collection_notifier.gateways import (
    EmailOutputGateway,
    UpcomingOutputGateway,
    create_email_output_gateway,
    create_gateway_from_config,
)

# Models
from collection_notifier.models import (
    DEFAULT_RELAY,
    Delivered,
    EmailBodyText,
    EmailFrom,
    EmailPassword,
    EmailTo,
    EmailUserName,
    NotifyError,
    NotifyResult,
    ServiceEvent,
    ServiceType,
    SMTPRelayConfig,
    SubjectTemplate,
)

# Templates
from collection_notifier.templates import SubjectRenderer

__all__ = [
    # Version
    "__version__",
    # Core exceptions
    "CollectionNotifierError",
    "GatewayConfigError",
    "SMTPClientError",
    "get_logger",
    # Configuration
    "NotifierConfig",
    # Models - Events
    "ServiceType",
    "ServiceEvent",
    # Models - Gateway values
    "EmailUserName",
    "EmailPassword",
    "EmailFrom",
    "EmailTo",
    "EmailBodyText",
    "SubjectTemplate",
    "SMTPRelayConfig",
    "DEFAULT_RELAY",
    # Models - Results
    "Delivered",
    "NotifyError",
    "NotifyResult",
    # Clients
    "SMTPClient",
    # Templates
    "SubjectRenderer",
    # Gateways
    "UpcomingOutputGateway",
    "EmailOutputGateway",
    "create_email_output_gateway",
    "create_gateway_from_config",
]
