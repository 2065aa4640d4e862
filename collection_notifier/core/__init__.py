"""Core module for the collection notifier.

Provides exceptions and logging configuration shared by all components.

Created: 2026-10-19
Version: 1.0.0
"""

from collection_notifier.core.exceptions import (
    CollectionNotifierError,
    GatewayConfigError,
    SMTPClientError,
)
from collection_notifier.core.logger import (
    get_logger,
    get_logs_directory,
    log_context,
    mask_password,
    setup_logging,
)

__all__ = [
    # Exceptions
    "CollectionNotifierError",
    "GatewayConfigError",
    "SMTPClientError",
    # Logging
    "get_logger",
    "setup_logging",
    "get_logs_directory",
    "log_context",
    "mask_password",
]
