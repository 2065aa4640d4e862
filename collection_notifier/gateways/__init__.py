"""Gateways module for the collection notifier.

Contains the notification port and its email implementation.

Version: 1.0.0
"""

from collection_notifier.gateways.email_gateway import (
    EmailOutputGateway,
    build_session,
    create_email_output_gateway,
    create_gateway_from_config,
)
from collection_notifier.gateways.ports import UpcomingOutputGateway

__all__ = [
    "UpcomingOutputGateway",
    "EmailOutputGateway",
    "build_session",
    "create_email_output_gateway",
    "create_gateway_from_config",
]
