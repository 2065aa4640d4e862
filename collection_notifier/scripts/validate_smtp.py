#!/usr/bin/env python3
"""Validate notifier configuration and SMTP relay connectivity.

Checks that the configured credentials can log in to the relay and,
optionally, sends one real collection reminder through the gateway.

Usage:
    python -m collection_notifier.scripts.validate_smtp
    python -m collection_notifier.scripts.validate_smtp --verbose
    python -m collection_notifier.scripts.validate_smtp --send-test refuse
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from collection_notifier.clients.smtp import SMTPClient
from collection_notifier.config import NotifierConfig
from collection_notifier.core.exceptions import GatewayConfigError
from collection_notifier.core.logger import get_logger, mask_password, setup_logging
from collection_notifier.gateways.email_gateway import (
    build_session,
    create_gateway_from_config,
)
from collection_notifier.models.email import EmailPassword, EmailUserName
from collection_notifier.models.service import ServiceEvent, ServiceType
from collection_notifier.models.smtp_config import DEFAULT_RELAY

logger = get_logger(__name__)


def print_header() -> None:
    """Print script header."""
    print("\n" + "=" * 80)
    print("  📧 Collection Notifier SMTP Validator")
    print("=" * 80)


def print_footer() -> None:
    """Print script footer."""
    print("=" * 80 + "\n")


def print_config(config: NotifierConfig) -> None:
    """Print loaded configuration (with credentials masked).

    Args:
        config: NotifierConfig instance.
    """
    print("\n📋 Loaded Configuration:")
    print(f"  SMTP Relay:       {DEFAULT_RELAY.host}:{DEFAULT_RELAY.port}")
    print(f"  STARTTLS:         {'Required' if DEFAULT_RELAY.starttls_required else 'Off'}")
    print(f"  SMTP Username:    {config.SMTP_USER or '(not set)'}")
    print(f"  SMTP Password:    {mask_password(config.SMTP_PASSWORD)}")
    print(f"  From:             {config.EMAIL_FROM or '(not set)'}")
    print(f"  To:               {config.EMAIL_TO or '(not set)'}")
    print(f"  Subject Template: {config.EMAIL_SUBJECT_TEMPLATE}")


def validate_smtp_connection(config: NotifierConfig) -> bool:
    """Validate that the relay accepts the configured credentials.

    Args:
        config: NotifierConfig instance.

    Returns:
        True if connection successful, False otherwise.
    """
    print("\n🧪 Testing SMTP Connection...")
    client = SMTPClient(
        build_session(
            DEFAULT_RELAY,
            EmailUserName(text=config.SMTP_USER),
            EmailPassword(text=config.SMTP_PASSWORD),
        )
    )

    if client.validate_connection():
        print("✅ SMTP connection test PASSED")
        return True

    print("❌ SMTP connection test FAILED")
    return False


def send_test_notification(config: NotifierConfig, service_type: ServiceType) -> bool:
    """Send one notification through the email gateway.

    Args:
        config: NotifierConfig instance.
        service_type: Collection type to notify about.

    Returns:
        True if the relay accepted the message, False otherwise.
    """
    print(f"\n📧 Sending {service_type.display_name} notification to: {config.EMAIL_TO}")
    gateway = create_gateway_from_config(config)

    if gateway.notify(ServiceEvent(service_type=service_type)).ok:
        print("✅ Notification handed to the relay")
        return True

    print("❌ Notification was not sent")
    return False


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        0 if all checks passed, 1 if any check failed.
    """
    parser = argparse.ArgumentParser(
        description="Validate collection notifier SMTP configuration and connectivity.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Quick validation
  python -m collection_notifier.scripts.validate_smtp

  # Debug logging regardless of LOG_LEVEL
  python -m collection_notifier.scripts.validate_smtp --verbose

  # Send a real recycling reminder
  python -m collection_notifier.scripts.validate_smtp --send-test recycling
        """,
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging output",
    )
    parser.add_argument(
        "--send-test",
        "-t",
        choices=[service_type.value for service_type in ServiceType],
        metavar="SERVICE",
        help="Send a real notification for SERVICE (refuse or recycling)",
    )

    args = parser.parse_args(argv)

    config = NotifierConfig()
    log_level = "DEBUG" if args.verbose else config.LOG_LEVEL

    setup_logging(
        log_dir=Path(config.LOG_DIR),
        log_level=log_level,
        file_level="DEBUG",
        console_level=log_level,
        enable_file=config.LOG_TO_FILE,
        max_size_mb=config.LOG_MAX_SIZE_MB,
        backup_count=config.LOG_BACKUP_COUNT,
    )

    print_header()

    exit_code = 0

    try:
        print_config(config)
        config.validate_smtp_config()

        if not validate_smtp_connection(config):
            exit_code = 1
        elif args.send_test and not send_test_notification(
            config, ServiceType(args.send_test)
        ):
            exit_code = 1

    except GatewayConfigError as e:
        print(f"\n❌ Configuration error: {e}")
        exit_code = 1

    finally:
        print_footer()

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
