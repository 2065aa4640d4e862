"""Pytest configuration and fixtures for collection notifier tests.

Provides reusable fixtures for gateway values, relay settings and mocked
SMTP connections.

Version: 1.0.0
"""

from __future__ import annotations

import os
from unittest.mock import MagicMock

import pytest

# Set test environment before importing application modules
os.environ.setdefault("SMTP_USER", "mailbox@domain.com")
os.environ.setdefault("SMTP_PASSWORD", "asdjf39ru4fsj")
os.environ.setdefault("EMAIL_FROM", "mailbox@domain.com")
os.environ.setdefault("EMAIL_TO", "mailbox@domain.com")
os.environ.setdefault("LOG_TO_FILE", "false")

from collection_notifier.models.email import (  # noqa: E402
    EmailBodyText,
    EmailFrom,
    EmailPassword,
    EmailTo,
    EmailUserName,
    SubjectTemplate,
)
from collection_notifier.models.smtp_config import (  # noqa: E402
    SMTPRelayConfig,
    SMTPSession,
)


# =============================================================================
# Gateway Value Fixtures
# =============================================================================
@pytest.fixture
def gateway_values() -> dict:
    """Valid constructor arguments for EmailOutputGateway."""
    return {
        "user_name": EmailUserName(text="mailbox@domain.com"),
        "password": EmailPassword(text="asdjf39ru4fsj"),
        "email_from": EmailFrom(address="sender@domain.com"),
        "email_to": EmailTo(address="recipient@domain.com"),
        "body_text": EmailBodyText(text="email body text"),
        "subject_template": SubjectTemplate(text="Collection reminder: <<serviceType>>"),
    }


# =============================================================================
# SMTP Fixtures
# =============================================================================
@pytest.fixture
def relay_config() -> SMTPRelayConfig:
    """Relay settings pointing at a test host."""
    return SMTPRelayConfig(
        host="smtp.test.com",
        port=587,
        starttls_required=True,
        debug=False,
        auth_required=True,
        timeout=30,
    )


@pytest.fixture
def smtp_session(relay_config: SMTPRelayConfig) -> SMTPSession:
    """Session with test credentials."""
    return SMTPSession(
        relay=relay_config,
        username=EmailUserName(text="mailbox@domain.com"),
        password=EmailPassword(text="asdjf39ru4fsj"),
    )


@pytest.fixture
def mock_smtp_connection() -> MagicMock:
    """Create a mock SMTP connection."""
    smtp = MagicMock()
    smtp.send_message.return_value = {}
    smtp.starttls.return_value = (220, b"TLS ready")
    smtp.login.return_value = (235, b"Authentication successful")
    smtp.quit.return_value = (221, b"Bye")
    return smtp


@pytest.fixture
def smtp_factory(mock_smtp_connection: MagicMock) -> MagicMock:
    """Factory returning the mock SMTP connection."""
    return MagicMock(return_value=mock_smtp_connection)
