"""Integration tests for the notification flow.

Drives the gateway built from settings against an in-memory SMTP server
stand-in and inspects the wire-level message it receives.

Version: 1.0.0
"""

from __future__ import annotations

import smtplib
from concurrent.futures import ThreadPoolExecutor
from email import message_from_string

import pytest

from collection_notifier.config.settings import NotifierConfig
from collection_notifier.gateways.email_gateway import create_gateway_from_config
from collection_notifier.models.result import Delivered, NotifyError
from collection_notifier.models.service import ServiceEvent, ServiceType


class FakeSMTP:
    """Records the SMTP conversation of one connection."""

    connections: list["FakeSMTP"] = []
    valid_password = "asdjf39ru4fsj"

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.calls: list[str] = []
        self.sent: list[str] = []
        FakeSMTP.connections.append(self)

    def set_debuglevel(self, level):
        self.calls.append(f"debug:{level}")

    def starttls(self, context=None):
        self.calls.append("starttls")

    def login(self, user, password):
        self.calls.append(f"login:{user}")
        if password != self.valid_password:
            raise smtplib.SMTPAuthenticationError(535, b"5.7.8 Authentication failed")

    def send_message(self, msg):
        self.calls.append("send")
        self.sent.append(msg.as_string())
        return {}

    def quit(self):
        self.calls.append("quit")


@pytest.fixture(autouse=True)
def reset_connections():
    FakeSMTP.connections = []
    yield
    FakeSMTP.connections = []


def _config(password: str = "asdjf39ru4fsj") -> NotifierConfig:
    return NotifierConfig(
        _env_file=None,
        SMTP_USER="mailbox@domain.com",
        SMTP_PASSWORD=password,
        EMAIL_FROM="sender@domain.com",
        EMAIL_TO="recipient@domain.com",
        EMAIL_BODY_TEXT="Bins go out tonight.",
        EMAIL_SUBJECT_TEMPLATE="<<serviceType>> collection tomorrow",
    )


class TestNotifyFlow:
    """End-to-end notification tests."""

    def test_recycling_notification(self):
        """Test the full conversation and the message on the wire."""
        gateway = create_gateway_from_config(_config(), smtp_factory=FakeSMTP)

        result = gateway.notify(ServiceEvent(service_type=ServiceType.RECYCLING))

        assert result == Delivered()
        [conn] = FakeSMTP.connections
        assert (conn.host, conn.port) == ("smtp.mail.me.com", 587)
        assert conn.calls == [
            "debug:1",
            "starttls",
            "debug:0",
            "login:mailbox@domain.com",
            "debug:1",
            "send",
            "quit",
        ]
        [raw] = conn.sent
        parsed = message_from_string(raw)
        assert parsed["From"] == "sender@domain.com"
        assert parsed["To"] == "recipient@domain.com"
        assert parsed["Subject"] == "Recycling collection tomorrow"
        assert parsed.get_payload(decode=True).decode("utf-8") == "Bins go out tonight."

    def test_bad_credentials(self):
        """Test rejected credentials produce NotifyError and nothing is sent."""
        gateway = create_gateway_from_config(_config("wrong"), smtp_factory=FakeSMTP)

        result = gateway.notify(ServiceEvent(service_type=ServiceType.REFUSE))

        assert result == NotifyError()
        [conn] = FakeSMTP.connections
        assert "send" not in conn.calls
        assert conn.calls[-1] == "quit"

    def test_concurrent_calls_use_separate_connections(self):
        """Test concurrent notifies on one gateway share no connection."""
        gateway = create_gateway_from_config(_config(), smtp_factory=FakeSMTP)
        events = [
            ServiceEvent(service_type=service_type)
            for service_type in [ServiceType.REFUSE, ServiceType.RECYCLING] * 4
        ]

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(gateway.notify, events))

        assert results == [Delivered()] * len(events)
        assert len(FakeSMTP.connections) == len(events)
        assert all(len(conn.sent) == 1 for conn in FakeSMTP.connections)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
