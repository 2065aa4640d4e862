"""SMTP client for notification delivery.

Sends a single plain-text message per connection: every ``send`` opens a
fresh connection, negotiates STARTTLS, authenticates with the session
credentials, hands the message to the relay and quits. Nothing is shared
between sends.

Features:
- STARTTLS with the default SSL context
- Optional smtplib protocol debug output
- Injectable SMTP factory for tests
- Authentication exchange kept out of debug output

Version: 1.0.0
"""

from __future__ import annotations

import smtplib
import ssl
from collections.abc import Callable
from email.mime.text import MIMEText

from collection_notifier.core.exceptions import SMTPClientError
from collection_notifier.core.logger import get_logger
from collection_notifier.models.smtp_config import SMTPSession

logger = get_logger(__name__)


def build_message(from_addr: str, to_addr: str, subject: str, body_text: str) -> MIMEText:
    """Build a single-part plain-text message.

    Args:
        from_addr: Sender address.
        to_addr: The one recipient address.
        subject: Rendered subject line.
        body_text: Plain-text body.

    Returns:
        Message ready for ``SMTPClient.send``.
    """
    msg = MIMEText(body_text, "plain", "utf-8")
    msg["From"] = from_addr
    msg["To"] = to_addr
    msg["Subject"] = subject
    return msg


class SMTPClient:
    """SMTP delivery client opening one connection per message.

    Attributes:
        session: Relay settings and credentials.
        smtp_factory: Callable returning an ``smtplib.SMTP``-like object.
    """

    def __init__(
        self,
        session: SMTPSession,
        smtp_factory: Callable[..., smtplib.SMTP] | None = None,
    ) -> None:
        """Initialize SMTP client.

        Args:
            session: Relay settings and credentials to connect with.
            smtp_factory: Factory for SMTP connections (defaults to smtplib.SMTP).
        """
        self.session = session
        self.smtp_factory = smtp_factory or smtplib.SMTP

    def _open_connection(self) -> smtplib.SMTP:
        """Connect, upgrade to TLS and authenticate.

        Returns:
            Authenticated SMTP connection.

        Raises:
            SMTPClientError: If any step fails.
        """
        relay = self.session.relay

        try:
            logger.debug(f"Connecting to SMTP: {relay.host}:{relay.port}")
            smtp = self.smtp_factory(relay.host, relay.port, timeout=relay.timeout)
        except Exception as e:
            logger.error(f"Failed to connect to {relay.host}:{relay.port}: {e}")
            raise SMTPClientError(f"Failed to connect to SMTP server: {e}") from e

        try:
            if relay.debug:
                smtp.set_debuglevel(1)

            if relay.starttls_required:
                logger.debug("Starting TLS...")
                smtp.starttls(context=ssl.create_default_context())

            if relay.auth_required:
                self._login(smtp)
        except Exception as e:
            logger.error(f"Failed to establish SMTP session: {e}")
            self._close_connection(smtp)
            raise SMTPClientError(f"Failed to establish SMTP session: {e}") from e

        logger.debug("SMTP connection established")
        return smtp

    def _login(self, smtp: smtplib.SMTP) -> None:
        """Authenticate with the session credentials.

        smtplib debug output echoes the AUTH command, whose argument is the
        base64-encoded password, so it is switched off for the exchange.
        """
        logger.debug(f"Authenticating as {self.session.username.text}")

        if self.session.relay.debug:
            smtp.set_debuglevel(0)

        try:
            smtp.login(
                self.session.username.text,
                self.session.password.text.get_secret_value(),
            )
        finally:
            if self.session.relay.debug:
                smtp.set_debuglevel(1)

    @staticmethod
    def _close_connection(smtp: smtplib.SMTP) -> None:
        """Close an SMTP connection, ignoring errors."""
        try:
            smtp.quit()
        except Exception as e:
            logger.debug(f"Error closing SMTP connection (non-critical): {e}")

    def send(self, message: MIMEText) -> None:
        """Send a message over a new authenticated connection.

        Args:
            message: Message built by ``build_message``.

        Raises:
            SMTPClientError: If the connection, authentication or send fails.
        """
        smtp = self._open_connection()

        try:
            smtp.send_message(message)
            logger.info(f"Email sent to {message['To']} - Subject: {message['Subject']}")
        except Exception as e:
            logger.error(f"Failed to send email to {message['To']}: {e}")
            raise SMTPClientError(f"Failed to send email to {message['To']}: {e}") from e
        finally:
            self._close_connection(smtp)

    def validate_connection(self) -> bool:
        """Test SMTP connection and authentication.

        Returns:
            True if connection successful, False otherwise.
        """
        try:
            logger.info("Testing SMTP connection...")
            smtp = self._open_connection()
        except SMTPClientError as e:
            logger.error(f"SMTP connection test failed: {e}")
            return False

        self._close_connection(smtp)
        logger.info("SMTP connection test successful")
        return True
