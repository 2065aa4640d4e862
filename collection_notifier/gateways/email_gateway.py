"""Email output gateway.

Sends collection reminders by email through the fixed SMTP relay. Each
``notify`` call renders the subject, builds a fresh SMTP session, composes
one plain-text message and hands it to the relay. Every failure, whatever
its cause, is returned as the same ``NotifyError`` value.

Version: 1.0.0
"""

from __future__ import annotations

import smtplib
from collections.abc import Callable

from pydantic import ValidationError

from collection_notifier.clients.smtp import SMTPClient, build_message
from collection_notifier.config.settings import NotifierConfig
from collection_notifier.core.exceptions import GatewayConfigError
from collection_notifier.core.logger import get_logger, log_context
from collection_notifier.gateways.ports import UpcomingOutputGateway
from collection_notifier.models.email import (
    EmailBodyText,
    EmailFrom,
    EmailPassword,
    EmailTo,
    EmailUserName,
    SubjectTemplate,
)
from collection_notifier.models.result import Delivered, NotifyError, NotifyResult
from collection_notifier.models.service import ServiceEvent
from collection_notifier.models.smtp_config import (
    DEFAULT_RELAY,
    SMTPRelayConfig,
    SMTPSession,
)
from collection_notifier.templates.renderer import SubjectRenderer

logger = get_logger(__name__)


def build_session(
    relay: SMTPRelayConfig, username: EmailUserName, password: EmailPassword
) -> SMTPSession:
    """Assemble the settings for one authenticated SMTP connection."""
    return SMTPSession(relay=relay, username=username, password=password)


class EmailOutputGateway:
    """Email implementation of ``UpcomingOutputGateway``.

    All fields are set once at construction and never modified, so a single
    instance may be shared between threads.

    Attributes:
        email_from: Sender mailbox.
        email_to: Recipient mailbox.
        body_text: Body sent with every notification.
        subject_template: Subject line template.
        relay: SMTP relay settings.
    """

    def __init__(
        self,
        user_name: EmailUserName,
        password: EmailPassword,
        email_from: EmailFrom,
        email_to: EmailTo,
        body_text: EmailBodyText,
        subject_template: SubjectTemplate,
        relay: SMTPRelayConfig = DEFAULT_RELAY,
        smtp_factory: Callable[..., smtplib.SMTP] | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            user_name: SMTP login name.
            password: SMTP login password.
            email_from: Sender mailbox.
            email_to: Recipient mailbox.
            body_text: Plain-text body.
            subject_template: Subject template; ``<<serviceType>>`` is replaced.
            relay: SMTP relay settings.
            smtp_factory: Factory for SMTP connections (defaults to smtplib.SMTP).
        """
        self._user_name = user_name
        self._password = password
        self.email_from = email_from
        self.email_to = email_to
        self.body_text = body_text
        self.subject_template = subject_template
        self.relay = relay
        self._smtp_factory = smtp_factory
        self._renderer = SubjectRenderer(subject_template)

    def notify(self, event: ServiceEvent) -> NotifyResult:
        """Email a reminder about ``event``.

        Args:
            event: Collection event to notify about.

        Returns:
            ``Delivered`` once the relay accepted the message, otherwise
            ``NotifyError``.
        """
        context = log_context(
            "notify",
            service_type=event.service_type.display_name,
            recipient=self.email_to.address,
        )

        try:
            subject = self._renderer.render(event)
            client = SMTPClient(
                build_session(self.relay, self._user_name, self._password),
                smtp_factory=self._smtp_factory,
            )
            client.send(
                build_message(
                    self.email_from.address,
                    self.email_to.address,
                    subject,
                    self.body_text.text,
                )
            )
        except Exception as e:
            logger.warning(f"Notification not sent: {context} ({type(e).__name__})")
            return NotifyError()

        logger.info(f"Notification sent: {context}")
        return Delivered()


def create_email_output_gateway(
    user_name: EmailUserName,
    password: EmailPassword,
    email_from: EmailFrom,
    email_to: EmailTo,
    body_text: EmailBodyText,
    subject_template: SubjectTemplate,
    relay: SMTPRelayConfig = DEFAULT_RELAY,
    smtp_factory: Callable[..., smtplib.SMTP] | None = None,
) -> UpcomingOutputGateway:
    """Construct a new email output gateway.

    Mails are sent over SMTP to the relay described by ``relay``. The
    subject template may contain the token ``<<serviceType>>``, replaced
    with ``Refuse`` or ``Recycling`` depending on the event.
    """
    return EmailOutputGateway(
        user_name,
        password,
        email_from,
        email_to,
        body_text,
        subject_template,
        relay=relay,
        smtp_factory=smtp_factory,
    )


def _describe_validation_error(error: ValidationError) -> str:
    """Summarise a validation error without echoing input values."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or error.title}: {err['msg']}"
        for err in error.errors()
    )


def create_gateway_from_config(
    config: NotifierConfig,
    smtp_factory: Callable[..., smtplib.SMTP] | None = None,
) -> UpcomingOutputGateway:
    """Construct an email output gateway from notifier settings.

    Args:
        config: Loaded notifier settings.
        smtp_factory: Factory for SMTP connections (defaults to smtplib.SMTP).

    Returns:
        Ready-to-use gateway.

    Raises:
        GatewayConfigError: If settings are missing or invalid.
    """
    config.validate_smtp_config()

    try:
        gateway = create_email_output_gateway(
            EmailUserName(text=config.SMTP_USER),
            EmailPassword(text=config.SMTP_PASSWORD),
            EmailFrom(address=config.EMAIL_FROM),
            EmailTo(address=config.EMAIL_TO),
            EmailBodyText(text=config.EMAIL_BODY_TEXT),
            SubjectTemplate(text=config.EMAIL_SUBJECT_TEMPLATE),
            smtp_factory=smtp_factory,
        )
    except ValidationError as e:
        logger.error(f"Invalid notifier configuration: {_describe_validation_error(e)}")
        raise GatewayConfigError(
            f"Invalid notifier configuration: {_describe_validation_error(e)}"
        ) from None

    logger.info(f"Email gateway ready: {config.EMAIL_FROM} → {config.EMAIL_TO}")
    return gateway
