"""SMTP relay configuration models.

Defines the fixed relay settings and the per-send session record that
``SMTPClient`` consumes.

Created: 2026-10-19
Version: 1.0.0
"""

from pydantic import BaseModel, Field

from collection_notifier.models.email import EmailPassword, EmailUserName


class SMTPRelayConfig(BaseModel):
    """SMTP relay connection settings.

    Attributes:
        host: SMTP server hostname.
        port: SMTP server port (1-65535).
        starttls_required: Whether STARTTLS must be negotiated before login.
        debug: Whether smtplib prints the protocol conversation.
        auth_required: Whether to log in before sending.
        timeout: Connection timeout in seconds.
    """

    host: str = Field(..., min_length=1, description="SMTP server hostname")
    port: int = Field(..., ge=1, le=65535, description="SMTP server port")
    starttls_required: bool = Field(default=True, description="Require STARTTLS")
    debug: bool = Field(default=False, description="Verbose SMTP protocol output")
    auth_required: bool = Field(default=True, description="Authenticate before send")
    timeout: int = Field(
        default=30, ge=5, le=120, description="Connection timeout (seconds)"
    )

    model_config = {"frozen": True}


# iCloud Mail relay used for all notifications
DEFAULT_RELAY = SMTPRelayConfig(
    host="smtp.mail.me.com",
    port=587,
    starttls_required=True,
    debug=True,
    auth_required=True,
)


class SMTPSession(BaseModel):
    """Everything needed to open one authenticated SMTP connection.

    Attributes:
        relay: Relay connection settings.
        username: Login name presented to the relay.
        password: Login password presented to the relay.
    """

    relay: SMTPRelayConfig
    username: EmailUserName
    password: EmailPassword

    model_config = {"frozen": True}
