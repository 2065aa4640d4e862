"""Email gateway value models.

Immutable values injected into ``EmailOutputGateway`` at construction:
SMTP credentials, sender and recipient mailboxes, body text and subject
template. Addresses are validated here, so an invalid mailbox fails when
the value is built rather than when a notification is sent.

Created: 2026-10-19
Version: 1.0.0
"""

from pydantic import BaseModel, EmailStr, Field, SecretStr, field_validator


class EmailUserName(BaseModel):
    """SMTP login name."""

    text: str = Field(..., description="SMTP authentication username")

    model_config = {"frozen": True}

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate username is not empty.

        Raises:
            ValueError: If username is empty or whitespace.
        """
        if not v or not v.strip():
            raise ValueError("SMTP username cannot be empty")
        return v


class EmailPassword(BaseModel):
    """SMTP login password.

    Stored as ``SecretStr`` so it is masked in ``repr``/``str`` and in
    validation errors. Only ``SMTPClient`` reveals it, when logging in.
    """

    text: SecretStr = Field(..., description="SMTP authentication password")

    model_config = {"frozen": True}

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: SecretStr) -> SecretStr:
        """Validate password is not empty.

        Raises:
            ValueError: If password is empty or whitespace.
        """
        if not v.get_secret_value().strip():
            raise ValueError("SMTP password cannot be empty")
        return v


class EmailFrom(BaseModel):
    """Sender mailbox."""

    address: EmailStr = Field(..., description="Sender email address")

    model_config = {"frozen": True}


class EmailTo(BaseModel):
    """Recipient mailbox."""

    address: EmailStr = Field(..., description="Recipient email address")

    model_config = {"frozen": True}


class EmailBodyText(BaseModel):
    """Plain-text body sent unchanged with every notification."""

    text: str = Field(..., description="Plain-text email body")

    model_config = {"frozen": True}


class SubjectTemplate(BaseModel):
    """Subject line pattern.

    May contain ``<<name>>`` tokens; see
    ``collection_notifier.templates.renderer`` for the substitution rules.
    """

    text: str = Field(..., description="Subject line template")

    model_config = {"frozen": True}
