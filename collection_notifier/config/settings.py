"""Collection notifier configuration with Pydantic v2.

Manages SMTP credentials, addressing, message text and logging settings
loaded from environment variables or .env file. The SMTP relay itself is
fixed (see ``collection_notifier.models.smtp_config.DEFAULT_RELAY``) and is
deliberately absent here.

Created: 2026-10-19
Version: 1.0.0
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from collection_notifier.core.exceptions import GatewayConfigError


class NotifierConfig(BaseSettings):
    """Collection notifier configuration.

    Loads settings from environment variables and .env file using Pydantic v2.
    All settings are case-sensitive.

    Attributes:
        SMTP_USER: SMTP authentication username.
        SMTP_PASSWORD: SMTP authentication password.
        EMAIL_FROM: Sender email address.
        EMAIL_TO: Recipient email address.
        EMAIL_BODY_TEXT: Plain-text body of every notification.
        EMAIL_SUBJECT_TEMPLATE: Subject template with ``<<serviceType>>`` token.
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        LOG_TO_FILE: Whether to log to file.
        LOG_DIR: Directory for log files.
        LOG_MAX_SIZE_MB: Maximum log file size in megabytes.
        LOG_BACKUP_COUNT: Number of backup log files to keep.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ========================================================================
    # SMTP Credentials
    # ========================================================================
    SMTP_USER: str = Field(
        default="",
        description="SMTP authentication username",
    )
    SMTP_PASSWORD: str = Field(
        default="",
        description="SMTP authentication password",
    )

    # ========================================================================
    # Message Configuration
    # ========================================================================
    EMAIL_FROM: str = Field(
        default="",
        description="Sender email address",
    )
    EMAIL_TO: str = Field(
        default="",
        description="Recipient email address",
    )
    EMAIL_BODY_TEXT: str = Field(
        default="Don't forget to put the bin out.",
        description="Plain-text email body",
    )
    EMAIL_SUBJECT_TEMPLATE: str = Field(
        default="Collection reminder: <<serviceType>>",
        description="Subject line template",
    )

    # ========================================================================
    # Logging Configuration
    # ========================================================================
    LOG_LEVEL: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level",
    )
    LOG_TO_FILE: bool = Field(
        default=True,
        description="Whether to log to file",
    )
    LOG_DIR: str = Field(
        default="./logs",
        description="Directory for log files",
    )
    LOG_MAX_SIZE_MB: int = Field(
        default=10,
        gt=0,
        description="Maximum log file size in megabytes",
    )
    LOG_BACKUP_COUNT: int = Field(
        default=5,
        gt=0,
        description="Number of backup log files to keep",
    )

    @field_validator("SMTP_USER", "EMAIL_FROM", "EMAIL_TO")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip surrounding whitespace from names and addresses.

        Args:
            v: Value to clean.

        Returns:
            Value without leading/trailing whitespace.
        """
        return v.strip()

    def validate_smtp_config(self) -> None:
        """Validate that everything needed to send is present.

        Raises:
            GatewayConfigError: If required settings are missing.
        """
        missing_fields = []

        if not self.SMTP_USER:
            missing_fields.append("SMTP_USER")

        if not self.SMTP_PASSWORD or not self.SMTP_PASSWORD.strip():
            missing_fields.append("SMTP_PASSWORD")

        if not self.EMAIL_FROM:
            missing_fields.append("EMAIL_FROM")

        if not self.EMAIL_TO:
            missing_fields.append("EMAIL_TO")

        if missing_fields:
            raise GatewayConfigError(
                f"Required settings missing: {', '.join(missing_fields)}. "
                f"Set these environment variables to enable notifications."
            )
