"""Custom exceptions for the collection notifier.

Defines the exception types raised while building a gateway and while
talking to the SMTP relay. Note that a failed notification is NOT an
exception: ``EmailOutputGateway.notify`` returns a ``NotifyError`` value
(see ``collection_notifier.models.result``).

Created: 2026-10-19
Version: 1.0.0
"""


class CollectionNotifierError(Exception):
    """Base exception for all collection notifier errors.

    Allows consumers to catch every notifier-related error with a single
    except block.

    Example:
        try:
            gateway = create_gateway_from_config(settings)
        except CollectionNotifierError as e:
            logger.error(f"Notifier unavailable: {e}")
    """

    pass


class GatewayConfigError(CollectionNotifierError):
    """Exception raised for configuration errors.

    Raised while constructing a gateway from invalid or missing settings,
    e.g. an unparseable sender address or an empty SMTP password. These
    failures surface at construction time and are never deferred into a
    ``NotifyError``.

    Example:
        raise GatewayConfigError("SMTP_PASSWORD environment variable not set")
    """

    pass


class SMTPClientError(CollectionNotifierError):
    """Exception raised for SMTP connection/delivery failures.

    Indicates problems with the SMTP connection, TLS negotiation,
    authentication, or message hand-off. The gateway converts it into a
    ``NotifyError`` result; it only escapes when ``SMTPClient`` is used
    directly.

    Example:
        raise SMTPClientError("Connection timeout to smtp.mail.me.com:587")
    """

    pass
