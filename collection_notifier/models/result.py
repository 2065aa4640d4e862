"""Notification result models.

``EmailOutputGateway.notify`` returns one of these values instead of
raising: ``Delivered`` once the relay accepted the message, ``NotifyError``
for any failure. ``NotifyError`` carries no detail; all instances compare
equal.

Created: 2026-10-19
Version: 1.0.0
"""

from pydantic import BaseModel


class Delivered(BaseModel):
    """The message was handed off to the SMTP relay."""

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return True


class NotifyError(BaseModel):
    """The notification attempt failed."""

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return False


NotifyResult = Delivered | NotifyError
