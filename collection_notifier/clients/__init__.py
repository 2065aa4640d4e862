"""Clients module for the collection notifier.

Contains the SMTP delivery client.

Version: 1.0.0
"""

from collection_notifier.clients.smtp import SMTPClient, build_message

__all__ = ["SMTPClient", "build_message"]
