"""Subject line renderer.

Substitutes ``<<name>>`` tokens in the subject template. Substitution is
literal and applied pair by pair, in order, to the text produced by the
previous pair. A value containing a token for a *later* pair is therefore
substituted again; nothing is re-scanned afterwards. Unknown tokens are
left as they are and nothing is escaped.

Version: 1.0.0
"""

from __future__ import annotations

from collections.abc import Iterable

from collection_notifier.core.logger import get_logger
from collection_notifier.models.email import SubjectTemplate
from collection_notifier.models.service import ServiceEvent

logger = get_logger(__name__)

SERVICE_TYPE_TOKEN = "serviceType"


def build_token(token_text: str) -> str:
    """Wrap a token name in its delimiters: ``name`` -> ``<<name>>``."""
    return f"<<{token_text}>>"


def replace_tokens(
    tokens_and_replacements: Iterable[tuple[str, str]], template_text: str
) -> str:
    """Replace every ``<<token>>`` occurrence with its value.

    Args:
        tokens_and_replacements: Ordered (token name, replacement) pairs.
        template_text: Text containing zero or more tokens.

    Returns:
        The substituted text.
    """
    text = template_text
    for token, replacement in tokens_and_replacements:
        text = text.replace(build_token(token), replacement)
    return text


class SubjectRenderer:
    """Renders the subject line for a collection event.

    The only token filled in is ``<<serviceType>>``, replaced with the
    event's service type as a capitalised word (``Refuse``, ``Recycling``).
    """

    def __init__(self, subject_template: SubjectTemplate) -> None:
        self.subject_template = subject_template

    def render(self, event: ServiceEvent) -> str:
        """Render the subject for ``event``.

        Args:
            event: Collection event being notified about.

        Returns:
            Rendered subject line.
        """
        subject = replace_tokens(
            [(SERVICE_TYPE_TOKEN, event.service_type.display_name)],
            self.subject_template.text,
        )
        logger.debug(f"Subject rendered: {subject}")
        return subject
