"""Templates module for the collection notifier.

Contains the ``<<token>>`` subject line renderer.

Version: 1.0.0
"""

from collection_notifier.templates.renderer import (
    SERVICE_TYPE_TOKEN,
    SubjectRenderer,
    build_token,
    replace_tokens,
)

__all__ = ["SubjectRenderer", "SERVICE_TYPE_TOKEN", "build_token", "replace_tokens"]
