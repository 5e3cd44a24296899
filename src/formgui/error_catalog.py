"""
Lookup table from error tags to user-facing text.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping

logger = logging.getLogger(__name__)

# Messages used by the demo screens
DEFAULT_MESSAGES: dict[Hashable, str] = {
    "obligatory_field": "This field is required",
    "valid_email": "Enter a valid email address",
    "only_numbers": "Only numbers are allowed",
    "card_length": "The card number must have 16 digits",
    "blank_spaces_error": "Blank spaces are not allowed",
}


class ErrorCatalog:
    """Resolves opaque error tags to display text."""

    def __init__(self, messages: Mapping[Hashable, str] | None = None):
        self._messages: dict[Hashable, str] = dict(DEFAULT_MESSAGES if messages is None else messages)

    def register(self, tag: Hashable, message: str) -> None:
        self._messages[tag] = message

    def resolve(self, tag: Hashable) -> str:
        """
        Get the text for ``tag``.

        Unknown tags resolve to their string form.
        """
        try:
            return self._messages[tag]
        except KeyError:
            logger.warning(f"No message registered for error tag {tag!r}")
            return str(tag)

    def __contains__(self, tag: object) -> bool:
        return tag in self._messages


_default_catalog: ErrorCatalog | None = None


def get_default_catalog() -> ErrorCatalog:
    """Get the shared catalog used by widgets created without one."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = ErrorCatalog()
    return _default_catalog
