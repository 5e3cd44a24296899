"""
Validity callbacks for single fields and groups of fields.

Each field holds a single validity listener, so registering a field again
(through ``check`` or ``check_all``) replaces its previous listener.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .field_validator import FieldValidator

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


def check(field: FieldValidator, on_valid: Callback, on_invalid: Callback) -> None:
    """
    Call ``on_valid`` or ``on_invalid`` whenever the validity of ``field`` changes.

    Args:
        field: Field to observe
        on_valid: Called when the field becomes valid
        on_invalid: Called when the field becomes invalid
    """

    def verify_function(is_valid: bool) -> None:
        if is_valid:
            on_valid()
        else:
            on_invalid()

    field.on_validity_changed = verify_function


def check_all(fields: Sequence[FieldValidator], on_all_valid: Callback, on_any_invalid: Callback) -> None:
    """
    Observe the conjunction of every field's validity.

    One of the callbacks is called immediately with the current state, and
    again every time any member's validity changes. An empty group is valid.

    Args:
        fields: Fields to observe
        on_all_valid: Called when every field is valid
        on_any_invalid: Called when at least one field is invalid
    """
    members = list(fields)

    def verify_function(_changed: bool | None = None) -> None:
        if all(field.is_valid for field in members):
            on_all_valid()
        else:
            on_any_invalid()

    verify_function()
    for field in members:
        field.on_validity_changed = verify_function
    logger.debug(f"Registered group of {len(members)} field(s)")
