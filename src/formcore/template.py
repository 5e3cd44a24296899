"""
Reusable validation configuration.

A Template is built once with Template.Builder and stamped onto any number of
fields. Applying a template replaces a field's whole configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from .field_validator import DisplayHook, FieldValidator
from .rules import ErrorTag, FieldType, Predicate, Rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Template:
    """Immutable snapshot of a field's validation configuration."""

    field_type: FieldType = FieldType.NONE
    type_error_tag: ErrorTag | None = None
    show_error_on_blur: bool = False
    extra_rules: tuple[Rule, ...] = ()
    display_normal: DisplayHook | None = None
    display_error: DisplayHook | None = None

    class Builder:
        """Accumulates settings; ``build()`` returns a new Template each time."""

        def __init__(self) -> None:
            self._draft = Template()
            self._rules: list[Rule] = []

        def set_type(self, field_type: FieldType, error_tag: ErrorTag | None = None) -> Template.Builder:
            self._draft = replace(self._draft, field_type=field_type, type_error_tag=error_tag)
            return self

        def set_on_focus_change_error(self, show_error_on_blur: bool) -> Template.Builder:
            self._draft = replace(self._draft, show_error_on_blur=show_error_on_blur)
            return self

        def add_validation(self, predicate: Predicate, error_tag: ErrorTag) -> Template.Builder:
            self._rules.append(Rule(predicate, error_tag))
            return self

        def set_display_error_function(
            self,
            normal_function: DisplayHook,
            error_function: DisplayHook,
        ) -> Template.Builder:
            """
            Replace the default error presentation.

            Args:
                normal_function: Called on every text change to reset the presentation
                error_function: Called by ``show_error()`` while the field is invalid
            """
            self._draft = replace(self._draft, display_normal=normal_function, display_error=error_function)
            return self

        def build(self) -> Template:
            return replace(self._draft, extra_rules=tuple(self._rules))


def apply_template(template: Template, fields: Iterable[FieldValidator]) -> None:
    """Initialize every field in ``fields`` with ``template``."""
    count = 0
    for field in fields:
        field.initialize_from_template(template)
        count += 1
    logger.debug(f"Applied {template.field_type.name} template to {count} field(s)")


# Canonical pristine configuration
CLEAR_TEMPLATE = Template.Builder().set_type(FieldType.NONE, None).set_on_focus_change_error(False).build()


def clear_all(fields: Iterable[FieldValidator]) -> None:
    """Reset every field in ``fields`` to no type, no extra rules and no blur errors."""
    apply_template(CLEAR_TEMPLATE, fields)
