"""
Live validation state for a single text input.

A FieldValidator receives text, focus and submit events from its input
surface, re-runs its RuleSet on every change and notifies a single listener
whenever the validity flag flips.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from .errors import ErrorCode, FailureKind, TemplateError
from .rules import ErrorTag, FieldType, Predicate, Rule, RuleSet

if TYPE_CHECKING:
    from .template import Template

logger = logging.getLogger(__name__)

ValidityListener = Callable[[bool], None]
DisplayHook = Callable[["FieldValidator"], None]


class InputSurface(Protocol):
    """Default error presenter for a field when no display hook is set."""

    def set_error(self, error_tag: ErrorTag) -> None: ...
    def clear_error(self) -> None: ...


class FieldValidator:
    """
    Validation configuration and current validity of one input.

    Fields start invalid until they are first verified.
    """

    def __init__(self, name: str = "", surface: InputSurface | None = None, text: str = ""):
        self.name = name
        self.surface = surface
        self.text = text

        self._rules = RuleSet()
        self._is_valid = False
        self.current_error_tag: ErrorTag | None = None
        self.failure = FailureKind.NONE

        self.show_error_on_blur = False
        self.on_validity_changed: ValidityListener | None = None
        self.display_normal: DisplayHook | None = None
        self.display_error: DisplayHook | None = None

    def __repr__(self) -> str:
        return f"FieldValidator(name={self.name!r}, type={self.field_type.name}, valid={self._is_valid})"

    # Configuration

    @property
    def field_type(self) -> FieldType:
        return self._rules.field_type

    @property
    def type_error_tag(self) -> ErrorTag | None:
        return self._rules.type_error_tag

    @property
    def extra_rules(self) -> tuple[Rule, ...]:
        return self._rules.extra_rules

    def set_type(self, field_type: FieldType, error_tag: ErrorTag | None) -> None:
        """
        Set the built-in verification and the error reported when it fails.

        Args:
            field_type: Type to verify the input against
            error_tag: Error to report if the verification fails
        """
        if not isinstance(field_type, FieldType):
            raise TemplateError(
                f"Unknown field type: {field_type!r}",
                code=ErrorCode.INVALID_FIELD_TYPE,
                context={"field": self.name},
            )
        self._rules.field_type = field_type
        self._rules.type_error_tag = error_tag

    def add_validation(self, predicate: Predicate, error_tag: ErrorTag) -> None:
        """
        Add an extra validation with the error to report if it fails.

        Extra validations run in the order they were added, before the type
        check.
        """
        if not callable(predicate):
            raise TemplateError(
                "Validation must be callable",
                code=ErrorCode.INVALID_RULE,
                context={"field": self.name},
            )
        self._rules.add(Rule(predicate, error_tag))

    def initialize_from_template(self, template: Template) -> None:
        """Overwrite the whole configuration with the template's."""
        self.set_type(template.field_type, template.type_error_tag)
        self.show_error_on_blur = template.show_error_on_blur
        self.display_normal = template.display_normal
        self.display_error = template.display_error
        self._rules.replace_extras(template.extra_rules)
        logger.debug(f"Field '{self.name}' initialized from template ({template.field_type.name})")

    # Validity

    @property
    def is_valid(self) -> bool:
        return self._is_valid

    @is_valid.setter
    def is_valid(self, value: bool) -> None:
        old_value = self._is_valid
        self._is_valid = value
        if old_value != value:
            logger.debug(f"Field '{self.name}' validity changed: {old_value} -> {value}")
            if self.on_validity_changed is not None:
                self.on_validity_changed(value)

    def verify(self) -> bool:
        """
        Verify the current text against every rule.

        Returns:
            The new validity flag
        """
        result = self._rules.evaluate(self.text)
        self.failure = result.failure
        self.current_error_tag = result.error_tag
        self.is_valid = result.valid
        return result.valid

    # Input surface events

    def on_text_changed(self, new_text: str) -> None:
        self.text = new_text
        if self.display_normal is not None:
            self.display_normal(self)
        elif self.surface is not None:
            self.surface.clear_error()
        self.verify()

    def on_focus_changed(self, has_focus: bool) -> None:
        if not self.show_error_on_blur:
            return
        if has_focus:
            self.verify()
        elif self.current_error_tag is not None:
            self.show_error()

    def on_submit_action(self) -> None:
        if not self.show_error_on_blur:
            return
        self.verify()
        if self.current_error_tag is not None:
            self.show_error()

    def show_error(self) -> None:
        """Show the current error, if there is one."""
        if self.current_error_tag is None:
            return
        if self.display_error is not None:
            self.display_error(self)
        elif self.surface is not None:
            self.surface.set_error(self.current_error_tag)
