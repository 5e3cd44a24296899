"""
QLineEdit bound to a FieldValidator.

The widget forwards text, focus and return-key events to its FieldValidator
and provides the default error presentation: a red border, the ``hasError``
dynamic property and the resolved error text as tooltip.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable

from PySide6.QtGui import QFocusEvent
from PySide6.QtWidgets import QLineEdit, QWidget

from formcore.field_validator import FieldValidator
from formcore.rules import FieldType, Predicate

from ..error_catalog import ErrorCatalog, get_default_catalog
from ..styling import apply_error_style, refresh_style

logger = logging.getLogger(__name__)


class LineEditForm(QLineEdit):
    """
    Text input with live validation.

    Configuration goes through ``form_field`` (or the shortcuts below); the
    ``formcore`` group and template functions take ``form_field`` values.
    """

    def __init__(
        self,
        parent: QWidget | None = None,
        name: str = "",
        catalog: ErrorCatalog | None = None,
    ):
        super().__init__(parent)
        if name:
            self.setObjectName(name)
        self._catalog = catalog or get_default_catalog()
        self._error_text: str | None = None
        self._original_tooltip = ""
        self._original_style = ""

        self.form_field = FieldValidator(name, surface=self, text=self.text())

        self.textChanged.connect(self.form_field.on_text_changed)
        self.returnPressed.connect(self.form_field.on_submit_action)

    # Shortcuts

    def set_type(self, field_type: FieldType, error_tag: Hashable | None) -> None:
        self.form_field.set_type(field_type, error_tag)

    def add_validation(self, predicate: Predicate, error_tag: Hashable) -> None:
        self.form_field.add_validation(predicate, error_tag)

    def set_show_error_on_blur(self, enabled: bool) -> None:
        self.form_field.show_error_on_blur = enabled

    def is_valid(self) -> bool:
        return self.form_field.is_valid

    def show_error(self) -> None:
        self.form_field.show_error()

    # Event wiring

    def focusInEvent(self, event: QFocusEvent) -> None:
        super().focusInEvent(event)
        self.form_field.on_focus_changed(True)

    def focusOutEvent(self, event: QFocusEvent) -> None:
        super().focusOutEvent(event)
        self.form_field.on_focus_changed(False)

    # Default error presentation

    def error_text(self) -> str | None:
        """Text of the error currently displayed, or None."""
        return self._error_text

    def set_error(self, error_tag: Hashable) -> None:
        """Display the text for ``error_tag`` on this widget."""
        if self._error_text is None:
            self._original_tooltip = self.toolTip()
            self._original_style = self.styleSheet()

        self._error_text = self._catalog.resolve(error_tag)
        self.setProperty("hasError", True)
        self.setToolTip(self._error_text)
        apply_error_style(self)
        logger.debug(f"Showing error on '{self.form_field.name}': {self._error_text}")

    def clear_error(self) -> None:
        """Restore the presentation that was active before ``set_error``."""
        if self._error_text is None:
            return
        self._error_text = None
        self.setProperty("hasError", False)
        self.setToolTip(self._original_tooltip)
        self.setStyleSheet(self._original_style)
        refresh_style(self)
