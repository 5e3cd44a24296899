"""
Custom error presentation demo: the surrounding panel changes color instead
of the input showing the default error.
"""

from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from formcore.field_validator import FieldValidator
from formcore.group import check
from formcore.rules import FieldType
from formcore.template import Template

from ..styling import StyleSheets
from ..widgets import LineEditForm


class PersonalizedErrorPage(QWidget):
    """Single required field validated on submit only."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._enabled_button = False
        self._setup_ui()
        self._setup_validation()

    def _setup_ui(self) -> None:
        self.panel = QFrame(self)
        self.panel.setObjectName("errorPanel")
        self.panel.setStyleSheet(StyleSheets.get_panel_style(False))

        self.edit = LineEditForm(self.panel, name="personalized")
        self.edit.setPlaceholderText("Required text")

        panel_layout = QVBoxLayout(self.panel)
        panel_layout.addWidget(self.edit)

        self.status_label = QLabel("", self)
        self.next_button = QPushButton("Next", self)
        self.next_button.clicked.connect(self.on_next_clicked)

        layout = QVBoxLayout(self)
        layout.addWidget(self.panel)
        layout.addWidget(self.status_label)
        layout.addWidget(self.next_button)
        layout.addStretch()

    def _setup_validation(self) -> None:
        template = (
            Template.Builder()
            .set_type(FieldType.TEXT, "obligatory_field")
            .set_on_focus_change_error(False)
            .set_display_error_function(self._display_normal, self._display_error)
            .build()
        )
        self.edit.form_field.initialize_from_template(template)

        check(self.edit.form_field, self._enable, self._disable)

    def _display_normal(self, _field: FieldValidator) -> None:
        self.panel.setStyleSheet(StyleSheets.get_panel_style(False))

    def _display_error(self, _field: FieldValidator) -> None:
        self.panel.setStyleSheet(StyleSheets.get_panel_style(True))

    def _enable(self) -> None:
        self._enabled_button = True

    def _disable(self) -> None:
        self._enabled_button = False

    def on_next_clicked(self) -> None:
        if self._enabled_button:
            self.status_label.setText("Success")
        else:
            self.status_label.setText("")
            # An untouched field has no error tag yet
            self.edit.form_field.verify()
            self.edit.show_error()
