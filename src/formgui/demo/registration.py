"""
Registration form demo: three typed fields and a Next button that is only
visible while every field is valid.
"""

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QFormLayout, QPushButton, QVBoxLayout, QWidget

from formcore.config import DEFAULT_CONFIG
from formcore.group import check_all
from formcore.rules import FieldType

from ..widgets import LineEditForm


class RegistrationPage(QWidget):
    """Name, email and card number with errors shown on blur."""

    nextRequested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self._setup_validation()

    def _setup_ui(self) -> None:
        self.name_edit = LineEditForm(self, name="name")
        self.name_edit.setPlaceholderText("Name")
        self.email_edit = LineEditForm(self, name="email")
        self.email_edit.setPlaceholderText("Email")
        self.card_edit = LineEditForm(self, name="card")
        self.card_edit.setPlaceholderText("Card number")

        form = QFormLayout()
        form.addRow("Name", self.name_edit)
        form.addRow("Email", self.email_edit)
        form.addRow("Card", self.card_edit)

        self.next_button = QPushButton("Next", self)
        self.next_button.clicked.connect(self.nextRequested.emit)

        layout = QVBoxLayout(self)
        layout.addLayout(form)
        layout.addWidget(self.next_button)
        layout.addStretch()

    def _setup_validation(self) -> None:
        blur_errors = bool(DEFAULT_CONFIG["show_error_on_blur"])

        self.name_edit.set_type(FieldType.TEXT, "obligatory_field")
        self.email_edit.set_type(FieldType.EMAIL, "valid_email")
        self.card_edit.set_type(FieldType.NUMBER, "only_numbers")
        self.card_edit.add_validation(lambda text: len(text) == 16, "card_length")
        for edit in self.fields():
            edit.set_show_error_on_blur(blur_errors)

        check_all(
            [edit.form_field for edit in self.fields()],
            lambda: self.next_button.setVisible(True),
            lambda: self.next_button.setVisible(False),
        )

    def fields(self) -> list[LineEditForm]:
        return [self.name_edit, self.email_edit, self.card_edit]
