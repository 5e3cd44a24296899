"""
Long form demo: fifteen fields configured by a single template.

The template comes from ``scroll-form.json`` in the presets directory when
that file exists, otherwise from the built-in preset below.
"""

import logging
from typing import Any

from PySide6.QtWidgets import QPushButton, QScrollArea, QVBoxLayout, QWidget

from formcore.config import SCHEMA_VERSION
from formcore.errors import FormError
from formcore.group import check_all
from formcore.presets import load_preset, template_from_preset
from formcore.template import Template, apply_template

from ..settings import get_presets_dir
from ..widgets import LineEditForm

logger = logging.getLogger(__name__)

FIELD_COUNT = 15
PRESET_FILENAME = "scroll-form.json"

SCROLL_FORM_PRESET: dict[str, Any] = {
    "schema_version": SCHEMA_VERSION,
    "name": "Scroll form",
    "description": "Required text without blank spaces",
    "template": {
        "type": "text",
        "type_error": "obligatory_field",
        "show_error_on_blur": True,
        "rules": [{"kind": "pattern", "value": "[^ ]*", "error": "blank_spaces_error"}],
    },
}


def load_scroll_template() -> Template:
    """Load the user's preset if there is a valid one, else the built-in preset."""
    preset_path = get_presets_dir() / PRESET_FILENAME
    if preset_path.exists():
        try:
            return load_preset(preset_path)
        except FormError as e:
            logger.warning(f"Ignoring preset {preset_path}: {e}")
    return template_from_preset(SCROLL_FORM_PRESET)


class ScrollFormPage(QWidget):
    """Scrollable list of fields sharing one template."""

    def __init__(self, parent: QWidget | None = None, template: Template | None = None) -> None:
        super().__init__(parent)
        self._template = template or load_scroll_template()
        self._setup_ui()
        self._setup_validation()

    def _setup_ui(self) -> None:
        content = QWidget()
        content_layout = QVBoxLayout(content)
        self.edits: list[LineEditForm] = []
        for index in range(1, FIELD_COUNT + 1):
            edit = LineEditForm(content, name=f"field{index}")
            edit.setPlaceholderText(f"Field {index}")
            content_layout.addWidget(edit)
            self.edits.append(edit)

        scroll_area = QScrollArea(self)
        scroll_area.setWidgetResizable(True)
        scroll_area.setWidget(content)

        self.next_button = QPushButton("Next", self)

        layout = QVBoxLayout(self)
        layout.addWidget(scroll_area)
        layout.addWidget(self.next_button)

    def _setup_validation(self) -> None:
        fields = [edit.form_field for edit in self.edits]
        apply_template(self._template, fields)
        check_all(
            fields,
            lambda: self.next_button.setEnabled(True),
            lambda: self.next_button.setEnabled(False),
        )
