"""
Shared styling utilities for textform widgets.

This module contains the color palette and stylesheets used to present
validation errors on input widgets.
"""

from typing import Any, Protocol


class StyleableWidget(Protocol):
    """Protocol for widgets that can be styled."""

    def setStyleSheet(self, styleSheet: str) -> None: ...
    def style(self) -> Any: ...


class AccessiblePalette:
    """
    Color palette with WCAG AA accessibility compliance.

    All combinations meet a minimum contrast ratio of 4.5:1 for normal text.
    """

    BORDER_ERROR = "#dc3545"

    BACKGROUND_DEFAULT = "#ffffff"
    BACKGROUND_HIGHLIGHT = "#cfe2ff"

    TEXT_PRIMARY = "#212529"


class StyleSheets:
    """Collection of reusable stylesheet definitions using the accessible palette."""

    @staticmethod
    def get_input_error_style() -> str:
        """Get stylesheet for an input showing an error."""
        return f"""
            QLineEdit {{
                border: 2px solid {AccessiblePalette.BORDER_ERROR};
                background-color: {AccessiblePalette.BACKGROUND_DEFAULT};
                color: {AccessiblePalette.TEXT_PRIMARY};
            }}
        """

    @staticmethod
    def get_panel_style(highlighted: bool) -> str:
        """Get background stylesheet for a container panel."""
        background = AccessiblePalette.BACKGROUND_HIGHLIGHT if highlighted else AccessiblePalette.BACKGROUND_DEFAULT
        return f"background-color: {background};"


def refresh_style(widget: StyleableWidget) -> None:
    """Force a style refresh after a dynamic property or stylesheet change."""
    widget.style().unpolish(widget)
    widget.style().polish(widget)


def apply_error_style(widget: StyleableWidget) -> None:
    """Apply the error stylesheet to an input widget."""
    widget.setStyleSheet(StyleSheets.get_input_error_style())
    refresh_style(widget)
