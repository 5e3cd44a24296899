"""
Widgets for textform.
"""

from .line_edit_form import LineEditForm

__all__ = ["LineEditForm"]
