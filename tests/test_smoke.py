"""
Smoke tests for the textform demo application.
These tests verify basic functionality and environment setup.
"""

import os
import sys

# Set offscreen platform to prevent display errors on headless systems
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def test_pyside6_imports():
    """Test that PySide6 can be imported successfully."""
    import PySide6  # noqa: F401
    from PySide6.QtWidgets import QApplication  # noqa: F401


def test_packages_import():
    """Test that both packages import and expose their public API."""
    import formcore
    from formgui.widgets import LineEditForm  # noqa: F401

    assert callable(formcore.check_all)
    assert formcore.FieldType.EMAIL.value == "email"


def test_main_window_constructs():
    """Test that the demo window can be constructed without errors."""
    from PySide6.QtWidgets import QApplication

    from formgui.demo import MainWindow
    from formgui.main import main as app_main

    app = QApplication.instance() or QApplication(sys.argv)  # noqa: F841

    assert callable(app_main)

    window = MainWindow()
    assert window.windowTitle() == "Textform demo"
    assert window.tabs.count() == 3

    window.close()
