"""
Demo pages showing textform validation on PySide6 widgets.
"""

from .main_window import MainWindow
from .personalized_error import PersonalizedErrorPage
from .registration import RegistrationPage
from .scroll_form import ScrollFormPage

__all__ = [
    "MainWindow",
    "PersonalizedErrorPage",
    "RegistrationPage",
    "ScrollFormPage",
]
