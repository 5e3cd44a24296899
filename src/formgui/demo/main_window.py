"""
Main window for the textform demo application.
"""

from PySide6.QtWidgets import QMainWindow, QTabWidget

from .personalized_error import PersonalizedErrorPage
from .registration import RegistrationPage
from .scroll_form import ScrollFormPage


class MainWindow(QMainWindow):
    """Tabbed window hosting the three demo pages."""

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Textform demo")
        self.resize(480, 560)

        self.tabs = QTabWidget(self)
        self.registration_page = RegistrationPage()
        self.personalized_page = PersonalizedErrorPage()
        self.scroll_page = ScrollFormPage()

        self.tabs.addTab(self.registration_page, "Registration")
        self.tabs.addTab(self.personalized_page, "Custom error")
        self.tabs.addTab(self.scroll_page, "Long form")
        self.setCentralWidget(self.tabs)

        self.registration_page.nextRequested.connect(lambda: self.tabs.setCurrentWidget(self.scroll_page))
