"""
Main entry point for the textform demo application.
"""

import logging
import sys

from PySide6.QtWidgets import QApplication

from formgui.demo import MainWindow
from formgui.settings import load_log_level, setup_qsettings


def main() -> int:
    """Main application entry point."""
    app = QApplication(sys.argv)
    setup_qsettings()

    logging.basicConfig(
        level=load_log_level(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    window = MainWindow()
    window.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
