"""
Qt-side settings for the textform demo.
"""

from pathlib import Path

from PySide6.QtCore import QCoreApplication, QSettings, QStandardPaths

from formcore.config import APP_NAME, APP_ORGANIZATION, DEFAULT_CONFIG

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def setup_qsettings() -> None:
    """
    Configure QSettings with application identifiers.

    This should be called early in application startup.
    """
    QCoreApplication.setOrganizationName(APP_ORGANIZATION)
    QCoreApplication.setApplicationName(APP_NAME)


def get_app_config_dir() -> Path:
    """Get the writable configuration directory for this application."""
    config_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
    return Path(config_location) / APP_ORGANIZATION / APP_NAME


def get_presets_dir() -> Path:
    """Get the directory where template presets are looked up."""
    return get_app_config_dir() / "presets"


def load_log_level() -> str:
    """Read the configured log level, falling back to the default."""
    value = str(QSettings().value("log_level", DEFAULT_CONFIG["log_level"])).upper()
    if value not in LOG_LEVELS:
        return str(DEFAULT_CONFIG["log_level"])
    return value
