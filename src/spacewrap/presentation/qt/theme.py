"""Theme and typography configuration for Qt presentation layer."""

from __future__ import annotations

import logging
from pathlib import Path
from uuid import uuid4

from PySide6.QtGui import QFont, QFontDatabase
from PySide6.QtWidgets import QApplication

LOGGER = logging.getLogger(__name__)
_ASSETS_DIR = Path(__file__).resolve().parents[2] / "assets"


def apply_theme(application: QApplication) -> None:
    """Apply typography and style sheet for the application."""
    correlation_id = str(uuid4())
    font_family = _configure_typography(application)
    stylesheet_loaded = _apply_stylesheet(application=application, correlation_id=correlation_id)
    LOGGER.info(
        "event=ui_theme_applied correlation_id=%s font_family=%s stylesheet_loaded=%s",
        correlation_id,
        font_family,
        stylesheet_loaded,
    )


def _configure_typography(application: QApplication) -> str:
    """Use the system fixed-width font so whitespace stays visible in editors."""
    font = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
    font.setStyleHint(QFont.StyleHint.Monospace)
    font.setPointSize(11)
    application.setFont(font, "QPlainTextEdit")
    return font.family()


def _apply_stylesheet(application: QApplication, correlation_id: str) -> bool:
    """Apply QSS stylesheet from package assets."""
    stylesheet_file = _ASSETS_DIR / "theme" / "app.qss"
    if not stylesheet_file.exists():
        LOGGER.warning("event=ui_stylesheet_missing correlation_id=%s", correlation_id)
        return False

    application.setStyleSheet(stylesheet_file.read_text(encoding="utf-8"))
    return True
