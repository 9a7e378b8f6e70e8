"""Shared pytest fixtures for headless Qt tests."""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from spacewrap.presentation.qt.app import create_application  # noqa: E402


@pytest.fixture(scope="session")
def application() -> QApplication:
    """Create a single QApplication for the full test session."""
    app = create_application(["pytest"])
    yield app
    app.closeAllWindows()
    app.processEvents()


@pytest.fixture(autouse=True)
def _cleanup_qt_windows(application: QApplication) -> None:
    """Ensure Qt windows are closed between tests to reduce teardown crashes."""
    yield
    application.closeAllWindows()
    application.processEvents()
