"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from courttime.ui.settings import LOG_LEVEL_ENV, resolve_data_dir

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from courttime.ui.styles.theme import APP_STYLE

    app.setApplicationName("Courttime")
    app.setOrganizationName("Courttime")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def _data_dir() -> Path:
    """Per-user storage directory, honouring ``$COURTTIME_DATA_DIR``."""
    from PyQt6.QtCore import QStandardPaths

    location = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.AppDataLocation
    )
    return resolve_data_dir(location or None)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from courttime.storage.roster_library import RosterLibrary
    from courttime.storage.state_store import StateStore
    from courttime.ui.main_window import MainWindow

    _configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    data_dir = _data_dir()
    _LOGGER.info("Using data directory %s", data_dir)

    window = MainWindow(
        state_store=StateStore(data_dir),
        roster_library=RosterLibrary(data_dir),
    )
    window.show()

    return app.exec()
