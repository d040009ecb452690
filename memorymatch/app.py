"""Application entry point and setup for Memory Match."""

import logging
import sys

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from memorymatch.core.controller import GameController
from memorymatch.core.leaderboard import LeaderboardStore
from memorymatch.core.levels import LevelRepository
from memorymatch.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load levels and the leaderboard, show the main window and start level 1."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Memory Match")
    app.setApplicationDisplayName("Memory Match")

    levels = LevelRepository()
    store = LeaderboardStore()
    controller = GameController(levels=levels, store=store)

    window = MainWindow(controller)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(min(geometry.width(), 1100), min(geometry.height(), 760))
    window.show()
    controller.start_level(levels.first.index)

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
