from __future__ import annotations

from typing import Dict, List

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from memorymatch.core.clock import format_time
from memorymatch.core.controller import GameController
from memorymatch.core.leaderboard import ScoreEntry
from memorymatch.ui.colors import BoardColors
from memorymatch.ui.tile_widgets import SolvedStrip, TileButton


class MainWindow(QMainWindow):
    """Board, stats row and leaderboard. All game state lives in the controller."""

    def __init__(self, controller: GameController) -> None:
        super().__init__()
        self._controller = controller
        self._buttons: Dict[str, TileButton] = {}

        self.setWindowTitle("Memory Match")
        self.setMinimumSize(820, 560)

        root = QWidget()
        root.setObjectName("root")
        root.setStyleSheet(
            f"""
            QWidget#root {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {BoardColors.BG_TOP}, stop:1 {BoardColors.BG_BOTTOM});
            }}
            QLabel {{ color: {BoardColors.TEXT_PRIMARY}; font-size: 15px; }}
            """
        )
        self.setCentralWidget(root)
        outer = QHBoxLayout(root)

        game_col = QVBoxLayout()
        outer.addLayout(game_col, 3)

        stats = QHBoxLayout()
        self._level_label = QLabel()
        self._moves_label = QLabel()
        self._time_label = QLabel()
        restart_btn = QPushButton("Restart")
        restart_btn.setCursor(Qt.PointingHandCursor)
        restart_btn.clicked.connect(lambda: self._controller.restart())
        for widget in (self._level_label, self._moves_label, self._time_label):
            stats.addWidget(widget)
        stats.addStretch(1)
        stats.addWidget(restart_btn)
        game_col.addLayout(stats)

        self._grid_host = QWidget()
        self._grid = QGridLayout(self._grid_host)
        self._grid.setSpacing(10)
        game_col.addWidget(self._grid_host, 1)

        self._solved = SolvedStrip()
        game_col.addWidget(self._solved)

        side_col = QVBoxLayout()
        outer.addLayout(side_col, 1)
        title = QLabel("Leaderboard")
        title.setStyleSheet(f"font-size: 18px; font-weight: 700; color: {BoardColors.PRIMARY_DARK};")
        side_col.addWidget(title)
        self._leaderboard_list = QListWidget()
        side_col.addWidget(self._leaderboard_list, 1)

        controller.level_started.connect(self._on_level_started)
        controller.tile_flipped.connect(self._refresh_tile)
        controller.pair_matched.connect(self._on_pair_matched)
        controller.pair_mismatched.connect(self._on_pair_mismatched)
        controller.clock_tick.connect(self._on_clock_tick)
        controller.level_completed.connect(self._on_level_completed)
        controller.leaderboard_updated.connect(self._show_leaderboard)
        controller.leaderboard_save_failed.connect(self._on_save_failed)

        self._show_leaderboard(controller.load_leaderboard())

    # ------------------------------------------------------------------
    # Signal handlers
    # ------------------------------------------------------------------

    def _on_level_started(self, index: int) -> None:
        session = self._controller.session
        if session is None:
            return
        self._clear_grid()
        self._solved.clear()
        cols = session.level.cols
        for position, tile in enumerate(session.board):
            button = TileButton(tile, self._controller.select_tile)
            self._buttons[tile.id] = button
            self._grid.addWidget(button, position // cols, position % cols)
        self._level_label.setText(f"Level {index}: {session.level.name}")
        self._update_stats()

    def _refresh_tile(self, tile_id: str) -> None:
        session = self._controller.session
        button = self._buttons.get(tile_id)
        if session is None or button is None:
            return
        button.set_status(session.board.status(tile_id))
        self._update_stats()

    def _on_pair_matched(self, first_id: str, second_id: str) -> None:
        self._refresh_tile(first_id)
        self._refresh_tile(second_id)
        session = self._controller.session
        if session is not None:
            first, second = session.board.solved[-1]
            self._solved.add_pair(first, second)

    def _on_pair_mismatched(self, first_id: str, second_id: str) -> None:
        self._refresh_tile(first_id)
        self._refresh_tile(second_id)

    def _on_clock_tick(self, seconds: int) -> None:
        self._time_label.setText(f"Time {format_time(seconds)}")

    def _on_level_completed(self, is_final_level: bool) -> None:
        session = self._controller.session
        if session is None:
            return
        if is_final_level:
            title, message, action = "Congratulations!", "You completed the game!", "Play Again"
        else:
            title = "Level Complete!"
            message = (
                f"You finished Level {session.level.index} in {session.moves} moves "
                f"and {session.formatted_time}."
            )
            action = "Next Level"
        box = QMessageBox(self)
        box.setWindowTitle(title)
        box.setText(message)
        next_btn = box.addButton(action, QMessageBox.AcceptRole)
        box.addButton("Close", QMessageBox.RejectRole)
        box.exec()
        if box.clickedButton() is next_btn:
            self._controller.start_next_level()

    def _show_leaderboard(self, scores: List[ScoreEntry]) -> None:
        self._leaderboard_list.clear()
        for rank, entry in enumerate(scores, start=1):
            self._leaderboard_list.addItem(
                f"{rank}. Level {entry.level} · {entry.moves} moves · {entry.formatted_time} · {entry.date}"
            )

    def _on_save_failed(self, path: str) -> None:
        self.statusBar().showMessage(f"Could not save leaderboard to {path}", 5000)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _update_stats(self) -> None:
        session = self._controller.session
        if session is None:
            return
        self._moves_label.setText(f"Moves {session.moves}")
        self._time_label.setText(f"Time {session.formatted_time}")

    def _clear_grid(self) -> None:
        for button in self._buttons.values():
            self._grid.removeWidget(button)
            button.deleteLater()
        self._buttons = {}
