"""Board widgets: clickable tiles and the solved-pairs strip."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget

from memorymatch.core.board import TileStatus
from memorymatch.core.deck import Tile
from memorymatch.ui.colors import BoardColors


class TileButton(QPushButton):
    """One card on the board. Shows ``?`` face-down and the symbol face-up."""

    def __init__(self, tile: Tile, on_click: Callable[[str], None], parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._tile = tile
        self.setMinimumSize(72, 72)
        self.setCursor(Qt.PointingHandCursor)
        self.clicked.connect(lambda: on_click(tile.id))
        self.set_status(TileStatus.FACE_DOWN)

    @property
    def tile(self) -> Tile:
        return self._tile

    def set_status(self, status: TileStatus) -> None:
        if status is TileStatus.FACE_DOWN:
            text, bg, fg = "?", BoardColors.TILE_BACK, "white"
        elif status is TileStatus.FACE_UP:
            text, bg, fg = self._tile.value, BoardColors.TILE_FACE, BoardColors.TEXT_PRIMARY
        else:
            text, bg, fg = "", BoardColors.empty_slot(), BoardColors.TEXT_MUTED
        self.setText(text)
        self.setEnabled(status is TileStatus.FACE_DOWN)
        self.setAccessibleName("Hidden card" if status is TileStatus.FACE_DOWN else self._tile.value)
        self.setStyleSheet(
            f"""
            QPushButton {{
                background: {bg};
                color: {fg};
                border: 2px solid {BoardColors.TILE_BORDER};
                border-radius: 10px;
                font-size: 30px;
            }}
            QPushButton:hover {{
                background: {BoardColors.hover(bg)};
            }}
            """
        )


class SolvedStrip(QWidget):
    """Horizontal row of matched pairs, in the order they were found."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(6)
        self._layout.addStretch(1)
        self.setFixedHeight(44)

    def clear(self) -> None:
        while self._layout.count() > 1:
            item = self._layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

    def add_pair(self, first: Tile, second: Tile) -> None:
        label = QLabel(f"{first.value}{second.value}")
        label.setStyleSheet(
            f"background: {BoardColors.TILE_MATCHED}; border-radius: 6px; padding: 2px 6px; font-size: 20px;"
        )
        self._layout.insertWidget(self._layout.count() - 1, label)
