"""Board palette."""

from PySide6.QtGui import QColor


class BoardColors:
    """Light theme palette for the board and side panels."""

    BG_TOP = "#ede7f6"
    BG_BOTTOM = "#d1c4e9"

    PRIMARY = "#5e35b1"
    PRIMARY_LIGHT = "#9162e4"
    PRIMARY_DARK = "#280680"

    TILE_BACK = "#7e57c2"
    TILE_FACE = "#ffffff"
    TILE_MATCHED = "#c8e6c9"
    TILE_BORDER = "rgba(255, 255, 255, 0.6)"

    TEXT_PRIMARY = "#1f1235"
    TEXT_MUTED = "#6d6480"

    # share of PRIMARY_LIGHT mixed into a tile under the cursor
    HOVER_TINT = 0.25

    @classmethod
    def hover(cls, base: str) -> str:
        return tint(base, cls.PRIMARY_LIGHT, cls.HOVER_TINT)

    @classmethod
    def empty_slot(cls) -> str:
        """Fill for the hole a matched tile leaves in the grid."""
        return tint(cls.BG_TOP, cls.BG_BOTTOM, 0.5)


def tint(base: str, toward: str, amount: float) -> str:
    """Move ``base`` ``amount`` of the way to ``toward`` (any color Qt parses).

    Returns ``#rrggbb``; ``base`` comes back unchanged if either color is invalid.
    """
    start, end = QColor(base), QColor(toward)
    if not (start.isValid() and end.isValid()):
        return base
    amount = max(0.0, min(1.0, amount))
    mixed = QColor(
        round(start.red() + (end.red() - start.red()) * amount),
        round(start.green() + (end.green() - start.green()) * amount),
        round(start.blue() + (end.blue() - start.blue()) * amount),
    )
    return mixed.name()
