"""Graphics items for the grid: tiles, axis digits and the path overlay."""

from typing import List

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPainterPath, QPen
from PySide6.QtWidgets import QGraphicsPathItem, QGraphicsRectItem, QGraphicsSimpleTextItem

from ..domain.types import Coord


class GridTile(QGraphicsRectItem):
    """Graphics item representing a single grid cell."""

    # Color scheme for different cell states
    COLORS = {
        "free": QColor(255, 255, 255),       # White
        "obstacle": QColor(0, 0, 0),         # Black
        "start": QColor(255, 0, 0),          # Red
        "goal": QColor(0, 0, 255),           # Blue
    }

    def __init__(self, x: int, y: int, size: float, state: str = "free"):
        super().__init__(0, 0, size, size)
        self.grid_x = x
        self.grid_y = y
        self.size = size
        self.state = state

        self.setPos(x * size, y * size)
        self.setAcceptHoverEvents(True)
        self.update_appearance()

    def update_appearance(self):
        """Update the tile appearance based on cell state."""
        color = self.COLORS.get(self.state, self.COLORS["free"])
        self.setBrush(QBrush(color))
        self.setPen(QPen(Qt.black, 1))

    def hoverEnterEvent(self, event):
        """Handle mouse hover enter."""
        if self.state == "free":
            self.setBrush(QBrush(self.brush().color().darker(110)))
        super().hoverEnterEvent(event)

    def hoverLeaveEvent(self, event):
        """Handle mouse hover leave."""
        self.update_appearance()
        super().hoverLeaveEvent(event)


class AxisLabel(QGraphicsSimpleTextItem):
    """Single digit marking a row or column index (index mod 10)."""

    def __init__(self, index: int, cell_size: float, vertical: bool):
        super().__init__(str(index % 10))
        self.setFont(QFont("Arial", max(6, int(cell_size / 4))))
        self.setBrush(QBrush(QColor(0, 0, 0)))
        self.setZValue(2)

        offset = index * cell_size + cell_size / 3
        if vertical:
            self.setPos(1, offset)
        else:
            self.setPos(offset, 0)


class PathOverlay(QGraphicsPathItem):
    """Polyline through the centers of the cells on a path."""

    COLOR = QColor(0, 255, 0)  # Green

    def __init__(self, path: List[Coord], cell_size: float, thickness: int):
        super().__init__()
        self.setPen(QPen(self.COLOR, thickness, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
        self.setZValue(1)

        painter_path = QPainterPath()
        for i, (x, y) in enumerate(path):
            point = QPointF((x + 0.5) * cell_size, (y + 0.5) * cell_size)
            if i == 0:
                painter_path.moveTo(point)
            else:
                painter_path.lineTo(point)
        self.setPath(painter_path)
