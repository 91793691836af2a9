"""Grid tile graphics items for the maze viewer."""

from typing import Optional
from PySide6.QtWidgets import QGraphicsRectItem
from PySide6.QtGui import QPainter, QBrush, QPen, QFont, QColor
from PySide6.QtCore import QRectF, Qt

from ..domain.types import CostRecord, NodeState


class GridTile(QGraphicsRectItem):
    """Graphics item representing a single maze cell."""

    # Color scheme for different cell states
    COLORS = {
        "empty": QColor(240, 240, 240),      # Light gray
        "wall": QColor(64, 64, 64),          # Dark gray
        "start": QColor(0, 255, 0),          # Green
        "target": QColor(255, 215, 0),       # Gold
        "open": QColor(173, 216, 230),       # Light blue
        "closed": QColor(255, 182, 193),     # Light pink
        "current": QColor(255, 0, 0),        # Red
        "path": QColor(255, 255, 0),         # Yellow
    }

    def __init__(self, row: int, col: int, size: float, state: NodeState = "empty"):
        super().__init__(0, 0, size, size)
        self.row = row
        self.col = col
        self.size = size
        self.state: NodeState = state
        self.record: Optional[CostRecord] = None
        self.show_costs = False

        self.setPos(col * size, row * size)
        self.update_appearance()

    def set_state(self, state: NodeState, record: Optional[CostRecord] = None):
        """Change the displayed state and the costs shown on the tile."""
        if state == self.state and record is self.record:
            # Costs of a queued record can drop in place
            if self.show_costs:
                self.update()
            return
        self.state = state
        self.record = record
        self.update_appearance()

    def update_appearance(self):
        """Update the tile appearance based on cell state."""
        color = self.COLORS.get(self.state, self.COLORS["empty"])
        self.setBrush(QBrush(color))

        if self.state == "wall":
            self.setPen(QPen(Qt.black, 1))
        else:
            self.setPen(QPen(Qt.gray, 0.5))
        self.update()

    def paint(self, painter: QPainter, option, widget=None):
        """Paint the tile with costs if enabled."""
        super().paint(painter, option, widget)

        if self.show_costs and self.record is not None and self.size > 30:
            self._paint_costs(painter)

    def _paint_costs(self, painter: QPainter):
        """Paint the g, h, f costs on the tile."""
        rect = self.rect()
        font = QFont("Arial", max(8, int(self.size / 6)))
        painter.setFont(font)
        painter.setPen(Qt.black)

        third_w = rect.width() / 3
        third_h = rect.height() / 3
        painter.drawText(QRectF(rect.left() + 2, rect.top() + 2, third_w, third_h),
                         Qt.AlignCenter, str(self.record.g))
        painter.drawText(QRectF(rect.right() - third_w, rect.top() + 2, third_w, third_h),
                         Qt.AlignCenter, str(self.record.h))
        painter.drawText(QRectF(rect.left() + rect.width() / 4, rect.bottom() - third_h,
                                rect.width() / 2, third_h),
                         Qt.AlignCenter, str(self.record.f))

    def set_show_costs(self, show: bool):
        """Enable or disable cost display."""
        self.show_costs = show
        self.update()
