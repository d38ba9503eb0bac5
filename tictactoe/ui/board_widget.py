from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import PLAYER_ONE_TOKEN, EMPTY

BACKGROUND_COLOR = QColor("#333")
GRID_COLOR = QColor("#555")
X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
WIN_HIGHLIGHT_COLOR = QColor(255, 255, 255, 40)


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller    # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_controller(self, controller):
        # swapped in on "new game"
        self.controller = controller
        self.update()

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), or None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        size = self.controller.board.size
        cell = side / size
        row = int((y - oy) // cell); col = int((x - ox) // cell)
        # clamp to valid range
        return max(0, min(row, size - 1)), max(0, min(col, size - 1))

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        offset_x, offset_y, side = self._geometry()
        painter.fillRect(self.rect(), BACKGROUND_COLOR)
        board = self.controller.board
        size = board.size
        cell_size = side / size

        winner = self.controller.winner
        if winner is not None:
            line = board.winning_line(winner.token) or []
            for r, c in line:
                painter.fillRect(QRectF(offset_x + c * cell_size, offset_y + r * cell_size,
                                        cell_size, cell_size), WIN_HIGHLIGHT_COLOR)

        # grid lines
        painter.setPen(QPen(GRID_COLOR, 2))
        for i in range(1, size):
            x = offset_x + i * cell_size
            painter.drawLine(int(x), int(offset_y), int(x), int(offset_y + side))
            y = offset_y + i * cell_size
            painter.drawLine(int(offset_x), int(y), int(offset_x + side), int(y))

        # marks
        for r, row in enumerate(board.rows()):
            for c, token in enumerate(row):
                if token == EMPTY:
                    continue
                cx = offset_x + c * cell_size + cell_size / 2
                cy = offset_y + r * cell_size + cell_size / 2
                rad = cell_size / 2 * 0.7
                if token == PLAYER_ONE_TOKEN:
                    painter.setPen(QPen(X_COLOR, 4, Qt.SolidLine, Qt.RoundCap))
                    # two crossing lines
                    painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                    painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                else:
                    painter.setPen(QPen(O_COLOR, 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.controller.is_round_over:
            return
        pos = event.position()
        target = self.cell_at(pos.x(), pos.y())
        if target is not None:
            self.cell_clicked.emit(*target)  # notify main window
