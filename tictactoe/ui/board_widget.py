from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import Symbol

X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
WIN_FILL = QColor(255, 255, 255, 40)


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # read-only, painting only
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and shade the winning line
        """
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        ox, oy, side = self._geometry()
        painter.fillRect(self.rect(), QColor("#333"))
        size = self.game_logic.board_size
        cell = side / size
        # winning cells under the marks
        for r, c in self.game_logic.winning_line() or ():
            painter.fillRect(QRectF(ox + c*cell, oy + r*cell, cell, cell), WIN_FILL)
        # grid lines
        painter.setPen(QPen(QColor("#555"), 2))
        for i in range(1, size):
            x = ox + i*cell
            painter.drawLine(QPointF(x, oy), QPointF(x, oy + side))
            y = oy + i*cell
            painter.drawLine(QPointF(ox, y), QPointF(ox + side, y))
        # marks
        for r in range(size):
            for c in range(size):
                sym = self.game_logic.board[r][c]
                if sym is None:
                    continue
                cx = ox + c*cell + cell/2
                cy = oy + r*cell + cell/2
                rad = cell/2 * 0.7
                if sym is Symbol.X:
                    painter.setPen(QPen(X_COLOR, 4))
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(O_COLOR, 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks:
            return
        ox, oy, side = self._geometry()
        x, y = event.position().x(), event.position().y()
        # only inside grid
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return
        size = self.game_logic.board_size
        cell = side / size
        row = min(int((y - oy) // cell), size - 1)
        col = min(int((x - ox) // cell), size - 1)
        self.cell_clicked.emit(row, col)
