import logging

from PySide6.QtCore import QObject, QThread, Signal, Slot

from .ai import MoveSelector
from .config import DEFAULT_DELAY_MS

logger = logging.getLogger(__name__)


class MoveWorker(QObject):
    """
    qt worker that thinks off the gui thread
    """
    move_ready = Signal(int, int, int)   # generation, row, col
    no_move = Signal(int)                # generation
    move_failed = Signal(int)            # generation

    def __init__(self, selector, delay_ms):
        super().__init__()
        self.selector = selector
        self.delay_ms = delay_ms

    @Slot(int, object, object)
    def compute(self, generation, state, difficulty):
        """
        wait out the delay, pick a move, emit it
        """
        try:
            if self.delay_ms:
                QThread.msleep(self.delay_ms)
            move = self.selector.select_move(state, difficulty)
        except Exception:
            logger.exception("move selection failed")
            self.move_failed.emit(generation)
            return
        if move is None:
            self.no_move.emit(generation)
        else:
            self.move_ready.emit(generation, move[0], move[1])


class ComputerPlayer(QObject):
    """
    owns the worker thread; results come back queued to the gui thread
    """
    _compute_requested = Signal(int, object, object)

    def __init__(self, selector=None, delay_ms=DEFAULT_DELAY_MS, parent=None):
        super().__init__(parent)
        self._on_ready = None
        self._on_failed = None
        self.thread = QThread(self)
        self.worker = MoveWorker(selector or MoveSelector(), delay_ms)
        self.worker.moveToThread(self.thread)
        # cross-thread connects are queued by qt
        self._compute_requested.connect(self.worker.compute)
        self.worker.move_ready.connect(self._on_move_ready)
        self.worker.no_move.connect(self._on_no_move)
        self.worker.move_failed.connect(self._on_move_failed)
        self.thread.finished.connect(self.worker.deleteLater)
        self.thread.start()

    def set_failure_handler(self, on_failed):
        self._on_failed = on_failed

    def request_move(self, generation, state, difficulty, on_ready):
        self._on_ready = on_ready
        self._compute_requested.emit(generation, state, difficulty)

    @Slot(int, int, int)
    def _on_move_ready(self, generation, row, col):
        if self._on_ready:
            self._on_ready(generation, (row, col))

    @Slot(int)
    def _on_no_move(self, generation):
        if self._on_ready:
            self._on_ready(generation, None)

    @Slot(int)
    def _on_move_failed(self, generation):
        if self._on_failed:
            self._on_failed(generation)

    def shutdown(self):
        """
        stop the thread, waits for a move in flight
        """
        if self.thread.isRunning():
            self.thread.quit()
            if not self.thread.wait(2000):
                logger.warning("computer player thread did not stop in time")
