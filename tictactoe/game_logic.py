import logging
from enum import Enum

logger = logging.getLogger(__name__)

BOARD_SIZE = 3  # fixed 3x3 grid

# every line that wins: rows, cols, then both diagonals
WINNING_LINES = (
    [[(r, c) for c in range(BOARD_SIZE)] for r in range(BOARD_SIZE)]
    + [[(r, c) for r in range(BOARD_SIZE)] for c in range(BOARD_SIZE)]
    + [[(i, i) for i in range(BOARD_SIZE)],
       [(i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)]]
)


class Symbol(Enum):
    """
    mark a player puts on the board
    """
    X = 'X'
    O = 'O'

    def opposite(self):
        return Symbol.O if self is Symbol.X else Symbol.X

    def __str__(self):
        return self.value


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class GameListener:
    """
    receives board notifications, override what you need
    """
    def on_board_changed(self, row, col, symbol, status_text):
        pass

    def on_game_over(self, status_text):
        pass

    def on_reset(self):
        pass


def empty_board():
    return [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]


def completes_line(board, row, col):
    """
    true if the mark at (row, col) closes a line through that cell
    """
    sym = board[row][col]
    if sym is None:
        return False
    b = board; n = BOARD_SIZE
    if all(b[row][j] == sym for j in range(n)):
        return True
    if all(b[i][col] == sym for i in range(n)):
        return True
    # main diag
    if row == col and all(b[i][i] == sym for i in range(n)):
        return True
    # anti-diag
    return row + col == n - 1 and all(b[i][n - 1 - i] == sym for i in range(n))


def find_winner(board):
    """
    scan all 8 lines, return the symbol holding one (or None)
    """
    for line in WINNING_LINES:
        first = board[line[0][0]][line[0][1]]
        if first is not None and all(board[r][c] == first for r, c in line):
            return first
    return None


class GameLogic:
    """
    tic-tac-toe rules and state

    the only way to change the board is make_move / reset_game; both
    report to the registered listeners
    """
    def __init__(self, listeners=()):
        """
        init board and counters
        """
        self.board_size = BOARD_SIZE
        self._listeners = list(listeners)
        self._init_state()

    def _init_state(self):
        self.board = empty_board()           # None = empty cell
        self.current_player = Symbol.X       # X always starts
        self.move_count = 0                  # how many moves done
        self.status = GameStatus.IN_PROGRESS
        self.winner = None                   # Symbol or None
        self.message = self._turn_message()

    def add_listener(self, listener):
        self._listeners.append(listener)

    def _turn_message(self):
        return f"Player {self.current_player}'s turn"

    def make_move(self, row, col):
        """
        place current player's mark, check result
        returns: 'win', 'draw', 'continue', or 'invalid'
        """
        # only if cell empty and game not over
        if self.is_over() or not self.is_cell_empty(row, col):
            logger.debug("ignored move (%s, %s)", row, col)
            return "invalid"

        sym = self.current_player
        self.board[row][col] = sym
        self.move_count += 1

        if completes_line(self.board, row, col):
            self.status = GameStatus.WON; self.winner = sym
            self.message = f"Player {sym} wins!"
            result = "win"
        elif self.move_count == self.board_size * self.board_size:
            self.status = GameStatus.DRAW
            self.message = "Game ended in a tie!"
            result = "draw"
        else:
            self.current_player = sym.opposite()
            self.message = self._turn_message()
            result = "continue"

        logger.debug("%s played (%d, %d): %s", sym, row, col, result)
        for listener in self._listeners:
            listener.on_board_changed(row, col, sym, self.message)
        if result != "continue":
            logger.info(self.message)
            for listener in self._listeners:
                listener.on_game_over(self.message)
        return result

    def reset_game(self):
        """
        clear board and reset flags
        """
        # back to fresh state
        self._init_state()
        logger.debug("game reset")
        for listener in self._listeners:
            listener.on_reset()

    def is_over(self):
        return self.status is not GameStatus.IN_PROGRESS

    def is_cell_empty(self, row, col):
        """
        true if coords valid and cell blank
        """
        if 0 <= row < self.board_size and 0 <= col < self.board_size:
            return self.board[row][col] is None
        return False

    def empty_cells(self):
        # row-major order, the AI relies on it for tie breaks
        return [(r, c) for r in range(self.board_size)
                for c in range(self.board_size) if self.board[r][c] is None]

    def winning_line(self):
        """
        cells of the completed line, or None
        """
        if self.status is not GameStatus.WON:
            return None
        for line in WINNING_LINES:
            if all(self.board[r][c] == self.winner for r, c in line):
                return line
        return None

    # raw cell writes, used by the search on scratch copies only
    def place(self, row, col, symbol):
        self.board[row][col] = symbol

    def clear(self, row, col):
        self.board[row][col] = None

    def copy(self):
        """
        detached snapshot: same position, no listeners
        """
        clone = GameLogic()
        clone.board = [list(row) for row in self.board]
        clone.current_player = self.current_player
        clone.move_count = self.move_count
        clone.status = self.status
        clone.winner = self.winner
        clone.message = self.message
        return clone
