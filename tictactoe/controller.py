import logging
import time

from .ai import Difficulty, MoveSelector
from .game_logic import Symbol

logger = logging.getLogger(__name__)

COMPUTER_SYMBOL = Symbol.O  # human is always X


class ImmediateComputerPlayer:
    """
    picks the computer move on the calling thread (console mode)
    """
    def __init__(self, selector=None, delay_ms=0):
        self.selector = selector or MoveSelector()
        self.delay_ms = delay_ms

    def request_move(self, generation, state, difficulty, on_ready):
        if self.delay_ms:
            time.sleep(self.delay_ms / 1000.0)
        on_ready(generation, self.selector.select_move(state, difficulty))

    def shutdown(self):
        pass


class GameController:
    """
    routes view events to the game and drives the computer player

    computer_player must offer request_move(generation, state, difficulty,
    on_ready); on_ready(generation, move) has to run on the thread that
    owns the game.
    """
    def __init__(self, game_logic, computer_player, difficulty=Difficulty.NONE):
        self.game_logic = game_logic
        self.computer_player = computer_player
        self.difficulty = difficulty
        self.generation = 0           # bumped on every reset
        self.computer_pending = False

    def on_cell_clicked(self, row, col):
        # not the human's turn while the computer thinks
        if self.computer_pending or self.game_logic.is_over():
            return
        if self.game_logic.make_move(row, col) == "continue":
            self._maybe_schedule_computer()

    def on_reset_requested(self):
        self.generation += 1
        self.computer_pending = False
        self.game_logic.reset_game()

    def on_difficulty_changed(self, difficulty):
        logger.info("difficulty set to %s", difficulty.label)
        self.difficulty = difficulty
        # a finished game stays on screen until "New Game"
        if not self.game_logic.is_over():
            self.on_reset_requested()

    def _maybe_schedule_computer(self):
        if self.difficulty is Difficulty.NONE:
            return
        if self.game_logic.current_player is not COMPUTER_SYMBOL:
            return
        self.computer_pending = True
        logger.debug("computer move requested (generation %d)", self.generation)
        self.computer_player.request_move(
            self.generation, self.game_logic.copy(), self.difficulty,
            self.apply_computer_move)

    def apply_computer_move(self, generation, move):
        """
        lands the computer's move unless the game was reset meanwhile
        """
        if generation != self.generation:
            logger.debug("dropped stale computer move %s (generation %d, now %d)",
                         move, generation, self.generation)
            return
        self.computer_pending = False
        if move is None:
            logger.warning("computer found no move")
            return
        self.game_logic.make_move(*move)

    def computer_move_failed(self, generation):
        if generation == self.generation:
            self.computer_pending = False
