"""
computer opponent: difficulty tiers and move selection
"""
import logging
import random
from enum import Enum

from .game_logic import completes_line, find_winner

logger = logging.getLogger(__name__)

SEARCH_DEPTH = 2    # ai move + one reply, not a full game-tree search
WIN_SCORE = 10


class Difficulty(Enum):
    NONE = 0
    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def label(self):
        return _LABELS[self]

    @classmethod
    def from_name(cls, name):
        """
        parse a cli/env value like 'hard' or 'NONE'
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(d.name.lower() for d in cls)
            raise ValueError(f"unknown difficulty {name!r} (choose from {choices})") from None


_LABELS = {
    Difficulty.NONE: "Two Players",
    Difficulty.EASY: "Easy AI",
    Difficulty.MEDIUM: "Medium AI",
    Difficulty.HARD: "Hard AI",
}


class MoveSelector:
    """
    picks the computer's move for the player whose turn it is

    EASY is uniform random, MEDIUM wins-then-blocks-then-random and HARD
    runs a depth-2 minimax with a +10/-10/0 static score.
    """
    def __init__(self, rng=None):
        self.rng = rng or random.Random()
        self.nodes_evaluated = 0

    def select_move(self, state, difficulty):
        """
        returns (row, col) or None when there is nothing to play
        """
        if difficulty is Difficulty.NONE or not state.empty_cells():
            return None
        if difficulty is Difficulty.EASY:
            move = self._random_move(state)
        elif difficulty is Difficulty.MEDIUM:
            move = self._medium_move(state)
        else:
            move = self._hard_move(state)
        logger.debug("%s picked %s for %s", difficulty.name, move, state.current_player)
        return move

    def _random_move(self, state):
        return self.rng.choice(state.empty_cells())

    def _medium_move(self, state):
        me = state.current_player
        # take a win first, then block, first hit in scan order
        for sym in (me, me.opposite()):
            move = self._find_completing_cell(state, sym)
            if move is not None:
                return move
        return self._random_move(state)

    def _find_completing_cell(self, state, symbol):
        scratch = state.copy()
        for row, col in scratch.empty_cells():
            scratch.place(row, col, symbol)
            wins = completes_line(scratch.board, row, col)
            scratch.clear(row, col)
            if wins:
                return (row, col)
        return None

    def _hard_move(self, state):
        self.nodes_evaluated = 0
        me = state.current_player
        score, move = self._minimax(state.copy(), SEARCH_DEPTH, me, me)
        logger.debug("minimax score %d after %d nodes", score, self.nodes_evaluated)
        return move

    def _minimax(self, board_state, depth, to_move, me):
        """
        returns (score, move); move is None at leaves
        """
        self.nodes_evaluated += 1
        board = board_state.board
        winner = find_winner(board)
        empty = board_state.empty_cells()
        # the root always expands while a cell is free
        is_root = depth == SEARCH_DEPTH
        if depth == 0 or not empty or (winner is not None and not is_root):
            return self._evaluate(winner, me), None

        maximizing = to_move is me
        best_score = float('-inf') if maximizing else float('inf')
        best_move = None
        for row, col in empty:
            board_state.place(row, col, to_move)
            score, _ = self._minimax(board_state, depth - 1, to_move.opposite(), me)
            board_state.clear(row, col)
            # strict compare keeps the earliest move on ties
            if (maximizing and score > best_score) or (not maximizing and score < best_score):
                best_score = score; best_move = (row, col)
        return best_score, best_move

    @staticmethod
    def _evaluate(winner, me):
        if winner is None:
            return 0
        return WIN_SCORE if winner is me else -WIN_SCORE
