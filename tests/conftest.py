"""
Shared pytest fixtures for the game tests.

Nothing here needs a display or a QApplication; the Qt front end is kept
out of these tests and the controller is driven through a fake computer
player instead.
"""

import random

import pytest

from tictactoe.game_logic import GameLogic, GameListener, Symbol


class RecordingListener(GameListener):
    """Collects every notification as a tuple, in order."""

    def __init__(self):
        self.events = []

    def on_board_changed(self, row, col, symbol, status_text):
        self.events.append(("changed", row, col, symbol, status_text))

    def on_game_over(self, status_text):
        self.events.append(("over", status_text))

    def on_reset(self):
        self.events.append(("reset",))


class FakeComputerPlayer:
    """Keeps requests until the test decides to deliver them."""

    def __init__(self):
        self.requests = []

    def request_move(self, generation, state, difficulty, on_ready):
        self.requests.append((generation, state, difficulty, on_ready))

    def deliver(self, move, index=-1):
        generation, _, _, on_ready = self.requests[index]
        on_ready(generation, move)

    def shutdown(self):
        pass


@pytest.fixture
def recorder():
    return RecordingListener()


@pytest.fixture
def game(recorder):
    return GameLogic(listeners=[recorder])


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fake_computer():
    return FakeComputerPlayer()


@pytest.fixture
def make_position():
    """
    Build a mid-game position from three row strings such as "XO.".

    The side to move is derived from the counts (X moves first), so the
    rows must describe a reachable position.
    """
    def _make(rows):
        state = GameLogic()
        for r, row in enumerate(rows):
            for c, ch in enumerate(row):
                if ch in "XO":
                    state.place(r, c, Symbol(ch))
        xs = sum(row.count("X") for row in rows)
        os_ = sum(row.count("O") for row in rows)
        assert xs - os_ in (0, 1), "unreachable position"
        state.move_count = xs + os_
        state.current_player = Symbol.X if xs == os_ else Symbol.O
        return state

    return _make
