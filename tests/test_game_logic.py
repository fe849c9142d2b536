"""Tests for the board rules: moves, wins, draws, reset and notifications."""

import pytest

from tictactoe.game_logic import (
    GameLogic,
    GameStatus,
    Symbol,
    WINNING_LINES,
    completes_line,
    find_winner,
)


def play(game, moves):
    return [game.make_move(r, c) for r, c in moves]


def filled_cells(game):
    return sum(cell is not None for row in game.board for cell in row)


class TestInitialState:
    def test_fresh_game(self, game):
        assert game.move_count == 0
        assert game.current_player is Symbol.X
        assert game.status is GameStatus.IN_PROGRESS
        assert game.winner is None
        assert game.message == "Player X's turn"
        assert not game.is_over()
        assert len(game.empty_cells()) == 9

    def test_eight_winning_lines(self):
        assert len(WINNING_LINES) == 8
        assert all(len(line) == 3 for line in WINNING_LINES)


class TestMakeMove:
    def test_move_marks_cell_and_flips_player(self, game):
        assert game.make_move(1, 1) == "continue"
        assert game.board[1][1] is Symbol.X
        assert game.current_player is Symbol.O
        assert game.move_count == 1
        assert game.message == "Player O's turn"

    def test_move_count_tracks_filled_cells(self, game):
        for move in [(0, 0), (1, 1), (2, 2), (0, 2), (2, 0)]:
            game.make_move(*move)
            assert game.move_count == filled_cells(game)

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
    def test_out_of_range_is_ignored(self, game, recorder, row, col):
        assert game.make_move(row, col) == "invalid"
        assert game.move_count == 0
        assert filled_cells(game) == 0
        assert recorder.events == []

    def test_occupied_cell_is_ignored(self, game, recorder):
        game.make_move(0, 0)
        recorder.events.clear()
        assert game.make_move(0, 0) == "invalid"
        assert game.board[0][0] is Symbol.X
        assert game.move_count == 1
        assert game.current_player is Symbol.O
        assert recorder.events == []

    def test_empty_cells_are_row_major(self, game):
        game.make_move(0, 1)
        assert game.empty_cells() == [
            (0, 0), (0, 2), (1, 0), (1, 1), (1, 2), (2, 0), (2, 1), (2, 2)
        ]


class TestEndOfGame:
    def test_top_row_win(self, game, recorder):
        results = play(game, [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)])
        assert results[-1] == "win"
        assert game.status is GameStatus.WON
        assert game.winner is Symbol.X
        assert game.is_over()
        assert game.message == "Player X wins!"
        assert game.winning_line() == [(0, 0), (0, 1), (0, 2)]
        assert recorder.events[-1] == ("over", "Player X wins!")

    def test_no_moves_after_win(self, game, recorder):
        play(game, [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)])
        recorder.events.clear()
        assert game.make_move(2, 0) == "invalid"
        assert game.board[2][0] is None
        assert game.move_count == 5
        assert recorder.events == []

    def test_column_win_for_o(self, game):
        play(game, [(0, 0), (0, 1), (2, 2), (1, 1), (1, 0)])
        assert game.make_move(2, 1) == "win"
        assert game.winner is Symbol.O
        # winner keeps the turn
        assert game.current_player is Symbol.O

    def test_anti_diagonal_win(self, game):
        play(game, [(0, 2), (0, 0), (1, 1), (0, 1)])
        assert game.make_move(2, 0) == "win"
        assert game.winning_line() == [(0, 2), (1, 1), (2, 0)]

    def test_draw(self, game, recorder):
        results = play(game, [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0),
                              (1, 2), (2, 1), (2, 0), (2, 2)])
        assert results == ["continue"] * 8 + ["draw"]
        assert game.status is GameStatus.DRAW
        assert game.winner is None
        assert game.message == "Game ended in a tie!"
        assert game.winning_line() is None
        assert recorder.events[-1] == ("over", "Game ended in a tie!")

    def test_ninth_move_win_is_not_a_draw(self, game):
        results = play(game, [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1),
                              (1, 2), (2, 1), (2, 0), (2, 2)])
        assert results[-1] == "win"
        assert game.status is GameStatus.WON
        assert game.winner is Symbol.X
        assert game.move_count == 9


class TestNotifications:
    def test_board_changed_carries_new_status(self, game, recorder):
        game.make_move(2, 1)
        assert recorder.events == [("changed", 2, 1, Symbol.X, "Player O's turn")]

    def test_win_sends_changed_then_over(self, game, recorder):
        play(game, [(0, 0), (1, 1), (0, 1), (2, 2)])
        recorder.events.clear()
        game.make_move(0, 2)
        assert recorder.events == [
            ("changed", 0, 2, Symbol.X, "Player X wins!"),
            ("over", "Player X wins!"),
        ]

    def test_reset_restores_initial_state(self, game, recorder):
        play(game, [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)])
        game.reset_game()
        assert recorder.events[-1] == ("reset",)
        assert filled_cells(game) == 0
        assert game.move_count == 0
        assert game.current_player is Symbol.X
        assert game.status is GameStatus.IN_PROGRESS
        assert game.message == "Player X's turn"
        assert game.make_move(0, 0) == "continue"

    def test_add_listener(self, recorder):
        game = GameLogic()
        game.add_listener(recorder)
        game.reset_game()
        assert recorder.events == [("reset",)]


class TestHelpers:
    def test_copy_is_detached(self, game, recorder):
        game.make_move(1, 1)
        clone = game.copy()
        recorder.events.clear()
        clone.make_move(0, 0)
        assert game.board[0][0] is None
        assert game.move_count == 1
        assert clone.current_player is Symbol.X
        assert recorder.events == []

    def test_find_winner_scans_all_lines(self, make_position):
        assert find_winner(make_position(["O..", "XO.", "XXO"]).board) is Symbol.O
        assert find_winner(make_position(["XO.", "...", "..."]).board) is None

    def test_completes_line_only_looks_through_cell(self, make_position):
        state = make_position(["XXX", "OO.", "..."])
        assert completes_line(state.board, 0, 1)
        assert not completes_line(state.board, 1, 0)
        assert not completes_line(state.board, 2, 2)
