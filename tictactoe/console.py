"""
Text front end: same game and controller as the window, driven by input().
"""

import logging

from .ai import Difficulty
from .game_logic import GameListener

logger = logging.getLogger(__name__)

HELP = "Enter move as row,col (0-2), 'r' to restart, 'd <none|easy|medium|hard>', 'q' to quit."


def format_board(board):
    """
    render the grid with row/col indices
    """
    lines = ["   0   1   2"]
    for r, row in enumerate(board):
        cells = [f" {cell.value if cell else ' '} " for cell in row]
        lines.append(f"{r} " + "|".join(cells))
        if r < len(board) - 1:
            lines.append("  " + "+".join(["---"] * len(row)))
    return "\n".join(lines)


class ConsoleView(GameListener):
    """
    prints the board whenever the game tells us something changed
    """
    def __init__(self, game_logic, output=print):
        self.game_logic = game_logic
        self.output = output

    def on_board_changed(self, row, col, symbol, status_text):
        self.output(f"\n{symbol} -> ({row}, {col})")
        self.output(format_board(self.game_logic.board))
        if not self.game_logic.is_over():
            self.output(status_text)

    def on_game_over(self, status_text):
        self.output(f"\n*** {status_text} ***  ('r' to play again)")

    def on_reset(self):
        self.output("\nNew game.")
        self.output(format_board(self.game_logic.board))
        self.output(self.game_logic.message)


def parse_move(text):
    """
    'row,col' -> (row, col); raises ValueError on anything else
    """
    parts = text.split(',')
    if len(parts) != 2:
        raise ValueError(f"expected row,col but got {text!r}")
    return int(parts[0]), int(parts[1])


def run_console(controller, input_func=input, output=print):
    """
    read commands until 'q' or EOF
    """
    game = controller.game_logic
    output(f"Tic-Tac-Toe ({controller.difficulty.label}). {HELP}")
    output(format_board(game.board))
    output(game.message)
    while True:
        try:
            line = input_func("> ").strip()
        except EOFError:
            break
        if not line:
            continue
        cmd = line.lower()
        if cmd == 'q':
            break
        if cmd == 'r':
            controller.on_reset_requested()
            continue
        if cmd.startswith('d '):
            try:
                controller.on_difficulty_changed(Difficulty.from_name(cmd[2:]))
            except ValueError as e:
                output(f"!! {e}")
            continue
        if game.is_over():
            output("!! Game over. 'r' to restart.")
            continue
        try:
            row, col = parse_move(line)
        except ValueError:
            output(f"!! {HELP}")
            continue
        if not game.is_cell_empty(row, col):
            output("!! Cell taken or out of range. Try again.")
            continue
        controller.on_cell_clicked(row, col)
    output("Goodbye!")
