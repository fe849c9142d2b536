"""
Command line entry: parse options, set up logging, launch a front end.
"""

import argparse
import logging
import sys

from .ai import Difficulty, MoveSelector
from .config import DEFAULT_DELAY_MS, GameConfig, LOG_LEVELS
from .controller import GameController, ImmediateComputerPlayer
from .game_logic import GameLogic

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe with a computer opponent")
    parser.add_argument(
        "--difficulty",
        choices=[d.name.lower() for d in Difficulty],
        help="Computer opponent for O (default: none, two players)"
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=DEFAULT_DELAY_MS,
        help="Pause before the computer plays, in milliseconds"
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Play in the terminal instead of a window"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity"
    )
    return parser


def run_gui(config):
    # qt only needed here, console mode runs without it
    from PySide6.QtWidgets import QApplication
    from .ui.main_window import TicTacToeWindow
    from .worker import ComputerPlayer

    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    game_logic = GameLogic()
    computer = ComputerPlayer(MoveSelector(), delay_ms=config.ai_delay_ms)
    controller = GameController(game_logic, computer, config.difficulty)
    computer.set_failure_handler(controller.computer_move_failed)
    window = TicTacToeWindow(game_logic, controller)
    game_logic.add_listener(window)
    window.show()
    return app.exec()


def run_text(config):
    from .console import ConsoleView, run_console

    game_logic = GameLogic()
    game_logic.add_listener(ConsoleView(game_logic))
    computer = ImmediateComputerPlayer(MoveSelector(), delay_ms=config.ai_delay_ms)
    controller = GameController(game_logic, computer, config.difficulty)
    try:
        run_console(controller)
    except KeyboardInterrupt:
        print("\nGame interrupted by user.")
    return 0


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = GameConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logger.info("starting (%s, difficulty %s)",
                "console" if config.console else "gui", config.difficulty.name.lower())

    if config.console:
        return run_text(config)
    return run_gui(config)
