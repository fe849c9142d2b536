"""
Runtime settings for the game.
Defaults live on the class; the command line and environment override them.
"""

import os
from dataclasses import dataclass

from .ai import Difficulty

DIFFICULTY_ENV = "TICTACTOE_DIFFICULTY"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_DELAY_MS = 500  # pacing so the human sees their own move first


@dataclass
class GameConfig:
    """
    settings picked by the operator at startup
    """
    difficulty: Difficulty = Difficulty.NONE
    ai_delay_ms: int = DEFAULT_DELAY_MS   # pause before the computer answers
    console: bool = False                 # text front end instead of the window
    log_level: str = "WARNING"

    @classmethod
    def from_args(cls, args, environ=None):
        """
        build from parsed argparse args; cli beats env beats default
        """
        environ = os.environ if environ is None else environ
        difficulty = cls.difficulty
        if args.difficulty:
            difficulty = Difficulty.from_name(args.difficulty)
        elif environ.get(DIFFICULTY_ENV):
            difficulty = Difficulty.from_name(environ[DIFFICULTY_ENV])
        if args.delay_ms < 0:
            raise ValueError("--delay-ms must not be negative")
        return cls(
            difficulty=difficulty,
            ai_delay_ms=args.delay_ms,
            console=args.console,
            log_level=args.log_level,
        )
