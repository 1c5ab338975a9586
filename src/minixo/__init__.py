"""minixo package exposing tic-tac-toe rules, move selection, and game sessions."""

from .ai import NO_MOVE, Difficulty, MoveSelector
from .config import GameOptions, load_options
from .game import Board, GameStatus, evaluate
from .session import GameSession, GameSnapshot, Scoreboard

__all__ = [
    "Board",
    "Difficulty",
    "GameOptions",
    "GameSession",
    "GameSnapshot",
    "GameStatus",
    "MoveSelector",
    "NO_MOVE",
    "Scoreboard",
    "evaluate",
    "load_options",
]
