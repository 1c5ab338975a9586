"""Automated move selection for tic-tac-toe at three difficulty levels."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union
import logging
import math
import random

from .game import BoardLike, Cell, Player, cells_of, evaluate, opponent

_LOGGER = logging.getLogger(__name__)

NO_MOVE = -1
WIN_SCORE = 10


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def _missing_(cls, value: object) -> Optional["Difficulty"]:
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


@dataclass
class MoveSelector:
    """Picks a cell for the automated player.

    - easy: uniform random empty cell
    - medium: win now if possible, else block the opponent, else easy
    - hard: full-depth minimax; wins and losses score +/-10 regardless of
      depth, so there is no preference for quicker wins

      MoveSelector(player="O").select_move(board, "hard") -> cell index or -1
    """

    player: Player = "O"
    rng: random.Random = field(default_factory=random.Random, repr=False)
    # position cache: (player, cells, maximizing) -> minimax score
    _tt: Dict[Tuple[Player, Tuple[Cell, ...], bool], int] = field(
        default_factory=dict, repr=False
    )

    @property
    def opponent(self) -> Player:
        return opponent(self.player)

    # ---- public API ----

    def select_move(
        self, board: BoardLike, difficulty: Union[Difficulty, str]
    ) -> int:
        cells = list(cells_of(board))
        status = evaluate(cells)
        if status.is_terminal:
            return NO_MOVE

        try:
            level = Difficulty(difficulty)
        except ValueError:
            _LOGGER.warning("Unknown difficulty %r", difficulty)
            return NO_MOVE

        if level is Difficulty.EASY:
            move = self._easy_move(cells)
        elif level is Difficulty.MEDIUM:
            move = self._medium_move(cells)
        else:
            move = self._hard_move(cells)
        _LOGGER.debug("%s (%s) picks cell %d", self.player, level.value, move)
        return move

    def score_moves(self, board: BoardLike) -> Dict[int, int]:
        """Minimax score of every empty cell, in scan order, as if the
        automated player moved there."""
        cells = list(cells_of(board))
        scores: Dict[int, int] = {}
        for i in range(len(cells)):
            if cells[i] is None:
                cells[i] = self.player
                scores[i] = self._minimax(cells, False)
                cells[i] = None
        return scores

    # ---- strategies ----

    def _easy_move(self, cells: List[Cell]) -> int:
        empty = [i for i, c in enumerate(cells) if c is None]
        if not empty:
            return NO_MOVE
        return self.rng.choice(empty)

    def _medium_move(self, cells: List[Cell]) -> int:
        for marker in (self.player, self.opponent):
            move = self._completing_cell(cells, marker)
            if move is not None:
                return move
        return self._easy_move(cells)

    def _hard_move(self, cells: List[Cell]) -> int:
        best_score = -math.inf
        move = NO_MOVE
        for i, score in self.score_moves(cells).items():
            if score > best_score:
                best_score, move = score, i

        if move == NO_MOVE:
            move = self._easy_move(cells)
        return move

    # ---- helpers ----

    @staticmethod
    def _completing_cell(cells: List[Cell], marker: Player) -> Optional[int]:
        """First empty cell where ``marker`` would complete a line."""
        for i in range(len(cells)):
            if cells[i] is not None:
                continue
            cells[i] = marker
            won = evaluate(cells).winner == marker
            cells[i] = None
            if won:
                return i
        return None

    def _minimax(self, cells: List[Cell], maximizing: bool) -> int:
        status = evaluate(cells)
        if status.winner == self.player:
            return WIN_SCORE
        if status.winner is not None:
            return -WIN_SCORE
        if status.is_tie:
            return 0

        key = (self.player, tuple(cells), maximizing)
        hit = self._tt.get(key)
        if hit is not None:
            return hit

        mover = self.player if maximizing else self.opponent
        best = -math.inf if maximizing else math.inf
        for i in range(len(cells)):
            if cells[i] is not None:
                continue
            cells[i] = mover
            score = self._minimax(cells, not maximizing)
            cells[i] = None
            best = max(best, score) if maximizing else min(best, score)

        value = int(best)
        self._tt[key] = value
        return value
