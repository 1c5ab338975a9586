"""Core rules for classic 3x3 tic-tac-toe: the board and terminal detection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union
import logging

_LOGGER = logging.getLogger(__name__)

Player = str  # "X" or "O"
Cell = Optional[Player]  # None for empty

PLAYERS: Tuple[Player, Player] = ("X", "O")

WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def opponent(player: Player) -> Player:
    return "O" if player == "X" else "X"


# ---------- Status ----------


class Outcome(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    TIED = "tied"


@dataclass(frozen=True)
class GameStatus:
    """Derived result of a board: in progress, won by a marker, or tied."""

    outcome: Outcome
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls) -> "GameStatus":
        return cls(Outcome.IN_PROGRESS)

    @classmethod
    def won(cls, player: Player) -> "GameStatus":
        return cls(Outcome.WON, player)

    @classmethod
    def tied(cls) -> "GameStatus":
        return cls(Outcome.TIED)

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS

    @property
    def is_tie(self) -> bool:
        return self.outcome is Outcome.TIED


# ---------- Board ----------


@dataclass
class Board:
    cells: List[Cell] = field(default_factory=lambda: [None] * 9)
    turn: Player = "X"

    @classmethod
    def from_cells(
        cls, cells: Sequence[Cell], turn: Optional[Player] = None
    ) -> "Board":
        """Build a board from 9 cells; the turn is inferred from marker counts
        unless given explicitly."""
        if len(cells) != 9:
            raise ValueError("A board has exactly 9 cells")
        if turn is None:
            turn = "O" if cells.count("X") > cells.count("O") else "X"
        return cls(cells=list(cells), turn=turn)

    def empty_cells(self) -> List[int]:
        return [i for i, c in enumerate(self.cells) if c is None]

    def is_full(self) -> bool:
        return all(c is not None for c in self.cells)

    def apply_move(self, index: int, player: Player) -> None:
        """Place ``player`` at ``index`` and pass the turn.

        Illegal moves (terminal board, occupied or out-of-range cell, unknown
        marker) are ignored.
        """
        if not isinstance(index, int) or player not in PLAYERS or not 0 <= index < 9:
            _LOGGER.debug("Ignoring move %r for %r", index, player)
            return
        if self.cells[index] is not None:
            _LOGGER.debug("Ignoring move on occupied cell %d", index)
            return
        if evaluate(self).is_terminal:
            _LOGGER.debug("Ignoring move %d on a finished board", index)
            return
        self.cells[index] = player
        self.turn = opponent(player)

    def clear(self) -> None:
        self.cells = [None] * 9
        self.turn = "X"

    def clone(self) -> "Board":
        return Board(cells=self.cells.copy(), turn=self.turn)

    def render(self) -> str:
        marks = [c if c is not None else str(i + 1) for i, c in enumerate(self.cells)]
        rows = [" | ".join(marks[i : i + 3]) for i in range(0, 9, 3)]
        return "\n---------\n".join(rows)


# ---------- Win detection ----------


BoardLike = Union[Board, Sequence[Cell]]


def cells_of(board: BoardLike) -> Sequence[Cell]:
    return board.cells if isinstance(board, Board) else board


def winning_line(board: BoardLike) -> Optional[Tuple[int, int, int]]:
    cells = cells_of(board)
    for line in WINNING_LINES:
        a, b, c = line
        v = cells[a]
        if v is not None and v == cells[b] == cells[c]:
            return line
    return None


def evaluate(board: BoardLike) -> GameStatus:
    """Derive the status of ``board``.

    Every line is checked before a full board is called a tie.
    """
    cells = cells_of(board)
    line = winning_line(cells)
    if line is not None:
        return GameStatus.won(cells[line[0]])  # type: ignore[arg-type]
    if all(c is not None for c in cells):
        return GameStatus.tied()
    return GameStatus.in_progress()
