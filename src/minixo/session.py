"""Game sessions: board ownership, automated turns and score keeping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Union
import logging

from .ai import NO_MOVE, Difficulty, MoveSelector
from .config import GameOptions
from .game import PLAYERS, Board, Cell, GameStatus, Player, evaluate, winning_line

_LOGGER = logging.getLogger(__name__)

WIN_POINTS = 5


@dataclass
class Scoreboard:
    """Per-marker win tallies that outlive individual games."""

    scores: Dict[Player, int] = field(default_factory=lambda: {p: 0 for p in PLAYERS})

    def record_result(self, status: GameStatus) -> None:
        if status.winner is None:
            return
        self.scores[status.winner] = self.scores.get(status.winner, 0) + WIN_POINTS

    def restore(self, scores: Mapping[str, int]) -> None:
        """Overwrite tallies, e.g. with values a host persisted earlier.
        Unknown markers are ignored."""
        for player in PLAYERS:
            if player in scores:
                self.scores[player] = int(scores[player])

    def reset(self) -> None:
        self.scores = {p: 0 for p in PLAYERS}

    def as_dict(self) -> Dict[Player, int]:
        return dict(self.scores)


@dataclass(frozen=True)
class GameSnapshot:
    """What a host needs to render after a move."""

    cells: List[Cell]
    turn: Player
    status: GameStatus
    scores: Dict[Player, int]

    @property
    def winner(self) -> Optional[Player]:
        return self.status.winner

    @property
    def draw(self) -> bool:
        return self.status.is_tie

    def to_dict(self) -> Dict[str, object]:
        line = winning_line(self.cells)
        return {
            "cells": [c if c is not None else "" for c in self.cells],
            "turn": self.turn,
            "winner": self.winner,
            "draw": self.draw,
            "inProgress": not self.status.is_terminal,
            "scores": dict(self.scores),
            "winningLine": list(line) if line is not None else None,
        }


@dataclass
class GameSession:
    """One player against the automated player, one board at a time."""

    options: GameOptions = field(default_factory=GameOptions)
    board: Board = field(default_factory=Board)
    scoreboard: Scoreboard = field(default_factory=Scoreboard)
    selector: Optional[MoveSelector] = None
    _recorded: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self._move_selector()

    @property
    def ai_player(self) -> Player:
        return self.options.ai_player

    # ---- contract operations ----

    def apply_move(self, index: int, marker: Optional[Player] = None) -> None:
        self.board.apply_move(index, marker or self.board.turn)

    def evaluate(self) -> GameStatus:
        return evaluate(self.board)

    def select_move(
        self, difficulty: Union[Difficulty, str, None] = None
    ) -> int:
        level = self.options.difficulty if difficulty is None else difficulty
        return self._move_selector().select_move(self.board, level)

    def record_result(self, status: GameStatus) -> None:
        self.scoreboard.record_result(status)

    def reset_game(self) -> None:
        self.board.clear()
        self._recorded = False
        _LOGGER.info("New game, scores %s", self.scoreboard.as_dict())

    # ---- combined operations for hosts ----

    def play_move(self, index: int) -> GameSnapshot:
        """Apply the current player's move and return the resulting state.

        The result of a finished game is recorded once, on the move that
        ends it. Ignored while the automated player is to move.
        """
        if self.board.turn == self.ai_player:
            _LOGGER.debug("Ignoring move %r, %s is to move", index, self.ai_player)
            return self.snapshot()
        self.apply_move(index)
        return self._settle()

    def play_ai_turn(self) -> GameSnapshot:
        status = self.evaluate()
        if not status.is_terminal and self.board.turn == self.ai_player:
            move = self.select_move()
            if move != NO_MOVE:
                self.apply_move(move, self.ai_player)
        return self._settle()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            cells=list(self.board.cells),
            turn=self.board.turn,
            status=self.evaluate(),
            scores=self.scoreboard.as_dict(),
        )

    def _move_selector(self) -> MoveSelector:
        if self.selector is None:
            self.selector = MoveSelector(player=self.ai_player)
        elif self.selector.player != self.ai_player:
            raise ValueError(
                f"Selector plays {self.selector.player!r} but the session "
                f"expects {self.ai_player!r}"
            )
        return self.selector

    def _settle(self) -> GameSnapshot:
        status = self.evaluate()
        if status.is_terminal and not self._recorded:
            self._recorded = True
            self.record_result(status)
            if status.winner:
                _LOGGER.info("%s wins", status.winner)
            else:
                _LOGGER.info("Game tied")
        return self.snapshot()
