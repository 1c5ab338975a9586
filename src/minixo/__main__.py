"""Entry point for playing minixo in a terminal via ``python -m minixo``."""

from __future__ import annotations

import logging
import os

from .config import load_options
from .session import GameSession


def _read_command(session: GameSession) -> str:
    while True:
        raw = input(f"Play {session.board.turn} at [1-9], r to reset, q to quit: ")
        raw = raw.strip().lower()
        if raw in ("q", "r"):
            return raw
        if raw.isdigit() and int(raw) - 1 in session.board.empty_cells():
            return raw
        print("Illegal move. Try again.")


def main() -> None:
    """Play against the automated player until the user quits."""

    logging.basicConfig(level=os.environ.get("MINIXO_LOG_LEVEL", "WARNING").upper())
    session = GameSession(options=load_options())
    level = session.options.difficulty.value
    print(f"You are playing against {session.ai_player} ({level}).")

    while True:
        snapshot = session.play_ai_turn()
        print(f"\n{session.board.render()}\n")
        if snapshot.status.is_terminal:
            print("Winner:", snapshot.winner if snapshot.winner else "Draw")
            print("Scores:", ", ".join(f"{p}={s}" for p, s in snapshot.scores.items()))
            session.reset_game()
            continue

        command = _read_command(session)
        if command == "q":
            return
        if command == "r":
            session.reset_game()
            continue
        session.play_move(int(command) - 1)


if __name__ == "__main__":
    main()
