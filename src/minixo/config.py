"""Session options and environment loading."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .ai import Difficulty
from .game import PLAYERS, Player


class GameOptions(BaseModel):
    """Options for a game session against the automated player."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    difficulty: Difficulty = Field(
        default=Difficulty.MEDIUM,
        description="Move-selection strategy of the automated player",
    )
    ai_player: Player = Field(default="O", alias="aiPlayer")

    @field_validator("difficulty", mode="before")
    @classmethod
    def normalize_difficulty(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("ai_player", mode="before")
    @classmethod
    def ensure_marker(cls, value: object) -> str:
        marker = str(value).strip().upper()
        if marker not in PLAYERS:
            raise ValueError(
                f"Unsupported marker {value!r}. Choose one of {', '.join(PLAYERS)}."
            )
        return marker


def load_options(environ: Optional[Mapping[str, str]] = None) -> GameOptions:
    """Build options from ``MINIXO_DIFFICULTY`` and ``MINIXO_AI_PLAYER``."""

    env = os.environ if environ is None else environ
    values = {}
    if env.get("MINIXO_DIFFICULTY"):
        values["difficulty"] = env["MINIXO_DIFFICULTY"]
    if env.get("MINIXO_AI_PLAYER"):
        values["ai_player"] = env["MINIXO_AI_PLAYER"]
    return GameOptions(**values)
