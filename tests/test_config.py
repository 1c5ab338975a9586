"""Tests for minixo session options."""

import pytest
from pydantic import ValidationError

from minixo.ai import Difficulty
from minixo.config import GameOptions, load_options


def test_defaults():
    options = GameOptions()
    assert options.difficulty is Difficulty.MEDIUM
    assert options.ai_player == "O"


def test_load_options_from_environment():
    options = load_options({"MINIXO_DIFFICULTY": "Hard", "MINIXO_AI_PLAYER": "x"})
    assert options.difficulty is Difficulty.HARD
    assert options.ai_player == "X"


def test_load_options_ignores_empty_values():
    assert load_options({"MINIXO_DIFFICULTY": ""}) == GameOptions()


def test_alias_is_accepted():
    assert GameOptions(aiPlayer="X").ai_player == "X"


@pytest.mark.parametrize(
    "values", [{"difficulty": "impossible"}, {"ai_player": "Z"}]
)
def test_rejects_unsupported_values(values):
    with pytest.raises(ValidationError):
        GameOptions(**values)
