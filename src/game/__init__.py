"""Game session for the word-placement puzzle."""

from .models import FinishReason, FinishResult, GameConfig
from .game import Game

__all__ = [
    "FinishReason",
    "FinishResult",
    "GameConfig",
    "Game",
]
