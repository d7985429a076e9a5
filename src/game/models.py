"""
Pydantic models for the game layer.

Configuration and finish outcomes. The session logic lives in game.py.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from ..board.letters import MAX_LETTERS
from ..board.mutation import BOARD_SIZE


FinishReason = Literal["ACCEPTED", "EMPTY_BOARD", "DISCONNECTED_LETTERS", "INVALID_WORDS"]


class GameConfig(BaseModel):
    """Configuration for a game session."""
    board_size: int = Field(default=BOARD_SIZE, ge=2)
    max_letters: int = Field(default=MAX_LETTERS, ge=1)
    seed: Optional[int] = None
    dictionary_path: Optional[str] = None


class FinishResult(BaseModel):
    """Outcome of submitting a board."""
    accepted: bool
    reason: FinishReason
    score: int = 0
    compliment: str = ""
    invalid_words: List[str] = Field(default_factory=list)
