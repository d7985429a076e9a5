"""Data models for board verification."""

from enum import Enum
from typing import List, NamedTuple, Tuple

from pydantic import BaseModel, Field

from ..board.models import Board


class Orientation(str, Enum):
    """Direction a candidate word is read in."""
    ACROSS = "across"  # left to right along a row
    DOWN = "down"  # top to bottom along a column


class CandidateWord(BaseModel):
    """A run of two or more consecutive letters found on the board."""
    word: str = Field(..., min_length=2)
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    orientation: Orientation

    @property
    def length(self) -> int:
        return len(self.word)

    def cells(self) -> List[Tuple[int, int]]:
        """(row, col) of every tile the word spans, first letter first."""
        if self.orientation == Orientation.ACROSS:
            return [(self.row, self.col + i) for i in range(self.length)]
        return [(self.row + i, self.col) for i in range(self.length)]


class ValidationResult(NamedTuple):
    """Annotated board snapshot plus the overall verdict."""
    board: Board
    valid: bool
