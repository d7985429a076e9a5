"""Data models for the puzzle board."""

from enum import Enum
from typing import Iterator, List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator


def new_id() -> str:
    return uuid4().hex


class TileState(str, Enum):
    """Correctness classification of a single tile."""
    IDLE = "idle"
    VALID = "valid"
    INVALID = "invalid"
    MIXED = "mixed"


class Letter(BaseModel):
    """A letter from the pool. The same letter may move between tiles."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    letter: str = Field(..., min_length=1, max_length=1)


class Tile(BaseModel):
    """A single grid cell, optionally holding a letter."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    letter: Optional[Letter] = None
    state: TileState = TileState.IDLE

    @property
    def char(self) -> Optional[str]:
        """The character on this tile, or None when empty."""
        return self.letter.letter if self.letter is not None else None


class Board(BaseModel):
    """
    A square matrix of tiles.

    Construction fails fast on jagged or non-square grids and on tiles whose
    stored coordinates disagree with their position in the matrix.
    """
    model_config = ConfigDict(frozen=True)

    tiles: List[List[Tile]]

    @model_validator(mode="after")
    def _check_shape(self) -> "Board":
        size = len(self.tiles)
        if size == 0:
            raise ValueError("Board must have at least one row")
        for r, row in enumerate(self.tiles):
            if len(row) != size:
                raise ValueError(
                    f"Board must be square: row {r} has {len(row)} tiles, expected {size}"
                )
            for c, tile in enumerate(row):
                if (tile.row, tile.col) != (r, c):
                    raise ValueError(
                        f"Tile at ({r}, {c}) reports position ({tile.row}, {tile.col})"
                    )
        return self

    @property
    def size(self) -> int:
        """Side length of the board."""
        return len(self.tiles)

    def tile(self, row: int, col: int) -> Tile:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Position ({row}, {col}) is outside a {self.size}x{self.size} board")
        return self.tiles[row][col]

    def letter_at(self, row: int, col: int) -> Optional[str]:
        return self.tile(row, col).char

    def iter_tiles(self) -> Iterator[Tile]:
        """Yield every tile in row-major order."""
        for row in self.tiles:
            yield from row
