import random
from typing import Dict, List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field

from .models import Board, Letter


# Bananagrams tile distribution (144 tiles total)
LETTER_DISTRIBUTION: Dict[str, int] = {
    "A": 13, "B": 3, "C": 3, "D": 6, "E": 18, "F": 3, "G": 4,
    "H": 3, "I": 12, "J": 2, "K": 2, "L": 5, "M": 3, "N": 8,
    "O": 11, "P": 3, "Q": 2, "R": 9, "S": 6, "T": 9, "U": 6,
    "V": 3, "W": 3, "X": 2, "Y": 3, "Z": 2
}

# Letters dealt to the player each game
MAX_LETTERS = 20


def board_letter_ids(board: Board) -> Set[str]:
    """Ids of every letter currently placed on the board."""
    return {tile.letter.id for tile in board.iter_tiles() if tile.letter is not None}


class LetterPool(BaseModel):
    """
    The fixed pool of letters a player arranges on the board.

    Attributes:
        letters: The letters in display order
        seed: Optional random seed for reproducibility
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    letters: List[Letter] = Field(default_factory=list)
    seed: Optional[int] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    @classmethod
    def create(cls, size: int = MAX_LETTERS, seed: Optional[int] = None) -> "LetterPool":
        """
        Factory method to deal a new pool from the letter distribution.

        Args:
            size: Number of letters to deal
            seed: Optional random seed for reproducibility

        Returns:
            A new LetterPool instance

        Raises:
            ValueError: If size exceeds the number of available tiles
        """
        bunch = []
        for char, count in LETTER_DISTRIBUTION.items():
            bunch.extend([char] * count)

        if not 0 < size <= len(bunch):
            raise ValueError(f"Pool size must be between 1 and {len(bunch)}, got {size}")

        rng = random.Random(seed)
        rng.shuffle(bunch)

        return cls(letters=[Letter(letter=char) for char in bunch[:size]], seed=seed)

    def shuffle(self) -> None:
        """Reorder the pool in place."""
        self._rng.shuffle(self.letters)

    def unused(self, board: Board) -> List[Letter]:
        """Letters not currently on the board, in pool order."""
        placed = board_letter_ids(board)
        return [letter for letter in self.letters if letter.id not in placed]

    def get(self, letter_id: str) -> Letter:
        for letter in self.letters:
            if letter.id == letter_id:
                return letter
        raise KeyError(f"No letter with id {letter_id!r} in the pool")
