"""Board model and mutation primitives."""

from .models import Board, Letter, Tile, TileState
from .mutation import BOARD_SIZE, create_board, set_letter, clear_board, reset_states
from .letters import LETTER_DISTRIBUTION, MAX_LETTERS, LetterPool, board_letter_ids

__all__ = [
    # Models
    "Board",
    "Letter",
    "Tile",
    "TileState",
    # Mutation
    "BOARD_SIZE",
    "create_board",
    "set_letter",
    "clear_board",
    "reset_states",
    # Letter pool
    "LETTER_DISTRIBUTION",
    "MAX_LETTERS",
    "LetterPool",
    "board_letter_ids",
]
