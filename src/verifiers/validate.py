"""
Board validation for the word-placement puzzle.

Validates:
1. Connectivity (all letters form one island) - only via `check_board`
2. Word validity (every across and down run of 2+ letters is a dictionary word)
3. Per-tile correctness, where a tile covered by one valid and one invalid
   word ends up invalid
"""

import logging
from typing import List, Tuple

from ..board.models import Board, TileState
from .connectivity import is_single_connected_region
from .dictionary import Dictionary
from .models import CandidateWord, ValidationResult
from .words import extract_all_words

logger = logging.getLogger(__name__)


def _initial_states(board: Board) -> List[List[TileState]]:
    return [
        [TileState.INVALID if tile.letter is not None else TileState.IDLE for tile in row]
        for row in board.tiles
    ]


def _spanned_cells(word: CandidateWord, size: int) -> List[Tuple[int, int]]:
    # Cells past the last row or column are skipped
    return [(r, c) for r, c in word.cells() if r < size and c < size]


def _annotate(board: Board, states: List[List[TileState]]) -> Board:
    return board.model_copy(update={"tiles": [
        [tile.model_copy(update={"state": states[tile.row][tile.col]}) for tile in row]
        for row in board.tiles
    ]})


def validate_board(board: Board, dictionary: Dictionary) -> ValidationResult:
    """
    Check every word on the board and classify each tile.

    Does not check connectivity; use `check_board` for the gated version.
    The input board is never modified.

    Args:
        board: Board snapshot to validate
        dictionary: Oracle answering membership for lowercase words

    Returns:
        ValidationResult with the annotated board and whether every word is valid
    """
    words = extract_all_words(board)
    verdicts = [dictionary.contains(w.word) for w in words]

    all_valid = all(verdicts)

    states = _initial_states(board)

    # Mark tiles of valid words first
    for word, ok in zip(words, verdicts):
        if not ok:
            continue
        for r, c in _spanned_cells(word, board.size):
            states[r][c] = TileState.VALID

    # Then demote tiles shared with an invalid word. Must run after every
    # valid word has been marked.
    for word, ok in zip(words, verdicts):
        if ok:
            continue
        for r, c in _spanned_cells(word, board.size):
            if states[r][c] == TileState.VALID:
                states[r][c] = TileState.INVALID

    logger.debug(
        "Validated %d words (%d invalid): %s",
        len(words),
        verdicts.count(False),
        "accepted" if all_valid else "rejected",
    )

    return ValidationResult(_annotate(board, states), all_valid)


def check_board(board: Board, dictionary: Dictionary) -> ValidationResult:
    """
    Validate a board only if its letters form a single connected island.

    An empty or disconnected board is rejected without marking any tile
    valid: filled tiles come back invalid and empty tiles idle.
    """
    if not is_single_connected_region(board):
        logger.debug("Board rejected: letters are empty or disconnected")
        return ValidationResult(_annotate(board, _initial_states(board)), False)

    return validate_board(board, dictionary)


def invalid_words(board: Board, dictionary: Dictionary) -> List[CandidateWord]:
    """Candidate words on the board that are not in the dictionary."""
    return [w for w in extract_all_words(board) if not dictionary.contains(w.word)]
