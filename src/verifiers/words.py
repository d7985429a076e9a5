"""Candidate word extraction along rows and columns."""

from typing import List, Optional

from ..board.models import Board
from .models import CandidateWord, Orientation


def _finish(words: List[CandidateWord], run: Optional[dict]) -> None:
    # Single letters are not words
    if run is not None and len(run["word"]) > 1:
        words.append(CandidateWord(
            word=run["word"].lower(),
            row=run["row"],
            col=run["col"],
            orientation=run["orientation"],
        ))


def extract_row_words(board: Board) -> List[CandidateWord]:
    """Extract all across words (2+ letters), row by row, left to right."""
    words: List[CandidateWord] = []

    for row in board.tiles:
        run = None
        for tile in row:
            char = tile.char
            if char:
                if run is None:
                    run = {"word": char, "row": tile.row, "col": tile.col,
                           "orientation": Orientation.ACROSS}
                else:
                    run["word"] += char
            else:
                _finish(words, run)
                run = None

        # Flush a run that reaches the end of the row
        _finish(words, run)

    return words


def extract_column_words(board: Board) -> List[CandidateWord]:
    """Extract all down words (2+ letters), column by column, top to bottom."""
    words: List[CandidateWord] = []

    for c in range(board.size):
        run = None
        for r in range(board.size):
            tile = board.tiles[r][c]
            char = tile.char
            if char:
                if run is None:
                    run = {"word": char, "row": tile.row, "col": tile.col,
                           "orientation": Orientation.DOWN}
                else:
                    run["word"] += char
            else:
                _finish(words, run)
                run = None

        # Flush a run that reaches the bottom of the column
        _finish(words, run)

    return words


def extract_words(board: Board, orientation: Orientation) -> List[CandidateWord]:
    """Extract candidate words for one orientation."""
    if orientation == Orientation.ACROSS:
        return extract_row_words(board)
    return extract_column_words(board)


def extract_all_words(board: Board) -> List[CandidateWord]:
    """Across words first, then down words."""
    return extract_row_words(board) + extract_column_words(board)
