"""Board verification: connectivity, word extraction and tile classification."""

from .validate import validate_board, check_board, invalid_words
from .models import CandidateWord, Orientation, ValidationResult
from .connectivity import is_single_connected_region, count_filled_tiles, traverse
from .words import extract_words, extract_row_words, extract_column_words, extract_all_words
from .dictionary import Dictionary, WordSet, load_word_list
from .scoring import count_letters_on_board, count_valid_letters_on_board, score_to_compliment
from .parsing import parse_board_text, render_board

__all__ = [
    # Main verification
    "validate_board",
    "check_board",
    "invalid_words",
    # Models
    "CandidateWord",
    "Orientation",
    "ValidationResult",
    # Connectivity
    "is_single_connected_region",
    "count_filled_tiles",
    "traverse",
    # Word extraction
    "extract_words",
    "extract_row_words",
    "extract_column_words",
    "extract_all_words",
    # Dictionary
    "Dictionary",
    "WordSet",
    "load_word_list",
    # Scoring
    "count_letters_on_board",
    "count_valid_letters_on_board",
    "score_to_compliment",
    # Text format
    "parse_board_text",
    "render_board",
]
