"""Letter counting for the end-of-game summary."""

from ..board.models import Board, TileState


def count_letters_on_board(board: Board) -> int:
    """Number of distinct letters placed on the board."""
    return len({tile.letter.id for tile in board.iter_tiles() if tile.letter is not None})


def count_valid_letters_on_board(board: Board) -> int:
    """Number of tiles classified as correct by the last validation."""
    return len({
        tile.id for tile in board.iter_tiles()
        if tile.state in (TileState.VALID, TileState.MIXED)
    })


def score_to_compliment(score: int) -> str:
    if score < 10:
        return "Better luck next time!"
    if score < 14:
        return "Not too shabby!"
    if score < 16:
        return "Nice."
    if score < 20:
        return "Awesome!"
    return "Perfect - you're amazing!"
