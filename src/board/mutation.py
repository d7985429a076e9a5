"""
Board mutation primitives.

Every function returns a new Board snapshot; the board passed in is never
modified. Tile ids and coordinates survive every operation.
"""

from typing import List, Optional, Tuple

from .models import Board, Letter, Tile, TileState


# Side length of a standard board
BOARD_SIZE = 6


def create_board(size: int = BOARD_SIZE) -> Board:
    """Create an empty size x size board with fresh tile ids."""
    if size < 1:
        raise ValueError(f"Board size must be positive, got {size}")
    return Board(tiles=[
        [Tile(row=r, col=c) for c in range(size)]
        for r in range(size)
    ])


def _rebuild(board: Board, rows: List[List[Tile]]) -> Board:
    return board.model_copy(update={"tiles": rows})


def set_letter(
    board: Board,
    position: Tuple[int, int],
    letter: Optional[Letter],
) -> Board:
    """
    Place `letter` on the tile at `position`, or clear it when `letter` is None.

    If the letter already sits on another tile it is moved, so a letter is
    never referenced by two tiles at once.
    Tiles whose occupant changes go back to idle.

    Args:
        board: The current board snapshot
        position: (row, col) of the target tile
        letter: The letter to place, or None to empty the tile

    Returns:
        A new board with the occupant replaced

    Raises:
        IndexError: If the position is outside the board
    """
    row, col = position
    board.tile(row, col)

    rows = []
    for tile_row in board.tiles:
        new_row = []
        for tile in tile_row:
            if (tile.row, tile.col) == (row, col):
                tile = tile.model_copy(update={"letter": letter, "state": TileState.IDLE})
            elif letter is not None and tile.letter is not None and tile.letter.id == letter.id:
                tile = tile.model_copy(update={"letter": None, "state": TileState.IDLE})
            new_row.append(tile)
        rows.append(new_row)

    return _rebuild(board, rows)


def clear_board(board: Board) -> Board:
    """Remove every letter from the board."""
    return _rebuild(board, [
        [tile.model_copy(update={"letter": None, "state": TileState.IDLE}) for tile in row]
        for row in board.tiles
    ])


def reset_states(board: Board) -> Board:
    """Put every tile back into the idle state, leaving letters in place."""
    return _rebuild(board, [
        [tile.model_copy(update={"state": TileState.IDLE}) for tile in row]
        for row in board.tiles
    ])
