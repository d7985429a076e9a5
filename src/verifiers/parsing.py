"""Plain-text board format: one line per row, `.` or space for an empty tile."""

from typing import List, Optional

from ..board.models import Board, Letter, Tile, TileState

EMPTY_CHARS = (".", " ")


def parse_board_text(text: str, size: Optional[int] = None) -> Board:
    """
    Parse a text grid into a Board.

    Empty leading and trailing lines are dropped. Short rows are padded with
    empty tiles. The board side is the larger of the row count and the longest
    row, unless `size` is given.

    Raises:
        ValueError: If the content is empty or does not fit in `size`
    """
    # A line of spaces is a row of empty tiles, so only truly empty lines are trimmed
    lines = [line.rstrip("\r") for line in text.split("\n")]
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()

    if not lines:
        raise ValueError("Board text is empty")

    needed = max(len(lines), max(len(line.rstrip()) for line in lines))
    if size is None:
        size = needed
    elif size < needed:
        raise ValueError(f"Board content needs a {needed}x{needed} board, got size {size}")

    rows: List[List[Tile]] = []
    for r in range(size):
        line = lines[r] if r < len(lines) else ""
        row = []
        for c in range(size):
            char = line[c] if c < len(line) else "."
            letter = None if char in EMPTY_CHARS else Letter(letter=char)
            row.append(Tile(row=r, col=c, letter=letter))
        rows.append(row)

    return Board(tiles=rows)


def render_board(board: Board, show_states: bool = False) -> str:
    """
    Render the board to a string grid.

    With `show_states`, letters on valid tiles are uppercase and all other
    letters lowercase.
    """
    lines = []
    for row in board.tiles:
        line = ""
        for tile in row:
            char = tile.char
            if char is None:
                line += "."
            elif show_states:
                line += char.upper() if tile.state == TileState.VALID else char.lower()
            else:
                line += char
        lines.append(line)
    return "\n".join(lines)
