"""Connectivity check: all placed letters must form a single island."""

import logging
from typing import List, Optional, Set

from ..board.models import Board, Tile

logger = logging.getLogger(__name__)

# Neighbor offsets in visiting order: up, left, down, right
_NEIGHBOR_OFFSETS = ((-1, 0), (0, -1), (1, 0), (0, 1))


def count_filled_tiles(board: Board) -> int:
    """Number of tiles holding a letter. Repeated characters count separately."""
    return sum(1 for tile in board.iter_tiles() if tile.letter is not None)


def find_first_filled_tile(board: Board) -> Optional[Tile]:
    """First tile holding a letter in row-major order, or None for an empty board."""
    for tile in board.iter_tiles():
        if tile.letter is not None:
            return tile
    return None


def _filled_neighbors(board: Board, tile: Tile) -> List[Tile]:
    neighbors = []
    for dr, dc in _NEIGHBOR_OFFSETS:
        r, c = tile.row + dr, tile.col + dc
        if 0 <= r < board.size and 0 <= c < board.size:
            neighbor = board.tiles[r][c]
            if neighbor.letter is not None:
                neighbors.append(neighbor)
    return neighbors


def traverse(board: Board, start: Tile) -> List[Tile]:
    """
    Depth-first walk over filled tiles reachable from `start`.

    Returns tiles in visiting order, which matches a recursive walk that
    tries neighbors up, left, down, right.
    """
    visited: Set[str] = set()
    order: List[Tile] = []
    stack = [start]

    while stack:
        tile = stack.pop()
        if tile.id in visited:
            continue
        visited.add(tile.id)
        order.append(tile)

        # Reversed so the first neighbor is explored first
        for neighbor in reversed(_filled_neighbors(board, tile)):
            if neighbor.id not in visited:
                stack.append(neighbor)

    return order


def is_single_connected_region(board: Board) -> bool:
    """
    Check that every placed letter is reachable from every other one.

    Depth-first traversal from the first filled tile over up/left/down/right
    neighbors (no diagonals, no wrapping). The board is connected iff the
    traversal visits every filled tile. An empty board is never connected.
    """
    total = count_filled_tiles(board)
    start = find_first_filled_tile(board)

    if start is None:
        logger.debug("Connectivity check: board is empty")
        return False

    reached = len(traverse(board, start))

    logger.debug("Connectivity check: reached %d of %d letters", reached, total)
    return reached == total
