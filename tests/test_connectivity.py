"""Test the single-island connectivity check."""

import pytest

from src.verifiers import count_filled_tiles, is_single_connected_region, parse_board_text, traverse
from src.verifiers.connectivity import find_first_filled_tile


def board(text, size=6):
    return parse_board_text(text, size=size)


class TestConnected:
    """Boards whose letters form one island."""

    def test_single_letter(self):
        assert is_single_connected_region(board("a")) is True

    def test_single_word(self):
        assert is_single_connected_region(board("\n".join(["......", ".cat.."]))) is True

    def test_crossing_words(self):
        assert is_single_connected_region(board("cat\no..\nt..")) is True

    def test_winding_path(self):
        """A snake touching every edge is still one island."""
        text = "\n".join([
            "aaaaaa",
            ".....a",
            "aaaaaa",
            "a.....",
            "aaaaaa",
            ".....a",
        ])
        assert is_single_connected_region(board(text)) is True

    def test_full_board(self):
        assert is_single_connected_region(board("\n".join(["zzzzzz"] * 6))) is True


class TestDisconnected:
    """Boards with two or more islands, or no letters at all."""

    def test_empty_board(self):
        assert is_single_connected_region(board(".")) is False

    def test_far_apart_letters(self):
        assert is_single_connected_region(board("a.....\n......\n......\n...b..")) is False

    def test_diagonal_is_not_adjacent(self):
        assert is_single_connected_region(board("a.\n.b")) is False

    def test_no_wrap_across_edges(self):
        """Letters on opposite edges of a row are not neighbors."""
        assert is_single_connected_region(board("a....b")) is False

    def test_same_character_counted_per_tile(self):
        """Two islands of the same character are still two islands."""
        assert is_single_connected_region(board("a.a")) is False

    @pytest.mark.parametrize("text", [
        "ab....\n......\n....cd",
        "a.....\n......\n......\n......\n......\n.....b",
        "cat...\n......\ndog...",
    ])
    def test_two_islands(self, text):
        assert is_single_connected_region(board(text)) is False


class TestTraversalOrder:
    """Visiting order matches a recursive walk trying up, left, down, right."""

    def visited(self, text):
        b = parse_board_text(text)
        start = find_first_filled_tile(b)
        return [tile.char for tile in traverse(b, start)]

    def test_plus_shape(self):
        assert self.visited(".a.\nbcd\n.e.") == ["a", "c", "b", "e", "d"]

    def test_square_reaches_tile_pushed_twice_once(self):
        assert self.visited("ab\ncd") == ["a", "c", "d", "b"]

    def test_stops_at_island_edge(self):
        assert self.visited("ab.\n...\n..c") == ["a", "b"]


class TestCountFilledTiles:

    def test_counts_repeated_characters(self):
        assert count_filled_tiles(board("aaa\na..")) == 4

    def test_empty(self):
        assert count_filled_tiles(board("......")) == 0
