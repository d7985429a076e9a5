"""Test candidate word extraction along rows and columns."""

from src.verifiers import (
    Orientation,
    extract_all_words,
    extract_column_words,
    extract_row_words,
    extract_words,
    parse_board_text,
)


def summary(words):
    return [(w.word, w.row, w.col, w.orientation) for w in words]


class TestRowWords:
    """Left-to-right extraction."""

    def test_word_mid_row(self):
        board = parse_board_text("......\n.cat..")
        assert summary(extract_row_words(board)) == [("cat", 1, 1, Orientation.ACROSS)]

    def test_word_flushed_at_row_end(self):
        board = parse_board_text("...dog")
        assert summary(extract_row_words(board)) == [("dog", 0, 3, Orientation.ACROSS)]

    def test_gap_breaks_words(self):
        """One empty tile always splits a run."""
        board = parse_board_text("at.it.")
        assert [w.word for w in extract_row_words(board)] == ["at", "it"]

    def test_single_letters_dropped(self):
        board = parse_board_text("a.b.cd")
        assert [w.word for w in extract_row_words(board)] == ["cd"]

    def test_lowercased(self):
        board = parse_board_text("CaT...")
        assert [w.word for w in extract_row_words(board)] == ["cat"]

    def test_rows_scanned_top_to_bottom(self):
        board = parse_board_text("ab....\n......\ncd....")
        assert [(w.word, w.row) for w in extract_row_words(board)] == [("ab", 0), ("cd", 2)]


class TestColumnWords:
    """Top-to-bottom extraction."""

    def test_word_in_column(self):
        board = parse_board_text("c.....\na.....\nt.....")
        assert summary(extract_column_words(board)) == [("cat", 0, 0, Orientation.DOWN)]

    def test_word_flushed_at_column_end(self):
        board = parse_board_text("......\n......\n......\n......\n.....u\n.....p")
        assert summary(extract_column_words(board)) == [("up", 4, 5, Orientation.DOWN)]

    def test_gap_breaks_words(self):
        board = parse_board_text("a.....\nt.....\n......\ni.....\nt.....")
        assert [(w.word, w.row) for w in extract_column_words(board)] == [("at", 0), ("it", 3)]

    def test_columns_scanned_left_to_right(self):
        board = parse_board_text("a.b\nc.d")
        assert [w.word for w in extract_column_words(board)] == ["ac", "bd"]


class TestAllWords:

    def test_across_before_down(self):
        board = parse_board_text("cat\no..\nt..")
        words = extract_all_words(board)
        assert [(w.word, w.orientation) for w in words] == [
            ("cat", Orientation.ACROSS),
            ("cot", Orientation.DOWN),
        ]

    def test_isolated_letter_never_a_candidate(self):
        board = parse_board_text("cat...\n......\n....x.")
        assert all("x" not in w.word for w in extract_all_words(board))

    def test_extract_words_by_orientation(self):
        board = parse_board_text("cat\no..\nt..")
        assert [w.word for w in extract_words(board, Orientation.ACROSS)] == ["cat"]
        assert [w.word for w in extract_words(board, Orientation.DOWN)] == ["cot"]

    def test_empty_board(self):
        assert extract_all_words(parse_board_text("......")) == []

    def test_cells(self):
        board = parse_board_text("cat\no..\nt..")
        across, down = extract_all_words(board)
        assert across.cells() == [(0, 0), (0, 1), (0, 2)]
        assert down.cells() == [(0, 0), (1, 0), (2, 0)]
        assert down.length == 3
