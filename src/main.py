"""
Check a puzzle board from the command line.

Usage:
    python -m src.main board.txt --dictionary words.txt
    python -m src.main board.txt --config config.yaml --verbose
"""

import argparse
import sys
from pathlib import Path

import yaml

from .game import GameConfig
from .logging_config import setup_logging
from .verifiers import (
    check_board,
    count_letters_on_board,
    count_valid_letters_on_board,
    extract_all_words,
    load_word_list,
    parse_board_text,
    render_board,
)

EXIT_ACCEPTED = 0
EXIT_ERROR = 1
EXIT_REJECTED = 2


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Check a word-placement puzzle board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Board file format (one line per row, '.' for an empty tile):
  ......
  .cat..
  ..o...
  ..t...

Example config.yaml:
  board_size: 6
  dictionary_path: words.txt
        """
    )
    parser.add_argument(
        "board",
        help="Path to the board text file"
    )
    parser.add_argument(
        "--dictionary", "-d",
        help="Path to a newline-delimited word list (overrides the config)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "WARNING")

    try:
        config = load_config(args.config) if args.config else GameConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return EXIT_ERROR

    dictionary_path = args.dictionary or config.dictionary_path
    if not dictionary_path:
        print("Error: dictionary required (use --dictionary or dictionary_path in config)", file=sys.stderr)
        return EXIT_ERROR

    try:
        dictionary = load_word_list(dictionary_path)
        board = parse_board_text(Path(args.board).read_text(encoding="utf-8"), size=config.board_size)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    annotated, valid = check_board(board, dictionary)

    print(render_board(annotated, show_states=True))
    print()
    for word in extract_all_words(board):
        verdict = "ok" if dictionary.contains(word.word) else "NOT A WORD"
        print(f"  {word.word:<10} {word.orientation.value:<6} ({word.row}, {word.col})  {verdict}")

    print()
    print("=== Board Summary ===")
    print(f"Letters placed: {count_letters_on_board(board)}")
    print(f"Valid letters: {count_valid_letters_on_board(annotated)}")
    print(f"Accepted: {'yes' if valid else 'no'}")

    return EXIT_ACCEPTED if valid else EXIT_REJECTED


if __name__ == "__main__":
    sys.exit(main())
