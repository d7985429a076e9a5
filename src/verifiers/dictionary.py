"""Dictionary oracle: membership tests for lowercase words."""

from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Protocol, Union, runtime_checkable


@runtime_checkable
class Dictionary(Protocol):
    """Anything that can answer whether a lowercase word is valid."""

    def contains(self, word: str) -> bool:
        ...


class WordSet:
    """
    In-memory word list.

    Entries are stripped and lowercased when the set is built. Lookups are
    exact: callers pass already-lowercased text.
    """

    def __init__(self, words: Iterable[str] = ()):
        self._words: FrozenSet[str] = frozenset(
            word.strip().lower() for word in words if word.strip()
        )

    def contains(self, word: str) -> bool:
        '''
        Returns True if `word` is in the word list.
        Returns False otherwise.
        '''
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __repr__(self) -> str:
        return f"WordSet({len(self._words)} words)"


def load_word_list(path: Union[str, Path]) -> WordSet:
    """Load a newline-delimited word file. Blank lines and `#` comments are skipped."""
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    with open(path, encoding="utf-8") as f:
        return WordSet(line for line in f if not line.lstrip().startswith("#"))
