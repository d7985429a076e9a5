import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..board import mutation
from ..board.letters import LetterPool
from ..board.models import Board, Letter
from ..verifiers.connectivity import count_filled_tiles, is_single_connected_region
from ..verifiers.dictionary import Dictionary, WordSet, load_word_list
from ..verifiers.scoring import count_valid_letters_on_board, score_to_compliment
from ..verifiers.validate import invalid_words, validate_board
from .models import FinishResult, GameConfig

logger = logging.getLogger(__name__)


class Game(BaseModel):
    """
    A single-player puzzle session.

    Holds the board, the letter pool and the dictionary, and runs the
    submit flow: connectivity gate first, then word validation.

    Attributes:
        config: Session configuration
        board: Current board snapshot, replaced on every change
        pool: Letters available to the player
        dictionary: Membership oracle for lowercase words
        is_finished: Whether an accepted board has been submitted
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    board: Board
    pool: LetterPool
    dictionary: Dictionary
    is_finished: bool = False

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        dictionary: Optional[Dictionary] = None,
    ) -> "Game":
        """
        Factory method to start a session with an empty board and a fresh pool.

        Args:
            config: Optional GameConfig instance
            dictionary: Dictionary to use; loaded from config.dictionary_path if omitted

        Returns:
            A new Game instance
        """
        if config is None:
            config = GameConfig()

        if dictionary is None:
            if config.dictionary_path is not None:
                dictionary = load_word_list(config.dictionary_path)
            else:
                logger.warning("No dictionary configured; every word will be rejected")
                dictionary = WordSet()

        return cls(
            config=config,
            board=mutation.create_board(config.board_size),
            pool=LetterPool.create(size=config.max_letters, seed=config.seed),
            dictionary=dictionary,
        )

    @property
    def unused_letters(self) -> List[Letter]:
        return self.pool.unused(self.board)

    def place_letter(self, position: Tuple[int, int], letter: Letter) -> None:
        """
        Put a pool letter on the board, moving it if it is already placed.

        Any earlier validation is discarded.

        Raises:
            KeyError: If the letter is not part of this game's pool
            IndexError: If the position is outside the board
        """
        self.pool.get(letter.id)
        self._update(mutation.set_letter(self.board, position, letter))

    def remove_letter(self, position: Tuple[int, int]) -> None:
        self._update(mutation.set_letter(self.board, position, None))

    def _update(self, board: Board) -> None:
        # Tile states only describe the board they were computed for
        self.board = mutation.reset_states(board)
        self.is_finished = False

    def shuffle_letters(self) -> None:
        self.pool.shuffle()

    def clear_board(self) -> None:
        self.board = mutation.clear_board(self.board)
        self.is_finished = False

    def request_finish(self) -> FinishResult:
        """
        Submit the board.

        A board whose letters are missing or split into islands is rejected
        untouched. Otherwise the board is replaced with its annotated copy.

        Returns:
            FinishResult describing the outcome
        """
        if not is_single_connected_region(self.board):
            reason = "EMPTY_BOARD" if count_filled_tiles(self.board) == 0 else "DISCONNECTED_LETTERS"
            logger.info("Board not accepted: %s", reason)
            return FinishResult(accepted=False, reason=reason)

        board, valid = validate_board(self.board, self.dictionary)
        self.board = board
        self.is_finished = valid

        score = count_valid_letters_on_board(board)
        bad = [w.word for w in invalid_words(board, self.dictionary)]

        logger.info("Board %s with %d valid letters", "accepted" if valid else "rejected", score)

        return FinishResult(
            accepted=valid,
            reason="ACCEPTED" if valid else "INVALID_WORDS",
            score=score,
            compliment=score_to_compliment(score),
            invalid_words=bad,
        )
