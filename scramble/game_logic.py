from __future__ import annotations
import logging
import random
from collections import Counter
from typing import Iterable, List, Optional

from .dictionary import DictionaryService
from .errors import DuplicateWord, InfeasibleWord, StartWordsUnavailable, UnrecognizedWord
from .schemas import GameSnapshot

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3


class GameState:
    def __init__(self, dictionary: DictionaryService, rng: Optional[random.Random] = None):
        self.dictionary = dictionary
        self.rng = rng or random.Random()
        self.puzzle_word = ''
        self.accepted_words: List[str] = []
        self.score = 0

    def start_round(self, word_list: Optional[Iterable[str]]):
        words = [w.strip().lower() for w in (word_list or []) if w and w.strip()]
        if not words:
            logger.error("No puzzle words available to start a round")
            raise StartWordsUnavailable("Could not load the puzzle word list")
        self.puzzle_word = self.rng.choice(words)
        logger.info("Round started with puzzle word %r", self.puzzle_word)

    def reset(self, word_list: Optional[Iterable[str]]):
        self.score = 0
        self.accepted_words.clear()
        self.start_round(word_list)

    def submit(self, candidate: str) -> Optional[str]:
        """Validate and record a candidate word.

        Returns the normalized word when accepted, or None for an empty entry.
        Raises DuplicateWord, InfeasibleWord or UnrecognizedWord, in that
        order of precedence.
        """
        word = candidate.strip().lower()
        if not word:
            return None
        if not self.is_original(word):
            raise DuplicateWord(word)
        if not self.is_possible(word):
            raise InfeasibleWord(word, self.puzzle_word)
        if not self.is_real(word):
            raise UnrecognizedWord(word)

        self.accepted_words.insert(0, word)
        self.score += len(word)
        logger.info("Accepted %r (score %d)", word, self.score)
        return word

    def is_original(self, word: str) -> bool:
        return word not in self.accepted_words

    def is_possible(self, word: str) -> bool:
        if len(word) < MIN_WORD_LENGTH:
            return False
        # Counter subtraction drops non-positive counts, so anything left over
        # is a letter used more often than the puzzle word allows.
        return not (Counter(word) - Counter(self.puzzle_word))

    def is_real(self, word: str) -> bool:
        if word == self.puzzle_word:
            return False
        return self.dictionary.is_valid(word)

    def snapshot(self, game_id: Optional[str] = None) -> GameSnapshot:
        return GameSnapshot(
            id=game_id,
            puzzleWord=self.puzzle_word,
            acceptedWords=list(self.accepted_words),
            score=self.score,
        )
