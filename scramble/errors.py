"""Exception hierarchy for the scramble game."""
from __future__ import annotations
from typing import Tuple


class ScrambleError(Exception):
    """Base exception for game failures."""


class WordError(ScrambleError):
    """A submitted word was rejected. Carries the alert shown to the player."""
    title = 'Word rejected'

    def __init__(self, word: str, message: str):
        super().__init__(f"{self.title}: {message}")
        self.word = word
        self.message = message

    def alert(self) -> Tuple[str, str]:
        return self.title, self.message


class DuplicateWord(WordError):
    title = 'Word already used'

    def __init__(self, word: str):
        super().__init__(word, 'Enter original word.')


class InfeasibleWord(WordError):
    title = 'Word not possible'

    def __init__(self, word: str, puzzle_word: str):
        super().__init__(
            word,
            f"All letters must come from '{puzzle_word}', and words need at least 3 letters.",
        )
        self.puzzle_word = puzzle_word


class UnrecognizedWord(WordError):
    title = 'Word not official'

    def __init__(self, word: str):
        super().__init__(word, 'Word must be a real word, and not the puzzle word itself.')


class StartWordsUnavailable(ScrambleError, RuntimeError):
    """Raised when the puzzle word list cannot be loaded. Not recoverable."""
