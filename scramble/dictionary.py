from __future__ import annotations
import logging
from typing import Iterable, Optional, Set

from wordfreq import zipf_frequency

from .config import DEFAULT_MIN_ZIPF, get_settings

logger = logging.getLogger(__name__)


class DictionaryService:
    """Spell-check style word lookup.

    With an explicit word set the service only recognizes those words, which
    keeps tests and small deployments deterministic. Otherwise it asks
    wordfreq how common the word is in the requested language.
    """

    def __init__(self, words: Optional[Iterable[str]] = None, language: str = 'en',
                 min_zipf: float = DEFAULT_MIN_ZIPF):
        # Store lowercase words
        self._words: Optional[Set[str]] = {w.strip().lower() for w in words} if words is not None else None
        self.language = language
        self.min_zipf = min_zipf

    def is_valid(self, word: str, language: Optional[str] = None) -> bool:
        if not word or not word.strip():
            return False
        w = word.strip().lower()
        if self._words is not None:
            return w in self._words
        lang = language or self.language
        freq = zipf_frequency(w, lang)
        logger.debug("zipf(%r, %s) = %.2f", w, lang, freq)
        return freq >= self.min_zipf


def from_settings() -> DictionaryService:
    settings = get_settings()
    return DictionaryService(language=settings.language, min_zipf=settings.min_zipf)


# Singleton instance
service = from_settings()
