from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_START_WORDS
from .errors import StartWordsUnavailable

logger = logging.getLogger(__name__)


def load_start_words(path: Optional[Path | str] = None) -> List[str]:
    """
    Read the puzzle word list: UTF-8, one word per line.
    Words are stripped and lowercased; blank lines are dropped.
    Raises StartWordsUnavailable if the file is missing or holds no words.
    """
    p = Path(path) if path is not None else DEFAULT_START_WORDS
    if not p.is_file():
        logger.error("Puzzle word list not found: %s", p)
        raise StartWordsUnavailable(f"Could not load {p}")
    words = [ln.strip().lower() for ln in p.read_text(encoding='utf-8').splitlines() if ln.strip()]
    if not words:
        logger.error("Puzzle word list is empty: %s", p)
        raise StartWordsUnavailable(f"No puzzle words in {p}")
    logger.info("Loaded %d puzzle words from %s", len(words), p)
    return words
