"""Environment-level configuration for the scramble server.

Deployment concerns (file locations, dictionary tuning, logging) live here,
away from the game rules.
"""
from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

DEFAULT_START_WORDS = Path(__file__).parent / 'data' / 'start.txt'
# Words below this Zipf frequency are treated as misspellings.
DEFAULT_MIN_ZIPF = 2.5


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(',') if o.strip()]


@dataclass
class Settings:
    start_words_path: Path = DEFAULT_START_WORDS
    language: str = 'en'
    min_zipf: float = DEFAULT_MIN_ZIPF
    log_level: str = 'INFO'
    cors_origins: List[str] = field(default_factory=lambda: ['*'])

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from SCRAMBLE_* environment variables."""
        return cls(
            start_words_path=Path(os.getenv('SCRAMBLE_START_WORDS', str(DEFAULT_START_WORDS))),
            language=os.getenv('SCRAMBLE_LANGUAGE', 'en'),
            min_zipf=float(os.getenv('SCRAMBLE_MIN_ZIPF', str(DEFAULT_MIN_ZIPF))),
            log_level=os.getenv('SCRAMBLE_LOG_LEVEL', 'INFO').upper(),
            cors_origins=_split_origins(os.getenv('SCRAMBLE_CORS_ORIGINS', '*')),
        )


def get_settings() -> Settings:
    return Settings.from_env()
