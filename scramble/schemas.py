from __future__ import annotations
from pydantic import BaseModel
from typing import List, Optional


class GameSnapshot(BaseModel):
    id: Optional[str] = None
    puzzleWord: str
    acceptedWords: List[str] = []
    score: int = 0


class Submission(BaseModel):
    word: str


class WordAlert(BaseModel):
    title: str
    message: str


class SubmitResult(BaseModel):
    accepted: bool
    word: str
    alert: Optional[WordAlert] = None
    state: GameSnapshot


class DictLookup(BaseModel):
    word: str
    language: str
    valid: bool
