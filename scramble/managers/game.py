from __future__ import annotations
import logging
import random
from typing import Dict, List, Optional

from ..dictionary import DictionaryService
from ..errors import WordError
from ..game_logic import GameState
from ..schemas import GameSnapshot, SubmitResult, WordAlert

logger = logging.getLogger(__name__)


class GameManager:
    def __init__(self, sio, dictionary: DictionaryService, start_words: List[str],
                 rng: Optional[random.Random] = None):
        self.sio = sio
        self.dictionary = dictionary
        self.start_words = list(start_words)
        self.rng = rng or random.Random()
        self.games: Dict[str, GameState] = {}

    def get_or_create(self, game_id: str) -> GameState:
        if game_id not in self.games:
            game = GameState(self.dictionary, rng=self.rng)
            game.start_round(self.start_words)
            self.games[game_id] = game
            logger.info("Created game %s", game_id)
        return self.games[game_id]

    def snapshot(self, game_id: str) -> GameSnapshot:
        return self.get_or_create(game_id).snapshot(game_id)

    async def _broadcast(self, game_id: str, state: GameSnapshot):
        if self.sio is not None:
            await self.sio.emit('game:state', state.model_dump(by_alias=True), room=game_id)

    async def submit(self, game_id: str, word: str, sid: Optional[str] = None) -> SubmitResult:
        game = self.get_or_create(game_id)
        try:
            accepted = game.submit(word)
        except WordError as e:
            logger.debug("Game %s rejected %r: %s", game_id, e.word, e.title)
            title, message = e.alert()
            alert = WordAlert(title=title, message=message)
            if self.sio is not None and sid is not None:
                await self.sio.emit('game:alert', alert.model_dump(), to=sid)
            return SubmitResult(accepted=False, word=e.word, alert=alert, state=game.snapshot(game_id))

        state = game.snapshot(game_id)
        if accepted is None:
            # Empty entry: nothing changed
            return SubmitResult(accepted=False, word='', state=state)
        await self._broadcast(game_id, state)
        return SubmitResult(accepted=True, word=accepted, state=state)

    async def reset(self, game_id: str) -> GameSnapshot:
        game = self.get_or_create(game_id)
        game.reset(self.start_words)
        state = game.snapshot(game_id)
        await self._broadcast(game_id, state)
        return state
