import asyncio
import random

import pytest

from scramble import main
from scramble.dictionary import DictionaryService
from scramble.managers.game import GameManager


class FakeSio:
    """Stands in for the Socket.IO server: keeps sessions and records emits."""

    def __init__(self):
        self.sessions = {}
        self.rooms = []
        self.emitted = []

    async def save_session(self, sid, session):
        self.sessions[sid] = session

    async def get_session(self, sid):
        return self.sessions.get(sid)

    async def enter_room(self, sid, room):
        self.rooms.append((sid, room))

    async def emit(self, event, data=None, to=None, room=None, **kwargs):
        self.emitted.append((event, data, to or room))


@pytest.fixture
def sio(monkeypatch):
    fake = FakeSio()
    mgr = GameManager(fake, DictionaryService(words={"cat", "act", "attic"}), ["tactic"],
                      rng=random.Random(0))
    monkeypatch.setattr(main, "sio", fake)
    monkeypatch.setattr(main, "games", mgr)
    return fake


def _joined(sio, sid="s1", game_id="g1"):
    asyncio.run(main.connect(sid, {}, {"token": "alice"}))
    asyncio.run(main.game_join(sid, game_id))
    sio.emitted.clear()


def test_connect_saves_token_as_name(sio):
    asyncio.run(main.connect("s1", {}, {"token": "  alice "}))
    asyncio.run(main.connect("s2", {}, None))
    assert sio.sessions["s1"] == {"name": "alice"}
    assert sio.sessions["s2"] == {"name": None}


def test_join_enters_room_and_sends_state(sio):
    asyncio.run(main.connect("s1", {}, {"token": "alice"}))
    asyncio.run(main.game_join("s1", "g1"))
    assert sio.rooms == [("s1", "g1")]
    assert sio.sessions["s1"] == {"name": "alice", "game_id": "g1"}
    assert sio.emitted == [
        ("game:state", {"id": "g1", "puzzleWord": "tactic", "acceptedWords": [], "score": 0}, "s1"),
    ]


def test_submit_dict_payload_broadcasts_state(sio):
    _joined(sio)
    asyncio.run(main.game_submit("s1", {"word": "Cat"}))
    assert sio.emitted == [
        ("game:state", {"id": "g1", "puzzleWord": "tactic", "acceptedWords": ["cat"], "score": 3}, "g1"),
    ]


def test_submit_bare_string_payload(sio):
    _joined(sio)
    asyncio.run(main.game_submit("s1", "act"))
    event, data, target = sio.emitted[-1]
    assert (event, target) == ("game:state", "g1")
    assert data["acceptedWords"] == ["act"]


def test_submit_rejection_alerts_sender(sio):
    _joined(sio)
    asyncio.run(main.game_submit("s1", {"word": "tactic"}))
    assert sio.emitted == [
        ("game:alert", {"title": "Word not official",
                        "message": "Word must be a real word, and not the puzzle word itself."}, "s1"),
    ]


def test_submit_null_word_is_ignored(sio):
    _joined(sio)
    asyncio.run(main.game_submit("s1", {"word": None}))
    asyncio.run(main.game_submit("s1", None))
    assert sio.emitted == []
    assert main.games.snapshot("g1").score == 0


def test_submit_non_string_word_is_rejected_not_crashed(sio):
    _joined(sio)
    asyncio.run(main.game_submit("s1", {"word": 123}))
    assert len(sio.emitted) == 1
    event, data, target = sio.emitted[0]
    assert (event, target) == ("game:alert", "s1")
    assert data["title"] == "Word not possible"


def test_events_without_joined_game_do_nothing(sio):
    asyncio.run(main.connect("s1", {}, None))
    asyncio.run(main.game_submit("s1", {"word": "cat"}))
    asyncio.run(main.game_reset("s1"))
    asyncio.run(main.game_submit("unknown", "cat"))
    assert sio.emitted == []
    assert main.games.games == {}


def test_reset_broadcasts_new_round(sio):
    _joined(sio)
    asyncio.run(main.game_submit("s1", "cat"))
    asyncio.run(main.game_reset("s1"))
    assert sio.emitted[-1] == (
        "game:state", {"id": "g1", "puzzleWord": "tactic", "acceptedWords": [], "score": 0}, "g1",
    )
