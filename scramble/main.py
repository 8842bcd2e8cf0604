from __future__ import annotations
import logging

import socketio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .dictionary import service as dict_service
from .managers.game import GameManager
from .routers import ws
from .schemas import DictLookup, GameSnapshot, Submission, SubmitResult
from .words import load_start_words

settings = get_settings()
logging.basicConfig(level=settings.log_level, format="[%(levelname)s] %(name)s: %(message)s")
logger = logging.getLogger(__name__)

# Socket.IO server (ASGI)
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=settings.cors_origins)
app = FastAPI(title="Scramble Server", version="0.1.0")

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

# A missing word list is fatal: let it propagate and stop the server.
start_words = load_start_words(settings.start_words_path)
games = GameManager(sio, dict_service, start_words)
app.state.games = games

app.include_router(ws.router, prefix='/ws')


# REST Endpoints
@app.get('/games/{game_id}', response_model=GameSnapshot)
async def get_game(game_id: str):
    return games.snapshot(game_id)

@app.post('/games/{game_id}/words', response_model=SubmitResult)
async def submit_word(game_id: str, submission: Submission):
    return await games.submit(game_id, submission.word)

@app.post('/games/{game_id}/reset', response_model=GameSnapshot)
async def reset_game(game_id: str):
    return await games.reset(game_id)

# Dictionary validation REST endpoint
@app.get('/dict/validate', response_model=DictLookup)
async def validate_word(word: str, lang: str = settings.language):
    valid = dict_service.is_valid(word, language=lang)
    return DictLookup(word=word.strip().lower(), language=lang, valid=valid)


# Socket.IO Events
@sio.event
async def connect(sid, environ, auth):
    # Save username from auth token (client uses token as username)
    username = None
    if isinstance(auth, dict):
        token = auth.get('token')
        if isinstance(token, str) and token.strip():
            username = token.strip()
    await sio.save_session(sid, { 'name': username })
    logger.debug("Connected %s as %s", sid, username)

@sio.on('game:join')
async def game_join(sid, game_id: str):
    await sio.enter_room(sid, game_id)
    sess = await sio.get_session(sid) or {}
    await sio.save_session(sid, { **sess, 'game_id': game_id })
    state = games.snapshot(game_id)
    await sio.emit('game:state', state.model_dump(by_alias=True), to=sid)

@sio.on('game:submit')
async def game_submit(sid, payload):
    sess = await sio.get_session(sid)
    game_id = sess.get('game_id') if sess else None
    if not game_id:
        return
    raw = payload.get('word') if isinstance(payload, dict) else payload
    word = str(raw or '')
    await games.submit(game_id, word, sid=sid)

@sio.on('game:reset')
async def game_reset(sid):
    sess = await sio.get_session(sid)
    game_id = sess.get('game_id') if sess else None
    if not game_id:
        return
    await games.reset(game_id)

# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn scramble.main:application --reload --host 0.0.0.0 --port 8000
