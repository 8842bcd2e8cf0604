from fastapi import APIRouter, WebSocket, WebSocketDisconnect

router = APIRouter()

BAD_MESSAGE = {"type": "alert", "title": "Bad message", "message": "Messages must be JSON objects."}


@router.websocket("/{game_id}")
async def websocket_endpoint(websocket: WebSocket, game_id: str):
    await websocket.accept()
    games = websocket.app.state.games

    # Send initial state to player
    await websocket.send_json({
        "type": "init",
        "state": games.snapshot(game_id).model_dump(),
    })

    try:
        while True:
            try:
                data = await websocket.receive_json()
            except ValueError:
                await websocket.send_json(BAD_MESSAGE)
                continue
            if not isinstance(data, dict):
                await websocket.send_json(BAD_MESSAGE)
                continue
            kind = data.get("type")
            if kind == "submit":
                result = await games.submit(game_id, str(data.get("word") or ""))
                if result.alert is not None:
                    await websocket.send_json({"type": "alert", **result.alert.model_dump()})
                else:
                    await websocket.send_json({"type": "update", "state": result.state.model_dump()})
            elif kind == "reset":
                state = await games.reset(game_id)
                await websocket.send_json({"type": "update", "state": state.model_dump()})
    except WebSocketDisconnect:
        return
