"""WebSocket control surface: quick keys and piece buttons."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from engine.constants import parse_square
from engine.highlights import HighlightState, clear_highlights, highlight_piece_moves, piece_for_key, show_demo
from engine.movegen import coerce_piece

router = APIRouter()

_LOGGER = logging.getLogger(__name__)


def _serialize_highlight(state: HighlightState) -> dict:
    payload = state.to_dict()
    payload["type"] = "highlight"
    return payload


def _error(message: str) -> dict:
    return {"type": "error", "message": message}


def handle_message(state: HighlightState, payload: object) -> tuple[HighlightState, dict]:
    """Apply one inbound message to ``state``; return the new state and the reply."""
    if not isinstance(payload, dict):
        return state, _error("Expected a JSON object")

    if payload.get("action") == "clear":
        return clear_highlights(), {"type": "clear"}

    if "key" in payload:
        piece = piece_for_key(str(payload["key"]))
        if piece is None:
            return state, _error(f"Unmapped key: {payload['key']}")
        new_state = show_demo(piece)
        return new_state, _serialize_highlight(new_state)

    if "piece" in payload:
        piece = coerce_piece(payload["piece"])
        if piece is None:
            return state, _error(f"Unknown piece: {payload['piece']}")
        origin = payload.get("origin")
        if origin is None:
            new_state = show_demo(piece)
        else:
            try:
                parse_square(origin)
            except ValueError as exc:
                return state, _error(str(exc))
            new_state = highlight_piece_moves(piece, origin)
        return new_state, _serialize_highlight(new_state)

    return state, _error("Expected one of: action, key, piece")


@router.websocket("/ws/highlights")
async def highlights_websocket(websocket: WebSocket) -> None:
    await websocket.accept()
    _LOGGER.info("Highlight session opened")
    state = clear_highlights()

    try:
        while True:
            text = await websocket.receive_text()
            try:
                payload = json.loads(text)
            except ValueError:
                reply = _error("Invalid JSON")
            else:
                state, reply = handle_message(state, payload)
            if reply["type"] == "error":
                _LOGGER.warning("Highlight session rejected message: %s", reply["message"])
            await websocket.send_json(reply)
    except WebSocketDisconnect:
        _LOGGER.info("Highlight session closed")
        return
