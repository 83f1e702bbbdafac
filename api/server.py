"""FastAPI server exposing piece move highlights."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from engine.constants import DEFAULT_ORIGIN, DEMO_ORIGINS, QUICK_KEYS, PieceType, parse_square
from engine.highlights import HighlightState, board_cells, highlight_piece_moves, origin_markers, show_demo
from engine.mobility import mobility_map

from .websocket import router as websocket_router

_LOGGER = logging.getLogger(__name__)


class MovesRequest(BaseModel):
    piece: PieceType
    origin: str = Field(default=DEFAULT_ORIGIN)


app = FastAPI(title="Piece Moves API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(websocket_router)


def _validate_origin(origin: str) -> str:
    try:
        parse_square(origin)
    except ValueError as exc:
        _LOGGER.warning("Rejected origin %r: %s", origin, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return origin


def highlight_payload(state: HighlightState) -> dict:
    payload = state.to_dict()
    payload["count"] = len(state.moves)
    return payload


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/pieces")
def pieces() -> list[dict[str, str]]:
    keys = {piece: key for key, piece in QUICK_KEYS.items()}
    return [
        {"piece": piece.value, "demo_origin": DEMO_ORIGINS[piece], "key": keys[piece]}
        for piece in PieceType
    ]


@app.get("/board")
def board() -> dict:
    markers = origin_markers()
    return {
        "cells": [
            {
                "square": cell.square,
                "file": cell.file,
                "rank": cell.rank,
                "shade": cell.shade,
                "marker": markers.get(cell.square),
            }
            for cell in board_cells()
        ]
    }


@app.post("/moves")
def moves(payload: MovesRequest) -> dict:
    origin = _validate_origin(payload.origin)
    state = highlight_piece_moves(payload.piece, origin)
    _LOGGER.debug("Highlighted %s from %s: %d squares", payload.piece.value, state.origin, len(state.moves))
    return highlight_payload(state)


@app.get("/demo/{piece}")
def demo(piece: PieceType) -> dict:
    return highlight_payload(show_demo(piece))


@app.get("/mobility/{piece}")
def mobility(piece: PieceType) -> dict:
    counts = mobility_map(piece)
    return {"piece": piece.value, "counts": counts, "total": sum(counts.values())}
