"""Whole-board move counts used as generator sanity checks."""

from __future__ import annotations

from .constants import SQUARES, PieceType
from .movegen import compute_moves


def count_moves(piece: PieceType | str, origin: str) -> int:
    return len(compute_moves(piece, origin))


def mobility_map(piece: PieceType | str) -> dict[str, int]:
    return {square: count_moves(piece, square) for square in SQUARES}


def total_mobility(piece: PieceType | str) -> int:
    return sum(mobility_map(piece).values())
