"""Pseudo-legal move generation for a single piece on an empty board."""

from __future__ import annotations

from typing import Callable

from .constants import (
    InvalidSquare,
    MoveKind,
    PieceType,
    in_bounds,
    parse_square,
    square_label,
)
from .move import MoveRecord


KING_DELTAS = tuple((dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0))
KNIGHT_DELTAS = ((1, 2), (2, 1), (-1, 2), (-2, 1), (1, -2), (2, -1), (-1, -2), (-2, -1))
ROOK_DIRS = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS = ((1, 1), (1, -1), (-1, 1), (-1, -1))
QUEEN_DIRS = ROOK_DIRS + BISHOP_DIRS

PAWN_DOUBLE_STEP_RANK = 2


def _leaper_moves(file_idx: int, rank: int, deltas: tuple[tuple[int, int], ...]) -> list[MoveRecord]:
    moves: list[MoveRecord] = []
    for df, dr in deltas:
        nf, nr = file_idx + df, rank + dr
        if in_bounds(nf, nr):
            moves.append(MoveRecord(square_label(nf, nr)))
    return moves


def _cast_rays(file_idx: int, rank: int, directions: tuple[tuple[int, int], ...]) -> list[MoveRecord]:
    moves: list[MoveRecord] = []
    for df, dr in directions:
        nf, nr = file_idx + df, rank + dr
        while in_bounds(nf, nr):
            moves.append(MoveRecord(square_label(nf, nr)))
            nf += df
            nr += dr
    return moves


def king_moves(file_idx: int, rank: int) -> list[MoveRecord]:
    return _leaper_moves(file_idx, rank, KING_DELTAS)


def knight_moves(file_idx: int, rank: int) -> list[MoveRecord]:
    return _leaper_moves(file_idx, rank, KNIGHT_DELTAS)


def rook_moves(file_idx: int, rank: int) -> list[MoveRecord]:
    return _cast_rays(file_idx, rank, ROOK_DIRS)


def bishop_moves(file_idx: int, rank: int) -> list[MoveRecord]:
    return _cast_rays(file_idx, rank, BISHOP_DIRS)


def queen_moves(file_idx: int, rank: int) -> list[MoveRecord]:
    return _cast_rays(file_idx, rank, QUEEN_DIRS)


def pawn_moves(file_idx: int, rank: int) -> list[MoveRecord]:
    """Pushes towards rank 8, plus both forward diagonals as captures.

    Captures are emitted whenever the square exists: there is no occupancy
    model, so they show which squares the pawn threatens.
    """
    moves: list[MoveRecord] = []
    forward = rank + 1
    if in_bounds(file_idx, forward):
        moves.append(MoveRecord(square_label(file_idx, forward)))
    if rank == PAWN_DOUBLE_STEP_RANK and in_bounds(file_idx, rank + 2):
        moves.append(MoveRecord(square_label(file_idx, rank + 2)))
    for df in (-1, 1):
        if in_bounds(file_idx + df, forward):
            moves.append(MoveRecord(square_label(file_idx + df, forward), MoveKind.CAPTURE))
    return moves


GENERATORS: dict[PieceType, Callable[[int, int], list[MoveRecord]]] = {
    PieceType.KING: king_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.ROOK: rook_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.PAWN: pawn_moves,
}


def coerce_piece(piece: PieceType | str) -> PieceType | None:
    if isinstance(piece, PieceType):
        return piece
    if not isinstance(piece, str):
        return None
    try:
        return PieceType(piece.strip().lower())
    except ValueError:
        return None


def compute_moves(piece: PieceType | str, origin: str) -> list[MoveRecord]:
    """Return every square ``piece`` reaches from ``origin``, in generation order.

    Unknown pieces and malformed or off-board origins yield an empty list.
    """
    piece_type = coerce_piece(piece)
    if piece_type is None:
        return []
    try:
        file_idx, rank = parse_square(origin)
    except InvalidSquare:
        return []
    return GENERATORS[piece_type](file_idx, rank)
