"""Highlight values consumed by renderers, the API and the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import (
    DEFAULT_ORIGIN,
    DEMO_ORIGINS,
    FILES,
    PIECE_INITIALS,
    QUICK_KEYS,
    RANKS,
    InvalidSquare,
    MoveKind,
    PieceType,
    parse_square,
    square_label,
    square_shade,
)
from .move import MoveRecord
from .movegen import coerce_piece, compute_moves


@dataclass(frozen=True, slots=True)
class BoardCell:
    square: str
    file: str
    rank: int
    shade: str


@dataclass(frozen=True, slots=True)
class HighlightState:
    piece: PieceType | None = None
    origin: str | None = None
    moves: tuple[MoveRecord, ...] = ()
    highlighted: frozenset[str] = field(default_factory=frozenset)
    captures: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not self.highlighted and not self.captures

    def marker(self, square: str) -> str | None:
        if square in self.captures:
            return "capture"
        if square in self.highlighted:
            return "highlight"
        return None

    def to_dict(self) -> dict:
        return {
            "piece": None if self.piece is None else self.piece.value,
            "origin": self.origin,
            "moves": [move.to_dict() for move in self.moves],
            "highlighted": sorted(self.highlighted),
            "captures": sorted(self.captures),
        }


def board_cells() -> list[BoardCell]:
    cells: list[BoardCell] = []
    for rank in range(len(RANKS), 0, -1):
        for file_idx, file in enumerate(FILES):
            square = square_label(file_idx, rank)
            cells.append(BoardCell(square=square, file=file, rank=rank, shade=square_shade(square)))
    return cells


def origin_markers() -> dict[str, str]:
    markers: dict[str, str] = {}
    for piece, square in DEMO_ORIGINS.items():
        markers[square] = markers.get(square, "") + PIECE_INITIALS[piece]
    return markers


def clear_highlights() -> HighlightState:
    return HighlightState()


def highlight_piece_moves(piece: PieceType | str, origin: str) -> HighlightState:
    """Build a fresh highlight for ``piece`` standing on ``origin``.

    The origin itself is highlighted when it is a real square, even if the
    piece name is unknown and no moves come back.
    """
    piece_type = coerce_piece(piece)
    try:
        origin_label = square_label(*parse_square(origin))
    except InvalidSquare:
        return HighlightState(piece=piece_type)

    moves = tuple(compute_moves(piece, origin_label))
    highlighted = {origin_label}
    captures: set[str] = set()
    for move in moves:
        if move.kind is MoveKind.CAPTURE:
            captures.add(move.square)
        else:
            highlighted.add(move.square)

    return HighlightState(
        piece=piece_type,
        origin=origin_label,
        moves=moves,
        highlighted=frozenset(highlighted),
        captures=frozenset(captures),
    )


def show_demo(piece: PieceType | str) -> HighlightState:
    piece_type = coerce_piece(piece)
    origin = DEMO_ORIGINS.get(piece_type, DEFAULT_ORIGIN)
    return highlight_piece_moves(piece, origin)


def piece_for_key(key: str) -> PieceType | None:
    return QUICK_KEYS.get(key)


def render_text(state: HighlightState) -> str:
    rows = []
    for rank in range(len(RANKS), 0, -1):
        row = []
        for file_idx in range(len(FILES)):
            square = square_label(file_idx, rank)
            marker = state.marker(square)
            if square == state.origin:
                row.append("o")
            elif marker == "capture":
                row.append("x")
            elif marker == "highlight":
                row.append("*")
            else:
                row.append(".")
        rows.append(f"{rank} " + " ".join(row))
    rows.append("  " + " ".join(FILES))
    return "\n".join(rows)
