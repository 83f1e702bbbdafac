"""Board-wide constants and square helpers."""

from __future__ import annotations

from enum import Enum

FILES = "abcdefgh"
RANKS = "12345678"

MIN_RANK = 1
MAX_RANK = 8

SQUARES = [f"{f}{r}" for r in RANKS for f in FILES]


class PieceType(str, Enum):
    KING = "king"
    QUEEN = "queen"
    ROOK = "rook"
    BISHOP = "bishop"
    KNIGHT = "knight"
    PAWN = "pawn"


class MoveKind(str, Enum):
    MOVE = "move"
    CAPTURE = "capture"


PIECE_INITIALS = {
    PieceType.KING: "K",
    PieceType.QUEEN: "Q",
    PieceType.ROOK: "R",
    PieceType.BISHOP: "B",
    PieceType.KNIGHT: "N",
    PieceType.PAWN: "P",
}

DEFAULT_ORIGIN = "d4"

DEMO_ORIGINS = {
    PieceType.KING: "d4",
    PieceType.QUEEN: "d4",
    PieceType.ROOK: "d4",
    PieceType.BISHOP: "d4",
    PieceType.KNIGHT: "d4",
    PieceType.PAWN: "d2",
}

QUICK_KEYS = {
    "1": PieceType.KING,
    "2": PieceType.QUEEN,
    "3": PieceType.ROOK,
    "4": PieceType.BISHOP,
    "5": PieceType.KNIGHT,
    "6": PieceType.PAWN,
}


class InvalidFile(ValueError):
    """Raised for a file letter outside a-h."""


class InvalidSquare(ValueError):
    """Raised for a square label that does not name a board square."""


def file_index(letter: str) -> int:
    if not isinstance(letter, str) or len(letter) != 1 or letter not in FILES:
        raise InvalidFile(f"Invalid file: {letter!r}")
    return FILES.index(letter)


def in_bounds(file_idx: int, rank: int) -> bool:
    if not isinstance(file_idx, int) or not isinstance(rank, int):
        return False
    return 0 <= file_idx < len(FILES) and MIN_RANK <= rank <= MAX_RANK


def square_label(file_idx: int, rank: int) -> str:
    if not in_bounds(file_idx, rank):
        raise InvalidSquare(f"Square out of range: ({file_idx}, {rank})")
    return f"{FILES[file_idx]}{rank}"


def parse_square(label: str) -> tuple[int, int]:
    """Split a label such as ``"d4"`` into ``(file_index, rank)``.

    Whitespace and case are normalized; anything that is not one file letter
    followed by one in-range rank digit raises ``InvalidSquare``.
    """
    if not isinstance(label, str):
        raise InvalidSquare(f"Invalid square: {label!r}")
    text = label.strip().lower()
    if len(text) != 2 or text[1] not in RANKS:
        raise InvalidSquare(f"Invalid square: {label!r}")
    try:
        file_idx = file_index(text[0])
    except InvalidFile as exc:
        raise InvalidSquare(f"Invalid square: {label!r}") from exc
    return file_idx, int(text[1])


def square_shade(label: str) -> str:
    file_idx, rank = parse_square(label)
    return "light" if (file_idx + rank) % 2 == 0 else "dark"
