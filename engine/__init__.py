"""Single-piece move visualizer core."""

from .constants import MoveKind, PieceType
from .highlights import HighlightState, highlight_piece_moves
from .move import MoveRecord
from .movegen import compute_moves

__all__ = [
    "HighlightState",
    "MoveKind",
    "MoveRecord",
    "PieceType",
    "compute_moves",
    "highlight_piece_moves",
]
