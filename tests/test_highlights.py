from engine.constants import PieceType
from engine.highlights import (
    board_cells,
    clear_highlights,
    highlight_piece_moves,
    origin_markers,
    piece_for_key,
    render_text,
    show_demo,
)


def test_board_cells_listed_from_rank_eight() -> None:
    cells = board_cells()
    assert len(cells) == 64
    assert cells[0].square == "a8"
    assert cells[7].square == "h8"
    assert cells[-1].square == "h1"
    assert cells[0].shade == "light"
    assert cells[-8].shade == "dark"


def test_origin_markers_group_demo_pieces() -> None:
    assert origin_markers() == {"d4": "KQRBN", "d2": "P"}


def test_pawn_highlight_splits_moves_and_captures() -> None:
    state = highlight_piece_moves(PieceType.PAWN, "d2")
    assert state.origin == "d2"
    assert state.highlighted == {"d2", "d3", "d4"}
    assert state.captures == {"c3", "e3"}
    assert state.marker("c3") == "capture"
    assert state.marker("d4") == "highlight"
    assert state.marker("h8") is None


def test_highlight_normalizes_origin() -> None:
    state = highlight_piece_moves("king", " A1 ")
    assert state.origin == "a1"
    assert state.highlighted == {"a1", "a2", "b1", "b2"}


def test_highlight_for_bad_origin_is_empty() -> None:
    state = highlight_piece_moves(PieceType.ROOK, "k9")
    assert state.is_empty
    assert state.origin is None
    assert state.piece is PieceType.ROOK


def test_highlight_for_unknown_piece_marks_only_origin() -> None:
    state = highlight_piece_moves("dragon", "d4")
    assert state.piece is None
    assert state.moves == ()
    assert state.highlighted == {"d4"}


def test_each_highlight_starts_from_a_clear_board() -> None:
    first = highlight_piece_moves(PieceType.QUEEN, "d4")
    second = highlight_piece_moves(PieceType.KNIGHT, "a1")
    assert second.highlighted == {"a1", "b3", "c2"}
    assert "h8" in first.highlighted


def test_clear_highlights_is_empty() -> None:
    state = clear_highlights()
    assert state.is_empty
    assert state.to_dict() == {
        "piece": None,
        "origin": None,
        "moves": [],
        "highlighted": [],
        "captures": [],
    }


def test_show_demo_uses_demo_origins() -> None:
    assert show_demo(PieceType.PAWN).origin == "d2"
    assert show_demo("bishop").origin == "d4"


def test_quick_keys() -> None:
    assert piece_for_key("1") is PieceType.KING
    assert piece_for_key("6") is PieceType.PAWN
    assert piece_for_key("7") is None


def test_to_dict_serializes_moves() -> None:
    payload = highlight_piece_moves(PieceType.PAWN, "d5").to_dict()
    assert payload["piece"] == "pawn"
    assert payload["moves"] == [
        {"square": "d6", "kind": "move"},
        {"square": "c6", "kind": "capture"},
        {"square": "e6", "kind": "capture"},
    ]
    assert payload["captures"] == ["c6", "e6"]


def test_render_text_marks_origin_moves_and_captures() -> None:
    lines = render_text(highlight_piece_moves(PieceType.PAWN, "d2")).splitlines()
    assert lines[0] == "8 . . . . . . . ."
    assert lines[4] == "4 . . . * . . . ."
    assert lines[5] == "3 . . x * x . . ."
    assert lines[6] == "2 . . . o . . . ."
    assert lines[-1] == "  a b c d e f g h"
