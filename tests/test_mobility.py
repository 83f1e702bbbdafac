from engine.constants import PieceType
from engine.mobility import count_moves, mobility_map, total_mobility


def test_total_mobility_matches_known_counts() -> None:
    assert total_mobility(PieceType.KING) == 420
    assert total_mobility(PieceType.QUEEN) == 1456
    assert total_mobility(PieceType.ROOK) == 896
    assert total_mobility(PieceType.BISHOP) == 560
    assert total_mobility(PieceType.KNIGHT) == 336
    assert total_mobility(PieceType.PAWN) == 162


def test_rook_mobility_is_constant() -> None:
    assert set(mobility_map(PieceType.ROOK).values()) == {14}


def test_knight_mobility_corners_and_center() -> None:
    counts = mobility_map("knight")
    assert counts["a1"] == 2
    assert counts["d4"] == 8
    assert counts["b1"] == 3


def test_count_moves_for_bad_input_is_zero() -> None:
    assert count_moves("dragon", "d4") == 0
    assert count_moves(PieceType.KING, "x1") == 0
