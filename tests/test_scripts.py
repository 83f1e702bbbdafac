import pytest

from scripts.bench import run_mobility_bench


def test_mobility_grid_reads_like_a_board() -> None:
    pytest.importorskip("matplotlib")
    from scripts.plot_metrics import _grid

    rows = [{k: str(v) for k, v in row.items()} for row in run_mobility_bench() if row["piece"] == "knight"]
    grid = _grid(rows)
    assert grid[0][0] == 2  # a8
    assert grid[7][1] == 3  # b1
    assert grid[4][3] == 8  # d4


def test_demo_square_positions() -> None:
    pytest.importorskip("PIL")
    from scripts.generate_demo_gifs import BOARD_X, BOARD_Y, CELL, _sq_to_xy

    assert _sq_to_xy("a8") == (BOARD_X, BOARD_Y)
    assert _sq_to_xy("h1") == (BOARD_X + 7 * CELL, BOARD_Y + 7 * CELL)
