from main import build_parser, format_mobility, run
from engine.mobility import mobility_map


def test_moves_command_prints_records(capsys) -> None:
    run(["moves", "pawn"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["d3 move", "d4 move", "c3 capture", "e3 capture"]


def test_moves_command_with_origin(capsys) -> None:
    run(["moves", "king", "--origin", "a1"])
    out = capsys.readouterr().out.splitlines()
    assert sorted(out) == ["a2 move", "b1 move", "b2 move"]


def test_show_command_draws_board(capsys) -> None:
    run(["show", "rook", "--origin", "a1"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "8 * . . . . . . ."
    assert lines[7] == "1 o * * * * * * *"


def test_default_prints_markers(capsys) -> None:
    run([])
    out = capsys.readouterr().out
    assert "d4: KQRBN" in out
    assert "d2: P" in out


def test_mobility_grid() -> None:
    text = format_mobility(mobility_map("king"))
    lines = text.splitlines()
    assert lines[0].startswith("8  3  5")
    assert lines[-1] == "   a  b  c  d  e  f  g  h"


def test_parser_rejects_unknown_piece() -> None:
    parser = build_parser()
    try:
        parser.parse_args(["moves", "dragon"])
    except SystemExit as exc:
        assert exc.code == 2
    else:
        raise AssertionError("expected argparse to reject the piece")


def _exit_code(argv: list[str]) -> int:
    try:
        run(argv)
    except SystemExit as exc:
        return exc.code
    raise AssertionError("expected the command to exit")


def test_bad_origin_is_reported(capsys) -> None:
    assert _exit_code(["moves", "king", "--origin", "z9"]) == 2
    assert "Invalid square" in capsys.readouterr().err
    assert _exit_code(["show", "rook", "--origin", "d9"]) == 2


def test_log_level_choices(capsys) -> None:
    assert _exit_code(["--log-level", "chatty"]) == 2
    run(["--log-level", "debug", "moves", "knight", "--origin", "a1"])
    assert sorted(capsys.readouterr().out.splitlines()) == ["b3 move", "c2 move"]
