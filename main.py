"""Command-line utilities for the piece move visualizer."""

from __future__ import annotations

import argparse
import logging

from engine.constants import DEMO_ORIGINS, FILES, RANKS, PieceType, parse_square, square_label
from engine.highlights import clear_highlights, highlight_piece_moves, origin_markers, render_text
from engine.mobility import mobility_map
from engine.movegen import compute_moves

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Piece move visualizer utilities")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)
    pieces = [piece.value for piece in PieceType]

    moves_parser = subparsers.add_parser("moves", help="List reachable squares")
    moves_parser.add_argument("piece", choices=pieces, help="Piece type")
    moves_parser.add_argument("--origin", default=None, help="Origin square (defaults to the demo origin)")

    show_parser = subparsers.add_parser("show", help="Draw reachable squares on a text board")
    show_parser.add_argument("piece", choices=pieces, help="Piece type")
    show_parser.add_argument("--origin", default=None, help="Origin square (defaults to the demo origin)")

    mobility_parser = subparsers.add_parser("mobility", help="Print move counts for every square")
    mobility_parser.add_argument("piece", choices=pieces, help="Piece type")

    return parser


def _origin_for(parser: argparse.ArgumentParser, piece: PieceType, origin: str | None) -> str:
    if origin is None:
        return DEMO_ORIGINS[piece]
    try:
        parse_square(origin)
    except ValueError as exc:
        parser.error(str(exc))
    return origin


def format_mobility(counts: dict[str, int]) -> str:
    rows = []
    for rank in range(len(RANKS), 0, -1):
        cells = [f"{counts[square_label(f, rank)]:2d}" for f in range(len(FILES))]
        rows.append(f"{rank} " + " ".join(cells))
    rows.append("  " + " ".join(f" {f}" for f in FILES))
    return "\n".join(rows)


def format_markers() -> str:
    markers = origin_markers()
    lines = [render_text(clear_highlights())]
    for square, initials in sorted(markers.items()):
        lines.append(f"{square}: {initials}")
    return "\n".join(lines)


def run(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)

    if args.command == "moves":
        piece = PieceType(args.piece)
        for move in compute_moves(piece, _origin_for(parser, piece, args.origin)):
            print(move)
        return

    if args.command == "show":
        piece = PieceType(args.piece)
        print(render_text(highlight_piece_moves(piece, _origin_for(parser, piece, args.origin))))
        return

    if args.command == "mobility":
        counts = mobility_map(args.piece)
        print(format_mobility(counts))
        print(f"total {sum(counts.values())}")
        return

    print(format_markers())


if __name__ == "__main__":
    run()
