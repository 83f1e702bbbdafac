#!/usr/bin/env python3
"""Generate reproducible mobility and timing CSVs for the move generator."""

from __future__ import annotations

import argparse
import csv
from pathlib import Path
from time import perf_counter
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from engine.constants import SQUARES, MoveKind, PieceType
from engine.movegen import compute_moves


def _write_csv(path: Path, fieldnames: list[str], rows: list[dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)


def run_mobility_bench() -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for piece in PieceType:
        for square in SQUARES:
            moves = compute_moves(piece, square)
            captures = sum(1 for move in moves if move.kind is MoveKind.CAPTURE)
            rows.append(
                {
                    "piece": piece.value,
                    "square": square,
                    "moves": len(moves) - captures,
                    "captures": captures,
                }
            )
    return rows


def run_timing_bench(rounds: int) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for piece in PieceType:
        start = perf_counter()
        for _ in range(rounds):
            for square in SQUARES:
                compute_moves(piece, square)
        elapsed_ms = (perf_counter() - start) * 1000.0
        calls = rounds * len(SQUARES)
        rows.append(
            {
                "piece": piece.value,
                "calls": calls,
                "elapsed_ms": round(elapsed_ms, 3),
                "calls_per_sec": int(calls / max(elapsed_ms / 1000.0, 1e-9)),
            }
        )
    return rows


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate move generator benchmark CSV files")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Output directory for CSV metrics",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=200,
        help="Full-board sweeps per piece in the timing benchmark",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    metrics_dir = Path(args.metrics_dir)

    mobility_path = metrics_dir / "mobility_metrics.csv"
    timing_path = metrics_dir / "timing_metrics.csv"

    _write_csv(
        mobility_path,
        fieldnames=["piece", "square", "moves", "captures"],
        rows=run_mobility_bench(),
    )
    _write_csv(
        timing_path,
        fieldnames=["piece", "calls", "elapsed_ms", "calls_per_sec"],
        rows=run_timing_bench(args.rounds),
    )

    print(f"wrote {mobility_path}")
    print(f"wrote {timing_path}")


if __name__ == "__main__":
    main()
