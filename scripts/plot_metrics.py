#!/usr/bin/env python3
"""Render mobility heatmaps and generator throughput from CSV metrics into SVG."""

from __future__ import annotations

import argparse
import csv
from collections import defaultdict
from pathlib import Path
import sys

import matplotlib.pyplot as plt

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from engine.constants import FILES, MAX_RANK, RANKS, parse_square

PALETTE = {
    "bg": "#161616",
    "panel": "#1e1e1e",
    "grid": "#2b2b2b",
    "text": "#e6e2d8",
    "muted": "#bdb8ad",
    "gold": "#c6a25a",
}


def _load_csv(path: Path) -> list[dict[str, str]]:
    with path.open("r", encoding="utf-8") as handle:
        return list(csv.DictReader(handle))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot move generator metrics")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Directory containing benchmark CSV files",
    )
    parser.add_argument(
        "--output",
        default=str(ROOT / "docs" / "visuals" / "mobility-charts.svg"),
        help="Output SVG path",
    )
    return parser.parse_args()


def _grid(rows: list[dict[str, str]]) -> list[list[int]]:
    # Row 0 is rank 8 so the image reads like a board.
    grid = [[0] * len(FILES) for _ in RANKS]
    for row in rows:
        file_idx, rank = parse_square(row["square"])
        grid[MAX_RANK - rank][file_idx] = int(row["moves"]) + int(row["captures"])
    return grid


def plot(mobility_rows: list[dict[str, str]], timing_rows: list[dict[str, str]], output: Path) -> None:
    plt.rcParams.update(
        {
            "font.family": "DejaVu Sans",
            "axes.facecolor": PALETTE["panel"],
            "figure.facecolor": PALETTE["bg"],
            "axes.edgecolor": PALETTE["grid"],
            "axes.labelcolor": PALETTE["text"],
            "xtick.color": PALETTE["muted"],
            "ytick.color": PALETTE["muted"],
            "text.color": PALETTE["text"],
            "axes.titlecolor": PALETTE["text"],
            "grid.color": PALETTE["grid"],
        }
    )

    by_piece: dict[str, list[dict[str, str]]] = defaultdict(list)
    for row in mobility_rows:
        by_piece[row["piece"]].append(row)

    fig, axes = plt.subplots(2, 4, figsize=(18, 9), dpi=150)
    fig.suptitle("Reachable Squares per Origin", fontsize=18, fontweight="bold", color=PALETTE["text"])

    flat_axes = axes.flatten()
    for ax, (piece, rows) in zip(flat_axes, by_piece.items()):
        grid = _grid(rows)
        ax.imshow(grid, cmap="YlOrBr")
        for y, line in enumerate(grid):
            for x, value in enumerate(line):
                ax.text(x, y, str(value), ha="center", va="center", fontsize=8, color="#1f1f1f")
        ax.set_title(f"{piece} (total {sum(map(sum, grid))})")
        ax.set_xticks(range(len(FILES)), list(FILES))
        ax.set_yticks(range(len(RANKS)), list(reversed(RANKS)))

    bar_ax = flat_axes[len(by_piece)]
    pieces = [row["piece"] for row in timing_rows]
    rates = [int(row["calls_per_sec"]) for row in timing_rows]
    bar_ax.bar(pieces, rates, color=PALETTE["gold"])
    bar_ax.set_title("compute_moves calls/second")
    bar_ax.tick_params(axis="x", rotation=45)
    bar_ax.grid(True, axis="y", alpha=0.6)

    for ax in flat_axes[len(by_piece) + 1 :]:
        ax.axis("off")

    output.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout(rect=(0, 0, 1, 0.95))
    fig.savefig(output, format="svg")
    plt.close(fig)


def main() -> None:
    args = parse_args()
    metrics_dir = Path(args.metrics_dir)
    output = Path(args.output)

    mobility_rows = _load_csv(metrics_dir / "mobility_metrics.csv")
    timing_rows = _load_csv(metrics_dir / "timing_metrics.csv")
    plot(mobility_rows, timing_rows, output)
    print(f"wrote {output}")


if __name__ == "__main__":
    main()
