#!/usr/bin/env python3
"""Generate demo GIF/PNG visuals of each piece's highlighted moves."""

from __future__ import annotations

from pathlib import Path
import sys

from PIL import Image, ImageDraw, ImageFont

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from engine.constants import MAX_RANK, PIECE_INITIALS, PieceType, parse_square
from engine.highlights import HighlightState, board_cells, origin_markers, show_demo

OUT_DIR = ROOT / "docs" / "visuals"

W, H = 1100, 640
BOARD_X, BOARD_Y, CELL = 40, 70, 62

COLORS = {
    "bg": "#161616",
    "panel": "#1e1e1e",
    "border": "#2b2b2b",
    "light": "#f0d9b5",
    "dark": "#b58863",
    "text": "#e6e2d8",
    "gold": "#c6a25a",
    "highlight": "#6f9d4f",
    "capture": "#b84f3a",
    "muted": "#9f988d",
}


def _font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    for family in ("/System/Library/Fonts/Supplemental/Arial.ttf", "/Library/Fonts/Arial.ttf"):
        try:
            return ImageFont.truetype(family, size=size)
        except OSError:
            continue
    return ImageFont.load_default()


FONT_TITLE = _font(36)
FONT_BODY = _font(20)
FONT_MONO = _font(18)
FONT_PIECE = _font(24)
FONT_MARK = _font(11)


def _sq_to_xy(square: str) -> tuple[int, int]:
    file_idx, rank = parse_square(square)
    x = BOARD_X + file_idx * CELL
    y = BOARD_Y + (MAX_RANK - rank) * CELL
    return x, y


def _base_canvas(title: str) -> tuple[Image.Image, ImageDraw.ImageDraw]:
    img = Image.new("RGB", (W, H), COLORS["bg"])
    draw = ImageDraw.Draw(img)
    draw.text((40, 20), title, fill=COLORS["text"], font=FONT_TITLE)
    draw.rounded_rectangle((690, 70, 1050, 560), radius=14, fill=COLORS["panel"], outline=COLORS["border"], width=2)
    return img, draw


def _draw_board(draw: ImageDraw.ImageDraw, state: HighlightState) -> None:
    for cell in board_cells():
        x, y = _sq_to_xy(cell.square)
        draw.rectangle((x, y, x + CELL, y + CELL), fill=COLORS[cell.shade])
        marker = state.marker(cell.square)
        if marker is not None:
            draw.rectangle((x + 4, y + 4, x + CELL - 4, y + CELL - 4), fill=COLORS[marker])

    for square, initials in origin_markers().items():
        x, y = _sq_to_xy(square)
        draw.text((x + 6, y + 6), initials, fill=COLORS["muted"], font=FONT_MARK)

    if state.origin and state.piece:
        x, y = _sq_to_xy(state.origin)
        draw.rectangle((x + 4, y + 4, x + CELL - 4, y + CELL - 4), outline=COLORS["gold"], width=3)
        cx, cy = x + CELL // 2, y + CELL // 2
        r = CELL // 2 - 10
        draw.ellipse((cx - r, cy - r, cx + r, cy + r), fill="#f8f6f2", outline="#5c5c5c", width=2)
        text = PIECE_INITIALS[state.piece]
        tw = draw.textlength(text, font=FONT_PIECE)
        draw.text((cx - tw / 2, cy - 14), text, fill="#5c5c5c", font=FONT_PIECE)


def _draw_panel(draw: ImageDraw.ImageDraw, state: HighlightState) -> None:
    draw.text((720, 110), "PIECE", fill=COLORS["gold"], font=FONT_BODY)
    name = state.piece.value if state.piece else "-"
    draw.text((720, 145), f"{name} on {state.origin or '-'}", fill=COLORS["text"], font=FONT_MONO)

    draw.text((720, 200), "REACH", fill=COLORS["gold"], font=FONT_BODY)
    moves = [m.square for m in state.moves if not m.is_capture]
    captures = [m.square for m in state.moves if m.is_capture]
    draw.text((720, 235), f"Moves: {len(moves)}", fill=COLORS["text"], font=FONT_MONO)
    draw.text((720, 265), f"Captures: {len(captures)}", fill=COLORS["text"], font=FONT_MONO)

    line_y = 310
    for start in range(0, len(moves), 7):
        draw.text((720, line_y), " ".join(moves[start : start + 7]), fill=COLORS["muted"], font=FONT_MONO)
        line_y += 28
    if captures:
        draw.text((720, line_y + 10), "x " + " ".join(captures), fill=COLORS["capture"], font=FONT_MONO)


def _save_gif(path: Path, frames: list[Image.Image], duration_ms: int = 350) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    frames[0].save(
        path,
        save_all=True,
        append_images=frames[1:],
        duration=duration_ms,
        loop=0,
        optimize=True,
    )


def render_frame(state: HighlightState) -> Image.Image:
    title = f"Moves: {state.piece.value}" if state.piece else "Moves"
    img, draw = _base_canvas(title)
    _draw_board(draw, state)
    _draw_panel(draw, state)
    return img


def make_piece_tour() -> None:
    frames = [render_frame(show_demo(piece)) for piece in PieceType]
    _save_gif(OUT_DIR / "demo-piece-tour.gif", frames, duration_ms=1200)


def make_piece_stills() -> None:
    for piece in PieceType:
        render_frame(show_demo(piece)).save(OUT_DIR / f"moves-{piece.value}.png")


def main() -> None:
    OUT_DIR.mkdir(parents=True, exist_ok=True)
    make_piece_tour()
    make_piece_stills()
    print(f"wrote demo visuals in {OUT_DIR}")


if __name__ == "__main__":
    main()
