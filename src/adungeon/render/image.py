# src/adungeon/render/image.py
# Render a dungeon grid to PNG using Pillow: one cell_px square per cell.

from __future__ import annotations

import os
from typing import List, Tuple

from PIL import Image, ImageDraw

RGBA = Tuple[int, int, int, int]


def tile_color(code: int) -> RGBA:
    if code == 0: return ( 24,  24,  28, 255)   # empty / wall
    if code == 1: return (196, 180, 140, 255)
    if code == 2: return (150, 130,  96, 255)
    if code == 3: return (110, 150, 110, 255)
    if code == 4: return ( 90, 110, 160, 255)
    return (255, 0, 255, 255)                   # unexpected code


def render_image(rows: List[List[int]], cell_px: int = 4, margin: int = 0) -> Image.Image:
    if cell_px <= 0:
        raise ValueError("cell_px must be positive")
    h = len(rows)
    w = len(rows[0]) if h else 0
    canvas = Image.new("RGBA", (w * cell_px + 2 * margin, h * cell_px + 2 * margin), tile_color(0))
    draw = ImageDraw.Draw(canvas)
    for y, row in enumerate(rows):
        for x, code in enumerate(row):
            if code == 0:
                continue
            x0 = margin + x * cell_px
            y0 = margin + y * cell_px
            draw.rectangle((x0, y0, x0 + cell_px - 1, y0 + cell_px - 1), fill=tile_color(code))
    return canvas


def save_png(rows: List[List[int]], out_png: str | os.PathLike[str], cell_px: int = 4) -> None:
    out_dir = os.path.dirname(os.fspath(out_png))
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    render_image(rows, cell_px=cell_px).save(out_png)
