# src/adungeon/mapgen/placement.py
from typing import List
from ..grid import Grid
from ..tiles import EMPTY, TILE


def touches_existing(grid: Grid, x: int, y: int) -> bool:
    """
    True when the TILE x TILE footprint at (x, y) already holds something,
    or when one of the four one-cell strips hugging its edges does:
    - left column x-1 and right column x+TILE over rows y..y+TILE-1
    - top row y-1 and bottom row y+TILE over cols x..x+TILE-1
    Strips that fall off the grid are skipped.
    """
    n = grid.size
    for r in range(TILE):
        for c in range(TILE):
            if grid.get(x + c, y + r) != EMPTY:
                return True

    if x - 1 >= 0:
        for r in range(TILE):
            if grid.get(x - 1, y + r) != EMPTY:
                return True
    if x + TILE < n:
        for r in range(TILE):
            if grid.get(x + TILE, y + r) != EMPTY:
                return True
    if y - 1 >= 0:
        for c in range(TILE):
            if grid.get(x + c, y - 1) != EMPTY:
                return True
    if y + TILE < n:
        for c in range(TILE):
            if grid.get(x + c, y + TILE) != EMPTY:
                return True
    return False


def place_block(grid: Grid, x: int, y: int, stamp: List[List[int]]) -> int:
    """Copy `stamp` onto the grid at (x, y), only into empty cells. Returns cells written."""
    written = 0
    for r in range(TILE):
        for c in range(TILE):
            if grid.get(x + c, y + r) == EMPTY:
                grid.set(x + c, y + r, stamp[r][c])
                written += 1
    return written
