# src/adungeon/mapgen/pattern.py
# Source pattern and the 4x4 stamps cut out of it.

from typing import List, Optional
from ..rng import CRandom
from ..tiles import PATTERN_H, PATTERN_W, TILE, TILE_CODES

Matrix = List[List[int]]


def generate_pattern(rng: CRandom, h: int = PATTERN_H, w: int = PATTERN_W) -> Matrix:
    """Fill an h x w pattern row-major with codes drawn uniformly from 1..4."""
    n = len(TILE_CODES)
    return [[1 + rng.below(n) for _ in range(w)] for _ in range(h)]


def sample_stamp(pattern: Matrix, rng: CRandom, out: Optional[Matrix] = None) -> Matrix:
    """
    Copy a TILE x TILE window from a random offset inside `pattern`.
    Row offset is drawn before column offset. Writes into `out` when given.
    """
    h, w = len(pattern), len(pattern[0])
    r0 = rng.below(h - TILE + 1)
    c0 = rng.below(w - TILE + 1)
    if out is None:
        out = [[0] * TILE for _ in range(TILE)]
    for r in range(TILE):
        row = pattern[r0 + r]
        for c in range(TILE):
            out[r][c] = row[c0 + c]
    return out
