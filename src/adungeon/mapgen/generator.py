# src/adungeon/mapgen/generator.py
# Frontier-driven growth: seed block at (5,5), then pop random frontier
# entries, roll against place_prob, and stamp tiles that touch the structure.

from dataclasses import dataclass, field
from typing import List, Optional

from ..config import GenParams
from ..grid import Grid, neighbors4
from ..rng import CRandom
from ..tiles import GRID_N, SEED_POS, TILE
from .frontier import Frontier
from .pattern import generate_pattern, sample_stamp
from .placement import place_block, touches_existing

STOP_BUDGET = "budget"        # placed reached max_blocks
STOP_EXHAUSTED = "exhausted"  # no pending frontier left


@dataclass
class DungeonResult:
    grid: Grid
    placed: int
    seed: int
    place_prob: int
    max_blocks: int
    stop_reason: str
    pattern: List[List[int]] = field(repr=False, default_factory=list)
    visited: int = 0   # frontier entries popped during growth


def generate_dungeon(
    params: GenParams,
    rng: Optional[CRandom] = None,
    size: int = GRID_N,
) -> DungeonResult:
    """
    Build the whole dungeon in memory. `params.seed` must already be resolved
    (nonzero seeds are used as-is; see timing.resolve_seed).

    Draw order per run: pattern (row-major), seed stamp, then per iteration
    frontier pick, probability roll, and a stamp only when accepted.
    """
    params = params.sanitized()
    if rng is None:
        rng = CRandom(params.seed)

    pattern = generate_pattern(rng)
    grid = Grid.empty(size)
    frontier = Frontier(size)
    stamp = [[0] * TILE for _ in range(TILE)]

    # Seed block: no roll, no adjacency gate.
    sx, sy = SEED_POS
    sample_stamp(pattern, rng, out=stamp)
    place_block(grid, sx, sy, stamp)
    placed = 1
    frontier.mark_seen(sx, sy)
    for nx, ny in ((sx + TILE, sy), (sx, sy + TILE), (sx - TILE, sy), (sx, sy - TILE)):
        frontier.push(nx, ny)

    visited = 0
    while frontier.pending() > 0 and placed < params.max_blocks:
        x, y = frontier.pop_random(rng)
        visited += 1
        roll = rng.below(100)
        if roll < params.place_prob and touches_existing(grid, x, y):
            sample_stamp(pattern, rng, out=stamp)
            place_block(grid, x, y, stamp)
            placed += 1
            for nx, ny in neighbors4(x, y):
                frontier.push(nx, ny)
        # else: dropped for good; seen stays set so the gap is permanent

    stop = STOP_BUDGET if placed >= params.max_blocks else STOP_EXHAUSTED
    return DungeonResult(
        grid=grid,
        placed=placed,
        seed=params.seed,
        place_prob=params.place_prob,
        max_blocks=params.max_blocks,
        stop_reason=stop,
        pattern=pattern,
        visited=visited,
    )
