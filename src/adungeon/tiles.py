# Canonical sizes and tile codes for the dungeon generator.

PATTERN_H, PATTERN_W = 8, 13   # source pattern the stamps are cut from
TILE = 4                       # stamp edge; also the lattice pitch
GRID_N = 225                   # output grid is GRID_N x GRID_N
LATTICE_OFFSET = 5             # aligned coords are LATTICE_OFFSET + k*TILE
SEED_POS = (LATTICE_OFFSET, LATTICE_OFFSET)

EMPTY = 0
TILE_CODES = (1, 2, 3, 4)


def is_filled(code: int) -> bool:
    return code != EMPTY
