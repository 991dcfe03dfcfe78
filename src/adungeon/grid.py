from dataclasses import dataclass
from typing import List, Optional, Tuple

from .tiles import EMPTY, GRID_N, LATTICE_OFFSET, TILE

Pos = Tuple[int, int]


@dataclass
class Grid:
    buf: List[int]
    stride: int = GRID_N

    @classmethod
    def empty(cls, size: int = GRID_N) -> "Grid":
        return cls(buf=[EMPTY] * (size * size), stride=size)

    @property
    def size(self) -> int:
        return self.stride

    def idx(self, x: int, y: int) -> int:
        return y * self.stride + x

    def get(self, x: int, y: int) -> int:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: int) -> None:
        self.buf[self.idx(x, y)] = v

    def filled_count(self) -> int:
        return sum(1 for v in self.buf if v != EMPTY)

    def as_matrix(self) -> List[List[int]]:
        n = self.stride
        return [self.buf[y * n:(y + 1) * n] for y in range(n)]


# ---- aligned lattice ----
# A position is aligned when both coords are LATTICE_OFFSET mod TILE and the
# whole TILE x TILE footprint fits inside the grid.

def aligned(v: int) -> bool:
    return (v - LATTICE_OFFSET) % TILE == 0


def in_bounds_block(x: int, y: int, size: int = GRID_N) -> bool:
    return x >= 0 and y >= 0 and x + TILE <= size and y + TILE <= size


def lattice_dims(size: int = GRID_N) -> Tuple[int, int]:
    """(cols, rows) of the aligned lattice for a size x size grid."""
    n = (size - LATTICE_OFFSET + TILE - 1) // TILE
    return n, n


def lattice_index(x: int, y: int, size: int = GRID_N) -> Optional[int]:
    """Flat seen-set index of an aligned position, or None when off-lattice."""
    cols, rows = lattice_dims(size)
    gx = (x - LATTICE_OFFSET) // TILE
    gy = (y - LATTICE_OFFSET) // TILE
    if gx < 0 or gy < 0 or gx >= cols or gy >= rows:
        return None
    return gy * cols + gx


def lattice_positions(size: int = GRID_N) -> List[Pos]:
    """Every aligned position whose footprint fits, row-major."""
    out = []
    for y in range(LATTICE_OFFSET, size - TILE + 1, TILE):
        for x in range(LATTICE_OFFSET, size - TILE + 1, TILE):
            out.append((x, y))
    return out


def neighbors4(x: int, y: int) -> List[Pos]:
    return [(x + TILE, y), (x - TILE, y), (x, y + TILE), (x, y - TILE)]
