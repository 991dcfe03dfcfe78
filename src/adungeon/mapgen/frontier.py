# src/adungeon/mapgen/frontier.py
# Randomly-poppable frontier of aligned positions plus the permanent seen set.

from typing import List, Tuple
from ..grid import aligned, in_bounds_block, lattice_dims, lattice_index
from ..rng import CRandom
from ..tiles import GRID_N

Pos = Tuple[int, int]


class Frontier:
    """
    Entries live in one list; `head` splits processed [0, head) from pending
    [head, len). Popping swaps the chosen entry into `head` and advances it,
    so removal from the middle is O(1) and the buffer only ever grows.
    """

    def __init__(self, size: int = GRID_N):
        self.size = size
        cols, rows = lattice_dims(size)
        self.seen = bytearray(cols * rows)
        self.items: List[Pos] = []
        self.head = 0
        self.pushes = 0

    def pending(self) -> int:
        return len(self.items) - self.head

    def _index(self, x: int, y: int):
        if not in_bounds_block(x, y, self.size) or not aligned(x) or not aligned(y):
            return None
        return lattice_index(x, y, self.size)

    def is_seen(self, x: int, y: int) -> bool:
        k = self._index(x, y)
        return k is not None and self.seen[k] == 1

    def mark_seen(self, x: int, y: int) -> None:
        k = self._index(x, y)
        if k is not None:
            self.seen[k] = 1

    def push(self, x: int, y: int) -> bool:
        k = self._index(x, y)
        if k is None or self.seen[k]:
            return False
        self.seen[k] = 1
        self.items.append((x, y))
        self.pushes += 1
        return True

    def pop_random(self, rng: CRandom) -> Pos:
        n = self.pending()
        if n <= 0:
            raise IndexError("pop from empty frontier")
        pick = self.head + rng.below(n)
        items = self.items
        items[pick], items[self.head] = items[self.head], items[pick]
        cur = items[self.head]
        self.head += 1
        return cur
