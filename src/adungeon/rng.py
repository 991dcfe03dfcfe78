from dataclasses import dataclass, field
from typing import List

# C library srand()/rand(): additive feedback generator x[i] = x[i-3] + x[i-31]
# over 32-bit words, seeded through Park–Miller minimal standard.
DEG = 31
SEP = 3
WARMUP = DEG * 10

A = 16807
M = 0x7FFFFFFF  # 2^31-1
Q, R = M // A, M % A  # Schrage factors: 127773, 2836
MASK32 = 0xFFFFFFFF
RAND_MAX = 0x7FFFFFFF


def _s32(v: int) -> int:
    v &= MASK32
    return v - 0x100000000 if (v & 0x80000000) else v


def _trunc_div(a: int, b: int) -> int:
    # C integer division rounds toward zero.
    q = abs(a) // b
    return q if a >= 0 else -q


def pm_step_signed(word: int) -> int:
    """One Park–Miller step on a signed 32-bit word, as the seeding loop does it."""
    hi = _trunc_div(word, Q)
    lo = word - hi * Q
    word = A * lo - R * hi
    if word < 0:
        word += M
    return word


def seed_table(seed: int) -> List[int]:
    """Return the 31-word state right after srand(seed), before warm-up."""
    seed &= MASK32
    if seed == 0:
        seed = 1
    word = _s32(seed)
    table = [seed]
    for _ in range(1, DEG):
        word = pm_step_signed(word)
        table.append(word & MASK32)
    return table


@dataclass
class CRandom:
    seed: int
    table: List[int] = field(init=False, repr=False)
    front: int = field(init=False, repr=False)
    rear: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.srand(self.seed)

    def srand(self, seed: int) -> None:
        self.seed = seed & MASK32
        self.table = seed_table(self.seed)
        self.front, self.rear = SEP, 0
        for _ in range(WARMUP):
            self.rand()

    def rand(self) -> int:
        val = (self.table[self.front] + self.table[self.rear]) & MASK32
        self.table[self.front] = val
        self.front = (self.front + 1) % DEG
        self.rear = (self.rear + 1) % DEG
        return val >> 1

    def below(self, n: int) -> int:
        """rand() % n, the way every draw in the generator is bounded."""
        assert n > 0
        return self.rand() % n
