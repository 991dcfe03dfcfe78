# src/adungeon/timing.py
"""
Wall-clock seed helpers. A seed of 0 means "derive from the clock", using the
C rule (unsigned)time(NULL): whole seconds truncated to 32 bits.
"""

import time
from typing import Callable, Optional

Clock = Callable[[], float]


def wallclock_seed(clock: Optional[Clock] = None) -> int:
    clock = clock or time.time
    return int(clock()) & 0xFFFFFFFF


def resolve_seed(seed: int, clock: Optional[Clock] = None) -> int:
    """Return `seed` unchanged when nonzero, else a seed taken from `clock`."""
    seed &= 0xFFFFFFFF
    return seed if seed != 0 else wallclock_seed(clock)


def make_fixed_clock(t: float) -> Clock:
    """
    Deterministic clock for tests: always returns `t`.
    """
    def clock() -> float:
        return t
    return clock
