# tests/test_timing.py
from adungeon.timing import make_fixed_clock, resolve_seed, wallclock_seed

def test_wallclock_seed_truncates_to_32_bits():
    assert wallclock_seed(make_fixed_clock(1700000000.9)) == 1700000000
    assert wallclock_seed(make_fixed_clock(float((1 << 32) + 5))) == 5

def test_resolve_seed():
    clock = make_fixed_clock(1234.5)
    assert resolve_seed(99, clock) == 99
    assert resolve_seed(0, clock) == 1234
