# tests/test_frontier.py
import pytest

from adungeon.rng import CRandom
from adungeon.mapgen.frontier import Frontier

def test_push_rejects_invalid_positions():
    f = Frontier()
    assert not f.push(6, 5)      # not aligned
    assert not f.push(1, 5)      # aligned residue but left of the lattice
    assert not f.push(5, 225)    # footprint past the bottom edge
    assert not f.push(-3, 5)
    assert f.pending() == 0

def test_push_once_only():
    f = Frontier()
    assert f.push(9, 5)
    assert not f.push(9, 5)
    assert f.is_seen(9, 5)
    assert f.pending() == 1 and f.pushes == 1

def test_mark_seen_blocks_push():
    f = Frontier()
    f.mark_seen(5, 5)
    assert f.is_seen(5, 5)
    assert not f.push(5, 5)
    assert f.pending() == 0

def test_pop_random_swaps_with_head():
    f = Frontier()
    pts = [(5, 5), (9, 5), (13, 5), (17, 5)]
    for p in pts:
        f.push(*p)
    replay = CRandom(3)
    pick = replay.rand() % 4
    got = f.pop_random(CRandom(3))
    assert got == pts[pick]
    assert f.head == 1 and f.pending() == 3
    # Picked entry now sits in the processed slot; the old head took its place.
    assert f.items[0] == pts[pick]
    assert f.items[pick] == pts[0]
    remaining = set(f.items[1:])
    assert remaining == set(pts) - {pts[pick]}

def test_pop_drains_every_entry_once():
    f = Frontier()
    pts = [(5 + 4 * i, 9) for i in range(30)]
    for p in pts:
        f.push(*p)
    rng = CRandom(11)
    popped = [f.pop_random(rng) for _ in range(len(pts))]
    assert sorted(popped) == sorted(pts)
    assert f.pending() == 0
    # Seen stays set after popping.
    assert all(f.is_seen(*p) for p in pts)
    assert not f.push(*pts[0])

def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Frontier().pop_random(CRandom(1))
