# tests/test_ascii.py
import pytest

from adungeon.config import GenParams
from adungeon.grid import Grid
from adungeon.mapgen.generator import generate_dungeon
from adungeon.render.ascii import (
    GLYPHS_DIGITS, GLYPHS_SYMBOLS, count_blocks, dumps, format_header,
    glyph_for, grid_from_rows, loads, parse_header, render_lines, write_dungeon,
)

def small_result(seed=1, blocks=1):
    return generate_dungeon(GenParams(max_blocks=blocks, place_prob=70, seed=seed))

def test_glyph_tables():
    assert [glyph_for(c, GLYPHS_SYMBOLS) for c in range(5)] == ["#", ".", ",", ":", ";"]
    assert [glyph_for(c, GLYPHS_DIGITS) for c in range(5)] == ["#", "1", "2", "3", "4"]
    assert glyph_for(9, GLYPHS_SYMBOLS) == "?"

def test_header_format_and_parse():
    h = format_header(12345, 87, 70)
    assert h == "# seed=12345 blocks=87 prob=70%"
    assert parse_header(h + "\n") == {"seed": 12345, "blocks": 87, "prob": 70}
    with pytest.raises(ValueError):
        parse_header("# seed=1 blocks=2")

def test_dump_layout_scenario_single_block():
    text = dumps(small_result(seed=1, blocks=1))
    lines = text.split("\n")
    assert lines[0] == "# seed=1 blocks=1 prob=70%"
    assert lines[-1] == ""              # trailing newline, nothing after
    body = lines[1:-1]
    assert len(body) == 225 and all(len(l) == 225 for l in body)
    for y, line in enumerate(body):
        for x, ch in enumerate(line):
            if 5 <= x < 9 and 5 <= y < 9:
                assert ch in ".,:;"
            else:
                assert ch == "#"

def test_digit_glyph_dump():
    text = dumps(small_result(seed=1, blocks=1), GLYPHS_DIGITS)
    row5 = text.split("\n")[6]
    assert row5[:5] == "#####"
    assert set(row5[5:9]) <= set("1234")
    assert set(row5[9:]) == {"#"}

def test_render_lines_small_grid():
    g = grid_from_rows([[0, 1], [2, 7]])
    assert list(render_lines(g)) == ["#.", ",?"]
    assert list(render_lines(g, GLYPHS_DIGITS)) == ["#1", "27"]

def test_round_trip_blocks_field():
    for glyphs in (GLYPHS_SYMBOLS, GLYPHS_DIGITS):
        res = generate_dungeon(GenParams(max_blocks=700, place_prob=70, seed=2718))
        meta, rows = loads(dumps(res, glyphs))
        assert meta == {"seed": 2718, "blocks": res.placed, "prob": 70}
        assert rows == res.grid.as_matrix()
        assert count_blocks(rows) == meta["blocks"]

def test_loads_rejects_bad_text():
    good = dumps(small_result())
    with pytest.raises(ValueError):
        loads("")
    with pytest.raises(ValueError):
        loads("\n".join(good.split("\n")[:100]))
    bad = good.replace("#", "x", 2)  # first '#' is the header's
    with pytest.raises(ValueError):
        loads(bad)

def test_write_dungeon(tmp_path):
    res = small_result(seed=4, blocks=20)
    out = tmp_path / "dungeon.txt"
    write_dungeon(out, res, GLYPHS_DIGITS)
    assert out.read_text(encoding="ascii") == dumps(res, GLYPHS_DIGITS)

def test_write_dungeon_unwritable_leaves_nothing(tmp_path):
    target = tmp_path / "missing_dir" / "dungeon.txt"
    with pytest.raises(OSError):
        write_dungeon(target, small_result())
    assert not target.exists()

def test_count_blocks_ignores_partial_footprints():
    g = Grid.empty()
    for r in range(4):
        for c in range(4):
            g.set(5 + c, 5 + r, 1)
    g.set(9, 5, 2)  # one stray cell of the next footprint
    assert count_blocks(g.as_matrix()) == 1
