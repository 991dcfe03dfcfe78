# src/adungeon/render/ascii.py
# Text dump of a dungeon: one header line, then one line of glyphs per grid row.

from __future__ import annotations

import os
import re
from typing import Dict, Iterable, Iterator, List, Tuple

from ..grid import Grid, lattice_positions
from ..tiles import EMPTY, GRID_N, TILE, is_filled

# Index = tile code. Batch output: symbols for every code.
GLYPHS_SYMBOLS = "#.,:;"
# Interactive output: wall glyph for empty, literal digits for codes.
GLYPHS_DIGITS = "#1234"
UNKNOWN_GLYPH = "?"

GLYPH_SETS = {"symbols": GLYPHS_SYMBOLS, "digits": GLYPHS_DIGITS}

HEADER_RE = re.compile(r"^# seed=(\d+) blocks=(\d+) prob=(\d+)%$")


def glyph_for(code: int, glyphs: str = GLYPHS_SYMBOLS) -> str:
    if glyphs == GLYPHS_DIGITS and code != EMPTY:
        return chr(ord("0") + code)
    return glyphs[code] if 0 <= code < len(glyphs) else UNKNOWN_GLYPH


def format_header(seed: int, blocks: int, prob: int) -> str:
    return f"# seed={seed} blocks={blocks} prob={prob}%"


def parse_header(line: str) -> Dict[str, int]:
    m = HEADER_RE.match(line.rstrip("\r\n"))
    if not m:
        raise ValueError(f"Not a dungeon header: {line!r}")
    seed, blocks, prob = (int(g) for g in m.groups())
    return {"seed": seed, "blocks": blocks, "prob": prob}


def render_lines(grid: Grid, glyphs: str = GLYPHS_SYMBOLS) -> Iterator[str]:
    n = grid.size
    for y in range(n):
        row = grid.buf[y * n:(y + 1) * n]
        yield "".join(glyph_for(v, glyphs) for v in row)


def dumps(result, glyphs: str = GLYPHS_SYMBOLS) -> str:
    """Full text of a DungeonResult, newline after every line."""
    lines = [format_header(result.seed, result.placed, result.place_prob)]
    lines.extend(render_lines(result.grid, glyphs))
    return "\n".join(lines) + "\n"


def write_dungeon(path: str | os.PathLike[str], result, glyphs: str = GLYPHS_SYMBOLS) -> None:
    """
    Write the dump to `path`. The text is built before the file is opened, so
    an unopenable destination leaves nothing behind; a write that fails after
    opening removes the partial file before the OSError propagates.
    """
    text = dumps(result, glyphs)
    f = open(path, "w", encoding="ascii", newline="\n")
    try:
        with f:
            f.write(text)
    except OSError:
        os.remove(path)
        raise


# ---------- reading back ----------

def _inverse_glyphs() -> Dict[str, int]:
    inv: Dict[str, int] = {}
    for glyphs in (GLYPHS_SYMBOLS, GLYPHS_DIGITS):
        for code in range(len(glyphs)):
            inv[glyph_for(code, glyphs)] = code
    return inv


def loads(text: str, size: int = GRID_N) -> Tuple[Dict[str, int], List[List[int]]]:
    """Parse a dump written with either glyph set into (header fields, code rows)."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("Empty dungeon text")
    meta = parse_header(lines[0])
    body = lines[1:]
    if len(body) != size:
        raise ValueError(f"Expected {size} grid rows, got {len(body)}")
    inv = _inverse_glyphs()
    rows: List[List[int]] = []
    for y, line in enumerate(body):
        if len(line) != size:
            raise ValueError(f"Row {y}: expected {size} columns, got {len(line)}")
        try:
            rows.append([inv[ch] for ch in line])
        except KeyError as e:
            raise ValueError(f"Row {y}: unknown glyph {e.args[0]!r}") from None
    return meta, rows


def grid_from_rows(rows: Iterable[List[int]]) -> Grid:
    rows = list(rows)
    buf: List[int] = []
    for row in rows:
        buf.extend(row)
    return Grid(buf=buf, stride=len(rows))


def count_blocks(rows: List[List[int]]) -> int:
    """Number of aligned TILE x TILE footprints whose cells are all filled."""
    size = len(rows)
    count = 0
    for x, y in lattice_positions(size):
        if all(is_filled(rows[y + r][x + c]) for r in range(TILE) for c in range(TILE)):
            count += 1
    return count
