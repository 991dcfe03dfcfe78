#!/usr/bin/env python3
# adungeon command line: `batch` reads parameters from argv and prints the map,
# `interactive` prompts for them and writes the map to a file.

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, replace
from typing import Callable, Optional

from .config import (
    DEFAULT_MAX_BLOCKS, DEFAULT_PLACE_PROB, DEFAULT_SEED, GLYPH_MODES,
    GenParams, clamp, load_params, parse_int,
)
from .mapgen.generator import DungeonResult, generate_dungeon
from .render.ascii import GLYPH_SETS, dumps, write_dungeon
from .timing import Clock, resolve_seed


def log(msg: str) -> None:
    print(f"[adungeon] {msg}", file=sys.stderr)


class AbortRun(Exception):
    """Input ended before a usable request was collected."""


@dataclass
class RunRequest:
    params: GenParams
    out_path: Optional[str] = None   # None = stdout
    glyphs: str = "symbols"
    verbose: bool = False


# ---------- input sources ----------

class ArgvSource:
    """Positional [max_blocks] [place_prob] [seed], optionally layered over --params FILE."""

    def __init__(self, args: argparse.Namespace):
        self.args = args

    def read(self) -> RunRequest:
        a = self.args
        base = load_params(a.params) if a.params else GenParams()
        params = GenParams(
            max_blocks=parse_int(a.max_blocks, base.max_blocks),
            place_prob=parse_int(a.place_prob, base.place_prob),
            seed=parse_int(a.seed, base.seed),
        )
        return RunRequest(params=params, out_path=a.out, glyphs=a.glyphs, verbose=a.verbose)


class PromptSource:
    """Asks for each parameter in turn; blank or garbage answers keep the default."""

    def __init__(self, args: argparse.Namespace,
                 input_fn: Optional[Callable[[str], str]] = None):
        self.args = args
        self.input_fn = input_fn or input

    def _ask(self, prompt: str) -> Optional[str]:
        try:
            return self.input_fn(prompt)
        except EOFError:
            return None

    def read(self) -> RunRequest:
        max_blocks = DEFAULT_MAX_BLOCKS
        line = self._ask(
            "Max blocks - upper bound on 4x4 placements. Typical: 800-3000.\n"
            f"Enter max blocks [{max_blocks}]: ")
        tmp = parse_int(line, max_blocks)
        if tmp > 0:
            max_blocks = tmp

        line = self._ask(
            "\nPlace probability (0-100) - chance to place when visiting a frontier cell.\n"
            "Higher => denser dungeon.\n"
            f"Enter place probability [{DEFAULT_PLACE_PROB}]: ")
        place_prob = clamp(parse_int(line, DEFAULT_PLACE_PROB), 0, 100)

        line = self._ask(
            "\nSeed - fixes randomness (0 = random based on time).\n"
            f"Enter seed [{DEFAULT_SEED}]: ")
        seed = parse_int(line, DEFAULT_SEED)

        name = self._ask("\nOutput filename (e.g., dungeon.txt): ")
        if name is None:
            raise AbortRun("No filename; aborting.")
        name = name.rstrip("\r\n")
        if not name:
            raise AbortRun("Empty filename; aborting.")

        params = GenParams(max_blocks=max_blocks, place_prob=place_prob, seed=seed)
        return RunRequest(params=params, out_path=name, glyphs=self.args.glyphs,
                          verbose=self.args.verbose)


# ---------- run ----------

def generate_for(req: RunRequest, clock: Optional[Clock] = None) -> DungeonResult:
    params = req.params.sanitized()
    params = replace(params, seed=resolve_seed(params.seed, clock))
    t0 = time.time()
    result = generate_dungeon(params)
    if req.verbose:
        log(f"placed={result.placed}/{result.max_blocks} visited={result.visited} "
            f"stop={result.stop_reason} elapsed={time.time() - t0:.2f}s")
    return result


def emit(req: RunRequest, result: DungeonResult) -> bool:
    """Write the dump to stdout or req.out_path. False when the file could not be written."""
    glyphs = GLYPH_SETS[req.glyphs]
    if req.out_path is None:
        sys.stdout.write(dumps(result, glyphs))
        return True
    try:
        write_dungeon(req.out_path, result, glyphs)
    except OSError as e:
        log(f"Error: could not write '{req.out_path}' ({e.strerror or e}).")
        return False
    return True


def run(source, clock: Optional[Clock] = None) -> int:
    try:
        req = source.read()
    except AbortRun as e:
        log(str(e))
        return 1
    except (OSError, ValueError, TypeError, RuntimeError) as e:
        log(f"Bad parameters: {e}")
        return 2

    try:
        result = generate_for(req, clock)
    except MemoryError:
        log("Out of memory allocating generation buffers; nothing written.")
        return 1

    if not emit(req, result):
        # Unwritable destination: reported, no file, still a clean exit.
        return 0
    if req.out_path is not None:
        print(f"\nWrote {req.out_path} (seed={result.seed}, blocks={result.placed}, "
              f"prob={result.place_prob}%)")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="adungeon",
        description="ASCII dungeon generator: grows a connected map out of 4x4 tiles.")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p1 = sub.add_parser("batch", help="parameters from the command line, map to stdout")
    p1.add_argument("max_blocks", nargs="?", default=None,
                    help=f"upper bound on 4x4 placements (default {DEFAULT_MAX_BLOCKS})")
    p1.add_argument("place_prob", nargs="?", default=None,
                    help=f"percent chance to place per frontier visit (default {DEFAULT_PLACE_PROB})")
    p1.add_argument("seed", nargs="?", default=None,
                    help="RNG seed; 0 or omitted = from wall clock")
    p1.add_argument("-o", "--out", type=str, default=None, help="write to file instead of stdout")
    p1.add_argument("--params", type=str, default=None, help="JSON/TOML parameter file")
    p1.add_argument("--glyphs", choices=GLYPH_MODES, default="symbols")
    p1.add_argument("-v", "--verbose", action="store_true")
    p1.set_defaults(source=ArgvSource)

    p2 = sub.add_parser("interactive", help="prompt for parameters and an output file")
    p2.add_argument("--glyphs", choices=GLYPH_MODES, default="digits")
    p2.add_argument("-v", "--verbose", action="store_true")
    p2.set_defaults(source=PromptSource)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return run(args.source(args))


if __name__ == "__main__":
    sys.exit(main())
