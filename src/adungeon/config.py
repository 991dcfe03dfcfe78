from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

import tomllib

DEFAULT_MAX_BLOCKS = 1200
DEFAULT_PLACE_PROB = 70
DEFAULT_SEED = 0  # 0 = seed from wall clock

GLYPH_MODES = ("symbols", "digits")


def clamp(v: int, lo: int, hi: int) -> int:
    return lo if v < lo else (hi if v > hi else v)


def parse_int(text: Any, default: int) -> int:
    """Lenient integer parse: None, blank or non-numeric input gives `default`."""
    if text is None:
        return default
    if isinstance(text, int):
        return text
    try:
        return int(str(text).strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class GenParams:
    max_blocks: int = DEFAULT_MAX_BLOCKS   # upper bound on accepted 4x4 placements
    place_prob: int = DEFAULT_PLACE_PROB   # % chance to place on a frontier visit
    seed: int = DEFAULT_SEED

    def sanitized(self) -> "GenParams":
        """Clamp probability to 0..100, reset a non-positive budget, keep seed unsigned 32-bit."""
        max_blocks = self.max_blocks if self.max_blocks > 0 else DEFAULT_MAX_BLOCKS
        seed = self.seed & 0xFFFFFFFF if self.seed > 0 else DEFAULT_SEED
        return replace(
            self,
            max_blocks=max_blocks,
            place_prob=clamp(self.place_prob, 0, 100),
            seed=seed,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GenParams":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown parameter(s): {', '.join(unknown)}")
        defaults = cls()
        return cls(**{
            name: parse_int(data.get(name), getattr(defaults, name)) for name in known
        })


def load_params(path: str | Path) -> GenParams:
    """
    Load generation parameters from a JSON or TOML file.
    """
    path = Path(path)
    raw = path.read_bytes()
    suffix = path.suffix.lower()
    data: Dict[str, Any]
    if suffix in {".json", ""}:
        data = json.loads(raw.decode("utf-8"))
    elif suffix in {".toml", ".tml"}:
        data = tomllib.loads(raw.decode("utf-8"))
    else:
        raise ValueError(f"Unsupported parameter file format: {suffix}")
    if not isinstance(data, dict):
        raise TypeError(f"Expected mapping at {path}, got {type(data)}")
    return GenParams.from_mapping(data)
