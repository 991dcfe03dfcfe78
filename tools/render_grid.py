#!/usr/bin/env python3
# Render a dumped dungeon (either glyph set) to a PNG using Pillow.

import argparse, os
from adungeon.render.ascii import count_blocks, loads
from adungeon.render.image import save_png


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("infile", type=str, help="Dungeon text written by `adungeon`")
    ap.add_argument("outfile", type=str, help="PNG to write")
    ap.add_argument("--cell", type=int, default=4, help="Cell size in pixels")
    args = ap.parse_args()

    with open(args.infile, encoding="ascii") as f:
        try:
            meta, rows = loads(f.read())
        except ValueError as e:
            raise SystemExit(f"{args.infile}: {e}")
    if count_blocks(rows) != meta["blocks"]:
        print(f"[render_grid] warning: header says blocks={meta['blocks']}, "
              f"grid holds {count_blocks(rows)}")
    save_png(rows, args.outfile, cell_px=args.cell)
    print(f"Wrote {os.path.abspath(args.outfile)}")


if __name__ == "__main__":
    main()
