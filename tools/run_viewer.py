#!/usr/bin/env python3
# Minimal interactive viewer for adungeon maps.
# - Sources: a dumped text file, or a fresh generation from --seed/--blocks/--prob
# - Arrow keys / PageUp / PageDown: scroll the viewport
# - R: regenerate with seed+1 (generated source only)
# - G: toggle glyph overlay on tiles
# - 60 Hz fixed loop

import argparse
import pygame
from adungeon.config import GenParams
from adungeon.mapgen.generator import generate_dungeon
from adungeon.render.ascii import GLYPH_SETS, loads
from adungeon.render.tileset import Tileset
from adungeon.timing import resolve_seed
from adungeon.ui.status_bar import StatusBarState, render_status_bar


def load_file(path):
    with open(path, encoding="ascii") as f:
        meta, rows = loads(f.read())
    return meta, rows


def generate(seed, blocks, prob):
    res = generate_dungeon(GenParams(max_blocks=blocks, place_prob=prob, seed=seed))
    meta = {"seed": res.seed, "blocks": res.placed, "prob": res.place_prob}
    return meta, res.grid.as_matrix()


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--file", type=str, default=None, help="Dungeon text to view")
    ap.add_argument("--seed", type=int, default=0, help="Seed when generating (0 = clock)")
    ap.add_argument("--blocks", type=int, default=1200)
    ap.add_argument("--prob", type=int, default=70)
    ap.add_argument("--tile", type=int, default=8, help="Tile size in pixels")
    ap.add_argument("--view", type=int, default=100, help="Viewport edge in cells")
    ap.add_argument("--glyphs", choices=sorted(GLYPH_SETS), default="symbols")
    args = ap.parse_args()

    pygame.init()
    pygame.display.set_caption("adungeon viewer")
    clock = pygame.time.Clock()

    view = args.view
    W = H = view * args.tile
    bar_h = max(12, args.tile * 2)
    screen = pygame.display.set_mode((W, H + bar_h))
    tiles = Tileset(args.tile, glyphs=GLYPH_SETS[args.glyphs])
    show_glyph = True

    seed = resolve_seed(args.seed)
    if args.file:
        meta, grid = load_file(args.file)
    else:
        meta, grid = generate(seed, args.blocks, args.prob)
    n = len(grid)
    sx = sy = 0
    step = max(1, view // 4)

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_RIGHT:
                    sx = min(n - view, sx + step)
                elif ev.key == pygame.K_LEFT:
                    sx = max(0, sx - step)
                elif ev.key in (pygame.K_DOWN, pygame.K_PAGEDOWN):
                    sy = min(n - view, sy + step)
                elif ev.key in (pygame.K_UP, pygame.K_PAGEUP):
                    sy = max(0, sy - step)
                elif ev.key == pygame.K_g:
                    show_glyph = not show_glyph
                elif ev.key == pygame.K_r and not args.file:
                    seed = (seed + 1) & 0xFFFFFFFF or 1
                    meta, grid = generate(seed, args.blocks, args.prob)
        sx, sy = max(0, sx), max(0, sy)

        screen.fill((0, 0, 0))
        for y in range(min(view, n - sy)):
            row = grid[sy + y]
            for x in range(min(view, n - sx)):
                screen.blit(tiles.view(row[sx + x], args.tile, show_glyph),
                            (x * args.tile, y * args.tile))

        state = StatusBarState(seed=meta["seed"], blocks=meta["blocks"], prob=meta["prob"],
                               scroll_x=sx, scroll_y=sy)
        render_status_bar(screen, (0, H), W, bar_h, state)
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()


if __name__ == "__main__":
    main()
