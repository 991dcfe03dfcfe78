# src/adungeon/render/tileset.py
from __future__ import annotations
import pygame
from functools import lru_cache

from .ascii import GLYPHS_SYMBOLS, glyph_for
from .image import tile_color


class Tileset:
    """
    Tiny cached surface builder for the viewer:
      - one coloured square per tile code (same palette as the PNG export)
      - optionally the dump glyph drawn on top, so the view reads like the text
    """
    def __init__(self, tile_size: int, glyphs: str = GLYPHS_SYMBOLS, font=None):
        self.tile_size = tile_size
        self.glyphs = glyphs
        self.font = font or pygame.font.SysFont(None, max(10, tile_size))

    @lru_cache(maxsize=64)
    def get(self, code: int, show_glyph: bool = True) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(tile_color(code))
        if show_glyph and self.tile_size >= 8:
            txt = self.font.render(glyph_for(code, self.glyphs), True, (0, 0, 0))
            r = txt.get_rect(center=(self.tile_size // 2, self.tile_size // 2))
            img.blit(txt, r)
        return img

    @lru_cache(maxsize=256)
    def view(self, code: int, size: int, show_glyph: bool = True) -> pygame.Surface:
        base = self.get(code, show_glyph)
        if base.get_size() == (size, size):
            return base
        return pygame.transform.scale(base, (size, size))
