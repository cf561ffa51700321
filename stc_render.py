"""
Atlas blitting helpers for the STC platform layer.

All sprites come from three images loaded once at startup:
- tile atlas: one column per tile id, normal tiles on row 0, ghost tiles on row 1
- background: blitted whole at the top-left corner
- digit atlas: ten glyphs per row, one row per HUD color

Nothing here owns those images; they are referenced on every blit.
"""
from __future__ import annotations
import pygame
from stc_layout import TILE_SIZE, NUMBER_WIDTH, NUMBER_HEIGHT


class AtlasRenderer:
    """Copies fixed-size rectangles from the atlases onto the screen surface."""
    def __init__(self, screen: pygame.Surface, tiles: pygame.Surface,
                 background: pygame.Surface, numbers: pygame.Surface):
        self.screen = screen
        self.tiles = tiles
        self.background = background
        self.numbers = numbers

    def draw_background(self):
        self.screen.blit(self.background, (0, 0))

    def draw_tile(self, x: int, y: int, tile: int, shadow: bool = False):
        # Source stride carries one pixel of padding between tiles
        src = pygame.Rect(TILE_SIZE * tile, (TILE_SIZE + 1) * (1 if shadow else 0),
                          TILE_SIZE + 1, TILE_SIZE + 1)
        self.screen.blit(self.tiles, (x, y), src)

    def draw_number(self, x: int, y: int, number: int, length: int, color: int):
        """Draws ``number`` right-aligned in a field of ``length`` digits.

        Always blits ``length`` glyphs: leading positions show zeros and wider
        values keep only their least significant digits.
        """
        src_y = NUMBER_HEIGHT * color
        for pos in range(length):
            src = pygame.Rect(NUMBER_WIDTH * (number % 10), src_y, NUMBER_WIDTH, NUMBER_HEIGHT)
            self.screen.blit(self.numbers, (x + NUMBER_WIDTH * (length - pos), y), src)
            number //= 10
