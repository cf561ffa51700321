"""Frame composition: draws the whole game state whenever the engine reports a change."""
from __future__ import annotations
import logging
from typing import Callable, List, Optional, Tuple

import pygame
from stc_config import CONFIG
from stc_engine import (BOARD_TILEMAP_HEIGHT, BOARD_TILEMAP_WIDTH, EMPTY_CELL,
                        TETROMINO_SIZE, Block, Color, Engine, EventType, Stats,
                        TetrominoType)
from stc_layout import TILE_SIZE, Dims
from stc_render import AtlasRenderer

logger = logging.getLogger(__name__)

# (x, y, length, color, value getter)
HudField = Tuple[int, int, int, Color, Callable[[Stats], int]]


def hud_fields(d: Dims) -> List[HudField]:
    def shape(t):
        return lambda s: s.pieces.get(t, 0)
    return [
        (d.level_x, d.level_y, d.level_length, Color.WHITE, lambda s: s.level),
        (d.lines_x, d.lines_y, d.lines_length, Color.WHITE, lambda s: s.lines),
        (d.score_x, d.score_y, d.score_length, Color.WHITE, lambda s: s.score),
        (d.tetromino_x, d.tetromino_l_y, d.tetromino_length, Color.ORANGE, shape(TetrominoType.L)),
        (d.tetromino_x, d.tetromino_i_y, d.tetromino_length, Color.CYAN, shape(TetrominoType.I)),
        (d.tetromino_x, d.tetromino_t_y, d.tetromino_length, Color.PURPLE, shape(TetrominoType.T)),
        (d.tetromino_x, d.tetromino_s_y, d.tetromino_length, Color.GREEN, shape(TetrominoType.S)),
        (d.tetromino_x, d.tetromino_z_y, d.tetromino_length, Color.RED, shape(TetrominoType.Z)),
        (d.tetromino_x, d.tetromino_o_y, d.tetromino_length, Color.YELLOW, shape(TetrominoType.O)),
        (d.tetromino_x, d.tetromino_j_y, d.tetromino_length, Color.BLUE, shape(TetrominoType.J)),
        (d.pieces_x, d.pieces_y, d.pieces_length, Color.WHITE, lambda s: s.total_pieces),
    ]


class FrameComposer:
    """Redraws background, preview, ghost, board, falling piece and HUD on change.

    ``flip`` presents the finished frame; it defaults to ``pygame.display.flip``.
    """
    def __init__(self, engine: Engine, renderer: AtlasRenderer,
                 dims: Optional[Dims] = None,
                 flip: Optional[Callable[[], None]] = None,
                 show_ghost: Optional[bool] = None):
        self.engine = engine
        self.renderer = renderer
        self.dims = dims or Dims()
        self.flip = flip or pygame.display.flip
        self.show_ghost = CONFIG["SHOW_GHOST_PIECE"] if show_ghost is None else show_ghost
        self.hud = hud_fields(self.dims)

    def render(self) -> bool:
        """Returns True when a frame was drawn and presented."""
        if not self.engine.has_changed():
            return False
        try:
            self._draw()
        except pygame.error as exc:
            # Lost the window mid-run: let the engine shut down cleanly
            logger.warning("video surface lost while drawing: %s", exc)
            self.engine.on_event_start(EventType.QUIT)
            return False
        self.engine.on_change_processed()
        try:
            self.flip()
        except pygame.error as exc:
            logger.warning("video surface lost on flip: %s", exc)
            self.engine.on_event_start(EventType.QUIT)
            return False
        return True

    def _draw(self):
        e = self.engine
        d = self.dims
        r = self.renderer
        r.draw_background()

        if e.show_preview():
            self._draw_block(e.next_block(), d.preview_x, d.preview_y, False)

        if self.show_ghost and e.show_shadow():
            gap = e.shadow_gap()
            if gap > 0:
                fb = e.falling_block()
                self._draw_block(fb, d.board_x + TILE_SIZE * fb.x,
                                 d.board_y + TILE_SIZE * (fb.y + gap), True)

        for i in range(BOARD_TILEMAP_WIDTH):
            for j in range(BOARD_TILEMAP_HEIGHT):
                tile = e.get_cell(i, j)
                if tile != EMPTY_CELL:
                    r.draw_tile(d.board_x + TILE_SIZE * i, d.board_y + TILE_SIZE * j, tile)

        # Falling piece goes over the board
        fb = e.falling_block()
        self._draw_block(fb, d.board_x + TILE_SIZE * fb.x, d.board_y + TILE_SIZE * fb.y, False)

        if not e.is_paused():
            stats = e.stats()
            for x, y, length, color, value in self.hud:
                r.draw_number(x, y, value(stats), length, color)

    def _draw_block(self, block: Block, x: int, y: int, shadow: bool):
        for i in range(TETROMINO_SIZE):
            for j in range(TETROMINO_SIZE):
                tile = block.cells[i][j]
                if tile != EMPTY_CELL:
                    self.renderer.draw_tile(x + TILE_SIZE * i, y + TILE_SIZE * j, tile, shadow)
