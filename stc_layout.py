# stc_layout.py
from dataclasses import dataclass

SCREEN_WIDTH, SCREEN_HEIGHT = 480, 272
SCREEN_BIT_DEPTH = 32

TILE_SIZE = 12

NUMBER_WIDTH = 7
NUMBER_HEIGHT = 9


@dataclass(frozen=True)
class Dims:
    board_x: int = 180
    board_y: int = 4
    preview_x: int = 112
    preview_y: int = 210

    score_x: int = 72
    score_y: int = 52
    score_length: int = 10

    lines_x: int = 108
    lines_y: int = 34
    lines_length: int = 5

    level_x: int = 108
    level_y: int = 16
    level_length: int = 5

    tetromino_x: int = 425
    tetromino_l_y: int = 53
    tetromino_i_y: int = 77
    tetromino_t_y: int = 101
    tetromino_s_y: int = 125
    tetromino_z_y: int = 149
    tetromino_o_y: int = 173
    tetromino_j_y: int = 197
    tetromino_length: int = 5

    pieces_x: int = 418
    pieces_y: int = 221
    pieces_length: int = 6
