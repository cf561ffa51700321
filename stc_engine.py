"""Engine-facing types: board constants, semantic events, block and stats models.

The game rules live on the other side of the ``Engine`` protocol; this module
only describes what the platform adapter reads from it and sends into it.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Protocol

BOARD_TILEMAP_WIDTH, BOARD_TILEMAP_HEIGHT = 10, 22
TETROMINO_SIZE = 4
EMPTY_CELL = -1


class TetrominoType(IntEnum):
    I = 0
    O = 1
    T = 2
    S = 3
    Z = 4
    J = 5
    L = 6


class Color(IntEnum):
    """Tile identifiers; also the row of each HUD color in the digit atlas."""
    WHITE = 0
    CYAN = 1
    RED = 2
    BLUE = 3
    ORANGE = 4
    GREEN = 5
    YELLOW = 6
    PURPLE = 7


class EventType(Enum):
    QUIT = "quit"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_DOWN = "move_down"
    ROTATE_CW = "rotate_cw"
    DROP = "drop"
    PAUSE = "pause"
    RESTART = "restart"
    SHOW_NEXT = "show_next"
    SHOW_SHADOW = "show_shadow"


class Phase(Enum):
    START = "start"
    END = "end"


def empty_cells() -> List[List[int]]:
    return [[EMPTY_CELL] * TETROMINO_SIZE for _ in range(TETROMINO_SIZE)]


@dataclass
class Block:
    """A tetromino grid addressed as ``cells[col][row]`` plus its board position."""
    cells: List[List[int]] = field(default_factory=empty_cells)
    x: int = 0
    y: int = 0


@dataclass
class Stats:
    level: int = 0
    lines: int = 0
    score: int = 0
    total_pieces: int = 0
    pieces: Dict[TetrominoType, int] = field(
        default_factory=lambda: {t: 0 for t in TetrominoType})


class Engine(Protocol):
    def has_changed(self) -> bool: ...
    def on_change_processed(self) -> None: ...
    def on_event_start(self, event: EventType) -> None: ...
    def on_event_end(self, event: EventType) -> None: ...
    def show_preview(self) -> bool: ...
    def show_shadow(self) -> bool: ...
    def shadow_gap(self) -> int: ...
    def next_block(self) -> Block: ...
    def falling_block(self) -> Block: ...
    def get_cell(self, col: int, row: int) -> int: ...
    def stats(self) -> Stats: ...
    def is_paused(self) -> bool: ...
    def update(self) -> None: ...
    def is_over(self) -> bool: ...
