from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from stc_engine import EMPTY_CELL, Block, Stats, empty_cells  # noqa: E402


class RecordingScreen:
    """Stands in for the display surface and records every blit."""

    def __init__(self, log: list | None = None) -> None:
        self.blits: list[tuple[object, tuple[int, int], pygame.Rect | None]] = []
        self.log = log if log is not None else []

    def blit(self, source, dest, area=None):
        self.blits.append((source, tuple(dest), area))
        self.log.append("blit")


class FakeEngine:
    def __init__(self, log: list | None = None) -> None:
        self.log = log if log is not None else []
        self.changed = True
        self.preview = True
        self.shadow = False
        self.gap = 0
        self.paused = False
        self.over_after: int | None = None
        self.updates = 0
        self.board: dict[tuple[int, int], int] = {}
        self.next = Block()
        self.falling = Block()
        self.game_stats = Stats()
        self.started: list = []
        self.ended: list = []
        self.acks = 0

    def has_changed(self) -> bool:
        return self.changed

    def on_change_processed(self) -> None:
        self.acks += 1
        self.changed = False
        self.log.append("ack")

    def on_event_start(self, event) -> None:
        self.started.append(event)
        self.log.append(("start", event))

    def on_event_end(self, event) -> None:
        self.ended.append(event)
        self.log.append(("end", event))

    def show_preview(self) -> bool:
        return self.preview

    def show_shadow(self) -> bool:
        return self.shadow

    def shadow_gap(self) -> int:
        return self.gap

    def next_block(self) -> Block:
        return self.next

    def falling_block(self) -> Block:
        return self.falling

    def get_cell(self, col: int, row: int) -> int:
        return self.board.get((col, row), EMPTY_CELL)

    def stats(self) -> Stats:
        return self.game_stats

    def is_paused(self) -> bool:
        return self.paused

    def update(self) -> None:
        self.updates += 1
        self.changed = True

    def is_over(self) -> bool:
        return self.over_after is not None and self.updates >= self.over_after


def block(cells: dict[tuple[int, int], int], x: int = 0, y: int = 0) -> Block:
    grid = empty_cells()
    for (i, j), tile in cells.items():
        grid[i][j] = tile
    return Block(grid, x, y)


@pytest.fixture
def log() -> list:
    return []


@pytest.fixture
def engine(log) -> FakeEngine:
    return FakeEngine(log)


@pytest.fixture
def screen(log) -> RecordingScreen:
    return RecordingScreen(log)


@pytest.fixture
def atlases() -> dict[str, pygame.Surface]:
    return {
        "tiles": pygame.Surface((108, 26)),
        "background": pygame.Surface((480, 272)),
        "numbers": pygame.Surface((70, 72)),
    }
