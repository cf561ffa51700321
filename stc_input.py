"""Keyboard to semantic event mapping"""
from typing import Dict, Iterable, NamedTuple, Optional
import logging
import pygame
from stc_config import CONFIG
from stc_engine import Engine, EventType, Phase

logger = logging.getLogger(__name__)


class KeyBinding(NamedTuple):
    event: EventType
    held: bool  # key-up also ends the action


def build_key_table(auto_rotation: Optional[bool] = None,
                    show_shadow: Optional[bool] = None) -> Dict[int, KeyBinding]:
    if auto_rotation is None: auto_rotation = CONFIG["AUTO_ROTATION"]
    if show_shadow is None: show_shadow = CONFIG["SHOW_GHOST_PIECE"]
    table = {
        pygame.K_ESCAPE: KeyBinding(EventType.QUIT, False),
        pygame.K_s: KeyBinding(EventType.MOVE_DOWN, True),
        pygame.K_DOWN: KeyBinding(EventType.MOVE_DOWN, True),
        pygame.K_w: KeyBinding(EventType.ROTATE_CW, auto_rotation),
        pygame.K_UP: KeyBinding(EventType.ROTATE_CW, auto_rotation),
        pygame.K_a: KeyBinding(EventType.MOVE_LEFT, True),
        pygame.K_LEFT: KeyBinding(EventType.MOVE_LEFT, True),
        pygame.K_d: KeyBinding(EventType.MOVE_RIGHT, True),
        pygame.K_RIGHT: KeyBinding(EventType.MOVE_RIGHT, True),
        pygame.K_SPACE: KeyBinding(EventType.DROP, False),
        pygame.K_F5: KeyBinding(EventType.RESTART, False),
        pygame.K_F1: KeyBinding(EventType.PAUSE, False),
        pygame.K_F2: KeyBinding(EventType.SHOW_NEXT, False),
    }
    if show_shadow:
        table[pygame.K_F3] = KeyBinding(EventType.SHOW_SHADOW, False)
    return table


class InputMapper:
    """Drains raw input once per iteration and forwards start/end events."""
    def __init__(self, engine: Engine, table: Optional[Dict[int, KeyBinding]] = None):
        self.engine = engine
        self.table = build_key_table() if table is None else table

    def process(self, events: Optional[Iterable[pygame.event.Event]] = None) -> int:
        if events is None:
            events = pygame.event.get()
        sent = 0
        for e in events:
            if e.type == pygame.QUIT:
                sent += self._deliver(EventType.QUIT, Phase.START)
            elif e.type == pygame.KEYDOWN:
                b = self.table.get(e.key)
                if b:
                    sent += self._deliver(b.event, Phase.START)
            elif e.type == pygame.KEYUP:
                b = self.table.get(e.key)
                if b and b.held:
                    sent += self._deliver(b.event, Phase.END)
        if sent:
            logger.debug("delivered %d input events", sent)
        return sent

    def _deliver(self, event: EventType, phase: Phase) -> int:
        if phase is Phase.START:
            self.engine.on_event_start(event)
        else:
            self.engine.on_event_end(event)
        return 1
