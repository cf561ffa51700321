"""Sound cues: a looping music track plus fire-and-forget effects."""
from __future__ import annotations
import logging
from typing import Optional

import pygame

logger = logging.getLogger(__name__)


class AudioCues:
    def __init__(self, music_loaded: bool = False,
                 line: Optional[pygame.mixer.Sound] = None,
                 drop: Optional[pygame.mixer.Sound] = None):
        self.music_loaded = music_loaded
        self.line = line
        self.drop = drop

    def start_music(self):
        if not self.music_loaded:
            return
        try:
            pygame.mixer.music.play(-1)
        except pygame.error as exc:
            logger.debug("music playback failed: %s", exc)

    def on_line_completed(self):
        self._play(self.line)

    def on_piece_drop(self):
        self._play(self.drop)

    @staticmethod
    def _play(sound: Optional[pygame.mixer.Sound]):
        # Any free channel; overlapping cues are allowed
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as exc:
            logger.debug("sound playback failed: %s", exc)
