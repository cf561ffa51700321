"""
Pygame platform layer for STC.

PlatformPygame owns every native resource the game needs (window surface,
atlas images, mixer and sounds) and exposes to the engine the handful of
entry points it calls: input polling, frame rendering, audio cues, time and
random numbers. The engine itself never touches pygame.
"""
from __future__ import annotations
import logging
import random
import time
from typing import Callable, Optional

import pygame
from stc_audio import AudioCues
from stc_config import CONFIG, asset_path
from stc_engine import Engine
from stc_errors import (AssetLoadError, ErrorCode, PlatformError,
                        PlatformInitError, VideoSurfaceError)
from stc_frame import FrameComposer
from stc_input import InputMapper
from stc_layout import SCREEN_BIT_DEPTH, SCREEN_HEIGHT, SCREEN_WIDTH, Dims
from stc_logging import setup_logging
from stc_render import AtlasRenderer
from stc_timing import TimingGate

logger = logging.getLogger(__name__)


class PlatformPygame:
    def __init__(self, dims: Optional[Dims] = None,
                 flip: Optional[Callable[[], None]] = None,
                 sleep: Optional[Callable[[int], object]] = None):
        self.dims = dims or Dims()
        self._flip = flip
        self.rng = random.Random()
        self.engine: Optional[Engine] = None

        self.screen: Optional[pygame.Surface] = None
        self.tiles: Optional[pygame.Surface] = None
        self.background: Optional[pygame.Surface] = None
        self.numbers: Optional[pygame.Surface] = None
        self.sound_line: Optional[pygame.mixer.Sound] = None
        self.sound_drop: Optional[pygame.mixer.Sound] = None
        self.music_loaded = False
        self._display_ready = False
        self._mixer_ready = False

        self.composer: Optional[FrameComposer] = None
        self.input: Optional[InputMapper] = None
        self.audio = AudioCues()
        self.timing = TimingGate(sleep=sleep)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.end()
        return False

    # ---------- Lifecycle ----------
    def init(self, engine: Engine):
        """Acquires every resource in order; raises a PlatformError subclass on the first failure.

        Nothing is rolled back here: call ``end()`` afterwards, it only
        releases what was actually acquired.
        """
        self.rng.seed(time.time())

        try:
            pygame.display.init()
        except pygame.error as exc:
            raise PlatformInitError(f"display init failed: {exc}") from exc
        self._display_ready = True

        try:
            pygame.mixer.init(CONFIG["AUDIO_RATE"], CONFIG["AUDIO_FORMAT"],
                              CONFIG["AUDIO_CHANNELS"], CONFIG["AUDIO_BUFFERS"])
        except pygame.error as exc:
            raise PlatformInitError(f"mixer init failed: {exc}") from exc
        self._mixer_ready = True

        try:
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT),
                                                  pygame.DOUBLEBUF, SCREEN_BIT_DEPTH)
        except pygame.error as exc:
            raise VideoSurfaceError(f"cannot create {SCREEN_WIDTH}x{SCREEN_HEIGHT} surface: {exc}") from exc

        name = CONFIG["GAME_NAME"]
        pygame.display.set_caption(f"{name} (Python)", name)

        self.tiles = self._load_image("BMP_TILE_BLOCKS")
        self.background = self._load_image("BMP_BACKGROUND")
        self.numbers = self._load_image("BMP_NUMBERS")

        path = asset_path("SND_MUSIC")
        try:
            pygame.mixer.music.load(path)
        except (pygame.error, OSError) as exc:
            raise AssetLoadError(path, exc) from exc
        self.music_loaded = True
        self.sound_line = self._load_sound("SND_LINE")
        self.sound_drop = self._load_sound("SND_DROP")

        self.engine = engine
        renderer = AtlasRenderer(self.screen, self.tiles, self.background, self.numbers)
        self.composer = FrameComposer(engine, renderer, self.dims, self._flip)
        self.input = InputMapper(engine)
        self.audio = AudioCues(self.music_loaded, self.sound_line, self.sound_drop)
        self.audio.start_music()
        logger.info("platform ready (%dx%d)", SCREEN_WIDTH, SCREEN_HEIGHT)

    def _load_image(self, key: str) -> pygame.Surface:
        path = asset_path(key)
        try:
            return pygame.image.load(path).convert_alpha()
        except (pygame.error, OSError) as exc:
            raise AssetLoadError(path, exc) from exc

    def _load_sound(self, key: str) -> pygame.mixer.Sound:
        path = asset_path(key)
        try:
            return pygame.mixer.Sound(path)
        except (pygame.error, OSError) as exc:
            raise AssetLoadError(path, exc) from exc

    def end(self):
        """Releases whatever was acquired. Safe after a failed init and safe to call twice."""
        self.composer = None
        self.input = None
        self.audio = AudioCues()
        self.sound_line = self.sound_drop = None
        if self._mixer_ready:
            if self.music_loaded:
                pygame.mixer.music.stop()
            pygame.mixer.quit()
            self._mixer_ready = False
            logger.debug("mixer closed")
        self.music_loaded = False
        self.tiles = self.background = self.numbers = None
        self.screen = None
        if self._display_ready:
            pygame.display.quit()
            self._display_ready = False
            logger.debug("display closed")
        self.engine = None

    # ---------- Per-iteration entry points ----------
    def process_events(self) -> int:
        return self.input.process() if self.input else 0

    def render_game(self) -> bool:
        drawn = self.composer.render() if self.composer else False
        self.timing.wait()
        return drawn

    # ---------- Engine services ----------
    def get_system_time(self) -> int:
        return pygame.time.get_ticks()

    def random(self) -> int:
        return self.rng.randrange(2 ** 31)

    def on_line_completed(self):
        self.audio.on_line_completed()

    def on_piece_drop(self):
        self.audio.on_piece_drop()


def run(engine: Engine, platform: Optional[PlatformPygame] = None) -> ErrorCode:
    """Runs the game loop until the engine reports it is over."""
    setup_logging()
    platform = platform or PlatformPygame()
    try:
        platform.init(engine)
    except PlatformError as exc:
        logger.error("initialization failed [%s]: %s", exc.code.name, exc)
        platform.end()
        return exc.code
    try:
        while not engine.is_over():
            platform.process_events()
            engine.update()
            platform.render_game()
    finally:
        platform.end()
    return ErrorCode.NONE
