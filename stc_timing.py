"""Fixed end-of-iteration delay"""
from typing import Callable, Optional
import pygame
from stc_config import CONFIG


class TimingGate:
    def __init__(self, delay_ms: Optional[int] = None,
                 sleep: Optional[Callable[[int], object]] = None):
        self.delay_ms = CONFIG["SLEEP_TIME"] if delay_ms is None else delay_ms
        self.sleep = sleep or pygame.time.delay

    def wait(self):
        self.sleep(self.delay_ms)
