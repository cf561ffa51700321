"""Initialization failures reported by the platform adapter."""
from enum import IntEnum


class ErrorCode(IntEnum):
    NONE = 0
    PLATFORM_INIT = -1
    VIDEO_SURFACE = -2
    ASSET_LOAD = -3


class PlatformError(Exception):
    code = ErrorCode.PLATFORM_INIT


class PlatformInitError(PlatformError):
    """A pygame subsystem (display or mixer) failed to start."""
    code = ErrorCode.PLATFORM_INIT


class VideoSurfaceError(PlatformError):
    code = ErrorCode.VIDEO_SURFACE


class AssetLoadError(PlatformError):
    """An atlas image or audio file could not be opened or decoded."""
    code = ErrorCode.ASSET_LOAD

    def __init__(self, path, reason):
        super().__init__(f"cannot load {path}: {reason}")
        self.path = path
