import os

CONFIG = {
    "GAME_NAME": "STC: simple tetris clone",
    "ASSET_DIR": os.environ.get("STC_ASSET_DIR", "media"),
    "BMP_TILE_BLOCKS": "sdl/blocks.png",
    "BMP_BACKGROUND": "sdl/back.png",
    "BMP_NUMBERS": "sdl/numbers.png",
    "SND_MUSIC": "sound/stc_theme_loop.ogg",
    "SND_LINE": "sound/line.wav",
    "SND_DROP": "sound/drop.wav",
    "SLEEP_TIME": 40,
    "SHOW_GHOST_PIECE": True,
    "AUTO_ROTATION": False,
    "AUDIO_RATE": 44100,
    "AUDIO_FORMAT": -16,
    "AUDIO_CHANNELS": 2,
    "AUDIO_BUFFERS": 4096,
}


def asset_path(key: str) -> str:
    return os.path.join(CONFIG["ASSET_DIR"], CONFIG[key])
