import os
from pathlib import Path
from typing import List

# Environment variables
ENV_FONTS = "EMOJI_PICKER_FONTS"
ENV_FONT_SIZE = "EMOJI_PICKER_FONT_SIZE"
ENV_PLUGIN_PATH = "EMOJI_PICKER_PLUGIN_PATH"
ENV_LOG_DIR = "EMOJI_PICKER_LOG_DIR"
ENV_DEBUG = "EMOJI_PICKER_DEBUG"

DEFAULT_FONT_SIZE = 64
DEFAULT_LOG_DIR = "logs"
CHANNEL_NAME = "emoji_picker"

# System fonts probed in order after any configured ones
SYSTEM_FONT_PATHS = [
    "C:/Windows/Fonts/seguiemj.ttf", # Windows Color Emoji
    "/System/Library/Fonts/Apple Color Emoji.ttc", # Mac
    "/usr/share/fonts/truetype/noto/NotoColorEmoji.ttf", # Debian/Ubuntu
    "/usr/share/fonts/noto/NotoColorEmoji.ttf", # Arch
    "/usr/share/fonts/google-noto-emoji/NotoColorEmoji.ttf", # Fedora
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
]


def _split_paths(value: str) -> List[str]:
    return [p.strip() for p in value.split(os.pathsep) if p.strip()]


def get_font_paths() -> List[str]:
    """
    Font fallback chain: EMOJI_PICKER_FONTS entries first, then the
    well-known system locations. Duplicates are dropped.
    """
    paths = []
    for path in _split_paths(os.environ.get(ENV_FONTS, "")) + SYSTEM_FONT_PATHS:
        if path not in paths:
            paths.append(path)
    return paths


def get_font_size() -> int:
    raw = os.environ.get(ENV_FONT_SIZE)
    if not raw:
        return DEFAULT_FONT_SIZE
    try:
        size = int(raw)
    except ValueError:
        raise ValueError(f"{ENV_FONT_SIZE} must be an integer, got {raw!r}")
    if size <= 0:
        raise ValueError(f"{ENV_FONT_SIZE} must be positive, got {size}")
    return size


def get_extra_plugin_paths() -> List[Path]:
    return [Path(p) for p in _split_paths(os.environ.get(ENV_PLUGIN_PATH, ""))]


def get_log_dir() -> Path:
    return Path(os.environ.get(ENV_LOG_DIR, DEFAULT_LOG_DIR))


def is_debug() -> bool:
    if os.environ.get("FLASK_ENV") == "development":
        return True
    return os.environ.get(ENV_DEBUG, "").lower() in ("1", "true", "yes", "on")
