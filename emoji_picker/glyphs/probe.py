"""
Glyph probes: answer "does the platform font stack have a real glyph
for this text?" without drawing anything for the caller.

The Pillow probe measures text with FreeType across a font fallback chain
and compares the result with the font's missing-glyph ("tofu") box.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Tuple

from PIL import ImageFont, features

from emoji_picker.core import config

logger = logging.getLogger(__name__)

# U+10FFFD is a private-use noncharacter no font maps; it always renders as tofu
MISSING_GLYPH = "\U0010FFFD"
VARIATION_SELECTORS = frozenset(("\ufe0e", "\ufe0f"))
# Noto Color Emoji (CBDT) only has a 109px strike
BITMAP_STRIKE_SIZE = 109


class GlyphProbe(ABC):
    """
    Platform capability the checker depends on.
    `available` is decided once when the probe is built.
    """
    available = True

    @abstractmethod
    def supports_glyph(self, candidate: str) -> bool:
        pass


class NullGlyphProbe(GlyphProbe):
    """Stands in when the platform has no usable text stack."""
    available = False

    def supports_glyph(self, candidate: str) -> bool:
        return False


class LoadedFont:
    def __init__(self, path: str, font, mode: str = ""):
        self.path = path
        self.font = font
        # "RGBA" makes FreeType load colour bitmaps instead of outlines
        self.mode = mode
        self.missing = missing_glyph_metrics(font, mode)

    def __repr__(self):
        return f"LoadedFont({os.path.basename(self.path)}, size={self.font.size})"


def missing_glyph_metrics(font, mode: str = "") -> Tuple[float, Any]:
    """Advance and ink box of the font's tofu glyph."""
    return font.getlength(MISSING_GLYPH, mode=mode), font.getbbox(MISSING_GLYPH, mode=mode)


def font_has_glyph(font, text: str, mode: str = "", missing: Optional[Tuple[float, Any]] = None) -> bool:
    """
    Decide from measurements alone whether `font` renders `text` as a
    distinct glyph.

    A multi-codepoint sequence only counts when the shaper collapsed it
    into a narrower cluster than its parts laid side by side.
    `missing` takes precomputed tofu metrics (see LoadedFont).
    """
    chars = [c for c in text if c not in VARIATION_SELECTORS]
    measured = "".join(chars)

    if len(chars) == 1 and chars[0].isspace():
        return True

    width = font.getlength(measured, mode=mode)
    if width == 0:
        return False

    if len(chars) > 1:
        if width > 2 * font.size:
            return False
        parts = sum(font.getlength(c, mode=mode) for c in chars)
        if width >= parts:
            return False

    if missing is None:
        missing = missing_glyph_metrics(font, mode)
    missing_width, missing_bbox = missing

    if width != missing_width:
        return True

    # Same advance as tofu: only the ink box can tell them apart
    return font.getbbox(measured, mode=mode) != missing_bbox


def load_font(path: str, size: int) -> Optional[LoadedFont]:
    if not os.path.isfile(path):
        logger.debug(f"Font not present: {path}")
        return None

    try:
        return LoadedFont(path, ImageFont.truetype(path, size))
    except OSError as e:
        first_error = e

    # Bitmap-only colour fonts reject any size but their own strike
    try:
        loaded = LoadedFont(path, ImageFont.truetype(path, BITMAP_STRIKE_SIZE), mode="RGBA")
    except OSError:
        logger.warning(f"Could not load font {path}: {first_error}")
        return None

    logger.debug(f"Loaded {path} at bitmap strike size {BITMAP_STRIKE_SIZE}")
    return loaded


class PillowGlyphProbe(GlyphProbe):
    """
    Glyph probe backed by Pillow's FreeType bindings.

    The font chain is loaded once. If Pillow lacks FreeType or none of the
    fonts load, `available` is False and every query answers False.
    """

    def __init__(self, font_paths: Iterable[str], font_size: int = config.DEFAULT_FONT_SIZE):
        self.font_size = font_size
        self.fonts: List[LoadedFont] = []
        self.freetype = features.check("freetype2")

        if not self.freetype:
            logger.warning("Pillow was built without FreeType support; glyph checks will report every emoji as missing")
        else:
            for path in font_paths:
                loaded = load_font(path, font_size)
                if loaded is not None:
                    self.fonts.append(loaded)

        self.available = bool(self.freetype and self.fonts)

        if self.available:
            logger.info(f"Glyph probe ready: {self.fonts} (complex text layout: {features.check('raqm')})")
        elif self.freetype:
            logger.warning("No usable fonts found; glyph checks will report every emoji as missing")

    def supports_glyph(self, candidate: str) -> bool:
        if not self.available:
            return False
        return any(font_has_glyph(f.font, candidate, f.mode, f.missing) for f in self.fonts)


def detect_probe(font_paths: Optional[Iterable[str]] = None, font_size: Optional[int] = None) -> GlyphProbe:
    """Build the platform probe from explicit arguments or the environment."""
    if font_paths is None:
        font_paths = config.get_font_paths()
    if font_size is None:
        font_size = config.get_font_size()
    return PillowGlyphProbe(font_paths, font_size)
