"""Test doubles shared by the test modules."""

from emoji_picker.glyphs.probe import GlyphProbe

SMILE = "\U0001F600"
NO_GLYPH = "\uFFFF"


class FakeProbe(GlyphProbe):
    """Probe answering from a fixed set; records every query."""

    def __init__(self, supported=(), available=True, failing=()):
        self.supported = set(supported)
        self.failing = set(failing)
        self.available = available
        self.calls = []

    def supports_glyph(self, candidate):
        self.calls.append(candidate)
        if candidate in self.failing:
            raise OSError(f"cannot measure {candidate!r}")
        return candidate in self.supported


class FakeFont:
    """
    Stand-in for a Pillow FreeTypeFont: advances and ink boxes come from
    tables, anything unknown measures as the missing glyph.
    """
    TOFU_WIDTH = 40.0
    TOFU_BBOX = (4, 10, 36, 60)

    def __init__(self, glyphs=None, clusters=None, size=64):
        self.size = size
        self.glyphs = glyphs or {}
        self.clusters = clusters or {}
        self.modes = []
        self.measured = []

    def _metrics(self, text):
        if text in self.clusters:
            return self.clusters[text]
        if text in self.glyphs:
            return self.glyphs[text]
        return None

    def getlength(self, text, mode=""):
        self.modes.append(mode)
        self.measured.append(text)
        metrics = self._metrics(text)
        if metrics is not None:
            return metrics[0]
        return sum(self._metrics(c)[0] if self._metrics(c) else self.TOFU_WIDTH for c in text)

    def getbbox(self, text, mode=""):
        self.modes.append(mode)
        self.measured.append(text)
        metrics = self._metrics(text)
        return metrics[1] if metrics is not None else self.TOFU_BBOX
