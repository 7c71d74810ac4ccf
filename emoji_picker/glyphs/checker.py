import logging
from typing import Any, Dict, Mapping

from .probe import GlyphProbe

logger = logging.getLogger(__name__)


class GlyphAvailabilityChecker:
    """
    Reports whether candidates render as real glyphs.
    Stateless apart from the injected probe and its cached capability flag.
    """

    def __init__(self, probe: GlyphProbe):
        self._probe = probe
        self._capable = bool(probe.available)
        if not self._capable:
            logger.warning(f"{type(probe).__name__} is unavailable; all candidates will be reported missing")

    @property
    def capable(self) -> bool:
        return self._capable

    def is_available(self, candidate: str) -> bool:
        if not self._capable:
            return False
        try:
            return bool(self._probe.supports_glyph(candidate))
        except (OSError, ValueError) as e:
            logger.debug(f"Glyph check failed for {candidate!r}: {e}")
            return False

    def check_availability(self, batch: Mapping[Any, Any]) -> Dict[Any, str]:
        """
        Keep only the entries whose candidate is available.
        Keys and values of kept entries are returned unchanged.
        """
        filtered = {}
        for key, candidate in batch.items():
            if not isinstance(candidate, str):
                logger.warning(f"Skipping entry {key!r}: expected str, got {type(candidate).__name__}")
                continue
            if self.is_available(candidate):
                filtered[key] = candidate

        logger.debug(f"check_availability: {len(filtered)}/{len(batch)} available")
        return filtered
