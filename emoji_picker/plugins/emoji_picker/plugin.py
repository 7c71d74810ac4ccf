import logging
import platform
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, List, Optional

from emoji_picker.core import config
from emoji_picker.core.channel import MethodCall, MethodChannel, MethodResult
from emoji_picker.core.plugin_interface import PluginInterface
from emoji_picker.glyphs.checker import GlyphAvailabilityChecker
from emoji_picker.glyphs.probe import GlyphProbe, detect_probe

logger = logging.getLogger(__name__)

EMOJI_ARGUMENT = "emoji"


class Method(Enum):
    IS_AVAILABLE = "isAvailable"
    CHECK_AVAILABILITY = "checkAvailability"
    GET_PLATFORM_VERSION = "getPlatformVersion"

    @classmethod
    def parse(cls, name: str) -> Optional["Method"]:
        try:
            return cls(name)
        except ValueError:
            return None


def platform_version() -> str:
    return f"{platform.system()} {platform.release()}".strip()


class EmojiPickerPlugin(PluginInterface):
    """
    Serves glyph availability queries on the 'emoji_picker' channel.

    The probe is built on attach, so platform capability is detected once
    per attach rather than on every call. Pass `probe` to inject one.
    """

    def __init__(self, probe: Optional[GlyphProbe] = None):
        self._probe = probe
        self._checker: Optional[GlyphAvailabilityChecker] = None
        self._registry = None
        self._channel: Optional[MethodChannel] = None

    def get_meta(self) -> Dict[str, Any]:
        return {
            'name': 'emoji_picker',
            'version': '1.0.0',
            'description': 'Reports which emoji the platform fonts can render as real glyphs.',
            'author': 'emoji_picker'
        }

    def get_channels(self) -> List[str]:
        return [config.CHANNEL_NAME]

    @property
    def attached(self) -> bool:
        return self._channel is not None

    @property
    def checker(self) -> Optional[GlyphAvailabilityChecker]:
        return self._checker

    def initialize(self, registry: Any) -> None:
        if self.attached:
            logger.warning("EmojiPickerPlugin: already attached, ignoring")
            return

        probe = self._probe if self._probe is not None else detect_probe()
        checker = GlyphAvailabilityChecker(probe)
        channel = registry.open_channel(config.CHANNEL_NAME)

        self._checker = checker
        self._channel = channel
        self._registry = registry
        channel.set_method_call_handler(self.on_method_call)
        logger.info(f"EmojiPickerPlugin: attached to channel '{config.CHANNEL_NAME}' (glyph probe capable: {checker.capable})")

    def shutdown(self) -> None:
        if not self.attached:
            return
        self._channel.set_method_call_handler(None)
        self._registry.close_channel(config.CHANNEL_NAME)
        self._channel = None
        self._registry = None
        self._checker = None
        logger.info("EmojiPickerPlugin: detached")

    def on_method_call(self, call: MethodCall) -> MethodResult:
        method = Method.parse(call.method)

        if method is Method.IS_AVAILABLE:
            candidate = call.argument(EMOJI_ARGUMENT, str)
            return MethodResult.success(self._checker.is_available(candidate))

        if method is Method.CHECK_AVAILABILITY:
            batch = call.argument(EMOJI_ARGUMENT, Mapping)
            return MethodResult.success(self._checker.check_availability(batch))

        if method is Method.GET_PLATFORM_VERSION:
            return MethodResult.success(platform_version())

        return MethodResult.not_implemented()


def register_with(registry: Any) -> EmojiPickerPlugin:
    """One-shot registration: register a fresh instance and attach it."""
    plugin = EmojiPickerPlugin()
    registry.register(plugin)
    plugin.initialize(registry)
    return plugin


def create_plugin() -> EmojiPickerPlugin:
    """Factory used by the loader; attaching is left to the registry."""
    return EmojiPickerPlugin()
