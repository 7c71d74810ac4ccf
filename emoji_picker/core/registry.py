import logging
from typing import Dict, Optional, List
from .plugin_interface import PluginInterface
from .channel import MethodChannel
from .errors import ChannelError

logger = logging.getLogger(__name__)

class PluginRegistry:
    """
    Singleton Registry for managing emoji_picker plugins and their channels.
    Handles registration, retrieval, and attach/detach lifecycle events.
    """
    _instance = None
    _plugins: Dict[str, PluginInterface] = {}
    _channels: Dict[str, MethodChannel] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(PluginRegistry, cls).__new__(cls)
            cls._instance._plugins = {}
            cls._instance._channels = {}
        return cls._instance

    def register(self, plugin: PluginInterface) -> None:
        """
        Register a new plugin instance.
        Validates the interface and metadata.
        """
        if not isinstance(plugin, PluginInterface):
            raise TypeError("Plugin must inherit from PluginInterface")

        meta = plugin.get_meta()
        name = meta.get('name')

        if not name:
            raise ValueError("Plugin metadata must include 'name'")

        previous = self._plugins.get(name)
        if previous is plugin:
            return
        if previous is not None:
            logger.warning(f"Plugin '{name}' is already registered. Detaching it before overwriting.")
            self._shutdown_plugin(name, previous)

        self._plugins[name] = plugin
        logger.info(f"Registered plugin: {name} v{meta.get('version', '0.0.0')}")

    def get_plugin(self, name: str) -> Optional[PluginInterface]:
        """Retrieve a specific plugin by name."""
        return self._plugins.get(name)

    def get_all_plugins(self) -> List[PluginInterface]:
        """Return a list of all registered plugins."""
        return list(self._plugins.values())

    def open_channel(self, name: str) -> MethodChannel:
        """
        Create the named channel.
        A channel has one owner; opening it twice is an error.
        """
        if name in self._channels:
            raise ChannelError(f"Channel '{name}' is already open")
        channel = MethodChannel(name)
        self._channels[name] = channel
        logger.debug(f"Opened channel: {name}")
        return channel

    def get_channel(self, name: str) -> Optional[MethodChannel]:
        return self._channels.get(name)

    def close_channel(self, name: str) -> None:
        channel = self._channels.pop(name, None)
        if channel is not None:
            channel.set_method_call_handler(None)
            logger.debug(f"Closed channel: {name}")

    def get_channel_names(self) -> List[str]:
        return sorted(self._channels)

    def initialize_all(self) -> None:
        """
        Attach all registered plugins.
        """
        for name, plugin in self._plugins.items():
            try:
                plugin.initialize(self)
                logger.info(f"Initialized plugin: {name}")
            except Exception as e:
                logger.error(f"Failed to initialize plugin '{name}': {e}", exc_info=True)

    def shutdown_all(self) -> None:
        """
        Detach all plugins in reverse order of registration.
        """
        for name, plugin in reversed(list(self._plugins.items())):
            self._shutdown_plugin(name, plugin)

    def _shutdown_plugin(self, name: str, plugin: PluginInterface) -> None:
        try:
            plugin.shutdown()
        except Exception as e:
            logger.error(f"Error shutting down plugin '{name}': {e}")
