from abc import ABC, abstractmethod
from typing import Dict, Any, List

class PluginInterface(ABC):
    """
    Abstract Base Class for all emoji_picker plugins.
    Enforces a strict contract for attach, detach, and metadata.
    """

    @abstractmethod
    def get_meta(self) -> Dict[str, Any]:
        """
        Return metadata about the plugin.
        Required keys: 'name', 'version', 'description', 'author'.
        """
        pass

    @abstractmethod
    def initialize(self, registry: Any) -> None:
        """
        Attach the plugin: open its channels and bind handlers.
        :param registry: Reference to the PluginRegistry singleton.
        """
        pass

    @abstractmethod
    def shutdown(self) -> None:
        """
        Detach the plugin: unbind handlers and release held references.
        """
        pass

    def get_channels(self) -> List[str]:
        """
        Return the names of the channels this plugin serves.
        Default implementation returns empty list.
        """
        return []
