import importlib.util
import logging
from pathlib import Path
from typing import List, Optional

from . import config
from .plugin_interface import PluginInterface
from .registry import PluginRegistry

logger = logging.getLogger(__name__)

# Constants
PLUGIN_FILE_NAME = "plugin.py"
PLUGIN_DIR_NAME = "plugins"

def get_bundled_plugin_path() -> Path:
    """Directory holding the plugins shipped inside the package."""
    return Path(__file__).resolve().parent.parent / PLUGIN_DIR_NAME

def get_plugin_paths() -> List[Path]:
    """
    Return a list of directories to scan for plugins.
    Bundled plugins first, then EMOJI_PICKER_PLUGIN_PATH entries.
    """
    paths = []
    for candidate in [get_bundled_plugin_path()] + config.get_extra_plugin_paths():
        if candidate.exists() and candidate.is_dir():
            paths.append(candidate)
        else:
            logger.debug(f"Skipping plugin path (not a directory): {candidate}")

    logger.debug(f"Plugin scan paths: {[str(p) for p in paths]}")
    return paths

def load_plugins_from_path(plugin_dir: Path, registry_instance: Optional[PluginRegistry] = None) -> int:
    """
    Scan a specific directory for plugins and load them.
    Expects structure: plugin_dir/my_plugin/plugin.py
    Returns the number of plugins registered.
    """
    if not plugin_dir.exists():
        logger.warning(f"Plugin directory not found: {plugin_dir}")
        return 0

    logger.info(f"Scanning for plugins in: {plugin_dir}")

    count = 0
    for item in sorted(plugin_dir.iterdir()):
        plugin_path = item / PLUGIN_FILE_NAME
        if item.is_dir() and plugin_path.exists():
            if load_single_plugin(item.name, plugin_path, registry_instance) is not None:
                count += 1
    logger.info(f"Scanned {plugin_dir}, loaded {count} plugins.")
    return count

def load_single_plugin(name: str, path: Path, registry_instance: Optional[PluginRegistry] = None) -> Optional[PluginInterface]:
    """
    Loads a single plugin from a path and registers it.

    A plugin module exposes either `create_plugin()` (registered here,
    attached later by `initialize_all`) or the legacy `register_with(registry)`
    (registers and attaches in one step).
    Failures are logged and reported as None.
    """
    registry = registry_instance if registry_instance is not None else PluginRegistry()
    try:
        logger.info(f"Loading plugin '{name}' from {path}")

        # Unique module name per plugin directory to avoid clashes
        module_name = f"emoji_picker_plugin_{name}"
        spec = importlib.util.spec_from_file_location(module_name, str(path))
        if spec is None or spec.loader is None:
            logger.error(f"Cannot build import spec for plugin '{name}' at {path}")
            return None

        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        if hasattr(module, 'create_plugin'):
            plugin = module.create_plugin()
            registry.register(plugin)
        elif hasattr(module, 'register_with'):
            plugin = module.register_with(registry)
        else:
            logger.warning(f"Loader: {name} exposes neither create_plugin() nor register_with()")
            return None

        logger.info(f"Loader: Registered plugin '{name}' (channels: {plugin.get_channels()})")
        return plugin

    except Exception as e:
        logger.error(f"Failed to load plugin '{name}': {e}", exc_info=True)
        return None

def load_plugins(registry_instance: Optional[PluginRegistry] = None) -> int:
    """
    Main entry point to discover and load all available plugins.
    """
    total = 0
    for path in get_plugin_paths():
        total += load_plugins_from_path(path, registry_instance)
    return total
