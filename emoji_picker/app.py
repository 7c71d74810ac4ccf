"""
emoji_picker host service
A Flask application that carries method-channel calls to the loaded plugins
as JSON over HTTP.
"""

import logging
from typing import Optional

from flask import Flask, jsonify, request

from emoji_picker.core.loader import load_plugins
from emoji_picker.core.registry import PluginRegistry
from emoji_picker.core.channel import MethodResult
from emoji_picker.version_info import __version__ as VERSION

logger = logging.getLogger(__name__)

# HTTP status per non-success result kind
STATUS_FOR_RESULT = {
    MethodResult.ERROR: 400,
    MethodResult.NOT_IMPLEMENTED: 501,
}


def create_app(registry: Optional[PluginRegistry] = None, load_bundled: bool = True) -> Flask:
    """
    Build the Flask app around a plugin registry.
    With `load_bundled`, plugins are discovered and attached first.
    """
    registry = registry if registry is not None else PluginRegistry()

    if load_bundled:
        logger.info("Initializing Plugin System...")
        try:
            load_plugins(registry)
            registry.initialize_all()
        except Exception as e:
            logger.error(f"Plugin system initialization failed: {e}", exc_info=True)
        logger.info(f"Registry initialized. Plugins: {len(registry.get_all_plugins())}, channels: {registry.get_channel_names()}")

    app = Flask(__name__)
    app.json.ensure_ascii = False
    app.extensions['emoji_picker.registry'] = registry

    @app.route('/api/version')
    def get_version():
        return jsonify({'version': VERSION})

    @app.route('/api/plugins')
    def get_plugins():
        """Return metadata and channels of every registered plugin."""
        plugins = []
        for plugin in registry.get_all_plugins():
            meta = dict(plugin.get_meta())
            meta['channels'] = plugin.get_channels()
            plugins.append(meta)
        return jsonify(plugins)

    @app.route('/api/channels/<channel_name>', methods=['POST'])
    def invoke_channel(channel_name):
        """
        Dispatch {"method": ..., "arguments": {...}} to the named channel.
        """
        channel = registry.get_channel(channel_name)
        if channel is None:
            return jsonify({'error': 'unknown_channel', 'channel': channel_name}), 404

        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({'error': 'bad_request', 'message': 'Body must be a JSON object'}), 400

        method = data.get('method')
        if not isinstance(method, str) or not method:
            return jsonify({'error': 'bad_request', 'message': "Missing 'method'"}), 400

        arguments = data.get('arguments')
        logger.debug(f"Channel '{channel_name}': invoking '{method}'")
        result = channel.invoke(method, arguments)

        if result.ok:
            return jsonify({'result': result.value})
        if result.status == MethodResult.NOT_IMPLEMENTED:
            return jsonify({'error': 'not_implemented', 'method': method}), STATUS_FOR_RESULT[result.status]
        return jsonify({'error': result.code, 'message': result.message}), STATUS_FOR_RESULT[result.status]

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'not_found', 'message': str(error)}), 404

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"500 Error: {error}", exc_info=True)
        return jsonify({'error': 'internal_error', 'message': str(error)}), 500

    return app
