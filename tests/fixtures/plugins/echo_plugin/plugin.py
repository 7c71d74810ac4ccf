from emoji_picker.core.channel import MethodResult
from emoji_picker.core.plugin_interface import PluginInterface
import logging

logger = logging.getLogger(__name__)

class EchoPlugin(PluginInterface):
    def __init__(self):
        self.channel = None
        self.registry = None

    def get_meta(self):
        return {
            'name': 'echo_plugin',
            'version': '0.1.0',
            'description': 'Echoes its arguments back, for verifying the plugin loader',
            'author': 'Developer'
        }

    def get_channels(self):
        return ['echo']

    def initialize(self, registry):
        logger.info("EchoPlugin: attaching...")
        self.channel = registry.open_channel('echo')
        self.registry = registry
        self.channel.set_method_call_handler(self.on_method_call)

    def shutdown(self):
        logger.info("EchoPlugin: detaching...")
        self.channel.set_method_call_handler(None)
        self.registry.close_channel('echo')
        self.channel = None
        self.registry = None

    def on_method_call(self, call):
        if call.method == 'echo':
            return MethodResult.success(call.argument('value'))
        return MethodResult.not_implemented()

# Legacy entry point: register and attach in one step
def register_with(registry):
    plugin = EchoPlugin()
    registry.register(plugin)
    plugin.initialize(registry)
    return plugin
