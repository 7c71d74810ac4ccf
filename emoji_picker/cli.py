#!/usr/bin/env python
"""
Command-line interface for emoji_picker
"""

import argparse
import atexit
import logging
import sys

from emoji_picker.core import config
from emoji_picker.version_info import __version__, __build_timestamp__, __build_type__

def print_version():
    """Print version information."""
    print(f"emoji_picker v{__version__}")
    print(f"Build: {__build_timestamp__}")
    print(f"Build Type: {__build_type__}")


def check_emojis(args):
    """Report glyph availability for each emoji given on the command line."""
    from emoji_picker.core.loader import load_plugins
    from emoji_picker.core.registry import PluginRegistry

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, stream=sys.stderr)

    registry = PluginRegistry()
    load_plugins(registry)
    registry.initialize_all()
    try:
        channel = registry.get_channel(config.CHANNEL_NAME)
        if channel is None:
            print(f"Channel '{config.CHANNEL_NAME}' is not available", file=sys.stderr)
            return 1

        for emoji in args.emoji:
            result = channel.invoke('isAvailable', {'emoji': emoji})
            status = 'available' if result.ok and result.value else 'missing'
            print(f"{emoji}\t{status}")
        return 0
    finally:
        registry.shutdown_all()


def start_server(args):
    """Start the Flask server."""
    from emoji_picker.core.logging_config import setup_logging
    from emoji_picker.core.registry import PluginRegistry
    from emoji_picker.app import create_app

    debug = args.debug or config.is_debug()
    setup_logging(config.get_log_dir(), debug)

    registry = PluginRegistry()
    app = create_app(registry)
    atexit.register(registry.shutdown_all)

    print(f"Starting emoji_picker v{__version__}")
    print(f"Server: http://{args.host}:{args.port}")
    print(f"Channels: {', '.join(registry.get_channel_names()) or '(none)'}")
    print("Press Ctrl+C to stop")
    print()

    app.run(host=args.host, port=args.port, debug=debug, use_reloader=False)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='emoji-picker',
        description=f'emoji_picker v{__version__}',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  emoji-picker --version              Show version information
  emoji-picker check 😀 🫠            Check which emoji the fonts can render
  emoji-picker start                  Start server on 127.0.0.1:8000
  emoji-picker start --port 8080      Start server on port 8080
        """
    )

    parser.add_argument(
        '--version', '-v',
        action='store_true',
        help='Show version information'
    )
    parser.add_argument(
        '--debug', '-d',
        action='store_true',
        help='Enable debug logging'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    check_parser = subparsers.add_parser('check', help='Check glyph availability of emoji')
    check_parser.add_argument('emoji', nargs='+', help='Emoji (or any text) to check')

    start_parser = subparsers.add_parser('start', help='Start the channel server')
    start_parser.add_argument(
        '--host',
        type=str,
        default='127.0.0.1',
        help='Host to bind to (default: 127.0.0.1)'
    )
    start_parser.add_argument(
        '--port', '-p',
        type=int,
        default=8000,
        help='Port to bind to (default: 8000)'
    )

    args = parser.parse_args(argv)

    if args.version:
        print_version()
        return 0

    if args.command == 'check':
        return check_emojis(args)

    if args.command == 'start':
        try:
            start_server(args)
            return 0
        except KeyboardInterrupt:
            print("\nServer stopped.")
            return 0
        except Exception as e:
            logging.getLogger(__name__).error(f"Error starting server: {e}", exc_info=True)
            print(f"Error starting server: {e}", file=sys.stderr)
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
