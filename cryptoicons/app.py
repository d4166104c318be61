#!/usr/bin/env python3
"""
Crypto Icon API - Server Application
====================================
Serves a directory of cryptocurrency icons over HTTP.

Run with: python -m cryptoicons
Or: cryptoicons

Options:
    -q, --quiet     Quiet mode - suppress all output except errors
    -v, --verbose   Verbose mode - show all Flask request logs
    -p, --port      Port to run on (default: $PORT or 3002)
    --host          Interface to bind (default: $HOST or 0.0.0.0)
    --icons-dir     Directory holding the icons (default: ./icons)
"""

import argparse
import logging
import time
from typing import Optional

from flask import Flask

from .api import api
from .manifest import update_manifest
from .user_config import ServerConfig, load_config


# Logging levels
LOG_QUIET = 0    # No output except errors
LOG_MINIMAL = 1  # Startup info only (default)
LOG_VERBOSE = 2  # All Flask request logs

logger = logging.getLogger(__name__)

# Process start, for /health uptime
PROCESS_STARTED_AT = time.monotonic()


def create_app(settings: Optional[ServerConfig] = None, log_level: int = LOG_MINIMAL) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        settings: Server configuration (default: loaded from the environment)
        log_level: Logging verbosity level

    Returns:
        Configured Flask app instance
    """
    if settings is None:
        settings = load_config()

    app = Flask(__name__)
    app.config['SERVER_CONFIG'] = settings
    app.config['STARTED_AT'] = PROCESS_STARTED_AT
    app.json.sort_keys = False

    # Configure logging based on level
    if log_level < LOG_VERBOSE:
        # Suppress Flask's default request logging
        log = logging.getLogger('werkzeug')
        log.setLevel(logging.ERROR if log_level == LOG_QUIET else logging.WARNING)

    # Register routes
    app.register_blueprint(api)

    return app


def configure_logging(log_level: int):
    """Route package log records to stderr at the chosen verbosity."""
    if log_level == LOG_QUIET:
        level = logging.ERROR
    elif log_level == LOG_VERBOSE:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')


def suppress_flask_banner():
    """Suppress Flask's development server banner and startup messages."""
    try:
        import flask.cli
        flask.cli.show_server_banner = lambda *args, **kwargs: None
    except (ImportError, AttributeError):
        pass

    # Suppress werkzeug's startup log messages
    logging.getLogger('werkzeug').setLevel(logging.ERROR)


def print_banner(settings: ServerConfig):
    """Print the URLs of the main endpoints."""
    url = f'http://localhost:{settings.port}'
    print()
    print(f"  Crypto Icon API is running on {url}")
    print(f"  API Documentation: {url}")
    print(f"  Health Check:      {url}/health")
    print(f"  Icons List:        {url}/icons")
    print(f"  Icon Example:      {url}/icons/BTC")
    print(f"  Manifest:          {url}/manifest.json")
    print()
    print("  Press Ctrl+C to stop")
    print()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the server command."""
    parser = argparse.ArgumentParser(
        description='Crypto Icon API - serve cryptocurrency icons over HTTP',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Quiet mode - suppress all output except errors'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose mode - show all Flask request logs'
    )
    parser.add_argument(
        '-p', '--port',
        type=int,
        default=None,
        help='Port to run the server on (default: $PORT or 3002)'
    )
    parser.add_argument(
        '--host',
        default=None,
        help='Interface to bind (default: $HOST or 0.0.0.0)'
    )
    parser.add_argument(
        '--icons-dir',
        default=None,
        help='Directory holding the icon files (default: $ICONS_DIR or ./icons)'
    )
    return parser


def main(argv: Optional[list] = None):
    """Main entry point for the server."""
    args = create_parser().parse_args(argv)

    # Determine log level
    if args.quiet:
        log_level = LOG_QUIET
    elif args.verbose:
        log_level = LOG_VERBOSE
    else:
        log_level = LOG_MINIMAL
    configure_logging(log_level)

    settings = load_config(overrides={
        'port': args.port,
        'host': args.host,
        'icons_dir': args.icons_dir,
    })

    # Rebuild the manifest once at startup
    update_manifest(settings.icons_dir, settings.manifest_file, settings.base_url)

    if log_level >= LOG_MINIMAL:
        print_banner(settings)

    # Suppress Flask banner for non-verbose modes
    if log_level < LOG_VERBOSE:
        suppress_flask_banner()

    app = create_app(settings, log_level)

    try:
        app.run(
            host=settings.host,
            port=settings.port,
            debug=False,
            threaded=True,
            use_reloader=False
        )
    except KeyboardInterrupt:
        if log_level >= LOG_MINIMAL:
            print("\n  Server stopped\n")


if __name__ == '__main__':
    main()
