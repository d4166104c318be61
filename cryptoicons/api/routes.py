"""
Flask routes for the Crypto Icon API.

Contains all public endpoints. Every route is read-only; filesystem
failures are logged and reported to the client as a generic 500.
"""

from __future__ import annotations

import logging
import time

from flask import Blueprint, current_app, jsonify, request, send_file

from ..config import API_NAME, API_VERSION, FORMAT_PRIORITY, ICON_CACHE_CONTROL
from ..manifest import ensure_manifest, read_manifest
from ..scanner import find_icon_files, search_icon_files, resolve_icon, content_type_for
from ..user_config import ServerConfig
from ..utils import validators
from ..utils.formatters import format_timestamp

# Create blueprint for routes
api = Blueprint('api', __name__)

# Module logger
_logger = logging.getLogger(__name__)


def _settings() -> ServerConfig:
    return current_app.config['SERVER_CONFIG']


def _internal_error():
    return jsonify({'error': 'Internal server error'}), 500


def _directory_missing():
    return jsonify({'error': 'Icons directory not found'}), 404


# =============================================================================
# Cross-origin policy and error handlers
# =============================================================================

@api.after_app_request
def add_cors_headers(response):
    """Allow GET requests from any origin."""
    response.headers.setdefault('Access-Control-Allow-Origin', '*')
    response.headers.setdefault('Access-Control-Allow-Methods', 'GET')
    response.headers.setdefault('Access-Control-Allow-Headers', 'Content-Type')
    return response


@api.app_errorhandler(404)
@api.app_errorhandler(405)
def endpoint_not_found(error):
    """Unknown routes and non-GET methods look the same to clients."""
    return jsonify({'error': 'Endpoint not found'}), 404


@api.app_errorhandler(500)
def internal_error(error):
    return _internal_error()


# =============================================================================
# Route Handlers
# =============================================================================

@api.route('/')
def index():
    """Describe the available endpoints."""
    base_url = _settings().base_url
    return jsonify({
        'name': API_NAME,
        'version': API_VERSION,
        'endpoints': {
            'manifest': '/manifest.json',
            'icon': '/icons/:symbol',
            'list': '/icons',
            'search': '/search?q=btc',
            'health': '/health',
        },
        'usage': {
            'cdn': f'{base_url}/icons/BTC',
            'jsdelivr': 'https://cdn.jsdelivr.net/gh/YOUR_USERNAME/crypto-icons/icons/BTC.png',
            'example': '/icons/BTC',
            'formats': list(FORMAT_PRIORITY),
        },
        'github': {
            'note': 'After deploying to GitHub, you can use jsdelivr CDN:',
            'example': 'https://cdn.jsdelivr.net/gh/YOUR_USERNAME/crypto-icons/icons/BTC.png',
        },
    })


@api.route('/health')
def health():
    """Liveness check with process uptime in seconds."""
    started_at = current_app.config['STARTED_AT']
    return jsonify({
        'status': 'ok',
        'timestamp': format_timestamp(),
        'uptime': time.monotonic() - started_at,
    })


@api.route('/manifest.json')
def manifest():
    """Serve the persisted manifest, building it first if it is missing."""
    settings = _settings()
    try:
        ensure_manifest(settings.icons_dir, settings.manifest_file, settings.base_url)
        return jsonify(read_manifest(settings.manifest_file))
    except (OSError, ValueError):
        _logger.exception("Error reading manifest")
        return _internal_error()


@api.route('/icons')
def list_icons():
    """List every icon file currently in the icons directory."""
    icons_dir = _settings().icons_dir
    if not icons_dir.is_dir():
        return _directory_missing()

    try:
        icons = [icon.to_dict() for icon in find_icon_files(icons_dir)]
    except OSError:
        _logger.exception("Error listing icons")
        return _internal_error()

    return jsonify({
        'total': len(icons),
        'icons': icons,
    })


@api.route('/icons/<symbol>')
def get_icon(symbol: str):
    """Serve the highest-priority file for a symbol."""
    symbol = symbol.upper()

    try:
        icon = resolve_icon(_settings().icons_dir, symbol)
        if icon is None:
            return jsonify({
                'error': 'Icon not found',
                'symbol': symbol,
                'searched_formats': list(FORMAT_PRIORITY),
            }), 404

        response = send_file(icon.path, mimetype=content_type_for(icon.format))
    except OSError:
        _logger.exception(f"Error serving icon {symbol}")
        return _internal_error()

    response.headers['Cache-Control'] = ICON_CACHE_CONTROL
    response.headers['Access-Control-Allow-Origin'] = '*'
    return response


@api.route('/search')
def search():
    """Find icons whose symbol contains ``q``, ignoring case."""
    query = request.args.get('q', '').lower()

    is_valid, error = validators.validate_search_query(query)
    if not is_valid:
        return jsonify({'error': error}), 400

    icons_dir = _settings().icons_dir
    if not icons_dir.is_dir():
        return _directory_missing()

    try:
        icons = [icon.to_dict() for icon in search_icon_files(icons_dir, query)]
    except OSError:
        _logger.exception("Error searching icons")
        return _internal_error()

    return jsonify({
        'query': query,
        'total': len(icons),
        'icons': icons,
    })
