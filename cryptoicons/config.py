"""
Configuration constants for the Crypto Icon API.

This module contains all fixed settings including:
- Supported icon formats and their resolution priority
- Manifest metadata
- Default server settings
"""

import os

# Formats tried, in order, when resolving a symbol to a file.
# The first existing file wins.
FORMAT_PRIORITY = ['png', 'svg', 'jpg', 'jpeg']

# Recognised icon extensions (matched case-insensitively)
IMAGE_EXTENSIONS = {f'.{fmt}' for fmt in FORMAT_PRIORITY}

# Content types that don't follow the image/<format> pattern
CONTENT_TYPE_OVERRIDES = {
    'svg': 'image/svg+xml',
}

# Icons never change once published under a symbol
ICON_CACHE_CONTROL = 'public, max-age=31536000, immutable'

# Manifest metadata
MANIFEST_NAME = 'binance-icons-collection'
MANIFEST_VERSION = '1.0.0'
MANIFEST_DESCRIPTION = 'Cryptocurrency icons from Binance'

API_NAME = 'Crypto Icon API'
API_VERSION = '1.0.0'

# Server defaults
DEFAULT_PORT = 3002
DEFAULT_HOST = '0.0.0.0'
DEFAULT_BASE_URL = 'http://localhost:3002'

# Filesystem defaults (relative to the working directory)
DEFAULT_ICONS_DIR = 'icons'
DEFAULT_MANIFEST_FILE = 'manifest.json'

# User config file location
CONFIG_DIR = os.path.join(os.path.expanduser('~'), '.cryptoicons')
CONFIG_FILE = os.path.join(CONFIG_DIR, 'config.json')
