"""
Crypto Icon API
===============
A small HTTP server for a static collection of cryptocurrency icons.

Features:
- Icon retrieval by symbol with png > svg > jpg > jpeg priority
- Live listing and substring search of the icons directory
- Generated manifest.json describing the whole collection
- Long-lived cache headers and open cross-origin access
"""

__version__ = "1.0.0"

from .models import IconFile, CollectionIndex
from .config import FORMAT_PRIORITY, IMAGE_EXTENSIONS
from .scanner import find_icon_files, search_icon_files, resolve_icon, content_type_for
from .manifest import build_index, write_index, update_manifest, read_manifest
from .user_config import ServerConfig, load_config
from .app import create_app

__all__ = [
    "IconFile",
    "CollectionIndex",
    "FORMAT_PRIORITY",
    "IMAGE_EXTENSIONS",
    "find_icon_files",
    "search_icon_files",
    "resolve_icon",
    "content_type_for",
    "build_index",
    "write_index",
    "update_manifest",
    "read_manifest",
    "ServerConfig",
    "load_config",
    "create_app",
]
