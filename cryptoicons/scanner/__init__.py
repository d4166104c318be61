"""
Scanner package for the Crypto Icon API.

Provides icon discovery and symbol resolution against the icons directory.

Public API:
- parse_icon_filename: Split a filename into symbol and format
- find_icon_files: List icon files in a directory
- search_icon_files: List icon files whose symbol contains a substring
- resolve_icon: Resolve a symbol to a file using format priority
- content_type_for: Content-Type for an icon format
"""

from __future__ import annotations

from .file_discovery import parse_icon_filename, find_icon_files, search_icon_files
from .resolver import content_type_for, candidate_filenames, resolve_icon

__all__ = [
    # File discovery
    'parse_icon_filename',
    'find_icon_files',
    'search_icon_files',
    # Resolution
    'content_type_for',
    'candidate_filenames',
    'resolve_icon',
]
