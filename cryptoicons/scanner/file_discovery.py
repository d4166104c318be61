"""
File discovery module for the scanner package.

Provides functionality to enumerate icon files in the icons directory and
derive a symbol and format from each filename.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from ..config import IMAGE_EXTENSIONS
from ..models import IconFile


def parse_icon_filename(filename: str) -> Optional[tuple[str, str]]:
    """
    Split an icon filename into its symbol and format.

    Args:
        filename: Bare filename, e.g. ``BTC.png``

    Returns:
        ``(symbol, format)`` with both parts in their original case, or
        None when the extension is not a recognised icon format

    Examples:
        >>> parse_icon_filename('eth.SVG')
        ('eth', 'SVG')
        >>> parse_icon_filename('notes.txt') is None
        True
    """
    symbol, ext = os.path.splitext(filename)
    if not symbol or ext.lower() not in IMAGE_EXTENSIONS:
        return None
    return symbol, ext[1:]


def find_icon_files(icons_dir: str | Path) -> list[IconFile]:
    """
    Find all icon files directly inside the given directory.

    Args:
        icons_dir: Directory to list (subdirectories are not scanned)

    Returns:
        IconFile entries sorted by filename, symbols in their original case

    Raises:
        FileNotFoundError: If the directory does not exist
        OSError: If the directory cannot be listed
    """
    root = Path(icons_dir)
    icons = []

    for filename in sorted(os.listdir(root)):
        parsed = parse_icon_filename(filename)
        if parsed is None:
            continue
        filepath = root / filename
        if not filepath.is_file():
            continue
        symbol, fmt = parsed
        icons.append(IconFile(symbol=symbol, format=fmt, path=str(filepath)))

    return icons


def search_icon_files(icons_dir: str | Path, query: str) -> list[IconFile]:
    """
    Find icon files whose symbol contains ``query``, ignoring case.

    Args:
        icons_dir: Directory to list
        query: Substring to look for

    Returns:
        Matching IconFile entries sorted by filename
    """
    needle = query.lower()
    return [icon for icon in find_icon_files(icons_dir) if needle in icon.symbol.lower()]


__all__ = ['parse_icon_filename', 'find_icon_files', 'search_icon_files']
