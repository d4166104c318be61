"""
Symbol resolution for the scanner package.

Maps a requested symbol to the single icon file that should be served,
trying each supported format in priority order.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from ..config import FORMAT_PRIORITY, CONTENT_TYPE_OVERRIDES
from ..models import IconFile
from ..utils.validators import validate_path_in_directory

logger = logging.getLogger(__name__)


def content_type_for(fmt: str) -> str:
    """
    Return the Content-Type for an icon format.

    Examples:
        >>> content_type_for('svg')
        'image/svg+xml'
        >>> content_type_for('PNG')
        'image/png'
    """
    fmt = fmt.lower()
    return CONTENT_TYPE_OVERRIDES.get(fmt, f'image/{fmt}')


def candidate_filenames(symbol: str) -> list[str]:
    """Filenames tried for ``symbol``, highest priority first."""
    return [f'{symbol}.{fmt}' for fmt in FORMAT_PRIORITY]


def resolve_icon(icons_dir: str | Path, symbol: str) -> Optional[IconFile]:
    """
    Resolve a requested symbol to an icon file on disk.

    The symbol is uppercased, then ``SYMBOL.png``, ``SYMBOL.svg``,
    ``SYMBOL.jpg`` and ``SYMBOL.jpeg`` are tried in that order. A candidate
    matches a file of exactly that name or, failing that, a file whose name
    differs only in case. The first match is returned.

    Args:
        icons_dir: Directory holding the icons
        symbol: Symbol as requested by the client (any case)

    Returns:
        The resolved IconFile, or None if no format exists for the symbol
        (or the icons directory is missing)

    Raises:
        OSError: On unexpected errors while listing the directory
    """
    root = Path(icons_dir)
    symbol = symbol.upper()

    try:
        entries = os.listdir(root)
    except FileNotFoundError:
        logger.debug(f"Icons directory missing while resolving {symbol}: {root}")
        return None

    variants: dict[str, list[str]] = {}
    for name in sorted(entries):
        variants.setdefault(name.lower(), []).append(name)

    for fmt, candidate in zip(FORMAT_PRIORITY, candidate_filenames(symbol)):
        # Exact name first, then the other case variants
        names = variants.get(candidate.lower(), [])
        if candidate in names:
            names = [candidate] + [name for name in names if name != candidate]

        for filename in names:
            filepath = root / filename
            if not filepath.is_file():
                continue
            if not validate_path_in_directory(str(filepath), str(root)):
                logger.warning(f"Refusing to serve icon outside icons directory: {filepath}")
                continue

            return IconFile(symbol=symbol, format=fmt, path=str(filepath))

    return None


__all__ = ['content_type_for', 'candidate_filenames', 'resolve_icon']
