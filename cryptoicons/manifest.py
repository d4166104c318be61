"""
Manifest generation for the Crypto Icon API.

The manifest (CollectionIndex) is rebuilt from scratch by scanning the
icons directory and is written to disk as formatted JSON. It is never
updated incrementally: any change to the directory needs a full rebuild.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Optional

from .config import (
    FORMAT_PRIORITY,
    MANIFEST_NAME,
    MANIFEST_VERSION,
    MANIFEST_DESCRIPTION,
)
from .models import CollectionIndex
from .scanner import find_icon_files
from .utils.formatters import format_timestamp, format_number

logger = logging.getLogger(__name__)

# Serializes lazy rebuilds triggered by concurrent requests
_rebuild_lock = threading.Lock()


def build_index(icons_dir: str | Path, base_url: str) -> CollectionIndex:
    """
    Build the collection index for a directory.

    Args:
        icons_dir: Directory holding the icon files
        base_url: Prefix for each icon's absolute ``cdnUrl``

    Returns:
        CollectionIndex with one ``icons`` entry per file and one ``crypto``
        entry per distinct uppercase symbol

    Raises:
        FileNotFoundError: If the directory does not exist
    """
    icons = [icon.uppercased() for icon in find_icon_files(icons_dir)]

    return CollectionIndex(
        name=MANIFEST_NAME,
        version=MANIFEST_VERSION,
        description=MANIFEST_DESCRIPTION,
        crypto=sorted({icon.symbol for icon in icons}),
        icons=[icon.to_manifest_dict(base_url) for icon in icons],
        formats=list(FORMAT_PRIORITY),
        last_updated=format_timestamp(),
    )


def write_index(index: CollectionIndex, manifest_path: str | Path) -> None:
    """
    Serialize the index and replace ``manifest_path``.

    The JSON is written to a temporary file beside the manifest and moved
    into place, so a failed write leaves the previous manifest intact.
    Non-ASCII characters (including undecodable filename bytes) are escaped.
    """
    manifest_path = Path(manifest_path)
    fd, tmp_path = tempfile.mkstemp(
        prefix=f'.{manifest_path.name}.', suffix='.tmp', dir=manifest_path.parent
    )
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            json.dump(index.to_dict(), f, indent=2)
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, manifest_path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def update_manifest(
    icons_dir: str | Path,
    manifest_path: str | Path,
    base_url: str,
) -> Optional[CollectionIndex]:
    """
    Rebuild the manifest and persist it.

    Never raises: a missing icons directory leaves any existing manifest
    untouched, and scan or write failures are logged with the previous
    manifest (if any) left in place.

    Returns:
        The new index, or None if nothing was written
    """
    if not os.path.isdir(icons_dir):
        logger.warning(f"Icons directory not found, manifest not updated: {icons_dir}")
        return None

    try:
        index = build_index(icons_dir, base_url)
        write_index(index, manifest_path)
    except (OSError, ValueError) as e:
        logger.error(f"Error updating manifest: {e}")
        return None

    logger.info(f"Manifest updated: {format_number(index.total_icons)} icons")
    return index


def ensure_manifest(icons_dir: str | Path, manifest_path: str | Path, base_url: str) -> None:
    """Build the manifest if it does not exist yet, at most once at a time."""
    if os.path.exists(manifest_path):
        return
    with _rebuild_lock:
        if not os.path.exists(manifest_path):
            update_manifest(icons_dir, manifest_path, base_url)


def read_manifest(manifest_path: str | Path) -> dict:
    """
    Load the persisted manifest.

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not valid JSON
    """
    with open(manifest_path, 'r', encoding='utf-8') as f:
        return json.load(f)


__all__ = ['build_index', 'write_index', 'update_manifest', 'ensure_manifest', 'read_manifest']
