"""
Input validation and security checks for the Crypto Icon API.

Provides validators for path containment, search queries and server
settings.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional


def validate_path_in_directory(filepath: str, base_directory: str) -> bool:
    """
    Validate that a file path is within the expected base directory.

    Keeps symlinks and odd symbols from resolving to files outside the
    icons directory.

    Args:
        filepath: Path to validate
        base_directory: Expected base directory

    Returns:
        True if path is within base_directory, False otherwise

    Examples:
        >>> validate_path_in_directory('/srv/icons/BTC.png', '/srv/icons')
        True
        >>> validate_path_in_directory('/etc/passwd', '/srv/icons')
        False
    """
    try:
        file_resolved = Path(filepath).resolve()
        base_resolved = Path(base_directory).resolve()
    except (OSError, RuntimeError):
        return False
    return str(file_resolved).startswith(str(base_resolved) + os.sep) or \
           str(file_resolved) == str(base_resolved)


def validate_search_query(query: Optional[str]) -> tuple[bool, str]:
    """
    Validate the ``q`` parameter of a search request.

    Returns:
        Tuple of (is_valid, error_message)

    Examples:
        >>> validate_search_query('btc')
        (True, '')
        >>> validate_search_query('')
        (False, 'Query parameter "q" is required')
    """
    if not query:
        return False, 'Query parameter "q" is required'
    return True, ""


def validate_port(port) -> tuple[bool, str]:
    """
    Validate a TCP port number.

    Examples:
        >>> validate_port(3002)
        (True, '')
        >>> validate_port(70000)
        (False, 'Port must be between 1 and 65535')
    """
    try:
        port = int(port)
    except (ValueError, TypeError):
        return False, "Port must be an integer"
    if not 1 <= port <= 65535:
        return False, "Port must be between 1 and 65535"
    return True, ""


__all__ = [
    'validate_path_in_directory',
    'validate_search_query',
    'validate_port',
]
