"""
Utilities package for the Crypto Icon API.

Provides:
- formatters: Timestamp and number formatting
- validators: Input validation and security checks
"""

from __future__ import annotations

# Import submodules for convenient access
from . import formatters
from . import validators

# Export commonly used functions
from .formatters import format_timestamp, format_number
from .validators import (
    validate_path_in_directory,
    validate_search_query,
    validate_port,
)

__all__ = [
    # Submodules
    'formatters',
    'validators',
    # Formatters
    'format_timestamp',
    'format_number',
    # Validators
    'validate_path_in_directory',
    'validate_search_query',
    'validate_port',
]
