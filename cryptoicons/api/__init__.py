"""
API package for the Crypto Icon API.

Provides the Flask routes serving icons, listings, search and the manifest.
"""

from __future__ import annotations

from .routes import api

__all__ = ['api']
