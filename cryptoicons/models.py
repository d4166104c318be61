"""
Data models for the Crypto Icon API.

Contains dataclasses for icon files found on disk and the generated
collection manifest.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class IconFile:
    """
    An icon file discovered in the icons directory.

    Attributes:
        symbol: Filename without extension (case as given)
        format: Extension without the leading dot, original case
        path: Full path to the file, never exposed to clients
    """
    symbol: str
    format: str
    path: str = ""

    @property
    def url(self) -> str:
        """Relative URL the icon is served from."""
        return f"/icons/{self.symbol}"

    def uppercased(self) -> 'IconFile':
        """Return a copy whose symbol is the canonical uppercase form."""
        return IconFile(symbol=self.symbol.upper(), format=self.format, path=self.path)

    def to_dict(self) -> dict:
        """Convert to the listing representation."""
        return {
            'symbol': self.symbol,
            'format': self.format,
            'url': self.url,
        }

    def to_manifest_dict(self, base_url: str) -> dict:
        """Convert to the manifest representation, including the absolute URL."""
        data = self.to_dict()
        data['cdnUrl'] = f"{base_url}{self.url}"
        return data


@dataclass
class CollectionIndex:
    """
    Descriptive index of the whole icon collection (the manifest).

    Attributes:
        crypto: Distinct uppercase symbols, sorted ascending
        icons: One manifest descriptor per file
        formats: Supported icon formats
        last_updated: ISO-8601 build timestamp
    """
    name: str
    version: str
    description: str
    crypto: list[str] = field(default_factory=list)
    icons: list[dict] = field(default_factory=list)
    formats: list[str] = field(default_factory=list)
    last_updated: Optional[str] = None

    @property
    def total_icons(self) -> int:
        return len(self.crypto)

    def to_dict(self) -> dict:
        """Convert to the JSON document written to disk."""
        return {
            'name': self.name,
            'version': self.version,
            'description': self.description,
            'crypto': list(self.crypto),
            'icons': list(self.icons),
            'totalIcons': self.total_icons,
            'formats': list(self.formats),
            'lastUpdated': self.last_updated,
        }
