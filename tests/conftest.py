"""
Pytest configuration and shared fixtures for test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
from PIL import Image


SVG_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="32" height="32">'
    '<circle cx="16" cy="16" r="15" fill="#627eea"/></svg>'
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def icons_dir(temp_dir):
    """Empty icons directory."""
    path = temp_dir / "icons"
    path.mkdir()
    return path


@pytest.fixture
def sample_icons(icons_dir):
    """
    Create a set of sample icons for testing.

    Returns:
        dict with paths to:
        - BTC.png (orange square)
        - eth.png, eth.svg (same symbol in two formats, lowercase name)
        - DOGE.jpg
        - SHIB.jpeg
        - README.txt (not an icon)
        - nested/ (subdirectory, never scanned)
    """
    icons = {}

    path = icons_dir / "BTC.png"
    Image.new('RGB', (32, 32), color='orange').save(path, 'PNG')
    icons['btc_png'] = path

    path = icons_dir / "eth.png"
    Image.new('RGB', (32, 32), color='blue').save(path, 'PNG')
    icons['eth_png'] = path

    path = icons_dir / "eth.svg"
    path.write_text(SVG_ICON, encoding='utf-8')
    icons['eth_svg'] = path

    path = icons_dir / "DOGE.jpg"
    Image.new('RGB', (32, 32), color='yellow').save(path, 'JPEG')
    icons['doge_jpg'] = path

    path = icons_dir / "SHIB.jpeg"
    Image.new('RGB', (32, 32), color='red').save(path, 'JPEG')
    icons['shib_jpeg'] = path

    path = icons_dir / "README.txt"
    path.write_text("not an icon")
    icons['readme'] = path

    nested = icons_dir / "nested"
    nested.mkdir()
    Image.new('RGB', (8, 8), color='green').save(nested / "SOL.png", 'PNG')
    icons['nested'] = nested

    return icons


@pytest.fixture
def server_config(temp_dir, icons_dir):
    """ServerConfig pointing at the temporary icons directory."""
    from cryptoicons.user_config import ServerConfig

    return ServerConfig(
        config_file=str(temp_dir / "missing-config.json"),
        overrides={
            'icons_dir': str(icons_dir),
            'manifest_file': str(temp_dir / "manifest.json"),
            'base_url': 'https://icons.example.com',
        },
        environ={},
    )


@pytest.fixture
def app(server_config):
    """Flask app wired to the temporary icons directory."""
    from cryptoicons.app import create_app

    app = create_app(server_config)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
