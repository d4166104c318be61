"""
Server configuration for the Crypto Icon API.

Supports configuration from multiple sources (in order of priority):
1. Runtime overrides, e.g. command line flags (highest priority)
2. Environment variables (a ``.env`` file in the working directory is loaded)
3. User config file (~/.cryptoicons/config.json)
4. Default values from config.py (lowest priority)

Config file location: ~/.cryptoicons/config.json, or the path in
CRYPTOICONS_CONFIG_FILE.

Example config.json:
{
    "port": 3002,
    "host": "0.0.0.0",
    "base_url": "https://icons.example.com",
    "icons_dir": "/srv/crypto-icons/icons",
    "manifest_file": "/srv/crypto-icons/manifest.json"
}
"""

import json
import os
from pathlib import Path
from typing import Any, Optional
import logging

from dotenv import load_dotenv, find_dotenv

from .config import (
    CONFIG_FILE,
    DEFAULT_PORT,
    DEFAULT_HOST,
    DEFAULT_BASE_URL,
    DEFAULT_ICONS_DIR,
    DEFAULT_MANIFEST_FILE,
)
from .utils.validators import validate_port

logger = logging.getLogger(__name__)


class ServerConfig:
    """
    Resolved server settings.

    Instances are passed explicitly to the app factory and the manifest
    builder. The config file is read lazily and cached.
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        overrides: Optional[dict] = None,
        environ: Optional[dict] = None,
    ):
        self._config_file = config_file
        self._overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        self._environ = os.environ if environ is None else environ
        self._config_data: Optional[dict] = None

    @property
    def config_file_path(self) -> Path:
        """Get the configuration file path."""
        if self._config_file:
            return Path(self._config_file)
        env_file = self._environ.get('CRYPTOICONS_CONFIG_FILE')
        if env_file:
            return Path(env_file)
        return Path(CONFIG_FILE)

    def _load_config_file(self) -> dict:
        """Load configuration from JSON file."""
        if not self.config_file_path.exists():
            return {}

        try:
            with open(self.config_file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load config file {self.config_file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {self.config_file_path}: not a JSON object")
            return {}
        logger.debug(f"Loaded configuration from {self.config_file_path}")
        return data

    def _get_config_data(self) -> dict:
        """Get cached config data (lazy loading)."""
        if self._config_data is None:
            self._config_data = self._load_config_file()
        return self._config_data

    def get(self, key: str, default: Any = None, env_var: Optional[str] = None) -> Any:
        """
        Get a configuration value with priority:
        1. Runtime override
        2. Environment variable (if env_var specified)
        3. Config file
        4. Default value

        Empty environment variables count as unset.
        """
        if key in self._overrides:
            return self._overrides[key]

        if env_var:
            env_value = self._environ.get(env_var)
            if env_value:
                return env_value

        config_data = self._get_config_data()
        if config_data.get(key) is not None:
            return config_data[key]

        return default

    @property
    def port(self) -> int:
        """Port the HTTP server listens on."""
        value = self.get('port', default=DEFAULT_PORT, env_var='PORT')
        is_valid, error = validate_port(value)
        if not is_valid:
            raise ValueError(f"Invalid port {value!r}: {error}")
        return int(value)

    @property
    def host(self) -> str:
        """Interface the HTTP server binds to."""
        return str(self.get('host', default=DEFAULT_HOST, env_var='HOST'))

    @property
    def base_url(self) -> str:
        """Prefix for absolute icon URLs in the manifest."""
        return str(self.get('base_url', default=DEFAULT_BASE_URL, env_var='BASE_URL'))

    @property
    def icons_dir(self) -> Path:
        """Directory holding the icon files."""
        return Path(self.get('icons_dir', default=DEFAULT_ICONS_DIR, env_var='ICONS_DIR')).absolute()

    @property
    def manifest_file(self) -> Path:
        """Location of the generated manifest."""
        return Path(self.get('manifest_file', default=DEFAULT_MANIFEST_FILE, env_var='MANIFEST_FILE')).absolute()

    def as_dict(self) -> dict:
        """Effective settings, for display."""
        return {
            'port': self.port,
            'host': self.host,
            'base_url': self.base_url,
            'icons_dir': str(self.icons_dir),
            'manifest_file': str(self.manifest_file),
        }

    def create_example_config(self) -> bool:
        """Create an example configuration file."""
        example_config = {
            "_comment": "Crypto Icon API configuration",
            "port": DEFAULT_PORT,
            "host": DEFAULT_HOST,
            "base_url": DEFAULT_BASE_URL,
            "icons_dir": None,
            "manifest_file": None,
        }

        try:
            self.config_file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file_path, 'w', encoding='utf-8') as f:
                json.dump(example_config, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to create example config: {e}")
            return False

        logger.info(f"Created example config file at {self.config_file_path}")
        return True


def load_config(overrides: Optional[dict] = None, config_file: Optional[str] = None) -> ServerConfig:
    """
    Load a ``.env`` file from the working directory (if any) and build the
    server configuration. Variables already set in the environment win.
    """
    env_path = find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(env_path, override=False)
        logger.debug(f"Loaded environment from {env_path}")
    return ServerConfig(config_file=config_file, overrides=overrides)
