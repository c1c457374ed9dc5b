"""
Configuration for the asciinema API client.

Resolves the server URL and the installation identifier used as the
basic-auth password on every request.

Precedence for the server URL: explicit argument > environment > JSON config
file > default.

Usage:
    from asciinema_api.config import Config

    config = Config()
    config.get_server_url()   # URL('https://asciinema.org')
    config.get_install_id()   # persisted UUID string
"""

import json
import logging
import os
import uuid
from pathlib import Path
from typing import Any, Dict, Optional

from yarl import URL

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "https://asciinema.org"
CONFIG_FILE_NAME = "config.json"
INSTALL_ID_FILE_NAME = "install-id"

SERVER_URL_ENV_VARS = ("ASCIINEMA_SERVER_URL", "ASCIINEMA_API_URL")


def config_home() -> Path:
    """Directory holding the config file and the install id."""
    explicit = os.getenv("ASCIINEMA_CONFIG_HOME")
    if explicit:
        return Path(explicit).expanduser()

    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg).expanduser() / "asciinema"

    return Path.home() / ".config" / "asciinema"


class Config:
    """
    Config collaborator consumed by the API operations.

    Both getters raise :class:`ConfigurationError` when the value cannot be
    obtained.
    """

    DEFAULTS: Dict[str, Any] = {
        'server': {'url': DEFAULT_SERVER_URL},
    }

    def __init__(self, server_url: Optional[str] = None, home: Optional[Path] = None):
        self._server_url_override = server_url
        self._home = Path(home) if home is not None else config_home()
        self._config: Dict[str, Any] = {}
        self._load_configuration()

    @property
    def home(self) -> Path:
        return self._home

    @property
    def install_id_path(self) -> Path:
        return self._home / INSTALL_ID_FILE_NAME

    def _load_configuration(self):
        """Load configuration from all sources in priority order."""
        self._config = {key: dict(value) for key, value in self.DEFAULTS.items()}
        self._load_from_json_config()
        self._load_from_environment()

    def _load_from_json_config(self):
        config_path = self._home / CONFIG_FILE_NAME
        if not config_path.exists():
            logger.debug(f"No config file at {config_path}")
            return

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                json_config = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load JSON config from {config_path}: {e}")
            return

        if not isinstance(json_config, dict):
            logger.warning(f"Ignoring {config_path}: top level must be an object")
            return

        for section, values in json_config.items():
            # Keys starting with _ are comments
            if section.startswith('_') or not isinstance(values, dict):
                continue
            filtered = {k: v for k, v in values.items() if not k.startswith('_')}
            self._config.setdefault(section, {}).update(filtered)
        logger.debug(f"Loaded JSON config from {config_path}")

    def _load_from_environment(self):
        for env_key in SERVER_URL_ENV_VARS:
            env_value = os.getenv(env_key)
            if env_value:
                self._config['server']['url'] = env_value
                logger.debug(f"Server URL taken from {env_key}")
                return

    def get(self, section: str, key: str, default: Any = None) -> Any:
        return self._config.get(section, {}).get(key, default)

    def get_server_url(self) -> URL:
        raw = self._server_url_override or self.get('server', 'url') or DEFAULT_SERVER_URL
        try:
            url = URL(str(raw).strip())
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"invalid server URL: {raw}", details={'server_url': raw}) from exc

        if url.scheme not in ('http', 'https') or not url.host:
            raise ConfigurationError(
                f"invalid server URL: {raw} - expected an absolute http(s) URL",
                details={'server_url': raw},
            )
        return url

    def get_install_id(self) -> str:
        path = self.install_id_path
        try:
            install_id = path.read_text(encoding='utf-8').strip()
        except FileNotFoundError:
            return self._create_install_id()
        except OSError as exc:
            raise ConfigurationError(
                f"cannot read install ID from {path}: {exc}", details={'path': str(path)}
            ) from exc

        if not install_id:
            raise ConfigurationError(f"install ID file {path} is empty", details={'path': str(path)})
        return install_id

    def _create_install_id(self) -> str:
        path = self.install_id_path
        install_id = str(uuid.uuid4())
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(install_id, encoding='utf-8')
        except OSError as exc:
            raise ConfigurationError(
                f"cannot save install ID to {path}: {exc}", details={'path': str(path)}
            ) from exc

        logger.info(f"Generated new install ID at {path}")
        return install_id


__all__ = ["Config", "config_home", "DEFAULT_SERVER_URL"]
