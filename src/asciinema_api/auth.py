"""
Credentials and identity attached to requests.

Requests are authenticated with HTTP basic auth: the local OS user name as
login and the installation ID as password.
"""

from __future__ import annotations

import base64
import os
from typing import Dict, Tuple

from yarl import URL


def get_username() -> str:
    """Local OS user name, empty when it cannot be determined."""
    return os.environ.get('USER', '')


def basic_auth_pair(install_id: str) -> Tuple[str, str]:
    return get_username(), install_id


def create_auth_headers(install_id: str) -> Dict[str, str]:
    """
    Build the basic-auth ``Authorization`` header.

    The ``user:install_id`` pair is encoded as UTF-8 before base64, so any
    user name is accepted, including non-Latin ones and ones containing ``:``.
    """
    login, password = basic_auth_pair(install_id)
    token = base64.b64encode(f"{login}:{password}".encode('utf-8')).decode('ascii')
    return {'Authorization': f"Basic {token}"}


def authentication_url(config) -> URL:
    """URL of the interactive "connect this installation" page.

    Raises whatever the config raises when the server URL or install ID is
    unavailable.
    """
    server_url = config.get_server_url()
    return server_url.with_path(f"/connect/{config.get_install_id()}")


__all__ = ["get_username", "basic_auth_pair", "create_auth_headers", "authentication_url"]
