"""
Version and build identification for the asciinema API client.

Every outgoing request carries a User-Agent of the form
``asciinema/<version> target/<build target>``.

Usage:
    from asciinema_api.versions import build_user_agent

    headers = {'User-Agent': build_user_agent()}
"""

import os
import sysconfig

__version__ = "3.0.0"

PRODUCT_NAME = "asciinema"


def get_version() -> str:
    """Get the client version string."""
    return __version__


def get_build_target() -> str:
    """
    Get the platform tag this client runs on (e.g. ``linux-x86_64``).

    Environment Variables:
        ASCIINEMA_BUILD_TARGET: Override for packaged builds
    """
    env_override = os.getenv("ASCIINEMA_BUILD_TARGET")
    if env_override:
        return env_override

    return sysconfig.get_platform()


def build_user_agent() -> str:
    return f"{PRODUCT_NAME}/{get_version()} target/{get_build_target()}"


__all__ = ["__version__", "PRODUCT_NAME", "get_version", "get_build_target", "build_user_agent"]
