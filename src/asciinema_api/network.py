"""
Gate for deployments where network access is turned off.

When disabled, every gated operation raises :class:`NetworkDisabledError`
before it consults config, touches the filesystem or opens a connection.

Env options:
- ASCIINEMA_NETWORK_DISABLED=1
"""

from __future__ import annotations

import functools
import os
from typing import Optional

from .errors import NetworkDisabledError

DISABLED_MESSAGE = (
    "Network access disabled: functionality that contacts the open internet "
    "has been removed in this version of asciinema"
)

_override: Optional[bool] = None


def set_network_access(enabled: Optional[bool]) -> None:
    """Force network access on or off; ``None`` restores the env default."""
    global _override
    _override = enabled


def network_access_enabled() -> bool:
    if _override is not None:
        return _override
    return os.getenv('ASCIINEMA_NETWORK_DISABLED', '0').lower() not in ('1', 'true', 'yes', 'on')


def disabled() -> NetworkDisabledError:
    return NetworkDisabledError(DISABLED_MESSAGE)


def requires_network(func):
    """Short-circuit a coroutine function with :func:`disabled` when offline."""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        if not network_access_enabled():
            raise disabled()
        return await func(*args, **kwargs)

    return wrapper


__all__ = [
    "DISABLED_MESSAGE",
    "set_network_access",
    "network_access_enabled",
    "disabled",
    "requires_network",
]
