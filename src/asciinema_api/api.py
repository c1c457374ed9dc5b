"""
Public operations against an asciinema server.

Each coroutine takes the config collaborator as its last argument and either
returns the decoded payload or raises an error from
:mod:`asciinema_api.errors`. All four network operations are gated by
:func:`asciinema_api.network.requires_network`.

Usage:
    from asciinema_api import api
    from asciinema_api.config import Config

    result = await api.upload_recording('demo.cast', Config())
    print(result.display_text)
"""

from __future__ import annotations

from typing import List

from yarl import URL

from .auth import authentication_url
from .changeset import StreamChangeset
from .client import ApiClient
from .models import RecordingUploadResult, StreamHandle
from .network import requires_network


def get_auth_url(config) -> URL:
    return authentication_url(config)


@requires_network
async def upload_recording(path, config) -> RecordingUploadResult:
    return await ApiClient(config).upload_recording(path)


@requires_network
async def list_user_streams(prefix: str, config) -> List[StreamHandle]:
    return await ApiClient(config).list_user_streams(prefix)


@requires_network
async def create_stream(changeset: StreamChangeset, config) -> StreamHandle:
    return await ApiClient(config).create_stream(changeset)


@requires_network
async def update_stream(stream_id: int, changeset: StreamChangeset, config) -> StreamHandle:
    return await ApiClient(config).update_stream(stream_id, changeset)


__all__ = ["get_auth_url", "upload_recording", "list_user_streams", "create_stream", "update_stream"]
