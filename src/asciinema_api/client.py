"""
HTTP client for the asciinema server API.

Builds the request for each operation, sends it over a fresh
``aiohttp.ClientSession`` and hands the response to
:mod:`asciinema_api.responses`.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any, Dict, List, Optional

import aiohttp
from yarl import URL

from .auth import create_auth_headers
from .changeset import StreamChangeset
from .errors import TransportError
from .models import RecordingUploadResult, StreamHandle
from .recording import read_recording
from .responses import RawResponse, interpret_response
from .transport.contract import (
    CREATE_STREAM,
    LIST_USER_STREAMS,
    STREAM_LIST_LIMIT,
    UPDATE_STREAM,
    UPLOAD_RECORDING,
    OperationContract,
)
from .versions import build_user_agent

logger = logging.getLogger(__name__)

STREAM_TRANSPORT_MESSAGE = "cannot obtain stream producer endpoint - is the server down?"


def default_headers(install_id: str) -> Dict[str, str]:
    headers = {
        'User-Agent': build_user_agent(),
        'Accept': 'application/json',
    }
    headers.update(create_auth_headers(install_id))
    return headers


class ApiClient:
    """
    Client for one asciinema server, bound to a config collaborator.

    The config must provide ``get_server_url() -> URL`` and
    ``get_install_id() -> str``; anything they raise propagates unchanged.
    Each call opens its own session; nothing is shared between calls.
    """

    def __init__(self, config, *, timeout: Optional[aiohttp.ClientTimeout] = None):
        self.config = config
        self._timeout = timeout

    def _credentials(self):
        server_url = self.config.get_server_url()
        install_id = self.config.get_install_id()
        return server_url, install_id

    def _open_session(self, install_id: str) -> aiohttp.ClientSession:
        kwargs: Dict[str, Any] = {'headers': default_headers(install_id)}
        if self._timeout is not None:
            kwargs['timeout'] = self._timeout
        return aiohttp.ClientSession(**kwargs)

    async def _send(
        self,
        contract: OperationContract,
        url: URL,
        install_id: str,
        transport_message: str,
        **kwargs,
    ) -> RawResponse:
        """Dispatch one request and read its body."""
        logger.debug(f"{contract.http_method} {url}")
        try:
            async with self._open_session(install_id) as session:
                async with session.request(contract.http_method, url, **kwargs) as response:
                    body = await response.text(errors='replace')
                    raw = RawResponse(
                        status=response.status,
                        body=body,
                        url=response.url,
                        reason=response.reason,
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.warning(f"{contract.operation}: request to {url} failed: {exc}")
            raise TransportError(
                f"{transport_message}: {exc}" if str(exc) else transport_message,
                details={'operation': contract.operation, 'url': str(url)},
            ) from exc

        logger.debug(f"{contract.operation}: HTTP {raw.status} from {url}")
        return raw

    async def upload_recording(self, path) -> RecordingUploadResult:
        server_url, install_id = self._credentials()
        data = await read_recording(path)

        form = aiohttp.FormData()
        form.add_field(
            'file',
            data,
            filename=os.path.basename(os.fspath(path)),
            content_type='application/octet-stream',
        )

        url = server_url.with_path(UPLOAD_RECORDING.path())
        response = await self._send(
            UPLOAD_RECORDING,
            url,
            install_id,
            f"cannot upload recording to {server_url.host} - is the server down?",
            data=form,
        )
        return interpret_response(UPLOAD_RECORDING, response, server_url)

    async def list_user_streams(self, prefix: str) -> List[StreamHandle]:
        server_url, install_id = self._credentials()
        url = server_url.with_path(LIST_USER_STREAMS.path()).with_query(
            {'prefix': prefix, 'limit': STREAM_LIST_LIMIT}
        )
        response = await self._send(LIST_USER_STREAMS, url, install_id, STREAM_TRANSPORT_MESSAGE)
        return interpret_response(LIST_USER_STREAMS, response, server_url)

    async def create_stream(self, changeset: StreamChangeset) -> StreamHandle:
        server_url, install_id = self._credentials()
        url = server_url.with_path(CREATE_STREAM.path())
        return await self._send_changeset(CREATE_STREAM, server_url, url, install_id, changeset)

    async def update_stream(self, stream_id: int, changeset: StreamChangeset) -> StreamHandle:
        server_url, install_id = self._credentials()
        url = server_url.with_path(UPDATE_STREAM.path(stream_id=stream_id))
        return await self._send_changeset(UPDATE_STREAM, server_url, url, install_id, changeset)

    async def _send_changeset(
        self,
        contract: OperationContract,
        server_url: URL,
        url: URL,
        install_id: str,
        changeset: StreamChangeset,
    ) -> StreamHandle:
        response = await self._send(
            contract, url, install_id, STREAM_TRANSPORT_MESSAGE, json=changeset.to_dict()
        )
        return interpret_response(contract, response, server_url)


__all__ = ["ApiClient", "default_headers", "STREAM_TRANSPORT_MESSAGE"]
