"""Pytest fixtures: an in-process fake asciinema server and config doubles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer
from yarl import URL

from asciinema_api import network

INSTALL_ID = "f7d1c3a0-4b9e-4f6e-9a43-0e2f3c1d5b6a"


@dataclass
class CapturedRequest:
    method: str
    path: str
    query: Dict[str, str]
    headers: Dict[str, str]
    body: str = ""
    files: Dict[str, Tuple[Optional[str], bytes]] = field(default_factory=dict)

    def json(self) -> Any:
        return json.loads(self.body)


class FakeServer:
    """Records every request and answers with a configured response."""

    def __init__(self) -> None:
        self.requests: List[CapturedRequest] = []
        self.status = 200
        self.body = ""
        self.content_type = "application/json"
        app = web.Application()
        app.router.add_route("*", "/{tail:.*}", self._handle)
        self._server = TestServer(app)

    def reply(self, status: int = 200, body: str = "", content_type: str = "application/json") -> None:
        self.status = status
        self.body = body
        self.content_type = content_type

    def reply_json(self, payload: Any, status: int = 200) -> None:
        self.reply(status, json.dumps(payload))

    @property
    def url(self) -> URL:
        return URL(f"http://{self._server.host}:{self._server.port}")

    @property
    def last_request(self) -> CapturedRequest:
        assert self.requests, "no request reached the fake server"
        return self.requests[-1]

    async def start(self) -> None:
        await self._server.start_server()

    async def close(self) -> None:
        await self._server.close()

    async def _handle(self, request: web.Request) -> web.Response:
        captured = CapturedRequest(
            method=request.method,
            path=request.path,
            query=dict(request.query),
            headers=dict(request.headers),
        )
        if request.content_type == "multipart/form-data":
            form = await request.post()
            for name, value in form.items():
                if isinstance(value, web.FileField):
                    captured.files[name] = (value.filename, value.file.read())
        else:
            captured.body = await request.text()
        self.requests.append(captured)
        return web.Response(status=self.status, text=self.body, content_type=self.content_type)


class StaticConfig:
    """Config double returning fixed values."""

    def __init__(self, server_url, install_id: str = INSTALL_ID) -> None:
        self.server_url = URL(str(server_url))
        self.install_id = install_id

    def get_server_url(self) -> URL:
        return self.server_url

    def get_install_id(self) -> str:
        return self.install_id


@pytest_asyncio.fixture
async def fake_server():
    server = FakeServer()
    await server.start()
    try:
        yield server
    finally:
        await server.close()


@pytest.fixture
def config(fake_server):
    return StaticConfig(fake_server.url)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch, tmp_path):
    for name in (
        "ASCIINEMA_SERVER_URL",
        "ASCIINEMA_API_URL",
        "ASCIINEMA_NETWORK_DISABLED",
        "ASCIINEMA_BUILD_TARGET",
        "XDG_CONFIG_HOME",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("ASCIINEMA_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("USER", "alice")
    network.set_network_access(None)
    yield
    network.set_network_access(None)


@pytest.fixture
def recording_file(tmp_path):
    path = tmp_path / "demo.cast"
    path.write_text(
        '{"version": 2, "width": 80, "height": 24}\n'
        '[0.5, "o", "hello"]\n',
        encoding="utf-8",
    )
    return path
