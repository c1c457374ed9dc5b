"""Interpretation of raw server responses.

Each response is classified once, by status code, into a decoded success
payload or one of the errors from :mod:`asciinema_api.errors`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError
from yarl import URL

from .errors import ApplicationError, DecodeError, HttpStatusError
from .models import STREAM_LIST, ErrorPayload, RecordingUploadResult, StreamHandle

logger = logging.getLogger(__name__)

RECORDING_TOO_LARGE_MESSAGE = "The recording exceeds the server-configured size limit"

_STREAM_HANDLE = TypeAdapter(StreamHandle)
_RECORDING_RESULT = TypeAdapter(RecordingUploadResult)


@dataclass(frozen=True)
class RawResponse:
    status: int
    body: str
    url: URL
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def try_decode_error(body: str) -> Optional[str]:
    """Message of a structured error body, or ``None`` when there is none."""
    try:
        return ErrorPayload.model_validate_json(body).message
    except ValidationError:
        return None


def not_authenticated_message(host: str) -> str:
    return f"this CLI hasn't been authenticated with {host} - run `asciinema auth` first"


def streaming_unsupported_message(host: str) -> str:
    return f"{host} doesn't support streaming"


def raise_for_status(response: RawResponse) -> None:
    if response.ok:
        return
    reason = f" {response.reason}" if response.reason else ""
    raise HttpStatusError(
        f"HTTP status {response.status}{reason} for url ({response.url})",
        status=response.status,
        details={'url': str(response.url)},
    )


def decode_success(response: RawResponse, adapter: TypeAdapter) -> Any:
    try:
        return adapter.validate_json(response.body)
    except ValidationError as exc:
        logger.debug(f"Malformed success body from {response.url}: {exc}")
        raise DecodeError(
            f"error decoding response body from {response.url}: {exc.error_count()} validation error(s)",
            details={'url': str(response.url), 'status': response.status},
        ) from exc


def interpret_recording_response(response: RawResponse) -> RecordingUploadResult:
    if response.status == 413:
        message = try_decode_error(response.body)
        raise ApplicationError(
            message if message is not None else RECORDING_TOO_LARGE_MESSAGE,
            status=413,
        )

    raise_for_status(response)
    return decode_success(response, _RECORDING_RESULT)


def _interpret_stream_status(response: RawResponse, server_url: URL) -> None:
    host = server_url.host

    if response.status == 401:
        raise ApplicationError(not_authenticated_message(host), status=401, details={'host': host})

    if response.status in (404, 422):
        message = try_decode_error(response.body)
        raise ApplicationError(
            message if message is not None else streaming_unsupported_message(host),
            status=response.status,
            details={'host': host},
        )

    raise_for_status(response)


def interpret_stream_response(response: RawResponse, server_url: URL) -> StreamHandle:
    _interpret_stream_status(response, server_url)
    return decode_success(response, _STREAM_HANDLE)


def interpret_stream_list_response(response: RawResponse, server_url: URL) -> list:
    _interpret_stream_status(response, server_url)
    return decode_success(response, STREAM_LIST)


_INTERPRETERS = {
    'recording': lambda response, server_url: interpret_recording_response(response),
    'stream': interpret_stream_response,
    'stream_list': interpret_stream_list_response,
}


def interpret_response(contract, response: RawResponse, server_url: URL) -> Any:
    """Classify ``response`` with the interpreter named by ``contract.response_kind``."""
    try:
        interpreter = _INTERPRETERS[contract.response_kind]
    except KeyError:
        raise ValueError(f"unknown response kind {contract.response_kind!r} for {contract.operation}") from None
    return interpreter(response, server_url)


__all__ = [
    "RECORDING_TOO_LARGE_MESSAGE",
    "RawResponse",
    "try_decode_error",
    "not_authenticated_message",
    "streaming_unsupported_message",
    "raise_for_status",
    "decode_success",
    "interpret_recording_response",
    "interpret_stream_response",
    "interpret_stream_list_response",
    "interpret_response",
]
