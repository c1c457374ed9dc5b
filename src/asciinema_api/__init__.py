"""Client library for the asciinema recording and streaming server API."""

from . import (
    api,
    auth,
    changeset,
    client,
    config,
    errors,
    logging,
    models,
    network,
    recording,
    responses,
    transport,
    versions,
)
from .api import create_stream, get_auth_url, list_user_streams, update_stream, upload_recording
from .changeset import NULL, UNSET, StreamChangeset, Value
from .config import Config
from .errors import (
    ApplicationError,
    AsciinemaApiError,
    ConfigurationError,
    DecodeError,
    HttpStatusError,
    NetworkDisabledError,
    RecordingFileError,
    TransportError,
)
from .models import RecordingUploadResult, StreamHandle
from .versions import __version__

__all__ = [
    "api",
    "auth",
    "changeset",
    "client",
    "config",
    "errors",
    "logging",
    "models",
    "network",
    "recording",
    "responses",
    "transport",
    "versions",
    "upload_recording",
    "list_user_streams",
    "create_stream",
    "update_stream",
    "get_auth_url",
    "StreamChangeset",
    "UNSET",
    "NULL",
    "Value",
    "Config",
    "RecordingUploadResult",
    "StreamHandle",
    "AsciinemaApiError",
    "ConfigurationError",
    "RecordingFileError",
    "TransportError",
    "ApplicationError",
    "HttpStatusError",
    "DecodeError",
    "NetworkDisabledError",
    "__version__",
]
