"""Error taxonomy for asciinema server API calls."""

from __future__ import annotations

from typing import Any, Dict, Optional


class AsciinemaApiError(Exception):
    """Base exception for API client failures."""

    code = "ASCIINEMA_API_ERROR"

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(AsciinemaApiError):
    code = "CONFIGURATION_ERROR"


class RecordingFileError(AsciinemaApiError):
    code = "RECORDING_FILE_ERROR"


class TransportError(AsciinemaApiError):
    """The server could not be reached at all."""

    code = "TRANSPORT_ERROR"


class ApplicationError(AsciinemaApiError):
    """The server understood the request but rejected it."""

    code = "APPLICATION_ERROR"

    def __init__(self, message: str, *, status: int, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)
        self.status = status


class HttpStatusError(ApplicationError):
    code = "HTTP_STATUS_ERROR"


class DecodeError(AsciinemaApiError):
    """A successful response carried a body of unexpected shape."""

    code = "DECODE_ERROR"


class NetworkDisabledError(AsciinemaApiError):
    code = "NETWORK_DISABLED"


__all__ = [
    "AsciinemaApiError",
    "ConfigurationError",
    "RecordingFileError",
    "TransportError",
    "ApplicationError",
    "HttpStatusError",
    "DecodeError",
    "NetworkDisabledError",
]
