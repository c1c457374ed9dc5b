"""Route definitions for asciinema server API operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class OperationContract:
    operation: str
    http_method: str
    http_route: str
    response_kind: str

    def path(self, **params) -> str:
        return "/" + self.http_route.format(**params)


UPLOAD_RECORDING = OperationContract("upload_recording", "POST", "api/v1/recordings", "recording")
LIST_USER_STREAMS = OperationContract("list_user_streams", "GET", "api/v1/user/streams", "stream_list")
CREATE_STREAM = OperationContract("create_stream", "POST", "api/v1/streams", "stream")
UPDATE_STREAM = OperationContract("update_stream", "PATCH", "api/v1/streams/{stream_id}", "stream")

OPERATION_CONTRACTS: List[OperationContract] = [
    UPLOAD_RECORDING,
    LIST_USER_STREAMS,
    CREATE_STREAM,
    UPDATE_STREAM,
]

STREAM_LIST_LIMIT = 10

__all__ = [
    "OperationContract",
    "UPLOAD_RECORDING",
    "LIST_USER_STREAMS",
    "CREATE_STREAM",
    "UPDATE_STREAM",
    "OPERATION_CONTRACTS",
    "STREAM_LIST_LIMIT",
]
