"""Transport contracts for asciinema server operations."""

from .contract import (
    OperationContract,
    UPLOAD_RECORDING,
    LIST_USER_STREAMS,
    CREATE_STREAM,
    UPDATE_STREAM,
    OPERATION_CONTRACTS,
    STREAM_LIST_LIMIT,
)

__all__ = [
    "OperationContract",
    "UPLOAD_RECORDING",
    "LIST_USER_STREAMS",
    "CREATE_STREAM",
    "UPDATE_STREAM",
    "OPERATION_CONTRACTS",
    "STREAM_LIST_LIMIT",
]
