"""Local asciicast recording access."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import aiofiles

from .errors import RecordingFileError

SUPPORTED_VERSIONS = (1, 2, 3)


@dataclass(frozen=True)
class RecordingInfo:
    path: Path
    version: int


def _header_version(candidate: str):
    try:
        header = json.loads(candidate)
    except ValueError:
        return None
    if isinstance(header, dict):
        return header.get('version')
    return None


def open_from_path(path) -> RecordingInfo:
    """Check that ``path`` holds an asciicast recording.

    v2 and v3 files start with a JSON header line, v1 files are a single
    JSON document.
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            first_line = f.readline()
            version = _header_version(first_line)
            if version is None:
                version = _header_version(first_line + f.read())
    except (OSError, UnicodeDecodeError) as exc:
        raise RecordingFileError(f"cannot open {path}: {exc}", details={'path': str(path)}) from exc

    if version not in SUPPORTED_VERSIONS:
        raise RecordingFileError(
            f"{path} is not in asciicast v1, v2 or v3 format", details={'path': str(path)}
        )
    return RecordingInfo(path=path, version=version)


async def read_recording(path) -> bytes:
    """Read the raw bytes of a recording for upload."""
    try:
        async with aiofiles.open(path, 'rb') as f:
            return await f.read()
    except OSError as exc:
        raise RecordingFileError(f"cannot read {path}: {exc}", details={'path': str(path)}) from exc


__all__ = ["RecordingInfo", "SUPPORTED_VERSIONS", "open_from_path", "read_recording"]
