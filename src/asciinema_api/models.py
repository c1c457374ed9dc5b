"""Response payload models for the asciinema server API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ApiModel(BaseModel):
    """Base model: unknown keys sent by newer servers are ignored."""

    model_config = ConfigDict(extra='ignore', populate_by_name=True, frozen=True)


class RecordingUploadResult(ApiModel):
    url: str
    message: Optional[str] = None

    @property
    def display_text(self) -> str:
        """Text shown to the user after an upload."""
        return self.message if self.message is not None else self.url


class StreamHandle(ApiModel):
    id: int = Field(ge=0)
    producer_endpoint: str = Field(alias='ws_producer_url')
    view_url: str = Field(alias='url')


class ErrorPayload(ApiModel):
    message: str


STREAM_LIST = TypeAdapter(List[StreamHandle])

__all__ = ["ApiModel", "RecordingUploadResult", "StreamHandle", "ErrorPayload", "STREAM_LIST"]
