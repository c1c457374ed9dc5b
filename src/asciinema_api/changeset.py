"""Partial-update documents for live streams.

Every field of a :class:`StreamChangeset` is in exactly one of three states:

- ``UNSET``: not part of the update, the key is left out of the body;
- ``NULL``: clear the field on the server, encoded as JSON ``null``;
- ``Value(x)``: set the field to ``x``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Generic, Mapping, TypeVar, Union

T = TypeVar("T")


class Unset:
    """Marker for a field that is not part of the update."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


class Null:
    """Marker for a field that must be cleared on the server."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NULL"


UNSET = Unset()
NULL = Null()


@dataclass(frozen=True)
class Value(Generic[T]):
    value: T


Patch = Union[Unset, Null, Value[T]]


def patch_of(value: Any) -> Patch:
    """Wrap an optional value, mapping ``None`` to an explicit ``NULL``."""
    if isinstance(value, (Unset, Null, Value)):
        return value
    if value is None:
        return NULL
    return Value(value)


@dataclass(frozen=True)
class StreamChangeset:
    live: Patch[bool] = UNSET
    title: Patch[str] = UNSET
    term_type: Patch[str] = UNSET
    term_version: Patch[str] = UNSET
    shell: Patch[str] = UNSET
    env: Patch[Mapping[str, str]] = UNSET

    def to_dict(self) -> Dict[str, Any]:
        """Encode to the JSON body sent on create/update."""
        body: Dict[str, Any] = {}
        for field in fields(self):
            state = getattr(self, field.name)
            if isinstance(state, Unset):
                continue
            if isinstance(state, Null):
                body[field.name] = None
            elif isinstance(state, Value):
                value = state.value
                body[field.name] = dict(value) if isinstance(value, Mapping) else value
            else:
                raise TypeError(
                    f"{field.name} must be UNSET, NULL or Value(...), got {type(state).__name__}"
                )
        return body

    def is_empty(self) -> bool:
        return not self.to_dict()


__all__ = ["UNSET", "NULL", "Unset", "Null", "Value", "Patch", "patch_of", "StreamChangeset"]
