"""Request value types and Sheets API option enums."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

import httpx


class HTTPMethod(str, Enum):
    """HTTP methods used by the Sheets v4 REST API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class MajorDimension(str, Enum):
    """Orientation of a two-dimensional value grid."""

    ROWS = "ROWS"
    COLUMNS = "COLUMNS"


class ValueRenderOption(str, Enum):
    """How cell values are rendered in a response."""

    FORMATTED_VALUE = "FORMATTED_VALUE"
    UNFORMATTED_VALUE = "UNFORMATTED_VALUE"
    FORMULA = "FORMULA"


class DateTimeRenderOption(str, Enum):
    """How dates, times and durations are rendered in a response."""

    SERIAL_NUMBER = "SERIAL_NUMBER"
    FORMATTED_STRING = "FORMATTED_STRING"


class ValueInputOption(str, Enum):
    """How input values are interpreted when written."""

    RAW = "RAW"
    USER_ENTERED = "USER_ENTERED"


class InsertDataOption(str, Enum):
    """How existing data is changed when appending."""

    OVERWRITE = "OVERWRITE"
    INSERT_ROWS = "INSERT_ROWS"


@dataclass(frozen=True)
class HTTPRequest:
    """A fully-formed, unsent HTTP request.

    Headers are copied into a read-only mapping on construction, so a built
    request cannot be changed and can be hashed.
    """

    method: HTTPMethod
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def __hash__(self) -> int:
        return hash((self.method, self.url, tuple(sorted(self.headers.items())), self.body))

    def to_httpx(self) -> httpx.Request:
        """Build the equivalent httpx request without sending it."""
        return httpx.Request(
            self.method.value,
            self.url,
            headers=dict(self.headers),
            content=self.body,
        )

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable view of the request."""
        return {
            "method": self.method.value,
            "url": self.url,
            "headers": dict(self.headers),
            "body": self.body.decode("utf-8") if self.body is not None else None,
        }


def value_range_body(
    values: list[list[Any]],
    range_notation: str | None = None,
    major_dimension: MajorDimension | str | None = None,
) -> bytes:
    """Encode a ValueRange object for update and append requests.

    Args:
        values: 2D list of cell values.
        range_notation: A1 notation the values cover (optional).
        major_dimension: Orientation of ``values`` (optional). Plain strings
            are sent unchanged.

    Returns:
        UTF-8 encoded JSON body.
    """
    payload: dict[str, Any] = {}
    if range_notation is not None:
        payload["range"] = range_notation
    if major_dimension is not None:
        if isinstance(major_dimension, Enum):
            major_dimension = major_dimension.value
        payload["majorDimension"] = major_dimension
    payload["values"] = values
    return json.dumps(payload).encode("utf-8")
