"""Google Sheets v4 request construction.

Build fully-formed HTTP requests for the Sheets REST API without sending them.

Usage:
    from sheets_builder import RequestBuilder, value_range_body

    builder = RequestBuilder(api_key="my-key")

    # Read values
    request = builder.get_values("SPREADSHEET_ID", "Sheet1!A1:C10")

    # Append rows
    request = builder.append_values(
        "SPREADSHEET_ID",
        "Sheet1!A1",
        value_range_body([["Bob", 25]]),
        value_input_option="USER_ENTERED",
    )

Authentication:
    An access token (from any token provider) takes priority over an API key.
    Configure both from the environment with BuilderConfig.from_env().
"""

from __future__ import annotations

from sheets_builder.builder import RequestBuilder
from sheets_builder.config import BuilderConfig
from sheets_builder.exceptions import InvalidURL, SheetsBuilderError, TokenError
from sheets_builder.models import (
    DateTimeRenderOption,
    HTTPMethod,
    HTTPRequest,
    InsertDataOption,
    MajorDimension,
    ValueInputOption,
    ValueRenderOption,
    value_range_body,
)

__all__ = [
    "RequestBuilder",
    "BuilderConfig",
    "HTTPMethod",
    "HTTPRequest",
    "MajorDimension",
    "ValueRenderOption",
    "DateTimeRenderOption",
    "ValueInputOption",
    "InsertDataOption",
    "value_range_body",
    "SheetsBuilderError",
    "InvalidURL",
    "TokenError",
]
