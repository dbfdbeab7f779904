"""Google Sheets v4 request builder.

Turns spreadsheet operations into unsent HTTP requests. Nothing here touches
the network; hand the result to an HTTP client (see ``HTTPRequest.to_httpx``).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import httpx

from sheets_builder import query as options
from sheets_builder.auth import access_token_from
from sheets_builder.config import DEFAULT_BASE_URL, BuilderConfig
from sheets_builder.exceptions import InvalidURL
from sheets_builder.models import (
    DateTimeRenderOption,
    HTTPMethod,
    HTTPRequest,
    InsertDataOption,
    MajorDimension,
    ValueInputOption,
    ValueRenderOption,
)
from sheets_builder.query import Query, collect_query, query_items

if TYPE_CHECKING:
    from google.auth.credentials import Credentials

logger = logging.getLogger(__name__)


def _require_body(body: bytes | None, operation: str) -> None:
    if body is None:
        raise ValueError(f"{operation} requires a request body")


class RequestBuilder:
    """Builds requests for the Google Sheets v4 REST API.

    The configuration is fixed at construction. If an access token is set it
    is sent as a Bearer header and the API key is not used; otherwise a
    configured API key is sent as the ``key`` query parameter.

    Usage:
        builder = RequestBuilder(api_key="my-key")

        # Read values
        request = builder.get_values("SPREADSHEET_ID", "Sheet1!A1:C10")

        # Write values
        body = value_range_body([["Name", "Age"], ["Alice", 30]])
        request = builder.update_values(
            "SPREADSHEET_ID", "Sheet1!A1", body, value_input_option="USER_ENTERED"
        )

        # Send with any HTTP client
        httpx.Client().send(request.to_httpx())
    """

    API_VERSION = "v4"
    RESOURCE = "spreadsheets"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str | None = None,
        access_token: str | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            base_url: Scheme and host of the API.
            api_key: API key, used only when no access token is given.
            access_token: OAuth access token from a token provider.
        """
        self._config = BuilderConfig(
            base_url=base_url,
            api_key=api_key,
            access_token=access_token,
        )
        if api_key and access_token is not None:
            logger.warning("Both API key and access token configured; API key will not be sent")

    @classmethod
    def from_config(cls, config: BuilderConfig) -> RequestBuilder:
        """Create a builder from a BuilderConfig."""
        return cls(
            base_url=config.base_url,
            api_key=config.api_key,
            access_token=config.access_token,
        )

    @classmethod
    def from_credentials(
        cls,
        credentials: Credentials,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str | None = None,
    ) -> RequestBuilder:
        """Create a builder authenticated with google-auth credentials.

        The current token is read once; refresh the credentials and create a
        new builder when it expires.

        Raises:
            TokenError: If the credentials hold no valid token.
        """
        return cls(
            base_url=base_url,
            api_key=api_key,
            access_token=access_token_from(credentials),
        )

    @property
    def config(self) -> BuilderConfig:
        """The builder's configuration."""
        return self._config

    # =========================================================================
    # Core builders
    # =========================================================================

    def _parse_base_url(self) -> httpx.URL:
        base_url = self._config.base_url
        try:
            url = httpx.URL(base_url)
        except httpx.InvalidURL as e:
            raise InvalidURL(base_url, str(e)) from e

        if not url.scheme or not url.host:
            raise InvalidURL(base_url, "base URL must include a scheme and host")
        return url

    def build_spreadsheet_request(
        self,
        method: HTTPMethod | str,
        spreadsheet_id: str | None = None,
        endpoint: str = "",
        query: Query | None = None,
        body: bytes | None = None,
    ) -> HTTPRequest:
        """Build a request under ``/v4/spreadsheets``.

        Args:
            method: HTTP method.
            spreadsheet_id: Spreadsheet ID; omitted from the path when None.
            endpoint: Path below the spreadsheet (e.g., "values/A1:B2").
            query: Query parameters. List values become repeated keys.
            body: JSON request body.

        Returns:
            The assembled request.

        Raises:
            InvalidURL: If the base URL cannot be parsed or the assembled
                URL is not valid.
        """
        method = HTTPMethod(method)
        base = self._parse_base_url()

        segments = [self.API_VERSION, self.RESOURCE]
        if spreadsheet_id:
            segments.append(spreadsheet_id)
        endpoint = endpoint.strip("/")
        if endpoint:
            segments.append(endpoint)
        # httpx keeps "%" as an existing escape; a literal "%" must go out as %25
        path = "/" + "/".join(segment.replace("%", "%25") for segment in segments)

        params: list[tuple[str, str]] = []
        if self._config.api_key and not self._config.uses_token:
            params.append(("key", self._config.api_key))
        params.extend(query_items(query))

        try:
            url = base.copy_with(path=path, params=params)
        except httpx.InvalidURL as e:
            raise InvalidURL(f"{self._config.base_url}{path}", str(e)) from e

        headers: dict[str, str] = {}
        if self._config.uses_token:
            headers["Authorization"] = f"Bearer {self._config.access_token}"
        if body is not None:
            headers["Content-Type"] = "application/json"

        logger.debug(f"Built {method.value} {url.path} query={[key for key, _ in params]}")
        return HTTPRequest(method=method, url=str(url), headers=headers, body=body)

    def build_values_request(
        self,
        method: HTTPMethod | str,
        spreadsheet_id: str,
        range_notation: str | None = None,
        endpoint: str = "values",
        query: Query | None = None,
        body: bytes | None = None,
    ) -> HTTPRequest:
        """Build a request for a values endpoint.

        The range is appended to the endpoint as-is; percent-encoding is left
        to the URL layer.
        """
        if range_notation is not None:
            endpoint = f"{endpoint}/{range_notation}"

        return self.build_spreadsheet_request(
            method,
            spreadsheet_id=spreadsheet_id,
            endpoint=endpoint,
            query=query,
            body=body,
        )

    def build_batch_request(
        self,
        method: HTTPMethod | str,
        spreadsheet_id: str,
        endpoint: str,
        query: Query | None = None,
        body: bytes | None = None,
    ) -> HTTPRequest:
        """Build a request for a batch endpoint (e.g., "values:batchGet")."""
        return self.build_spreadsheet_request(
            method,
            spreadsheet_id=spreadsheet_id,
            endpoint=endpoint,
            query=query,
            body=body,
        )

    # =========================================================================
    # Spreadsheets
    # =========================================================================

    def get_spreadsheet(
        self,
        spreadsheet_id: str,
        ranges: Sequence[str] | None = None,
        include_grid_data: bool = False,
        fields: str | None = None,
    ) -> HTTPRequest:
        """Create a GET request for spreadsheet metadata.

        Args:
            spreadsheet_id: Spreadsheet ID.
            ranges: Ranges to restrict grid data to.
            include_grid_data: Include cell data for the ranges.
            fields: Field mask for the response.
        """
        query = collect_query(
            options.GET_SPREADSHEET,
            ranges=ranges,
            include_grid_data=include_grid_data,
            fields=fields,
        )
        return self.build_spreadsheet_request(
            HTTPMethod.GET,
            spreadsheet_id=spreadsheet_id,
            endpoint="",
            query=query,
        )

    def create_spreadsheet(self, body: bytes) -> HTTPRequest:
        """Create a POST request that creates a spreadsheet.

        Args:
            body: JSON Spreadsheet resource.
        """
        _require_body(body, "create_spreadsheet")
        return self.build_spreadsheet_request(HTTPMethod.POST, body=body)

    # =========================================================================
    # Values
    # =========================================================================

    def get_values(
        self,
        spreadsheet_id: str,
        range_notation: str,
        major_dimension: MajorDimension | str | None = None,
        value_render_option: ValueRenderOption | str | None = None,
        date_time_render_option: DateTimeRenderOption | str | None = None,
    ) -> HTTPRequest:
        """Create a GET request for reading values.

        Args:
            spreadsheet_id: Spreadsheet ID.
            range_notation: A1 notation (e.g., "Sheet1!A1:C10").
            major_dimension: "ROWS" or "COLUMNS".
            value_render_option: How values are rendered.
            date_time_render_option: How dates are rendered.
        """
        query = collect_query(
            options.GET_VALUES,
            major_dimension=major_dimension,
            value_render_option=value_render_option,
            date_time_render_option=date_time_render_option,
        )
        return self.build_values_request(
            HTTPMethod.GET,
            spreadsheet_id,
            range_notation=range_notation,
            query=query,
        )

    def update_values(
        self,
        spreadsheet_id: str,
        range_notation: str,
        body: bytes,
        value_input_option: ValueInputOption | str | None = None,
        include_values_in_response: bool = False,
        response_value_render_option: ValueRenderOption | str | None = None,
        response_date_time_render_option: DateTimeRenderOption | str | None = None,
    ) -> HTTPRequest:
        """Create a PUT request for updating values.

        Args:
            spreadsheet_id: Spreadsheet ID.
            range_notation: A1 notation (e.g., "Sheet1!A1").
            body: JSON ValueRange (see ``value_range_body``).
            value_input_option: How input is interpreted ("RAW" or "USER_ENTERED").
            include_values_in_response: Echo the updated values back.
            response_value_render_option: Rendering of echoed values.
            response_date_time_render_option: Rendering of echoed dates.
        """
        _require_body(body, "update_values")
        query = collect_query(
            options.UPDATE_VALUES,
            value_input_option=value_input_option,
            include_values_in_response=include_values_in_response,
            response_value_render_option=response_value_render_option,
            response_date_time_render_option=response_date_time_render_option,
        )
        return self.build_values_request(
            HTTPMethod.PUT,
            spreadsheet_id,
            range_notation=range_notation,
            query=query,
            body=body,
        )

    def append_values(
        self,
        spreadsheet_id: str,
        range_notation: str,
        body: bytes,
        value_input_option: ValueInputOption | str | None = None,
        insert_data_option: InsertDataOption | str | None = None,
        include_values_in_response: bool = False,
        response_value_render_option: ValueRenderOption | str | None = None,
        response_date_time_render_option: DateTimeRenderOption | str | None = None,
    ) -> HTTPRequest:
        """Create a POST request for appending values after a table.

        Args:
            spreadsheet_id: Spreadsheet ID.
            range_notation: A1 notation used to find the table.
            body: JSON ValueRange (see ``value_range_body``).
            value_input_option: How input is interpreted.
            insert_data_option: "OVERWRITE" or "INSERT_ROWS".
            include_values_in_response: Echo the appended values back.
            response_value_render_option: Rendering of echoed values.
            response_date_time_render_option: Rendering of echoed dates.
        """
        _require_body(body, "append_values")
        query = collect_query(
            options.APPEND_VALUES,
            value_input_option=value_input_option,
            insert_data_option=insert_data_option,
            include_values_in_response=include_values_in_response,
            response_value_render_option=response_value_render_option,
            response_date_time_render_option=response_date_time_render_option,
        )
        return self.build_values_request(
            HTTPMethod.POST,
            spreadsheet_id,
            range_notation=f"{range_notation}:append",
            query=query,
            body=body,
        )

    def clear_values(self, spreadsheet_id: str, range_notation: str) -> HTTPRequest:
        """Create a POST request for clearing values from a range."""
        return self.build_values_request(
            HTTPMethod.POST,
            spreadsheet_id,
            range_notation=f"{range_notation}:clear",
        )

    # =========================================================================
    # Batch values
    # =========================================================================

    def batch_get_values(
        self,
        spreadsheet_id: str,
        ranges: Sequence[str],
        major_dimension: MajorDimension | str | None = None,
        value_render_option: ValueRenderOption | str | None = None,
        date_time_render_option: DateTimeRenderOption | str | None = None,
    ) -> HTTPRequest:
        """Create a GET request for reading several ranges.

        Raises:
            ValueError: If no ranges are given.
        """
        if not ranges:
            raise ValueError("batch_get_values requires at least one range")

        query = collect_query(
            options.BATCH_GET_VALUES,
            ranges=ranges,
            major_dimension=major_dimension,
            value_render_option=value_render_option,
            date_time_render_option=date_time_render_option,
        )
        return self.build_batch_request(
            HTTPMethod.GET,
            spreadsheet_id,
            endpoint="values:batchGet",
            query=query,
        )

    def batch_update_values(self, spreadsheet_id: str, body: bytes) -> HTTPRequest:
        """Create a POST request for writing several ranges.

        Args:
            spreadsheet_id: Spreadsheet ID.
            body: JSON BatchUpdateValuesRequest.
        """
        _require_body(body, "batch_update_values")
        return self.build_batch_request(
            HTTPMethod.POST,
            spreadsheet_id,
            endpoint="values:batchUpdate",
            body=body,
        )

    def batch_clear_values(self, spreadsheet_id: str, body: bytes) -> HTTPRequest:
        """Create a POST request for clearing several ranges.

        Args:
            spreadsheet_id: Spreadsheet ID.
            body: JSON BatchClearValuesRequest.
        """
        _require_body(body, "batch_clear_values")
        return self.build_batch_request(
            HTTPMethod.POST,
            spreadsheet_id,
            endpoint="values:batchClear",
            body=body,
        )
