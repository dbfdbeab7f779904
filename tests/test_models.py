"""Tests for request values and body helpers."""

import json

import httpx

from sheets_builder import (
    HTTPMethod,
    HTTPRequest,
    MajorDimension,
    RequestBuilder,
    value_range_body,
)


class TestHTTPRequest:
    """Test the request value type."""

    def test_to_httpx(self):
        """Should build an unsent httpx request with the same parts."""
        request = RequestBuilder(access_token="tok").update_values("S1", "A1", b'{"values": []}')
        converted = request.to_httpx()
        assert isinstance(converted, httpx.Request)
        assert converted.method == "PUT"
        assert converted.url == httpx.URL(request.url)
        assert converted.headers["authorization"] == "Bearer tok"
        assert converted.headers["content-type"] == "application/json"
        assert converted.content == b'{"values": []}'

    def test_as_dict(self):
        """Should return a JSON-serializable view."""
        request = HTTPRequest(
            method=HTTPMethod.POST,
            url="https://example.com/v4/spreadsheets",
            headers={"Content-Type": "application/json"},
            body=b"{}",
        )
        data = request.as_dict()
        assert data == {
            "method": "POST",
            "url": "https://example.com/v4/spreadsheets",
            "headers": {"Content-Type": "application/json"},
            "body": "{}",
        }
        json.dumps(data)

    def test_headers_copied_on_construction(self):
        """Should not share the caller's header dict."""
        headers = {"Content-Type": "application/json"}
        request = HTTPRequest(method=HTTPMethod.GET, url="https://example.com", headers=headers)
        headers["Content-Type"] = "text/plain"
        assert request.headers["Content-Type"] == "application/json"

    def test_as_dict_without_body(self):
        """Should report a missing body as None."""
        request = HTTPRequest(method=HTTPMethod.GET, url="https://example.com")
        assert request.as_dict()["body"] is None


class TestValueRangeBody:
    """Test ValueRange encoding."""

    def test_values_only(self):
        """Should encode just the values when nothing else is given."""
        assert json.loads(value_range_body([["a", 1]])) == {"values": [["a", 1]]}

    def test_all_fields(self):
        """Should include range and major dimension when given."""
        body = value_range_body([[1], [2]], range_notation="Sheet1!A1:A2", major_dimension="ROWS")
        assert json.loads(body) == {
            "range": "Sheet1!A1:A2",
            "majorDimension": "ROWS",
            "values": [[1], [2]],
        }

    def test_plain_major_dimension_passed_through(self):
        """Should send plain strings unchanged, like the query options."""
        body = value_range_body([[1]], major_dimension="DIMENSION_UNSPECIFIED")
        assert json.loads(body)["majorDimension"] == "DIMENSION_UNSPECIFIED"

    def test_enum_major_dimension(self):
        """Should send the enum's wire value."""
        body = value_range_body([[1]], major_dimension=MajorDimension.COLUMNS)
        assert json.loads(body)["majorDimension"] == "COLUMNS"
