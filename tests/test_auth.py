"""Tests for the access token hand-off."""

from datetime import datetime, timedelta, timezone

import pytest
from google.oauth2.credentials import Credentials

from sheets_builder import RequestBuilder, TokenError
from sheets_builder.auth import SCOPE_PREFIX, SCOPES, access_token_from, resolve_scopes


class TestAccessTokenFrom:
    """Test reading tokens from google-auth credentials."""

    def test_valid_token(self):
        """Should return the token of valid credentials."""
        creds = Credentials(token="test-access-token")
        assert access_token_from(creds) == "test-access-token"

    def test_token_with_future_expiry(self):
        """Should accept tokens that have not expired."""
        creds = Credentials(token="tok", expiry=datetime.now(timezone.utc).replace(tzinfo=None) + timedelta(hours=1))
        assert access_token_from(creds) == "tok"

    def test_missing_token(self):
        """Should raise when credentials were never refreshed."""
        with pytest.raises(TokenError, match="no access token"):
            access_token_from(Credentials(token=None))

    def test_expired_token(self):
        """Should raise instead of refreshing an expired token."""
        creds = Credentials(token="old", expiry=datetime(2000, 1, 1))
        with pytest.raises(TokenError, match="expired"):
            access_token_from(creds)


class TestFromCredentials:
    """Test builder construction from credentials."""

    def test_bearer_header(self):
        """Should authenticate requests with the credentials' token."""
        builder = RequestBuilder.from_credentials(Credentials(token="tok"), api_key="k")
        request = builder.get_values("S1", "A1")
        assert request.headers["Authorization"] == "Bearer tok"
        assert "key=" not in request.url


class TestScopes:
    """Test scope resolution."""

    def test_names_resolved(self):
        """Should resolve short names to scope URLs."""
        assert resolve_scopes(["sheets", "sheets_drive_file"]) == [
            SCOPE_PREFIX + SCOPES["sheets"],
            "https://www.googleapis.com/auth/drive.file",
        ]

    def test_scope_paths_resolved(self):
        """Should accept the scope path without the URL prefix."""
        assert resolve_scopes(["spreadsheets.readonly"]) == [
            "https://www.googleapis.com/auth/spreadsheets.readonly"
        ]

    def test_full_urls_accepted(self):
        """Should pass full scope URLs through."""
        url = "https://www.googleapis.com/auth/spreadsheets.readonly"
        assert resolve_scopes([url]) == [url]

    def test_duplicates_dropped(self):
        """Should keep the first occurrence of each scope."""
        url = "https://www.googleapis.com/auth/spreadsheets"
        assert resolve_scopes(["sheets", url, "spreadsheets"]) == [url]

    def test_unknown_scope_raises(self):
        """Should raise error for unknown scope names."""
        with pytest.raises(ValueError, match="Unknown scope"):
            resolve_scopes(["gmail"])
