"""Access token hand-off from google-auth credentials.

Obtaining and refreshing tokens belongs to the token provider (an OAuth flow,
a service account, gcloud). This module only reads the current token off a
credentials object so it can be fixed into a builder's configuration.

Example:
    >>> from google.oauth2 import service_account
    >>> import google.auth.transport.requests
    >>> creds = service_account.Credentials.from_service_account_file(
    ...     "key.json", scopes=resolve_scopes(["sheets"])
    ... )
    >>> creds.refresh(google.auth.transport.requests.Request())
    >>> builder = RequestBuilder.from_credentials(creds)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from google.auth.credentials import Credentials

from sheets_builder.exceptions import TokenError

logger = logging.getLogger(__name__)


SCOPE_PREFIX = "https://www.googleapis.com/auth/"

# Short names for the scopes a token provider must request for Sheets calls
SCOPES = {
    "sheets": "spreadsheets",
    "sheets_readonly": "spreadsheets.readonly",
    "sheets_drive_file": "drive.file",
}


def resolve_scopes(scopes: Iterable[str]) -> list[str]:
    """Expand scope names to OAuth scope URLs, dropping duplicates.

    Accepts short names ("sheets"), the scope path itself
    ("spreadsheets.readonly") or a full URL.
    """
    resolved: list[str] = []
    for scope in scopes:
        if "://" in scope:
            url = scope
        elif scope in SCOPES:
            url = SCOPE_PREFIX + SCOPES[scope]
        elif scope in SCOPES.values():
            url = SCOPE_PREFIX + scope
        else:
            raise ValueError(
                f"Unknown scope: {scope}. Use a full URL or one of: {sorted(SCOPES)}"
            )
        if url not in resolved:
            resolved.append(url)
    return resolved


def access_token_from(credentials: Credentials) -> str:
    """Read the bearer token from google-auth credentials.

    Args:
        credentials: Any google-auth credentials object.

    Returns:
        The current access token.

    Raises:
        TokenError: If the credentials hold no token or the token has expired.
    """
    if not credentials.token:
        raise TokenError(
            "Credentials have no access token. Refresh them with the token provider first."
        )
    if credentials.expired:
        raise TokenError(
            f"Access token expired at {credentials.expiry}. "
            "Refresh it with the token provider first."
        )

    logger.debug(f"Using access token from {type(credentials).__name__}")
    return credentials.token
