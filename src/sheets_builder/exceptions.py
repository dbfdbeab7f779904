"""Request construction exceptions."""


class SheetsBuilderError(Exception):
    """Base exception for sheets-builder errors."""

    pass


class InvalidURL(SheetsBuilderError):
    """Raised when a request URL cannot be parsed or assembled."""

    def __init__(self, url: str, reason: str | None = None):
        self.url = url
        message = f"Invalid URL: {url!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class TokenError(SheetsBuilderError):
    """Raised when credentials cannot supply an access token."""

    pass
