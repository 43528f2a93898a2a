"""Errors raised by the Sheets client."""


class SheetsError(Exception):
    """Base class for spreadsheet source failures."""

    def __init__(self, message: str = "Spreadsheet request failed"):
        self.message = message
        super().__init__(self.message)


class SheetNotFoundError(SheetsError):
    """Requested sheet title does not exist in the spreadsheet."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f'Sheet with title "{title}" not found')


class RateLimitedError(SheetsError):
    """Upstream signaled throttling (HTTP 429 or a rate-limit 403)."""

    def __init__(self, message: str = "Rate limit exceeded. Please try again later."):
        super().__init__(message)


class UpstreamError(SheetsError):
    """Any other upstream failure: network, 5xx after retries, unexpected status."""


class AuthenticationError(SheetsError):
    """Service account token could not be obtained."""
