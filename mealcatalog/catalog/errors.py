"""
Failure kinds raised by the TheMealDB client.

All of them derive from ``CatalogFetchError`` so ``CatalogStore`` can
catch a single type at the fetch boundary. ``kind`` is a short stable
string that ends up in ``CatalogState.error_kind``; the exception text
is for logs only and is never shown to the user.
"""

from typing import Optional


class CatalogFetchError(Exception):
    """Base class for a failed catalog fetch."""

    kind = "unknown"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class HttpStatusError(CatalogFetchError):
    """The endpoint answered with a non-success status."""

    kind = "http_status"

    def __init__(self, status_code: int, url: str = ""):
        super().__init__(f"HTTP Error {status_code} from {url or 'catalog endpoint'}")
        self.status_code = status_code
        self.url = url


class TransportError(CatalogFetchError):
    """The request never produced a response (DNS, connection, timeout)."""

    kind = "transport"


class MalformedResponseError(CatalogFetchError):
    """The body was not JSON or did not have the expected shape."""

    kind = "malformed_response"
