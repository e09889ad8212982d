"""
Custom exceptions for the Ooyala API client library.
"""

from typing import Optional


class OoyalaClientError(Exception):
    """Base exception for Ooyala client errors."""
    pass


class ConfigurationError(OoyalaClientError):
    """Raised when client configuration is invalid."""
    pass


class MissingPayloadError(OoyalaClientError):
    """Raised when a create or modify call has no body to send."""
    pass


class CryptographicError(OoyalaClientError):
    """Raised when the request signature cannot be computed."""
    pass


class HTTPError(OoyalaClientError):
    """Raised when HTTP request fails."""
    pass


class StatusError(HTTPError):
    """Raised when the API answers with a status code mapped to a failure."""

    def __init__(self, status_code: int, url: str, message: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(message or f"{self.__class__.__name__} ({status_code})")


class NoContentError(StatusError):
    """Raised on 204 No Content."""

    def __init__(self, status_code: int, url: str):
        super().__init__(status_code, url, "NO CONTENT")


class BadRequestError(StatusError):
    """Raised on 400 Bad Request."""

    def __init__(self, status_code: int, url: str):
        super().__init__(status_code, url, "BAD REQUEST")


class NotAuthorizedError(StatusError):
    """Raised on 401 Unauthorized, usually a bad signature or an expired one."""

    def __init__(self, status_code: int, url: str):
        super().__init__(status_code, url, "NOT AUTHORISED")


class ForbiddenError(StatusError):
    """Raised on 403 Forbidden."""

    def __init__(self, status_code: int, url: str):
        super().__init__(status_code, url, "FORBIDDEN")


class NotFoundError(StatusError):
    """Raised on 404 Not Found."""

    def __init__(self, status_code: int, url: str):
        super().__init__(status_code, url, "NOT FOUND")


class InsufficientCreditsError(StatusError):
    """Raised on 429, the API's way of reporting exhausted credits."""

    def __init__(self, status_code: int, url: str):
        super().__init__(status_code, url, "INSUFFICIENT API CREDITS")


STATUS_ERRORS = {
    204: NoContentError,
    400: BadRequestError,
    401: NotAuthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    429: InsufficientCreditsError,
}
