"""
Ooyala V2 API Client Library

A Python client library that builds signed requests for the Ooyala V2
REST API and returns the raw response body.

Example usage:
    from ooyala_client import OoyalaClient

    client = OoyalaClient("your-api-key", "your-secret", expires=15)
    response = client.get("/v2/assets", {"include": "metadata"})
    print(response.body)
"""

from .client import OoyalaClient, APIResponse
from .request import RequestContext, assemble_url, select_base_url
from .signer import compute_signature, canonical_message
from .exceptions import (
    OoyalaClientError,
    ConfigurationError,
    MissingPayloadError,
    CryptographicError,
    HTTPError,
    StatusError,
    NoContentError,
    BadRequestError,
    NotAuthorizedError,
    ForbiddenError,
    NotFoundError,
    InsufficientCreditsError,
)
from .constants import (
    PRIMARY_BASE_URL,
    CACHE_BASE_URL,
    DEFAULT_CONFIG,
    URL_PARAMETERS,
)

__version__ = "1.0.0"
__all__ = [
    "OoyalaClient",
    "APIResponse",
    "RequestContext",
    "assemble_url",
    "select_base_url",
    "compute_signature",
    "canonical_message",
    "OoyalaClientError",
    "ConfigurationError",
    "MissingPayloadError",
    "CryptographicError",
    "HTTPError",
    "StatusError",
    "NoContentError",
    "BadRequestError",
    "NotAuthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "InsufficientCreditsError",
    "PRIMARY_BASE_URL",
    "CACHE_BASE_URL",
    "DEFAULT_CONFIG",
    "URL_PARAMETERS",
]
