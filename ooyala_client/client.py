"""
Ooyala V2 API client.

This module builds signed requests against the Ooyala V2 REST API, sends
them with a bounded retry and hands the raw response body back to the caller.
"""

import logging
import os
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import requests

from .constants import (
    CONTENT_TYPE,
    DEFAULT_CONFIG,
    ENV_API_KEY,
    ENV_API_SECRET,
    ENV_EXPIRES,
    ENV_TIMEOUT,
)
from .exceptions import (
    ConfigurationError,
    HTTPError,
    MissingPayloadError,
    OoyalaClientError,
    STATUS_ERRORS,
)
from .request import RequestContext, assemble_url, select_base_url
from .signer import compute_signature

logger = logging.getLogger(__name__)

# Verbs that must carry a body, with the error raised when it is missing
PAYLOAD_REQUIRED = {
    'POST': "NO NEW ASSET DATA",
    'PATCH': "NO DATA TO UPDATE",
}


@dataclass(frozen=True)
class APIResponse:
    """Outcome of a successful call. body is None for unmapped status codes."""

    status_code: int
    url: str
    body: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)


class OoyalaClient:
    """
    Client for making signed requests to the Ooyala V2 API.

    The instance only holds identity: api key, secret, the absolute expiry
    computed at construction and the two origins. Each call builds its own
    RequestContext, so signing state is never shared between calls.

    The expiry is not refreshed. Once the TTL has elapsed the API rejects
    every request and a new client has to be created.
    """

    def __init__(self, api_key: str, secret: str, **config):
        """
        Initialize the client.

        Args:
            api_key: Public API key, sent with every request
            secret: API secret used for signing, never sent
            **config: Configuration options (expires, max_retries, timeout,
                base_url, cache_base_url)
        """
        self.api_key = api_key
        self.secret = secret

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self.base_url = self.config['base_url'].rstrip('/')
        self.cache_base_url = self.config['cache_base_url'].rstrip('/')
        self.expires = int(time.time()) + int(self.config['expires'])

        self.session = requests.Session()

    @classmethod
    def from_env(cls, **config) -> "OoyalaClient":
        """
        Create a client from OOYALA_API_KEY and OOYALA_API_SECRET.

        OOYALA_EXPIRES and OOYALA_TIMEOUT are optional; explicit keyword
        arguments win over the environment.
        """
        api_key = (os.getenv(ENV_API_KEY) or "").strip()
        secret = (os.getenv(ENV_API_SECRET) or "").strip()

        if not api_key:
            raise ConfigurationError(f"Missing env var {ENV_API_KEY}")
        if not secret:
            raise ConfigurationError(f"Missing env var {ENV_API_SECRET}")

        env_config = {}
        try:
            if os.getenv(ENV_EXPIRES):
                env_config['expires'] = int(os.environ[ENV_EXPIRES])
            if os.getenv(ENV_TIMEOUT):
                env_config['timeout'] = float(os.environ[ENV_TIMEOUT])
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric environment value: {e}") from e

        return cls(api_key, secret, **{**env_config, **config})

    def _validate_config(self):
        """Validate client configuration."""
        if not self.api_key:
            raise ConfigurationError("api_key cannot be empty")

        if not self.secret:
            raise ConfigurationError("secret cannot be empty")

        if self.config['expires'] <= 0:
            raise ConfigurationError("expires must be positive")

        if self.config['max_retries'] < 0:
            raise ConfigurationError("max_retries cannot be negative")

        if self.config['timeout'] <= 0:
            raise ConfigurationError("timeout must be positive")

    def _context(self, method: str, path: str, params: Optional[Mapping[str, Any]],
                 body: Optional[str]) -> RequestContext:
        return RequestContext.build(method, path, self.api_key, self.expires,
                                    params=params, body=body)

    def sign(self, method: str, path: str, params: Optional[Mapping[str, Any]] = None,
             body: str = "") -> str:
        """Return the escaped signature the given call would carry."""
        ctx = self._context(method, path, params, body)
        return compute_signature(self.secret, ctx.method, ctx.path, ctx.params, ctx.body)

    def build_url(self, method: str, path: str, params: Optional[Mapping[str, Any]] = None,
                  body: str = "") -> str:
        """Return the signed URL the given call would be sent to."""
        return self._prepare(self._context(method, path, params, body))

    def _prepare(self, ctx: RequestContext) -> str:
        signature = compute_signature(self.secret, ctx.method, ctx.path, ctx.params, ctx.body)
        base_url = select_base_url(ctx.method, self.base_url, self.cache_base_url)
        return assemble_url(base_url, ctx.path, ctx.params, signature)

    def _send(self, ctx: RequestContext) -> APIResponse:
        """
        Sign, build and send one attempt.

        Raises:
            HTTPError: If the HTTP exchange fails
            StatusError: If the status code maps to a failure
        """
        url = self._prepare(ctx)
        headers = {
            'Content-Length': str(ctx.content_length),
            'Content-Type': CONTENT_TYPE,
        }

        try:
            response = self.session.request(
                ctx.method,
                url,
                data=ctx.body.encode('utf-8'),
                headers=headers,
                timeout=self.config['timeout'],
            )
        except requests.RequestException as e:
            raise HTTPError(
                f"HTTP request failed: {type(e).__name__} on {ctx.method} {ctx.path}"
            ) from e

        error_class = STATUS_ERRORS.get(response.status_code)
        if error_class is not None:
            raise error_class(response.status_code, url)

        body = response.text if response.status_code == 200 else None
        return APIResponse(
            status_code=response.status_code,
            url=url,
            body=body,
            headers=dict(response.headers),
        )

    def request(self, method: str, path: str, params: Optional[Mapping[str, Any]] = None,
                body: Optional[str] = None) -> APIResponse:
        """
        Make a signed request, retrying on any failure.

        Every attempt re-signs and rebuilds the URL. There is no delay between
        attempts and no distinction between transport and status failures.

        Args:
            method: HTTP method
            path: Resource path, e.g. /v2/assets
            params: Query parameters (where, include, limit, page_token, ...)
            body: Serialized JSON payload

        Returns:
            APIResponse for the first successful attempt

        Raises:
            MissingPayloadError: If POST or PATCH is called without a body
            OoyalaClientError: The error from the last attempt
        """
        ctx = self._context(method, path, params, body)
        if not ctx.body and ctx.method in PAYLOAD_REQUIRED:
            raise MissingPayloadError(PAYLOAD_REQUIRED[ctx.method])

        attempts = self.config['max_retries'] + 1

        for attempt in range(1, attempts + 1):
            logger.debug("%s %s attempt %d/%d", ctx.method, ctx.path, attempt, attempts)
            try:
                return self._send(ctx)
            except OoyalaClientError as e:
                if attempt == attempts:
                    logger.error("%s %s failed after %d attempts: %s",
                                 ctx.method, ctx.path, attempts, type(e).__name__)
                    raise
                logger.warning("%s %s attempt %d failed, retrying: %s",
                               ctx.method, ctx.path, attempt, type(e).__name__)

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> APIResponse:
        """Get or view a resource."""
        return self.request('GET', path, params)

    def post(self, path: str, body: str, params: Optional[Mapping[str, Any]] = None) -> APIResponse:
        """Create a new resource."""
        return self.request('POST', path, params, body)

    def put(self, path: str, body: Optional[str] = None,
            params: Optional[Mapping[str, Any]] = None) -> APIResponse:
        """Replace an existing resource."""
        return self.request('PUT', path, params, body)

    def patch(self, path: str, body: str, params: Optional[Mapping[str, Any]] = None) -> APIResponse:
        """Update an existing resource."""
        return self.request('PATCH', path, params, body)

    def delete(self, path: str, params: Optional[Mapping[str, Any]] = None) -> APIResponse:
        """Delete a resource."""
        return self.request('DELETE', path, params)

    fetch = get
    create = post
    replace = put
    modify = patch
    remove = delete

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
