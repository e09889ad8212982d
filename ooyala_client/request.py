"""
Per-call request values and URL assembly.

A RequestContext is built fresh for every call so that the client itself only
holds identity (key, secret, expiry, origins) and can be shared.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
from urllib.parse import quote_plus

from .constants import (
    CACHED_METHOD,
    PARAM_API_KEY,
    PARAM_EXPIRES,
    PARAM_SIGNATURE,
    PARAM_WHERE,
    URL_PARAMETERS,
)


@dataclass(frozen=True)
class RequestContext:
    """Everything that goes into signing and sending one request."""

    method: str
    path: str
    params: Dict[str, str] = field(default_factory=dict)
    body: str = ""

    @classmethod
    def build(cls, method: str, path: str, api_key: str, expires: int,
              params: Optional[Mapping[str, Any]] = None,
              body: Optional[str] = None) -> "RequestContext":
        """
        Normalize caller input into a context.

        The method is uppercased and parameter values are stringified. api_key
        and expires always come from the client identity, overriding any
        caller supplied values.
        """
        merged = {key: str(value) for key, value in (params or {}).items()}
        merged[PARAM_API_KEY] = api_key
        merged[PARAM_EXPIRES] = str(expires)
        return cls(method=method.upper(), path=path, params=merged, body=body or "")

    @property
    def content_length(self) -> int:
        return len(self.body.encode('utf-8'))


def _present(name: str) -> Callable[[Mapping[str, str]], bool]:
    return lambda params: name in params


# Optional parameters appended after the fixed prefix, in output order.
# Anything else in params is signed but not sent.
OPTIONAL_URL_PARAMETERS: Tuple[Tuple[str, Callable[[Mapping[str, str]], bool]], ...] = tuple(
    (name, _present(name)) for name in URL_PARAMETERS
)


def select_base_url(method: str, base_url: str, cache_base_url: str) -> str:
    """Reads use the cache origin, every other verb the primary origin."""
    if method.upper() == CACHED_METHOD:
        return cache_base_url
    return base_url


def assemble_url(base_url: str, path: str, params: Mapping[str, str],
                 signature: str) -> str:
    """
    Build the final request URL.

    The query always starts with api_key, then where (escaped, when present),
    signature and expires. The allow-listed optional parameters follow in
    their fixed order with raw values, so callers must pre-escape them.
    """
    query = [f"{PARAM_API_KEY}={params[PARAM_API_KEY]}"]
    if PARAM_WHERE in params:
        query.append(f"{PARAM_WHERE}={quote_plus(params[PARAM_WHERE])}")
    query.append(f"{PARAM_SIGNATURE}={signature}")
    query.append(f"{PARAM_EXPIRES}={params[PARAM_EXPIRES]}")

    for name, include in OPTIONAL_URL_PARAMETERS:
        if include(params):
            query.append(f"{name}={params[name]}")

    return f"{base_url.rstrip('/')}{path}?{'&'.join(query)}"
