"""
Request signing for the Ooyala V2 API.

The signature is SHA-256 over the secret, the HTTP method, the request path,
every parameter as ``key=value`` in sorted key order, and the raw body. The
digest is base64 encoded, stripped of its padding and query escaped, so the
server can recompute it from the same request.
"""

import base64
import hashlib
from typing import Mapping, Any
from urllib.parse import quote_plus

from .constants import SIGNATURE_LENGTH
from .exceptions import CryptographicError


def canonical_message(secret: str, method: str, path: str,
                      params: Mapping[str, Any], body: str = "") -> str:
    """
    Build the string that gets hashed.

    Values are concatenated as-is, without URL escaping.
    """
    parts = [secret, method, path]
    for key in sorted(params):
        parts.append(f"{key}={params[key]}")
    parts.append(body or "")
    return "".join(parts)


def compute_signature(secret: str, method: str, path: str,
                      params: Mapping[str, Any], body: str = "") -> str:
    """
    Generate the escaped request signature.

    Args:
        secret: API secret (never sent over the wire)
        method: Uppercase HTTP verb
        path: Resource path, e.g. /v2/assets
        params: Every query parameter, including api_key and expires
        body: Raw request body, empty when there is none

    Returns:
        Query-escaped 43 character signature

    Raises:
        CryptographicError: If the message cannot be hashed
    """
    message = canonical_message(secret, method, path, params, body)

    try:
        digest = hashlib.sha256(message.encode('utf-8')).digest()
    except (UnicodeEncodeError, ValueError) as e:
        raise CryptographicError(f"Unable to hash request for signing: {e}") from e

    signature = base64.b64encode(digest).decode('ascii')[:SIGNATURE_LENGTH]
    return quote_plus(signature)
