"""
Unit tests for request signing.
"""

import base64
import hashlib
from urllib.parse import quote_plus, unquote_plus

import pytest

from ooyala_client import compute_signature, canonical_message, CryptographicError


SECRET = "test-secret"
PATH = "/v2/assets"


class TestSigner:
    """Test signature generation."""

    @pytest.fixture
    def params(self):
        """Parameters every signed request carries, plus a filter."""
        return {
            "api_key": "test-key",
            "expires": "1700000015",
            "where": "asset_type='video'",
        }

    def test_canonical_message_sorted(self, params):
        """Test parameters are appended in sorted key order with raw values."""
        message = canonical_message(SECRET, "GET", PATH, params, "")

        assert message == (
            "test-secretGET/v2/assets"
            "api_key=test-key"
            "expires=1700000015"
            "where=asset_type='video'"
        )

    def test_canonical_message_appends_body(self, params):
        """Test the raw body closes the message."""
        message = canonical_message(SECRET, "POST", PATH, params, '{"name":"a"}')

        assert message.endswith("where=asset_type='video'{\"name\":\"a\"}")

    def test_compute_signature_matches_digest(self, params):
        """Test signature is escaped, truncated base64 SHA-256 of the message."""
        message = canonical_message(SECRET, "GET", PATH, params, "")
        digest = hashlib.sha256(message.encode('utf-8')).digest()
        expected = quote_plus(base64.b64encode(digest).decode('ascii')[:43])

        assert compute_signature(SECRET, "GET", PATH, params) == expected

    def test_compute_signature_deterministic(self, params):
        """Test identical inputs give identical output."""
        first = compute_signature(SECRET, "GET", PATH, params, "")
        second = compute_signature(SECRET, "GET", PATH, dict(params), "")

        assert first == second

    def test_compute_signature_length(self, params):
        """Test signature is 43 characters before escaping, without padding."""
        signature = unquote_plus(compute_signature(SECRET, "GET", PATH, params))

        assert len(signature) == 43
        assert not signature.endswith("=")

    def test_compute_signature_is_url_safe(self, params):
        """Test no raw '+' or '/' survives in the signature."""
        for i in range(50):
            signature = compute_signature(SECRET, "GET", f"{PATH}/{i}", params)
            assert "+" not in signature
            assert "/" not in signature

    def test_compute_signature_key_order_independent(self, params):
        """Test parameter insertion order does not matter."""
        reversed_params = dict(reversed(list(params.items())))

        assert list(reversed_params) != list(params)
        assert (compute_signature(SECRET, "GET", PATH, params)
                == compute_signature(SECRET, "GET", PATH, reversed_params))

    def test_compute_signature_sensitivity(self, params):
        """Test every input takes part in the signature."""
        base = compute_signature(SECRET, "GET", PATH, params, "")

        changed_value = dict(params, expires="1700000016")
        added_param = dict(params, limit="10")

        assert compute_signature("other-secret", "GET", PATH, params, "") != base
        assert compute_signature(SECRET, "POST", PATH, params, "") != base
        assert compute_signature(SECRET, "GET", "/v2/labels", params, "") != base
        assert compute_signature(SECRET, "GET", PATH, changed_value, "") != base
        assert compute_signature(SECRET, "GET", PATH, added_param, "") != base
        assert compute_signature(SECRET, "GET", PATH, params, "{}") != base

    def test_compute_signature_unencodable_input(self, params):
        """Test a message that cannot be UTF-8 encoded raises CryptographicError."""
        with pytest.raises(CryptographicError):
            compute_signature("bad-\ud800-secret", "GET", PATH, params)
