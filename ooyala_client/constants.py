"""
Constants for the Ooyala V2 API client library.
"""

# API origins. Reads go through the CDN-fronted origin, everything else
# goes to the primary one.
PRIMARY_BASE_URL = "https://api.ooyala.com"
CACHE_BASE_URL = "https://cdn-api.ooyala.com"

# HTTP
CONTENT_TYPE = "application/json; charset=utf-8"
CACHED_METHOD = "GET"

# Default configuration values
DEFAULT_CONFIG = {
    'expires': 15,                    # signature TTL in seconds
    'max_retries': 3,                 # retries after the first attempt
    'timeout': 30,                    # HTTP timeout in seconds
    'base_url': PRIMARY_BASE_URL,
    'cache_base_url': CACHE_BASE_URL,
}

# Signing
SIGNATURE_LENGTH = 43  # base64 of a SHA-256 digest without its '=' pad

# Query parameters
PARAM_API_KEY = "api_key"
PARAM_EXPIRES = "expires"
PARAM_SIGNATURE = "signature"
PARAM_WHERE = "where"

# Optional parameters forwarded in the URL, in output order
URL_PARAMETERS = ("user_permission", "limit", "page_token", "include")

# Environment variables read by OoyalaClient.from_env()
ENV_API_KEY = "OOYALA_API_KEY"
ENV_API_SECRET = "OOYALA_API_SECRET"
ENV_EXPIRES = "OOYALA_EXPIRES"
ENV_TIMEOUT = "OOYALA_TIMEOUT"
