"""
Constants for the Picket Python client.
"""

API_VERSION = "v1"
BASE_API_URL = f"https://picketapi.com/api/{API_VERSION}"

VERSION = "0.1.0"
USER_AGENT = f"picket-python/{VERSION}"

# Chain used when the caller does not name one
DEFAULT_CHAIN = "ethereum"

DEFAULT_TIMEOUT = 30.0

# Success is the inclusive 2xx range
SUCCESS_STATUS_MIN = 200
SUCCESS_STATUS_MAX = 299

ENDPOINTS = {
    "nonce": "/auth/nonce",
    "auth": "/auth",
    "authz": "/authz",
    "validate": "/auth/validate",
    "token_ownership": "/chains/{chain}/wallets/{wallet_address}/tokenOwnership",
    "chain": "/chains/{chain}",
    "chains": "/chains",
}

# Environment variables read by from_env()
ENV_API_KEY = "PICKET_API_KEY"
ENV_BASE_URL = "PICKET_BASE_URL"
ENV_TIMEOUT = "PICKET_TIMEOUT"
