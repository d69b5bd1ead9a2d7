"""
API key authentication for the Picket client.
"""

import base64
from typing import Dict

from picket.constants import USER_AGENT
from picket.exceptions import ConfigurationError


class BasicAuth:
    """Builds request headers from a Picket secret API key.

    The key is sent as Basic credentials: the key alone, base64-encoded,
    with no username component.
    """

    def __init__(self, api_key: str) -> None:
        """Initialize the authenticator.

        Args:
            api_key: The Picket secret API key.

        Raises:
            ConfigurationError: If the key is empty.
        """
        if not api_key:
            raise ConfigurationError("Missing secret key")
        self._api_key = api_key

    def __repr__(self) -> str:
        return "BasicAuth(api_key='***')"

    def authorization(self) -> str:
        """Get the Authorization header value."""
        encoded = base64.b64encode(self._api_key.encode("utf-8")).decode("ascii")
        return f"Basic {encoded}"

    def headers(self) -> Dict[str, str]:
        """Get the headers attached to every request.

        Returns:
            A new header dictionary on each call.
        """
        return {
            "User-Agent": USER_AGENT,
            "Content-Type": "application/json",
            "Authorization": self.authorization(),
        }


def create_basic_auth(api_key: str) -> BasicAuth:
    """Create a Basic authenticator for an API key.

    Args:
        api_key: The Picket secret API key.

    Returns:
        A BasicAuth instance.
    """
    return BasicAuth(api_key)
