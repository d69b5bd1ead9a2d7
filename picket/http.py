"""
HTTP transport wrappers for the Picket client.

Both wrappers send one request per call and classify the response: any
status in the inclusive 2xx range is a success, everything else raises
PicketApiError with the decoded error body.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from picket.auth import BasicAuth
from picket.constants import DEFAULT_TIMEOUT, SUCCESS_STATUS_MAX, SUCCESS_STATUS_MIN
from picket.exceptions import PicketApiError
from picket.types import ErrorResponse

logger = logging.getLogger(__name__)


def is_success(status_code: int) -> bool:
    """Check whether a status code is in the 2xx success range."""
    return SUCCESS_STATUS_MIN <= status_code <= SUCCESS_STATUS_MAX


def handle_response(response: httpx.Response) -> Any:
    """Decode a response body and classify its status.

    The body is parsed as JSON regardless of status since error bodies are
    JSON too. Malformed JSON raises json.JSONDecodeError.

    Args:
        response: The HTTP response.

    Returns:
        The decoded JSON body.

    Raises:
        PicketApiError: If the status is outside the 2xx range.
    """
    data = response.json()
    if not is_success(response.status_code):
        error = ErrorResponse.from_dict(data)
        logger.debug(
            "%s %s rejected: status=%d code=%s",
            response.request.method,
            response.request.url.path,
            response.status_code,
            error.code,
        )
        raise PicketApiError(error, status_code=response.status_code)
    return data


class HttpClient:
    """Synchronous HTTP client bound to a base URL and API key."""

    def __init__(
        self,
        base_url: str,
        auth: BasicAuth,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: The API base URL.
            auth: Header builder for the API key.
            timeout: Request timeout in seconds, used when no client is injected.
            client: Optional httpx client to send requests through. An
                injected client is not closed by close().
        """
        self._base_url = base_url.rstrip("/")
        self._auth = auth
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    def request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send a request and return the decoded body.

        Args:
            method: HTTP method.
            endpoint: Path relative to the base URL.
            data: Optional JSON body.

        Returns:
            The decoded JSON body.

        Raises:
            PicketApiError: If the status is outside the 2xx range.
            httpx.HTTPError: On transport failures.
        """
        logger.debug("%s %s", method, endpoint)
        response = self._client.request(
            method,
            f"{self._base_url}{endpoint}",
            json=data,
            headers=self._auth.headers(),
        )
        return handle_response(response)

    def get(self, endpoint: str) -> Any:
        return self.request("GET", endpoint)

    def post(self, endpoint: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("POST", endpoint, data=data)

    def close(self) -> None:
        """Close the underlying client if we created it."""
        if self._owns_client:
            self._client.close()


class AsyncHttpClient:
    """Asynchronous counterpart of HttpClient."""

    def __init__(
        self,
        base_url: str,
        auth: BasicAuth,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth = auth
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send a request and return the decoded body.

        Raises:
            PicketApiError: If the status is outside the 2xx range.
            httpx.HTTPError: On transport failures.
        """
        logger.debug("%s %s", method, endpoint)
        response = await self._client.request(
            method,
            f"{self._base_url}{endpoint}",
            json=data,
            headers=self._auth.headers(),
        )
        return handle_response(response)

    async def get(self, endpoint: str) -> Any:
        return await self.request("GET", endpoint)

    async def post(self, endpoint: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("POST", endpoint, data=data)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
