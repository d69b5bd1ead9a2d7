"""
Main Picket client for the authentication and token gating API.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, Union
from urllib.parse import quote

from dotenv import load_dotenv

from picket.auth import BasicAuth, create_basic_auth
from picket.constants import (
    BASE_API_URL,
    DEFAULT_CHAIN,
    DEFAULT_TIMEOUT,
    ENDPOINTS,
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_TIMEOUT,
)
from picket.exceptions import ConfigurationError
from picket.http import HttpClient
from picket.types import (
    AccessTokenPayload,
    AuthRequest,
    AuthRequirements,
    AuthState,
    AuthzRequest,
    ChainInfo,
    ChainInfoRequest,
    NonceRequest,
    NonceResponse,
    SigningMessageContext,
    TokenOwnershipRequest,
    TokenOwnershipResponse,
    ValidateRequest,
)

logger = logging.getLogger(__name__)

ClientT = TypeVar("ClientT", bound="BasePicket")


@dataclass(frozen=True)
class PreparedCall:
    """A validated request ready to be sent, with its response decoder."""

    method: str
    endpoint: str
    data: Optional[Dict[str, Any]]
    parse: Callable[[Any], Any]


def _segment(value: str) -> str:
    """Percent-encode a value for use as a single URL path segment."""
    return quote(value, safe="")


def _parse_chains(response: Any) -> List[ChainInfo]:
    chains = response.get("data", []) if isinstance(response, dict) else response
    return [ChainInfo.from_dict(c) for c in (chains or [])]


class BasePicket:
    """Request shaping shared by the sync and async clients.

    Each _prepare_* method validates its arguments and raises
    PicketValidationError before anything touches the network.
    """

    def __init__(self, api_key: str, base_url: str = BASE_API_URL) -> None:
        self._auth: BasicAuth = create_basic_auth(api_key)
        self._base_url = base_url.rstrip("/")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"

    @property
    def base_url(self) -> str:
        """Get the API base URL."""
        return self._base_url

    @classmethod
    def _settings_from_env(cls, dotenv: bool) -> Dict[str, Any]:
        """Read client settings from the environment.

        Raises:
            ConfigurationError: If the API key is not set.
        """
        if dotenv:
            load_dotenv()

        api_key = os.environ.get(ENV_API_KEY)
        if not api_key:
            raise ConfigurationError(f"{ENV_API_KEY} is not set")

        settings: Dict[str, Any] = {
            "api_key": api_key,
            "base_url": os.environ.get(ENV_BASE_URL) or BASE_API_URL,
        }
        timeout = os.environ.get(ENV_TIMEOUT)
        if timeout:
            try:
                settings["timeout"] = float(timeout)
            except ValueError as e:
                raise ConfigurationError(f"Invalid {ENV_TIMEOUT}: {timeout!r}") from e
        return settings

    @classmethod
    def from_env(cls: Type[ClientT], dotenv: bool = True, **kwargs: Any) -> ClientT:
        """Create a client from environment variables.

        Reads PICKET_API_KEY (required), PICKET_BASE_URL and PICKET_TIMEOUT.

        Args:
            dotenv: Load a .env file into the environment first.
            **kwargs: Extra constructor arguments (e.g., http_client).

        Returns:
            A configured client.

        Raises:
            ConfigurationError: If PICKET_API_KEY is not set.
        """
        settings = cls._settings_from_env(dotenv)
        logger.debug("Loaded settings from environment (base_url=%s)", settings["base_url"])
        settings.update(kwargs)
        return cls(**settings)

    # =========================================================================
    # Request shaping
    # =========================================================================

    def _prepare_nonce(self, wallet_address: str, chain: str) -> PreparedCall:
        request = NonceRequest(wallet_address=wallet_address, chain=chain)
        return PreparedCall("POST", ENDPOINTS["nonce"], request.to_dict(), NonceResponse.from_dict)

    def _prepare_auth(
        self,
        wallet_address: str,
        signature: str,
        chain: str,
        requirements: Optional[AuthRequirements],
        context: Optional[SigningMessageContext],
    ) -> PreparedCall:
        request = AuthRequest(
            wallet_address=wallet_address,
            signature=signature,
            chain=chain,
            requirements=requirements,
            context=context,
        )
        return PreparedCall("POST", ENDPOINTS["auth"], request.to_dict(), AuthState.from_dict)

    def _prepare_authz(
        self,
        access_token: str,
        requirements: AuthRequirements,
        revalidate: bool,
    ) -> PreparedCall:
        request = AuthzRequest(
            access_token=access_token,
            requirements=requirements,
            revalidate=revalidate,
        )
        return PreparedCall("POST", ENDPOINTS["authz"], request.to_dict(), AuthState.from_dict)

    def _prepare_validate(
        self,
        access_token: str,
        requirements: Optional[AuthRequirements],
    ) -> PreparedCall:
        request = ValidateRequest(access_token=access_token, requirements=requirements)
        return PreparedCall(
            "POST", ENDPOINTS["validate"], request.to_dict(), AccessTokenPayload.from_dict
        )

    def _prepare_token_ownership(
        self,
        wallet_address: str,
        chain: str,
        contract_address: Optional[str],
        min_token_balance: Optional[Union[int, str]],
        token_ids: Optional[List[str]],
    ) -> PreparedCall:
        request = TokenOwnershipRequest(
            wallet_address=wallet_address,
            chain=chain,
            contract_address=contract_address,
            min_token_balance=min_token_balance,
            token_ids=token_ids,
        )
        endpoint = ENDPOINTS["token_ownership"].format(
            chain=_segment(request.chain),
            wallet_address=_segment(request.wallet_address),
        )
        return PreparedCall("POST", endpoint, request.to_dict(), TokenOwnershipResponse.from_dict)

    def _prepare_chain_info(self, chain: str) -> PreparedCall:
        request = ChainInfoRequest(chain=chain)
        endpoint = ENDPOINTS["chain"].format(chain=_segment(request.chain))
        return PreparedCall("GET", endpoint, None, ChainInfo.from_dict)

    def _prepare_chains(self) -> PreparedCall:
        return PreparedCall("GET", ENDPOINTS["chains"], None, _parse_chains)


class Picket(BasePicket):
    """Client for the Picket API.

    Example:
        >>> picket = Picket("sk_...")
        >>> nonce = picket.nonce("0xf39F...2266")
        >>> # sign a message containing nonce.statement and nonce.nonce
        >>> state = picket.auth("0xf39F...2266", signature)
        >>> claims = picket.validate(state.access_token)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[Any] = None,
    ) -> None:
        """Initialize the Picket client.

        Args:
            api_key: The Picket secret API key.
            base_url: The API base URL.
            timeout: HTTP request timeout in seconds.
            http_client: Optional httpx.Client to send requests through.

        Raises:
            ConfigurationError: If the API key is empty.
        """
        super().__init__(api_key, base_url)
        self._http = HttpClient(self._base_url, self._auth, timeout=timeout, client=http_client)

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()

    def __enter__(self) -> "Picket":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager."""
        self.close()

    def _send(self, call: PreparedCall) -> Any:
        return call.parse(self._http.request(call.method, call.endpoint, data=call.data))

    def nonce(self, wallet_address: str, chain: str = DEFAULT_CHAIN) -> NonceResponse:
        """Get a single-use nonce for a wallet.

        Args:
            wallet_address: The wallet address.
            chain: The chain slug.

        Returns:
            The nonce, the statement to sign and the message format.

        Raises:
            PicketValidationError: If wallet_address is empty.
            PicketApiError: If the API rejects the request.
        """
        return self._send(self._prepare_nonce(wallet_address, chain))

    def auth(
        self,
        wallet_address: str,
        signature: str,
        chain: str = DEFAULT_CHAIN,
        requirements: Optional[AuthRequirements] = None,
        context: Optional[SigningMessageContext] = None,
    ) -> AuthState:
        """Authenticate a wallet from its signature, optionally token gated.

        Args:
            wallet_address: The wallet address that signed the message.
            signature: The wallet's signature of the nonce message.
            chain: The chain slug.
            requirements: Optional gating requirements.
            context: Signing message context; required when the nonce was
                issued for a SIWE message.

        Returns:
            The access token and authenticated user.

        Raises:
            PicketValidationError: If wallet_address or signature is empty.
            PicketApiError: If authentication fails.
        """
        return self._send(
            self._prepare_auth(wallet_address, signature, chain, requirements, context)
        )

    def authz(
        self,
        access_token: str,
        requirements: AuthRequirements,
        revalidate: bool = False,
    ) -> AuthState:
        """Check an access token against requirements without re-signing.

        Args:
            access_token: An existing access token.
            requirements: The requirements to enforce.
            revalidate: Force the server to re-derive ownership evidence.

        Returns:
            The current (possibly refreshed) access token and user.

        Raises:
            PicketValidationError: If access_token or requirements is missing.
            PicketApiError: If authorization fails.
        """
        return self._send(self._prepare_authz(access_token, requirements, revalidate))

    def validate(
        self,
        access_token: str,
        requirements: Optional[AuthRequirements] = None,
    ) -> AccessTokenPayload:
        """Validate an access token and decode its claims.

        Raises:
            PicketValidationError: If access_token is empty.
            PicketApiError: If the token is invalid, expired or fails requirements.
        """
        return self._send(self._prepare_validate(access_token, requirements))

    def token_ownership(
        self,
        wallet_address: str,
        chain: str = DEFAULT_CHAIN,
        contract_address: Optional[str] = None,
        min_token_balance: Optional[Union[int, str]] = None,
        token_ids: Optional[List[str]] = None,
    ) -> TokenOwnershipResponse:
        """Check whether a wallet holds a token.

        EVM and Flow chains need contract_address; Solana needs token_ids.

        Raises:
            PicketValidationError: If a field the chain requires is missing.
            PicketApiError: If the API rejects the request.
        """
        return self._send(
            self._prepare_token_ownership(
                wallet_address, chain, contract_address, min_token_balance, token_ids
            )
        )

    def chain_info(self, chain: str) -> ChainInfo:
        """Get metadata for one chain."""
        return self._send(self._prepare_chain_info(chain))

    def chains(self) -> List[ChainInfo]:
        """Get metadata for all supported chains."""
        return self._send(self._prepare_chains())
