"""
Asyncio client for the Picket API.
"""

from typing import Any, List, Optional, Union

from picket.client import BasePicket, PreparedCall
from picket.constants import BASE_API_URL, DEFAULT_CHAIN, DEFAULT_TIMEOUT
from picket.http import AsyncHttpClient
from picket.types import (
    AccessTokenPayload,
    AuthRequirements,
    AuthState,
    ChainInfo,
    NonceResponse,
    SigningMessageContext,
    TokenOwnershipResponse,
)


class AsyncPicket(BasePicket):
    """Async client for the Picket API.

    Methods mirror Picket and raise the same exceptions. Argument
    validation happens before the first await, so a missing field never
    reaches the transport.

    Example:
        async with AsyncPicket("sk_...") as picket:
            nonce = await picket.nonce("0xf39F...2266")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[Any] = None,
    ) -> None:
        """Initialize the async client.

        Args:
            api_key: The Picket secret API key.
            base_url: The API base URL.
            timeout: HTTP request timeout in seconds.
            http_client: Optional httpx.AsyncClient to send requests through.
        """
        super().__init__(api_key, base_url)
        self._http = AsyncHttpClient(
            self._base_url, self._auth, timeout=timeout, client=http_client
        )

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()

    async def __aenter__(self) -> "AsyncPicket":
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def _send(self, call: PreparedCall) -> Any:
        data = await self._http.request(call.method, call.endpoint, data=call.data)
        return call.parse(data)

    async def nonce(self, wallet_address: str, chain: str = DEFAULT_CHAIN) -> NonceResponse:
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
        return await self._send(self._prepare_nonce(wallet_address, chain))

    async def auth(
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
        return await self._send(
            self._prepare_auth(wallet_address, signature, chain, requirements, context)
        )

    async def authz(
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
        return await self._send(self._prepare_authz(access_token, requirements, revalidate))

    async def validate(
        self,
        access_token: str,
        requirements: Optional[AuthRequirements] = None,
    ) -> AccessTokenPayload:
        """Validate an access token and decode its claims.

        Raises:
            PicketValidationError: If access_token is empty.
            PicketApiError: If the token is invalid, expired or fails requirements.
        """
        return await self._send(self._prepare_validate(access_token, requirements))

    async def token_ownership(
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
        return await self._send(
            self._prepare_token_ownership(
                wallet_address, chain, contract_address, min_token_balance, token_ids
            )
        )

    async def chain_info(self, chain: str) -> ChainInfo:
        """Get metadata for one chain."""
        return await self._send(self._prepare_chain_info(chain))

    async def chains(self) -> List[ChainInfo]:
        """Get metadata for all supported chains."""
        return await self._send(self._prepare_chains())
