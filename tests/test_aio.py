"""Tests for the asyncio client."""

import asyncio

import httpx
import pytest
import respx
from httpx import Response

from picket import AsyncPicket, ConfigurationError, PicketApiError, PicketValidationError


@pytest.fixture
async def aclient(api_key, base_url):
    client = AsyncPicket(api_key, base_url=base_url)
    yield client
    await client.close()


class TestAsyncPicket:
    """Tests for AsyncPicket."""

    def test_empty_key(self):
        with pytest.raises(ConfigurationError):
            AsyncPicket("")

    @pytest.mark.asyncio
    @respx.mock
    async def test_validation_before_request(self, aclient):
        with pytest.raises(PicketValidationError, match="signature"):
            await aclient.auth("0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266", "")
        assert respx.calls.call_count == 0

    @pytest.mark.asyncio
    @respx.mock
    async def test_token_ownership_solana_rule(self, aclient, solana_wallet_address):
        with pytest.raises(PicketValidationError, match="tokenIds"):
            await aclient.token_ownership(solana_wallet_address, chain="solana")
        assert respx.calls.call_count == 0

    @pytest.mark.asyncio
    @respx.mock
    async def test_nonce(self, aclient, base_url, wallet_address):
        respx.post(f"{base_url}/auth/nonce").mock(
            return_value=Response(200, json={"nonce": "abc", "statement": "Sign in"})
        )
        result = await aclient.nonce(wallet_address)
        assert result.nonce == "abc"

    @pytest.mark.asyncio
    @respx.mock
    async def test_chain_info_not_found(self, aclient, base_url):
        respx.get(f"{base_url}/chains/ethereum").mock(
            return_value=Response(404, json={"code": "not_found", "msg": "unknown chain"})
        )
        with pytest.raises(PicketApiError) as exc_info:
            await aclient.chain_info("ethereum")
        assert exc_info.value.status_code == 404
        assert exc_info.value.code == "not_found"

    @pytest.mark.asyncio
    @respx.mock
    async def test_concurrent_calls(self, aclient, base_url, ethereum_chain_data):
        respx.get(f"{base_url}/chains/ethereum").mock(
            return_value=Response(200, json=ethereum_chain_data)
        )
        respx.get(f"{base_url}/chains").mock(
            return_value=Response(200, json={"data": [ethereum_chain_data]})
        )

        info, chains = await asyncio.gather(
            aclient.chain_info("ethereum"),
            aclient.chains(),
        )
        assert info.chain_slug == "ethereum"
        assert len(chains) == 1

    @pytest.mark.asyncio
    async def test_injected_transport(self, api_key, base_url, wallet_address):
        seen = []

        def handler(request):
            seen.append(request)
            return Response(200, json={
                "allowed": True,
                "walletAddress": wallet_address,
                "tokenBalance": "2",
            })

        injected = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        async with AsyncPicket(api_key, base_url=base_url, http_client=injected) as client:
            result = await client.token_ownership(wallet_address, contract_address="0x1")

        assert result.token_balance == "2"
        assert seen[0].url.path.endswith(f"/wallets/{wallet_address}/tokenOwnership")
        assert not injected.is_closed
        await injected.aclose()

    @pytest.mark.asyncio
    async def test_path_segments_escaped(self, api_key, base_url):
        seen = []

        def handler(request):
            seen.append(request)
            return Response(200, json={"chainSlug": "x"})

        injected = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        async with AsyncPicket(api_key, base_url=base_url, http_client=injected) as client:
            await client.chain_info("ethereum/../../auth")

        assert seen[0].url.raw_path == b"/api/v1/chains/ethereum%2F..%2F..%2Fauth"
        await injected.aclose()
