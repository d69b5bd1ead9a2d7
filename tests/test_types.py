"""Tests for request and response types."""

import pytest

from picket import (
    AccessTokenPayload,
    AuthenticatedUser,
    AuthRequirements,
    ChainInfo,
    ChainType,
    ErrorResponse,
    NonceResponse,
    PicketValidationError,
    SigningMessageContext,
    SigningMessageFormat,
)
from picket.types import AuthRequest, NonceRequest, TokenOwnershipRequest


class TestAuthRequirements:
    """Tests for AuthRequirements."""

    def test_empty(self):
        assert AuthRequirements().is_empty()
        assert AuthRequirements().to_dict() == {}

    def test_camel_case(self):
        requirements = AuthRequirements(
            token_ids=["1", "2"],
            collection="degods",
            creator_address="AxFuniPo7RaDgPH6Gizf4GZmLQFc4M5ipckeeZfkrPNn",
        )
        assert not requirements.is_empty()
        assert requirements.to_dict() == {
            "tokenIds": ["1", "2"],
            "collection": "degods",
            "creatorAddress": "AxFuniPo7RaDgPH6Gizf4GZmLQFc4M5ipckeeZfkrPNn",
        }

    def test_from_dict(self):
        requirements = AuthRequirements.from_dict({"contractAddress": "0x1", "minTokenBalance": "10"})
        assert requirements.contract_address == "0x1"
        assert requirements.min_token_balance == "10"


class TestRequests:
    """Request structs validate on construction."""

    def test_nonce_request_empty_chain_defaults(self):
        request = NonceRequest(wallet_address="0x1", chain="")
        assert request.chain == "ethereum"

    def test_auth_request_missing_signature(self):
        with pytest.raises(PicketValidationError):
            AuthRequest(wallet_address="0x1", signature="")

    def test_token_ownership_flow_requires_contract(self):
        with pytest.raises(PicketValidationError, match="flow"):
            TokenOwnershipRequest(wallet_address="0x1", chain="flow")

    def test_context_chain_type(self):
        context = SigningMessageContext(
            domain="example.com",
            uri="https://example.com",
            chain_id=0,
            issued_at="2024-01-01T00:00:00.000Z",
            chain_type=ChainType.SOLANA,
            locale="en",
        )
        assert context.to_dict()["chainType"] == "solana"
        assert context.to_dict()["locale"] == "en"


class TestResponses:
    """Tests for response decoding."""

    def test_nonce_format(self):
        nonce = NonceResponse.from_dict({"nonce": "n", "statement": "s", "format": "siwe"})
        assert nonce.format == SigningMessageFormat.SIWE
        assert nonce.to_dict() == {"nonce": "n", "statement": "s", "format": "siwe"}

    def test_user_balances_as_strings(self):
        user = AuthenticatedUser.from_dict({
            "walletAddress": "0x1",
            "displayAddress": "0x1",
            "tokenBalance": 4,
            "tokenBalances": {"collection": 2},
        })
        assert user.token_balance == "4"
        assert user.token_balances == {"collection": "2"}

    def test_access_token_payload(self):
        payload = AccessTokenPayload.from_dict({
            "iat": 1,
            "ext": 2,
            "iss": "picketapi.com",
            "sub": "0x1",
            "aud": "proj",
            "tid": "t",
            "walletAddress": "0x1",
            "displayAddress": "0x1",
            "requirements": {"contractAddress": "0x2"},
        })
        assert payload.issued_at == 1
        assert payload.user.wallet_address == payload.sub
        assert payload.requirements.contract_address == "0x2"

    def test_error_response(self):
        error = ErrorResponse.from_dict({"msg": "nope"})
        assert error.code is None
        assert error.to_dict() == {"msg": "nope"}

    def test_nonce_unknown_format_kept(self):
        nonce = NonceResponse.from_dict({"nonce": "n", "format": "eip4361"})
        assert nonce.format == "eip4361"
        assert nonce.to_dict()["format"] == "eip4361"

    def test_nonce_missing_format(self):
        assert NonceResponse.from_dict({"nonce": "n"}).format == SigningMessageFormat.SIMPLE

    def test_chain_info_null_chain_id(self):
        info = ChainInfo.from_dict({"chainSlug": "solana", "chainID": None})
        assert info.chain_id == 0
        assert info.chain_slug == "solana"

    def test_token_ownership_chain_lowercased(self):
        request = TokenOwnershipRequest(wallet_address="w", chain="Solana", token_ids=["t"])
        assert request.chain == "solana"
