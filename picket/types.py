"""
Data types and models for the Picket Python client.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from picket.config import ChainType, get_chain_rules
from picket.constants import DEFAULT_CHAIN
from picket.exceptions import PicketValidationError


class SigningMessageFormat(str, Enum):
    """Message format a nonce was issued for."""

    SIMPLE = "simple"
    SIWE = "siwe"


def _require(value: Any, name: str) -> None:
    """Raise PicketValidationError if a required value is missing or empty."""
    if not value:
        raise PicketValidationError(
            f"{name} parameter is required - see docs for reference.",
            field=name,
        )


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None."""
    return {k: v for k, v in data.items() if v is not None}


# =============================================================================
# Request values
# =============================================================================


@dataclass
class AuthRequirements:
    """Gating conditions a wallet must satisfy.

    All members are optional; an empty instance means no gating.
    """

    contract_address: Optional[str] = None
    min_token_balance: Optional[Union[int, str]] = None
    token_ids: Optional[List[str]] = None
    collection: Optional[str] = None
    creator_address: Optional[str] = None
    allowed_wallets: Optional[List[str]] = None

    def is_empty(self) -> bool:
        """Check whether no gating condition is set."""
        return not self.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API submission."""
        return _compact({
            "contractAddress": self.contract_address,
            "minTokenBalance": self.min_token_balance,
            "tokenIds": self.token_ids,
            "collection": self.collection,
            "creatorAddress": self.creator_address,
            "allowedWallets": self.allowed_wallets,
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuthRequirements":
        """Create from API response dictionary."""
        return cls(
            contract_address=data.get("contractAddress"),
            min_token_balance=data.get("minTokenBalance"),
            token_ids=data.get("tokenIds"),
            collection=data.get("collection"),
            creator_address=data.get("creatorAddress"),
            allowed_wallets=data.get("allowedWallets"),
        )


@dataclass
class SigningMessageContext:
    """Fields the server needs to rebuild a structured signing message."""

    domain: str
    uri: str
    chain_id: int
    issued_at: str
    chain_type: ChainType = ChainType.ETHEREUM
    locale: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API submission."""
        return _compact({
            "domain": self.domain,
            "uri": self.uri,
            "chainId": self.chain_id,
            "issuedAt": self.issued_at,
            "chainType": ChainType(self.chain_type).value,
            "locale": self.locale,
        })


@dataclass
class NonceRequest:
    """Arguments for requesting a nonce."""

    wallet_address: str
    chain: str = DEFAULT_CHAIN

    def __post_init__(self) -> None:
        """Validate request arguments."""
        _require(self.wallet_address, "walletAddress")
        self.chain = self.chain or DEFAULT_CHAIN

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API submission."""
        return {"chain": self.chain, "walletAddress": self.wallet_address}


@dataclass
class AuthRequest:
    """Arguments for authenticating a signed nonce message."""

    wallet_address: str
    signature: str
    chain: str = DEFAULT_CHAIN
    requirements: Optional[AuthRequirements] = None
    context: Optional[SigningMessageContext] = None

    def __post_init__(self) -> None:
        """Validate request arguments."""
        _require(self.wallet_address, "walletAddress")
        _require(self.signature, "signature")
        self.chain = self.chain or DEFAULT_CHAIN

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API submission."""
        return _compact({
            "chain": self.chain,
            "walletAddress": self.wallet_address,
            "signature": self.signature,
            "requirements": self.requirements.to_dict() if self.requirements else None,
            "context": self.context.to_dict() if self.context else None,
        })


@dataclass
class AuthzRequest:
    """Arguments for re-checking the authorization state of an access token."""

    access_token: str
    requirements: AuthRequirements
    revalidate: bool = False

    def __post_init__(self) -> None:
        """Validate request arguments."""
        _require(self.access_token, "accessToken")
        if self.requirements is None:
            raise PicketValidationError(
                "requirements parameter is required - see docs for reference.",
                field="requirements",
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API submission."""
        return {
            "accessToken": self.access_token,
            "requirements": self.requirements.to_dict(),
            "revalidate": self.revalidate,
        }


@dataclass
class ValidateRequest:
    """Arguments for validating an access token."""

    access_token: str
    requirements: Optional[AuthRequirements] = None

    def __post_init__(self) -> None:
        """Validate request arguments."""
        if not self.access_token:
            raise PicketValidationError("access token is empty", field="accessToken")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API submission."""
        return _compact({
            "accessToken": self.access_token,
            "requirements": self.requirements.to_dict() if self.requirements else None,
        })


@dataclass
class TokenOwnershipRequest:
    """Arguments for checking whether a wallet holds a token.

    Which identifying field is required depends on the chain family:
    contract-addressed families need contract_address, token-id-addressed
    families need token_ids.
    """

    wallet_address: str
    chain: str = DEFAULT_CHAIN
    contract_address: Optional[str] = None
    min_token_balance: Optional[Union[int, str]] = None
    token_ids: Optional[List[str]] = None

    def __post_init__(self) -> None:
        """Validate request arguments against the chain's rules."""
        _require(self.wallet_address, "walletAddress")
        # Slugs are case-insensitive; the URL and the rule lookup use one form
        self.chain = (self.chain or DEFAULT_CHAIN).lower()
        rules = get_chain_rules(self.chain)
        for name in rules.ownership_fields:
            if not getattr(self, name):
                wire_name = _WIRE_NAMES.get(name, name)
                raise PicketValidationError(
                    f"{wire_name} parameter is required for {rules.chain_type.value} "
                    f"chains - see docs for reference.",
                    field=wire_name,
                )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API submission."""
        return _compact({
            "contractAddress": self.contract_address,
            "minTokenBalance": self.min_token_balance,
            "tokenIds": self.token_ids,
        })


@dataclass
class ChainInfoRequest:
    """Arguments for looking up one chain."""

    chain: str

    def __post_init__(self) -> None:
        _require(self.chain, "chain")


_WIRE_NAMES = {
    "contract_address": "contractAddress",
    "token_ids": "tokenIds",
}


# =============================================================================
# Responses
# =============================================================================


@dataclass
class ErrorResponse:
    """Error body returned with any non-2xx response."""

    msg: str
    code: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "ErrorResponse":
        """Create from API response body.

        Bodies that are not JSON objects are kept as the message.
        """
        if not isinstance(data, dict):
            return cls(msg=str(data))
        return cls(msg=data.get("msg", ""), code=data.get("code"))

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"code": self.code, "msg": self.msg})


def _parse_format(tag: Optional[str]) -> Union[SigningMessageFormat, str]:
    if not tag:
        return SigningMessageFormat.SIMPLE
    try:
        return SigningMessageFormat(tag)
    except ValueError:
        return tag


def _format_tag(value: Union[SigningMessageFormat, str]) -> str:
    return value.value if isinstance(value, SigningMessageFormat) else value


@dataclass
class NonceResponse:
    """A single-use nonce and the statement to embed in the signed message."""

    nonce: str
    statement: str = ""
    # Unrecognized formats are kept as the raw tag
    format: Union[SigningMessageFormat, str] = SigningMessageFormat.SIMPLE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NonceResponse":
        """Create from API response dictionary."""
        return cls(
            nonce=data["nonce"],
            statement=data.get("statement", ""),
            format=_parse_format(data.get("format")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nonce": self.nonce,
            "statement": self.statement,
            "format": _format_tag(self.format),
        }


@dataclass
class AuthenticatedUser:
    """The subject of an access token."""

    wallet_address: str
    display_address: str
    chain: str = DEFAULT_CHAIN
    contract_address: Optional[str] = None
    token_balance: Optional[str] = None
    # Ownership evidence keyed by requirement type
    token_balances: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuthenticatedUser":
        """Create from API response dictionary."""
        token_balance = data.get("tokenBalance")
        return cls(
            wallet_address=data.get("walletAddress", ""),
            display_address=data.get("displayAddress", ""),
            chain=data.get("chain", DEFAULT_CHAIN),
            contract_address=data.get("contractAddress"),
            token_balance=str(token_balance) if token_balance is not None else None,
            token_balances={
                k: str(v) for k, v in (data.get("tokenBalances") or {}).items()
            },
        )

    def to_dict(self) -> Dict[str, Any]:
        result = _compact({
            "walletAddress": self.wallet_address,
            "displayAddress": self.display_address,
            "chain": self.chain,
            "contractAddress": self.contract_address,
            "tokenBalance": self.token_balance,
        })
        if self.token_balances:
            result["tokenBalances"] = dict(self.token_balances)
        return result


@dataclass
class AuthState:
    """An access token and the user it was issued to."""

    access_token: str
    user: AuthenticatedUser

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuthState":
        """Create from API response dictionary."""
        return cls(
            access_token=data["accessToken"],
            user=AuthenticatedUser.from_dict(data.get("user") or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"accessToken": self.access_token, "user": self.user.to_dict()}


@dataclass
class AccessTokenPayload:
    """Decoded claims of a validated access token."""

    iat: int
    ext: int
    iss: str
    sub: str
    aud: str
    tid: str
    user: AuthenticatedUser
    requirements: Optional[AuthRequirements] = None

    @property
    def issued_at(self) -> int:
        return self.iat

    @property
    def expires_at(self) -> int:
        return self.ext

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccessTokenPayload":
        """Create from API response dictionary.

        User fields are embedded at the top level of the claim set.
        """
        requirements = data.get("requirements")
        return cls(
            iat=int(data.get("iat", 0)),
            ext=int(data.get("ext", 0)),
            iss=data.get("iss", ""),
            sub=data.get("sub", ""),
            aud=data.get("aud", ""),
            tid=data.get("tid", ""),
            user=AuthenticatedUser.from_dict(data),
            requirements=AuthRequirements.from_dict(requirements) if requirements else None,
        )


@dataclass
class TokenOwnershipResponse:
    """Result of a token ownership check."""

    allowed: bool
    wallet_address: str
    token_balance: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenOwnershipResponse":
        """Create from API response dictionary."""
        return cls(
            allowed=bool(data.get("allowed", False)),
            wallet_address=data.get("walletAddress", ""),
            token_balance=str(data.get("tokenBalance", "0")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "allowed": self.allowed,
            "walletAddress": self.wallet_address,
            "tokenBalance": self.token_balance,
        }


@dataclass
class ChainInfo:
    """Metadata for a supported chain."""

    chain_slug: str
    chain_id: int
    chain_type: str
    chain_name: str
    public_rpc: str
    authorization_supported: bool

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChainInfo":
        """Create from API response dictionary."""
        return cls(
            chain_slug=data.get("chainSlug", ""),
            chain_id=int(data.get("chainID") or 0),
            chain_type=data.get("chainType", ChainType.ETHEREUM.value),
            chain_name=data.get("chainName", ""),
            public_rpc=data.get("publicRPC", ""),
            authorization_supported=bool(data.get("authorizationSupported", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chainSlug": self.chain_slug,
            "chainID": self.chain_id,
            "chainType": self.chain_type,
            "chainName": self.chain_name,
            "publicRPC": self.public_rpc,
            "authorizationSupported": self.authorization_supported,
        }
