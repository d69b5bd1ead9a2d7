"""
Picket Python Client

A Python client for backends that delegate wallet authentication and token
gating to the Picket API.
"""

from picket.aio import AsyncPicket
from picket.client import Picket
from picket.config import ChainType, get_chain_type
from picket.constants import API_VERSION, BASE_API_URL, DEFAULT_CHAIN, VERSION
from picket.exceptions import (
    ConfigurationError,
    PicketApiError,
    PicketError,
    PicketValidationError,
)
from picket.types import (
    AccessTokenPayload,
    AuthenticatedUser,
    AuthRequirements,
    AuthState,
    ChainInfo,
    ErrorResponse,
    NonceResponse,
    SigningMessageContext,
    SigningMessageFormat,
    TokenOwnershipResponse,
)

__version__ = VERSION

__all__ = [
    # Clients
    "Picket",
    "AsyncPicket",
    # Constants
    "API_VERSION",
    "BASE_API_URL",
    "DEFAULT_CHAIN",
    # Chains
    "ChainType",
    "get_chain_type",
    # Types
    "AccessTokenPayload",
    "AuthenticatedUser",
    "AuthRequirements",
    "AuthState",
    "ChainInfo",
    "ErrorResponse",
    "NonceResponse",
    "SigningMessageContext",
    "SigningMessageFormat",
    "TokenOwnershipResponse",
    # Exceptions
    "PicketError",
    "PicketApiError",
    "PicketValidationError",
    "ConfigurationError",
]
