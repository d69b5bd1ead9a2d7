"""
Chain configuration for the Picket client.

Maps chain slugs to their chain family and declares, per family, which
identifying fields a token ownership check needs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class ChainType(str, Enum):
    """Chain family: networks sharing an addressing scheme."""

    ETHEREUM = "ethereum"
    SOLANA = "solana"
    FLOW = "flow"


@dataclass(frozen=True)
class ChainRules:
    """Request rules for one chain family."""

    chain_type: ChainType
    # Fields a token ownership request must carry (snake_case attribute names)
    ownership_fields: Tuple[str, ...]


CHAIN_RULES: Dict[ChainType, ChainRules] = {
    ChainType.ETHEREUM: ChainRules(ChainType.ETHEREUM, ("contract_address",)),
    ChainType.FLOW: ChainRules(ChainType.FLOW, ("contract_address",)),
    ChainType.SOLANA: ChainRules(ChainType.SOLANA, ("token_ids",)),
}

# Known chain slugs. Slugs not listed here are EVM networks.
CHAIN_TYPES: Dict[str, ChainType] = {
    "ethereum": ChainType.ETHEREUM,
    "goerli": ChainType.ETHEREUM,
    "sepolia": ChainType.ETHEREUM,
    "polygon": ChainType.ETHEREUM,
    "mumbai": ChainType.ETHEREUM,
    "optimism": ChainType.ETHEREUM,
    "arbitrum": ChainType.ETHEREUM,
    "avalanche": ChainType.ETHEREUM,
    "base": ChainType.ETHEREUM,
    "solana": ChainType.SOLANA,
    "solana-devnet": ChainType.SOLANA,
    "flow": ChainType.FLOW,
    "flow-testnet": ChainType.FLOW,
}


def get_chain_type(chain: str) -> ChainType:
    """Resolve a chain slug to its chain family.

    Args:
        chain: The chain slug (e.g., "ethereum", "solana").

    Returns:
        The chain family. Unknown slugs resolve to ChainType.ETHEREUM.
    """
    return CHAIN_TYPES.get(chain.lower(), ChainType.ETHEREUM)


def get_chain_rules(chain: str, chain_type: Optional[ChainType] = None) -> ChainRules:
    """Get the request rules for a chain.

    Args:
        chain: The chain slug.
        chain_type: Optional explicit family, overriding slug resolution.

    Returns:
        The rules for the chain's family.
    """
    return CHAIN_RULES[chain_type or get_chain_type(chain)]
