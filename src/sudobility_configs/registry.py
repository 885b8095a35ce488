"""Read-only accessors over the chain table."""

import logging
from typing import Iterable, List, Optional, Union

from .chains import CHAIN_INFO_MAP, Chain
from .exceptions import ChainNotFoundError
from .types import ChainInfo, ChainType

logger = logging.getLogger(__name__)

ChainLike = Union[Chain, str]


def resolve_chain(chain: ChainLike) -> Chain:
    """
    Convert a chain identifier to a Chain member.

    Accepts a Chain, its value (e.g. "eth-mainnet") or its member name
    (e.g. "ETH_MAINNET").

    Args:
        chain: Chain identifier

    Returns:
        Chain member

    Raises:
        ChainNotFoundError: If the identifier is not a supported chain
    """
    if isinstance(chain, Chain):
        return chain

    if isinstance(chain, str):
        try:
            return Chain(chain)
        except ValueError:
            pass
        if chain in Chain.__members__:
            return Chain[chain]

    logger.debug("Unknown chain identifier %r", chain)
    raise ChainNotFoundError(f"Chain '{chain}' is not supported")


def has_chain(chain: ChainLike) -> bool:
    """Return True if ``chain`` names a supported chain."""
    try:
        resolve_chain(chain)
    except ChainNotFoundError:
        return False
    return True


def is_evm_chain(chain: ChainLike) -> bool:
    """
    Check if a chain is an EVM chain.

    Returns False for unrecognized identifiers instead of raising.
    """
    if not has_chain(chain):
        return False
    return get_chain_info(chain).chain_type is ChainType.EVM


def is_solana_chain(chain: ChainLike) -> bool:
    """
    Check if a chain is a Solana chain.

    Returns False for unrecognized identifiers instead of raising.
    """
    if not has_chain(chain):
        return False
    return get_chain_info(chain).chain_type is ChainType.SOLANA


def get_chain_info(chain: ChainLike) -> ChainInfo:
    """
    Get the complete static record for a chain.

    Args:
        chain: Chain identifier

    Returns:
        ChainInfo for the chain

    Raises:
        ChainNotFoundError: If the chain is not supported
    """
    return CHAIN_INFO_MAP[resolve_chain(chain)]


def get_chain_info_by_id(chain_id: int) -> Optional[ChainInfo]:
    """
    Find a chain record by numeric chain id.

    Args:
        chain_id: Numeric id (positive for EVM, negative for Solana)

    Returns:
        Matching ChainInfo, or None if no chain has that id
    """
    for info in CHAIN_INFO_MAP.values():
        if info.chain_id == chain_id:
            return info
    return None


def get_chain_id(chain: ChainLike) -> int:
    """Numeric chain id; negative for Solana chains."""
    return get_chain_info(chain).chain_id


def get_chain_type(chain: ChainLike) -> ChainType:
    return get_chain_info(chain).chain_type


def get_user_friendly_name(chain: ChainLike) -> str:
    """Display name, e.g. "Ethereum Sepolia"."""
    return get_chain_info(chain).name


def get_usdc_address(chain: ChainLike) -> Optional[str]:
    """USDC contract address (EVM) or mint address (Solana), if known."""
    return get_chain_info(chain).usdc_address


def get_mailer_address(chain: ChainLike) -> Optional[str]:
    return get_chain_info(chain).mailer_address


def get_starting_block(chain: ChainLike) -> Optional[int]:
    """Block the mailer contract was deployed at, used as the event indexing start."""
    return get_chain_info(chain).starting_block


def filter_visible_chains(
    chains: Iterable[ChainInfo],
    chain_type: Optional[ChainType] = None,
    include_testnet: bool = True,
) -> List[ChainInfo]:
    """
    Filter chain records down to those visible to the application.

    Visible chains:
    - Have a mailer contract address
    - Match chain_type, if given
    - Are mainnets, unless include_testnet is True

    Args:
        chains: Chain records to filter
        chain_type: Only keep chains of this family (None keeps all)
        include_testnet: Keep testnet chains as well as mainnets

    Returns:
        List of visible chain records, in input order
    """
    return [
        info
        for info in chains
        if (chain_type is None or info.chain_type is chain_type)
        and (include_testnet or not info.is_testnet)
        and info.mailer_address is not None
    ]


def get_visible_chains(
    chain_type: Optional[ChainType] = None, include_testnet: bool = True
) -> List[ChainInfo]:
    """
    Get the chains the application should show, in registry order.

    Args:
        chain_type: Only return chains of this family (None returns all)
        include_testnet: Include testnet chains as well as mainnets

    Returns:
        List of ChainInfo records that have a mailer contract deployed
    """
    return filter_visible_chains(CHAIN_INFO_MAP.values(), chain_type, include_testnet)
