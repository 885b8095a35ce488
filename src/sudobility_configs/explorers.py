"""Block explorer URL builders for sudobility-configs library."""

from typing import Optional

from .constants import EXPLORER_API_URL_TEMPLATE, EXPLORER_BROWSER_URL_TEMPLATE
from .registry import ChainLike, get_chain_info
from .types import BlockchainApis, ChainType


def get_explorer_api_url(api_key: Optional[str], chain: ChainLike) -> Optional[str]:
    """
    Build an Etherscan-style explorer API URL.

    The Etherscan multichain key works across EVM explorers. Solana has no
    Etherscan-style API.

    Args:
        api_key: Etherscan multichain API key
        chain: Chain identifier

    Returns:
        https://{domain}/api?apikey={api_key}, or None if the key is empty,
        the chain is Solana, or the chain has no explorer API

    Raises:
        ChainNotFoundError: If the chain is not supported
    """
    info = get_chain_info(chain)
    if not api_key:
        return None

    if info.chain_type is ChainType.SOLANA or not info.explorer_domain:
        return None

    return EXPLORER_API_URL_TEMPLATE.format(domain=info.explorer_domain, api_key=api_key)


def get_explorer_api_url_from_apis(apis: BlockchainApis, chain: ChainLike) -> Optional[str]:
    """Same as get_explorer_api_url, using the bundle's Etherscan key."""
    return get_explorer_api_url(apis.etherscan_api_key, chain)


def get_block_explorer_url(chain: ChainLike) -> Optional[str]:
    """
    Get the block explorer browser URL.

    Args:
        chain: Chain identifier

    Returns:
        https://{domain}, or None if the chain has no browser explorer

    Raises:
        ChainNotFoundError: If the chain is not supported
    """
    domain = get_chain_info(chain).explorer_browser_domain
    if not domain:
        return None
    return EXPLORER_BROWSER_URL_TEMPLATE.format(domain=domain)
