"""One-shot derivation of everything known about a configured chain."""

from .explorers import get_block_explorer_url, get_explorer_api_url
from .providers import get_rpc_url
from .registry import get_chain_info
from .types import ChainConfig, DerivedChainInfo


def derive_chain_info(config: ChainConfig) -> DerivedChainInfo:
    """
    Derive chain metadata and URLs from a chain config.

    The RPC URL comes from get_rpc_url with config.preferred_provider
    (Alchemy by default). If that provider has no key or does not serve the
    chain, the regular provider priority applies.

    Args:
        config: Chain and credentials

    Returns:
        DerivedChainInfo with id, type, name, RPC URL, explorer URLs and USDC address

    Raises:
        ChainNotFoundError: If config.chain is not supported
    """
    info = get_chain_info(config.chain)

    return DerivedChainInfo(
        chain=info.chain,
        chain_id=info.chain_id,
        chain_type=info.chain_type,
        name=info.name,
        rpc_url=get_rpc_url(config.api_keys, info.chain, config.preferred_provider),
        explorer_api_url=get_explorer_api_url(config.etherscan_api_key, info.chain),
        explorer_url=get_block_explorer_url(info.chain),
        usdc_address=info.usdc_address,
    )
