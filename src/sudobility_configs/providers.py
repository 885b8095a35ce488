"""RPC URL builders and provider selection for sudobility-configs library."""

import logging
from typing import Callable, Dict, Optional, Tuple, Union

from .constants import (
    ALCHEMY_URL_TEMPLATE,
    ANKR_URL_TEMPLATE,
    METAMASK_URL_TEMPLATE,
    QUICKNODE_KEY_SEPARATOR,
    QUICKNODE_URL_TEMPLATE,
)
from .registry import ChainLike, get_chain_info
from .types import ApiKeys, BlockchainApis, RpcProvider

logger = logging.getLogger(__name__)

# Order tried by get_rpc_url when no preferred provider yields a URL
PROVIDER_PRIORITY: Tuple[RpcProvider, ...] = (
    RpcProvider.QUICKNODE,
    RpcProvider.ANKR,
    RpcProvider.METAMASK,
    RpcProvider.ALCHEMY,
)


def parse_provider(name: Optional[str]) -> Optional[RpcProvider]:
    """
    Parse a provider name into an RpcProvider.

    Matching is case-insensitive against both member names ("ALCHEMY")
    and values ("alchemy").

    Args:
        name: Provider name

    Returns:
        RpcProvider, or None if name is empty or not a known provider
    """
    if not name:
        return None

    normalized = name.strip().lower()
    for provider in RpcProvider:
        if normalized in (provider.value, provider.name.lower()):
            return provider
    return None


def _split_quicknode_key(api_key: str) -> Optional[Tuple[str, str]]:
    parts = api_key.split(QUICKNODE_KEY_SEPARATOR)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return None
    return parts[0], parts[1]


def get_alchemy_rpc_url(api_key: Optional[str], chain: ChainLike) -> Optional[str]:
    """
    Build an Alchemy RPC URL.

    Args:
        api_key: Alchemy API key
        chain: Chain identifier

    Returns:
        https://{network}.g.alchemy.com/v2/{api_key}, or None if the key is
        empty or Alchemy does not serve the chain

    Raises:
        ChainNotFoundError: If the chain is not supported
    """
    network = get_chain_info(chain).alchemy_network
    if not api_key or not network:
        return None
    return ALCHEMY_URL_TEMPLATE.format(network=network, api_key=api_key)


def get_ankr_rpc_url(api_key: Optional[str], chain: ChainLike) -> Optional[str]:
    """
    Build an Ankr RPC URL.

    Args:
        api_key: Ankr API key
        chain: Chain identifier

    Returns:
        https://rpc.ankr.com/{network}/{api_key}, or None if the key is empty
        or Ankr does not serve the chain

    Raises:
        ChainNotFoundError: If the chain is not supported
    """
    network = get_chain_info(chain).ankr_network
    if not api_key or not network:
        return None
    return ANKR_URL_TEMPLATE.format(network=network, api_key=api_key)


def get_metamask_rpc_url(api_key: Optional[str], chain: ChainLike) -> Optional[str]:
    """
    Build a Metamask/Infura RPC URL.

    Args:
        api_key: Infura API key
        chain: Chain identifier

    Returns:
        https://{network}.infura.io/v3/{api_key}, or None if the key is empty
        or Infura does not serve the chain

    Raises:
        ChainNotFoundError: If the chain is not supported
    """
    network = get_chain_info(chain).metamask_network
    if not api_key or not network:
        return None
    return METAMASK_URL_TEMPLATE.format(network=network, api_key=api_key)


def get_quicknode_rpc_url(api_key: Optional[str], chain: ChainLike) -> Optional[str]:
    """
    Build a QuickNode RPC URL.

    Args:
        api_key: QuickNode credential in "subdomain:token" form
        chain: Chain identifier

    Returns:
        https://{subdomain}.{network}.quiknode.pro/{token}/, or None if the
        key is empty or malformed, or QuickNode does not serve the chain

    Raises:
        ChainNotFoundError: If the chain is not supported
    """
    network = get_chain_info(chain).quicknode_network
    if not api_key or not network:
        return None

    credential = _split_quicknode_key(api_key)
    if credential is None:
        return None

    subdomain, token = credential
    return QUICKNODE_URL_TEMPLATE.format(subdomain=subdomain, network=network, token=token)


_BUILDERS: Dict[RpcProvider, Callable[[Optional[str], ChainLike], Optional[str]]] = {
    RpcProvider.ALCHEMY: get_alchemy_rpc_url,
    RpcProvider.ANKR: get_ankr_rpc_url,
    RpcProvider.METAMASK: get_metamask_rpc_url,
    RpcProvider.QUICKNODE: get_quicknode_rpc_url,
}


def build_rpc_url(
    provider: RpcProvider, api_key: Optional[str], chain: ChainLike
) -> Optional[str]:
    """Build an RPC URL for ``chain`` with the given provider's builder."""
    return _BUILDERS[provider](api_key, chain)


def get_alchemy_rpc_url_from_apis(apis: BlockchainApis, chain: ChainLike) -> Optional[str]:
    return get_alchemy_rpc_url(apis.api_keys.alchemy_api_key, chain)


def get_ankr_rpc_url_from_apis(apis: BlockchainApis, chain: ChainLike) -> Optional[str]:
    return get_ankr_rpc_url(apis.api_keys.ankr_api_key, chain)


def get_metamask_rpc_url_from_apis(apis: BlockchainApis, chain: ChainLike) -> Optional[str]:
    return get_metamask_rpc_url(apis.api_keys.metamask_api_key, chain)


def get_quicknode_rpc_url_from_apis(apis: BlockchainApis, chain: ChainLike) -> Optional[str]:
    return get_quicknode_rpc_url(apis.api_keys.quicknode_api_key, chain)


def get_rpc_url(
    api_keys: ApiKeys,
    chain: ChainLike,
    preferred: Union[RpcProvider, str, None] = None,
) -> Optional[str]:
    """
    Build an RPC URL, choosing among providers.

    If a preferred provider is given and yields a URL, that URL is returned.
    Otherwise providers are tried in PROVIDER_PRIORITY order
    (QuickNode > Ankr > Metamask > Alchemy) and the first URL wins.

    Args:
        api_keys: Credentials for all RPC providers
        chain: Chain identifier
        preferred: Preferred provider, as an RpcProvider or a case-insensitive
                   name ("ALCHEMY", "ankr", ...). Unknown names are ignored.

    Returns:
        RPC URL, or None if no provider has both a key and support for the chain

    Raises:
        ChainNotFoundError: If the chain is not supported
    """
    info = get_chain_info(chain)

    if isinstance(preferred, str):
        provider = parse_provider(preferred)
        if provider is None:
            logger.debug("Ignoring unknown RPC provider %r", preferred)
    else:
        provider = preferred

    if provider is not None:
        url = build_rpc_url(provider, api_keys.get(provider), info.chain)
        if url is not None:
            return url
        logger.debug(
            "Preferred provider %s unavailable for %s, falling back to priority order",
            provider.value,
            info.chain.value,
        )

    for candidate in PROVIDER_PRIORITY:
        url = build_rpc_url(candidate, api_keys.get(candidate), info.chain)
        if url is not None:
            return url

    logger.debug("No RPC provider available for %s", info.chain.value)
    return None
