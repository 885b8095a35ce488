"""
sudobility-configs: chain metadata and RPC/explorer URL helpers for the 0xmail.box ecosystem
"""

from importlib.metadata import PackageNotFoundError, version

from .chains import CHAIN_INFO_MAP, Chain
from .derive import derive_chain_info
from .exceptions import ChainConfigError, ChainNotFoundError
from .explorers import (
    get_block_explorer_url,
    get_explorer_api_url,
    get_explorer_api_url_from_apis,
)
from .providers import (
    PROVIDER_PRIORITY,
    build_rpc_url,
    get_alchemy_rpc_url,
    get_alchemy_rpc_url_from_apis,
    get_ankr_rpc_url,
    get_ankr_rpc_url_from_apis,
    get_metamask_rpc_url,
    get_metamask_rpc_url_from_apis,
    get_quicknode_rpc_url,
    get_quicknode_rpc_url_from_apis,
    get_rpc_url,
    parse_provider,
)
from .registry import (
    filter_visible_chains,
    get_chain_id,
    get_chain_info,
    get_chain_info_by_id,
    get_chain_type,
    get_mailer_address,
    get_starting_block,
    get_usdc_address,
    get_user_friendly_name,
    get_visible_chains,
    has_chain,
    is_evm_chain,
    is_solana_chain,
    resolve_chain,
)
from .types import (
    ApiKeys,
    BlockchainApis,
    ChainConfig,
    ChainInfo,
    ChainType,
    DerivedChainInfo,
    RpcProvider,
)

try:
    __version__ = version("sudobility-configs")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "Chain",
    "CHAIN_INFO_MAP",
    "ChainType",
    "RpcProvider",
    "ChainInfo",
    "ApiKeys",
    "BlockchainApis",
    "ChainConfig",
    "DerivedChainInfo",
    "ChainConfigError",
    "ChainNotFoundError",
    "resolve_chain",
    "has_chain",
    "is_evm_chain",
    "is_solana_chain",
    "get_chain_info",
    "get_chain_info_by_id",
    "get_chain_id",
    "get_chain_type",
    "get_user_friendly_name",
    "get_usdc_address",
    "get_mailer_address",
    "get_starting_block",
    "filter_visible_chains",
    "get_visible_chains",
    "PROVIDER_PRIORITY",
    "parse_provider",
    "build_rpc_url",
    "get_alchemy_rpc_url",
    "get_alchemy_rpc_url_from_apis",
    "get_ankr_rpc_url",
    "get_ankr_rpc_url_from_apis",
    "get_metamask_rpc_url",
    "get_metamask_rpc_url_from_apis",
    "get_quicknode_rpc_url",
    "get_quicknode_rpc_url_from_apis",
    "get_rpc_url",
    "get_explorer_api_url",
    "get_explorer_api_url_from_apis",
    "get_block_explorer_url",
    "derive_chain_info",
]
