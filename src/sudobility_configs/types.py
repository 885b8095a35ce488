"""Data types and dataclasses for sudobility-configs library."""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Mapping, Optional

from .constants import API_KEY_ENV, ETHERSCAN_API_KEY_ENV

if TYPE_CHECKING:
    from .chains import Chain


class ChainType(Enum):
    """
    Chain family.

    Determines which explorer and URL conventions apply to a chain.
    """

    EVM = "evm"
    SOLANA = "solana"


class RpcProvider(Enum):
    """RPC gateway providers. Values are the canonical lowercase names."""

    ALCHEMY = "alchemy"
    ANKR = "ankr"
    METAMASK = "metamask"  # Infura
    QUICKNODE = "quicknode"


@dataclass(frozen=True)
class ChainInfo:
    """Static metadata for one chain."""

    # Required fields
    chain: "Chain"
    chain_type: ChainType
    chain_id: int  # Positive for EVM, negative for Solana
    name: str  # Display name, e.g. "Ethereum"
    is_testnet: bool

    # Provider network slugs (None if the provider does not serve the chain)
    alchemy_network: Optional[str] = None
    ankr_network: Optional[str] = None
    metamask_network: Optional[str] = None
    quicknode_network: Optional[str] = None

    explorer_domain: Optional[str] = None  # Etherscan-style API host, EVM only
    explorer_browser_domain: Optional[str] = None
    usdc_address: Optional[str] = None  # Contract (EVM) or mint (Solana)

    # Mailer deployment; presence marks the chain as visible
    mailer_address: Optional[str] = None
    starting_block: Optional[int] = None


def _read_env(environ: Optional[Mapping[str, str]], name: str) -> Optional[str]:
    if environ is None:
        environ = os.environ
    # Empty variables count as unset
    return environ.get(name) or None


@dataclass(frozen=True)
class ApiKeys:
    """RPC provider credentials. Any of them may be missing."""

    alchemy_api_key: Optional[str] = None
    ankr_api_key: Optional[str] = None
    metamask_api_key: Optional[str] = None
    quicknode_api_key: Optional[str] = None  # "subdomain:token"

    def get(self, provider: RpcProvider) -> Optional[str]:
        """Return the credential for ``provider``."""
        return getattr(self, f"{provider.value}_api_key")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ApiKeys":
        """
        Read provider credentials from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            ApiKeys with every variable in API_KEY_ENV that is set and non-empty
        """
        return cls(**{attr: _read_env(environ, var) for attr, var in API_KEY_ENV.items()})


@dataclass(frozen=True)
class BlockchainApis:
    """Credentials bundle: RPC provider keys plus the Etherscan multichain key."""

    api_keys: ApiKeys = field(default_factory=ApiKeys)
    etherscan_api_key: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BlockchainApis":
        """
        Read the full credentials bundle from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            BlockchainApis populated from API_KEY_ENV and ETHERSCAN_API_KEY_ENV
        """
        return cls(
            api_keys=ApiKeys.from_env(environ),
            etherscan_api_key=_read_env(environ, ETHERSCAN_API_KEY_ENV),
        )


@dataclass(frozen=True)
class ChainConfig:
    """Host-supplied configuration for a single chain."""

    chain: "Chain"
    alchemy_api_key: Optional[str] = None
    ankr_api_key: Optional[str] = None
    metamask_api_key: Optional[str] = None
    quicknode_api_key: Optional[str] = None
    etherscan_api_key: Optional[str] = None
    preferred_provider: Optional[RpcProvider] = RpcProvider.ALCHEMY

    @property
    def api_keys(self) -> ApiKeys:
        return ApiKeys(
            alchemy_api_key=self.alchemy_api_key,
            ankr_api_key=self.ankr_api_key,
            metamask_api_key=self.metamask_api_key,
            quicknode_api_key=self.quicknode_api_key,
        )


@dataclass(frozen=True)
class DerivedChainInfo:
    """Everything derivable for a chain from its config."""

    chain: "Chain"
    chain_id: int
    chain_type: ChainType
    name: str
    rpc_url: Optional[str]
    explorer_api_url: Optional[str]
    explorer_url: Optional[str]
    usdc_address: Optional[str]
