"""Shared pytest fixtures for sudobility-configs tests."""

from typing import Callable, Optional

import pytest

from sudobility_configs import ApiKeys, BlockchainApis, Chain, ChainInfo, ChainType
from sudobility_configs.constants import API_KEY_ENV, ETHERSCAN_API_KEY_ENV


@pytest.fixture
def all_api_keys() -> ApiKeys:
    """ApiKeys with every provider credential populated."""
    return ApiKeys(
        alchemy_api_key="alchemy-key",
        ankr_api_key="ankr-key",
        metamask_api_key="metamask-key",
        quicknode_api_key="my-endpoint:abc123token",
    )


@pytest.fixture
def blockchain_apis(all_api_keys: ApiKeys) -> BlockchainApis:
    """Full credentials bundle including the Etherscan key."""
    return BlockchainApis(api_keys=all_api_keys, etherscan_api_key="etherscan-key")


@pytest.fixture
def clean_env(monkeypatch) -> None:
    """Remove all credential variables from the environment."""
    for var in list(API_KEY_ENV.values()) + [ETHERSCAN_API_KEY_ENV]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_chain_info() -> Callable[..., ChainInfo]:
    """Factory for ChainInfo records used by filtering tests."""

    def _make(
        chain: Chain = Chain.ETH_MAINNET,
        chain_type: ChainType = ChainType.EVM,
        chain_id: int = 1,
        is_testnet: bool = False,
        mailer_address: Optional[str] = "0x0000000000000000000000000000000000000001",
    ) -> ChainInfo:
        return ChainInfo(
            chain=chain,
            chain_type=chain_type,
            chain_id=chain_id,
            name=chain.value,
            is_testnet=is_testnet,
            mailer_address=mailer_address,
        )

    return _make
