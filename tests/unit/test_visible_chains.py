"""Unit tests for visible chain filtering."""

import pytest

from sudobility_configs import Chain, ChainType, filter_visible_chains, get_visible_chains


class TestFilterVisibleChains:
    """Test the filter_visible_chains function."""

    def test_drops_chains_without_mailer(self, make_chain_info):
        """Test that chains without a mailer address are never visible."""
        with_mailer = make_chain_info(Chain.ETH_MAINNET, chain_id=1)
        without_mailer = make_chain_info(Chain.BASE_MAINNET, chain_id=8453, mailer_address=None)

        assert filter_visible_chains([with_mailer, without_mailer]) == [with_mailer]

    def test_filters_by_chain_type(self, make_chain_info):
        """Test that chain_type keeps only chains of that family."""
        evm = make_chain_info(Chain.ETH_MAINNET, ChainType.EVM, 1)
        solana = make_chain_info(Chain.SOLANA_MAINNET, ChainType.SOLANA, -101)

        assert filter_visible_chains([evm, solana], ChainType.EVM) == [evm]
        assert filter_visible_chains([evm, solana], ChainType.SOLANA) == [solana]
        assert filter_visible_chains([evm, solana], None) == [evm, solana]

    def test_excludes_testnets_when_requested(self, make_chain_info):
        """Test that include_testnet=False keeps only mainnets."""
        mainnet = make_chain_info(Chain.ETH_MAINNET, chain_id=1)
        testnet = make_chain_info(Chain.ETH_SEPOLIA, chain_id=11155111, is_testnet=True)

        assert filter_visible_chains([mainnet, testnet], include_testnet=False) == [mainnet]
        assert filter_visible_chains([mainnet, testnet], include_testnet=True) == [
            mainnet,
            testnet,
        ]

    def test_combined_filters(self, make_chain_info):
        """Test type and testnet filters together."""
        chains = [
            make_chain_info(Chain.ETH_MAINNET, ChainType.EVM, 1),
            make_chain_info(Chain.ETH_SEPOLIA, ChainType.EVM, 11155111, is_testnet=True),
            make_chain_info(Chain.SOLANA_MAINNET, ChainType.SOLANA, -101),
            make_chain_info(Chain.SOLANA_DEVNET, ChainType.SOLANA, -102, is_testnet=True),
        ]

        result = filter_visible_chains(chains, ChainType.SOLANA, include_testnet=False)
        assert [info.chain for info in result] == [Chain.SOLANA_MAINNET]

    def test_preserves_order(self, make_chain_info):
        """Test that input order is kept, not sorted."""
        chains = [
            make_chain_info(Chain.BASE_MAINNET, chain_id=8453),
            make_chain_info(Chain.ETH_MAINNET, chain_id=1),
            make_chain_info(Chain.POLYGON_MAINNET, chain_id=137),
        ]
        assert filter_visible_chains(chains) == chains

    def test_empty_input(self):
        """Test that empty input returns empty list."""
        assert filter_visible_chains([]) == []


class TestGetVisibleChains:
    """Test get_visible_chains against the shipped table."""

    @pytest.mark.parametrize("chain_type", [None, ChainType.EVM, ChainType.SOLANA])
    def test_mainnets_are_subset_of_all(self, chain_type):
        """Test that excluding testnets only ever removes chains."""
        with_testnets = get_visible_chains(chain_type, True)
        mainnets_only = get_visible_chains(chain_type, False)

        assert all(info in with_testnets for info in mainnets_only)
        removed = [info for info in with_testnets if info not in mainnets_only]
        assert all(info.is_testnet for info in removed)

    @pytest.mark.parametrize("chain_type", [None, ChainType.EVM, ChainType.SOLANA])
    def test_all_visible_chains_have_mailer(self, chain_type):
        """Test that every visible chain has a mailer contract."""
        for info in get_visible_chains(chain_type):
            assert info.mailer_address is not None

    def test_defaults_include_everything_with_mailer(self):
        """Test that the defaults return all types and testnets."""
        assert get_visible_chains() == get_visible_chains(None, True)

    def test_local_evm_is_visible(self):
        """Test that the local EVM chain with its mailer deployment is visible."""
        chains = [info.chain for info in get_visible_chains(ChainType.EVM, True)]
        assert Chain.EVM_LOCAL in chains

    def test_local_evm_hidden_without_testnets(self):
        """Test that the local EVM chain counts as a testnet."""
        chains = [info.chain for info in get_visible_chains(ChainType.EVM, False)]
        assert Chain.EVM_LOCAL not in chains
