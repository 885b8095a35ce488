"""Supported chains and their static metadata."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .types import ChainInfo, ChainType


class Chain(str, Enum):
    """
    Supported chain identifiers.

    The set is closed. Values are the string form accepted wherever a chain
    is looked up by text.
    """

    ETH_MAINNET = "eth-mainnet"
    ETH_SEPOLIA = "eth-sepolia"
    POLYGON_MAINNET = "polygon-mainnet"
    POLYGON_AMOY = "polygon-amoy"
    ARBITRUM_MAINNET = "arbitrum-mainnet"
    ARBITRUM_SEPOLIA = "arbitrum-sepolia"
    OPTIMISM_MAINNET = "optimism-mainnet"
    OPTIMISM_SEPOLIA = "optimism-sepolia"
    BASE_MAINNET = "base-mainnet"
    BASE_SEPOLIA = "base-sepolia"
    AVALANCHE_MAINNET = "avalanche-mainnet"
    AVALANCHE_FUJI = "avalanche-fuji"
    BSC_MAINNET = "bsc-mainnet"
    BSC_TESTNET = "bsc-testnet"
    EVM_LOCAL = "evm-local"
    SOLANA_MAINNET = "solana-mainnet"
    SOLANA_DEVNET = "solana-devnet"
    SOLANA_TESTNET = "solana-testnet"
    SOLANA_LOCAL = "solana-local"


# Solana has no EVM chain id; negative ids keep the two spaces disjoint.
_CHAIN_INFO = {
    # EVM mainnets
    Chain.ETH_MAINNET: ChainInfo(
        chain=Chain.ETH_MAINNET,
        chain_type=ChainType.EVM,
        chain_id=1,
        name="Ethereum",
        is_testnet=False,
        alchemy_network="eth-mainnet",
        ankr_network="eth",
        metamask_network="mainnet",
        quicknode_network="ethereum-mainnet",
        explorer_domain="api.etherscan.io",
        explorer_browser_domain="etherscan.io",
        usdc_address="0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
    ),
    Chain.POLYGON_MAINNET: ChainInfo(
        chain=Chain.POLYGON_MAINNET,
        chain_type=ChainType.EVM,
        chain_id=137,
        name="Polygon",
        is_testnet=False,
        alchemy_network="polygon-mainnet",
        ankr_network="polygon",
        metamask_network="polygon-mainnet",
        quicknode_network="matic",
        explorer_domain="api.polygonscan.com",
        explorer_browser_domain="polygonscan.com",
        usdc_address="0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359",
    ),
    Chain.ARBITRUM_MAINNET: ChainInfo(
        chain=Chain.ARBITRUM_MAINNET,
        chain_type=ChainType.EVM,
        chain_id=42161,
        name="Arbitrum One",
        is_testnet=False,
        alchemy_network="arb-mainnet",
        ankr_network="arbitrum",
        metamask_network="arbitrum-mainnet",
        quicknode_network="arbitrum-mainnet",
        explorer_domain="api.arbiscan.io",
        explorer_browser_domain="arbiscan.io",
        usdc_address="0xaf88d065e77c8cC2239327C5EDb3A432268e5831",
    ),
    Chain.OPTIMISM_MAINNET: ChainInfo(
        chain=Chain.OPTIMISM_MAINNET,
        chain_type=ChainType.EVM,
        chain_id=10,
        name="Optimism",
        is_testnet=False,
        alchemy_network="opt-mainnet",
        ankr_network="optimism",
        metamask_network="optimism-mainnet",
        quicknode_network="optimism",
        explorer_domain="api-optimistic.etherscan.io",
        explorer_browser_domain="optimistic.etherscan.io",
        usdc_address="0x0b2C639c533813f4Aa9D7837CAf62653d097Ff85",
    ),
    Chain.BASE_MAINNET: ChainInfo(
        chain=Chain.BASE_MAINNET,
        chain_type=ChainType.EVM,
        chain_id=8453,
        name="Base",
        is_testnet=False,
        alchemy_network="base-mainnet",
        ankr_network="base",
        metamask_network="base-mainnet",
        quicknode_network="base-mainnet",
        explorer_domain="api.basescan.org",
        explorer_browser_domain="basescan.org",
        usdc_address="0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913",
    ),
    Chain.AVALANCHE_MAINNET: ChainInfo(
        chain=Chain.AVALANCHE_MAINNET,
        chain_type=ChainType.EVM,
        chain_id=43114,
        name="Avalanche",
        is_testnet=False,
        alchemy_network="avax-mainnet",
        ankr_network="avalanche",
        metamask_network="avalanche-mainnet",
        quicknode_network="avalanche-mainnet",
        explorer_domain="api.snowtrace.io",
        explorer_browser_domain="snowtrace.io",
        usdc_address="0xB97EF9Ef8734C71904D8002F8b6Bc66Dd9c48a6E",
    ),
    Chain.BSC_MAINNET: ChainInfo(
        chain=Chain.BSC_MAINNET,
        chain_type=ChainType.EVM,
        chain_id=56,
        name="BNB Smart Chain",
        is_testnet=False,
        alchemy_network="bnb-mainnet",
        ankr_network="bsc",
        metamask_network="bsc-mainnet",
        quicknode_network="bsc",
        explorer_domain="api.bscscan.com",
        explorer_browser_domain="bscscan.com",
        usdc_address="0x8AC76a51cc950d9822D68b83fE1Ad97B32Cd580d",
    ),
    # EVM testnets
    Chain.ETH_SEPOLIA: ChainInfo(
        chain=Chain.ETH_SEPOLIA,
        chain_type=ChainType.EVM,
        chain_id=11155111,
        name="Ethereum Sepolia",
        is_testnet=True,
        alchemy_network="eth-sepolia",
        ankr_network="eth_sepolia",
        metamask_network="sepolia",
        quicknode_network="ethereum-sepolia",
        explorer_domain="api-sepolia.etherscan.io",
        explorer_browser_domain="sepolia.etherscan.io",
        usdc_address="0x1c7D4B196Cb0C7B01d743Fbc6116a902379C7238",
    ),
    Chain.POLYGON_AMOY: ChainInfo(
        chain=Chain.POLYGON_AMOY,
        chain_type=ChainType.EVM,
        chain_id=80002,
        name="Polygon Amoy",
        is_testnet=True,
        alchemy_network="polygon-amoy",
        ankr_network="polygon_amoy",
        metamask_network="polygon-amoy",
        quicknode_network="matic-amoy",
        explorer_domain="api-amoy.polygonscan.com",
        explorer_browser_domain="amoy.polygonscan.com",
        usdc_address="0x41E94Eb019C0762f9Bfcf9Fb1E58725BfB0e7582",
    ),
    Chain.ARBITRUM_SEPOLIA: ChainInfo(
        chain=Chain.ARBITRUM_SEPOLIA,
        chain_type=ChainType.EVM,
        chain_id=421614,
        name="Arbitrum Sepolia",
        is_testnet=True,
        alchemy_network="arb-sepolia",
        ankr_network="arbitrum_sepolia",
        metamask_network="arbitrum-sepolia",
        quicknode_network="arbitrum-sepolia",
        explorer_domain="api-sepolia.arbiscan.io",
        explorer_browser_domain="sepolia.arbiscan.io",
        usdc_address="0x75faf114eafb1BDbe2F0316DF893fd58CE46AA4d",
    ),
    Chain.OPTIMISM_SEPOLIA: ChainInfo(
        chain=Chain.OPTIMISM_SEPOLIA,
        chain_type=ChainType.EVM,
        chain_id=11155420,
        name="Optimism Sepolia",
        is_testnet=True,
        alchemy_network="opt-sepolia",
        ankr_network="optimism_sepolia",
        metamask_network="optimism-sepolia",
        quicknode_network="optimism-sepolia",
        explorer_domain="api-sepolia-optimistic.etherscan.io",
        explorer_browser_domain="sepolia-optimism.etherscan.io",
        usdc_address="0x5fd84259d66Cd46123540766Be93DFE6D43130D7",
    ),
    Chain.BASE_SEPOLIA: ChainInfo(
        chain=Chain.BASE_SEPOLIA,
        chain_type=ChainType.EVM,
        chain_id=84532,
        name="Base Sepolia",
        is_testnet=True,
        alchemy_network="base-sepolia",
        ankr_network="base_sepolia",
        metamask_network="base-sepolia",
        quicknode_network="base-sepolia",
        explorer_domain="api-sepolia.basescan.org",
        explorer_browser_domain="sepolia.basescan.org",
        usdc_address="0x036CbD53842c5426634e7929541eC2318f3dCF7e",
    ),
    Chain.AVALANCHE_FUJI: ChainInfo(
        chain=Chain.AVALANCHE_FUJI,
        chain_type=ChainType.EVM,
        chain_id=43113,
        name="Avalanche Fuji",
        is_testnet=True,
        alchemy_network="avax-fuji",
        ankr_network="avalanche_fuji",
        metamask_network="avalanche-fuji",
        quicknode_network="avalanche-testnet",
        explorer_domain="api-testnet.snowtrace.io",
        explorer_browser_domain="testnet.snowtrace.io",
        usdc_address="0x5425890298aed601595a70AB815c96711a31Bc65",
    ),
    Chain.BSC_TESTNET: ChainInfo(
        chain=Chain.BSC_TESTNET,
        chain_type=ChainType.EVM,
        chain_id=97,
        name="BNB Smart Chain Testnet",
        is_testnet=True,
        alchemy_network="bnb-testnet",
        ankr_network="bsc_testnet_chapel",
        metamask_network="bsc-testnet",
        quicknode_network="bsc-testnet",
        explorer_domain="api-testnet.bscscan.com",
        explorer_browser_domain="testnet.bscscan.com",
    ),
    # Hardhat / anvil node; the mailer is the first contract from the default deployer
    Chain.EVM_LOCAL: ChainInfo(
        chain=Chain.EVM_LOCAL,
        chain_type=ChainType.EVM,
        chain_id=31337,
        name="Local EVM",
        is_testnet=True,
        mailer_address="0x5FbDB2315678afecb367f032d93F642f64180aa3",
        starting_block=0,
    ),
    # Solana
    Chain.SOLANA_MAINNET: ChainInfo(
        chain=Chain.SOLANA_MAINNET,
        chain_type=ChainType.SOLANA,
        chain_id=-101,
        name="Solana",
        is_testnet=False,
        alchemy_network="solana-mainnet",
        ankr_network="solana",
        quicknode_network="solana-mainnet",
        explorer_browser_domain="explorer.solana.com",
        usdc_address="EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
    ),
    Chain.SOLANA_DEVNET: ChainInfo(
        chain=Chain.SOLANA_DEVNET,
        chain_type=ChainType.SOLANA,
        chain_id=-102,
        name="Solana Devnet",
        is_testnet=True,
        alchemy_network="solana-devnet",
        ankr_network="solana_devnet",
        quicknode_network="solana-devnet",
        explorer_browser_domain="explorer.solana.com",
        usdc_address="4zMMC9srt5Ri5X14GAgXhaHii3GnPAEERYPJgZJDncDU",
    ),
    Chain.SOLANA_TESTNET: ChainInfo(
        chain=Chain.SOLANA_TESTNET,
        chain_type=ChainType.SOLANA,
        chain_id=-103,
        name="Solana Testnet",
        is_testnet=True,
        quicknode_network="solana-testnet",
        explorer_browser_domain="explorer.solana.com",
    ),
    Chain.SOLANA_LOCAL: ChainInfo(
        chain=Chain.SOLANA_LOCAL,
        chain_type=ChainType.SOLANA,
        chain_id=-104,
        name="Local Solana",
        is_testnet=True,
    ),
}

# Read-only view; the table is never mutated after import
CHAIN_INFO_MAP: Mapping[Chain, ChainInfo] = MappingProxyType(_CHAIN_INFO)
