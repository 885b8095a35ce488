"""Configuration constants for sudobility-configs library."""

# Per-provider RPC URL templates
ALCHEMY_URL_TEMPLATE = "https://{network}.g.alchemy.com/v2/{api_key}"
ANKR_URL_TEMPLATE = "https://rpc.ankr.com/{network}/{api_key}"
METAMASK_URL_TEMPLATE = "https://{network}.infura.io/v3/{api_key}"
QUICKNODE_URL_TEMPLATE = "https://{subdomain}.{network}.quiknode.pro/{token}/"

# Etherscan-style explorer API and browser URLs
EXPLORER_API_URL_TEMPLATE = "https://{domain}/api?apikey={api_key}"
EXPLORER_BROWSER_URL_TEMPLATE = "https://{domain}"

# QuickNode credentials are "subdomain:token"
QUICKNODE_KEY_SEPARATOR = ":"

# Environment variables read by ApiKeys.from_env / BlockchainApis.from_env
API_KEY_ENV = {
    "alchemy_api_key": "ALCHEMY_API_KEY",
    "ankr_api_key": "ANKR_API_KEY",
    "metamask_api_key": "METAMASK_API_KEY",
    "quicknode_api_key": "QUICKNODE_API_KEY",
}
ETHERSCAN_API_KEY_ENV = "ETHERSCAN_API_KEY"
