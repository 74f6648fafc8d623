"""Configuration constants for curation-deployments."""

# Fully-qualified contract name: source file + contract
CURATION_MANAGER_ID = "src/CurationManager.sol:CurationManager"

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Deployed instance re-verified by the verify script
CURATION_MANAGER_ADDRESS = "0x269921f2cf8c16a1839b3dea1c253a1f85f0b27b"

DEFAULT_VERIFY_ATTEMPTS = 3

# Seconds; multiplied by the attempt number between verification attempts
DEFAULT_RETRY_DELAY = 10.0

# Chain names accepted in $CHAIN (selects .env.<CHAIN>)
NETWORK_CONFIG = {
    "mainnet": {
        "chain_id": 1,
        "chain_name": "Ethereum Mainnet",
        "block_explorer_url": "https://etherscan.io",
    },
    "goerli": {
        "chain_id": 5,
        "chain_name": "Goerli",
        "block_explorer_url": "https://goerli.etherscan.io",
    },
    "sepolia": {
        "chain_id": 11155111,
        "chain_name": "Sepolia",
        "block_explorer_url": "https://sepolia.etherscan.io",
    },
    "polygon": {
        "chain_id": 137,
        "chain_name": "Polygon Mainnet",
        "block_explorer_url": "https://polygonscan.com",
    },
    "mumbai": {
        "chain_id": 80001,
        "chain_name": "Polygon Mumbai",
        "block_explorer_url": "https://mumbai.polygonscan.com",
    },
    "optimism": {
        "chain_id": 10,
        "chain_name": "OP Mainnet",
        "block_explorer_url": "https://optimistic.etherscan.io",
    },
    "base": {
        "chain_id": 8453,
        "chain_name": "Base",
        "block_explorer_url": "https://basescan.org",
    },
    "zora": {
        "chain_id": 7777777,
        "chain_name": "Zora",
        "block_explorer_url": "https://explorer.zora.energy",
    },
}
