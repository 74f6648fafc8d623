"""Chain configuration loading for curation-deployments."""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import dotenv_values

from .constants import NETWORK_CONFIG
from .exceptions import ConfigurationError
from .types import ChainConfig

logger = logging.getLogger(__name__)

# Settings read from .env.<CHAIN>; process environment takes precedence
ENV_KEYS = (
    "ETH_RPC_URL",
    "RPC_URL",
    "PRIVATE_KEY",
    "ETHERSCAN_API_KEY",
    "CHAIN_ID",
    "VERIFIER_URL",
)


def _rpc_url(values: Mapping[str, str]) -> Optional[str]:
    # ETH_RPC_URL and RPC_URL are aliases; resolved within one source
    return values.get("ETH_RPC_URL") or values.get("RPC_URL")


def get_env_path(chain: str, root: Optional[Union[Path, str]] = None) -> Path:
    """
    Get the environment file path for a chain.

    Args:
        chain: Chain name (value of $CHAIN)
        root: Directory holding the env files (defaults to the working directory)

    Returns:
        Absolute path to .env.<chain>
    """
    if root is None:
        root = Path.cwd()
    else:
        root = Path(root).absolute()

    return root / f".env.{chain}"


def load_chain_config(
    chain: Optional[str] = None,
    root: Optional[Union[Path, str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ChainConfig:
    """
    Load chain configuration from .env.<CHAIN>.

    Args:
        chain: Chain name (defaults to $CHAIN)
        root: Directory holding the env files (defaults to the working directory)
        environ: Process environment (defaults to os.environ)

    Returns:
        ChainConfig for the chain

    Raises:
        ConfigurationError: If no chain is given, the env file is missing,
                            or the chain id cannot be determined
    """
    if environ is None:
        environ = os.environ

    if chain is None:
        chain = environ.get("CHAIN")
    if not chain:
        raise ConfigurationError(
            "Chain required: set $CHAIN to select the .env.<CHAIN> file"
        )

    env_path = get_env_path(chain, root)
    if not env_path.exists():
        raise ConfigurationError(f"Environment file not found at {env_path}")

    file_values = {k: v for k, v in dotenv_values(env_path).items() if v is not None}
    env_values = {k: environ[k] for k in ENV_KEYS if k in environ}
    values = file_values | env_values
    logger.debug("Loaded %s", env_path)

    network_config = NETWORK_CONFIG.get(chain, {})

    chain_id = values.get("CHAIN_ID") or network_config.get("chain_id")
    if chain_id is None:
        raise ConfigurationError(
            f"Unknown chain '{chain}': set CHAIN_ID in {env_path.name}"
        )
    try:
        chain_id = int(chain_id)
    except ValueError as e:
        raise ConfigurationError(f"Invalid CHAIN_ID {chain_id!r}") from e

    return ChainConfig(
        chain=chain,
        chain_id=chain_id,
        block_explorer_url=network_config.get("block_explorer_url"),
        rpc_url=_rpc_url(env_values) or _rpc_url(file_values),
        private_key=values.get("PRIVATE_KEY"),
        etherscan_api_key=values.get("ETHERSCAN_API_KEY"),
        verifier_url=values.get("VERIFIER_URL"),
    )
