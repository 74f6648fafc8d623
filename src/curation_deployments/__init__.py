"""
curation-deployments: deploy and verify the CurationManager contract
"""

from importlib.metadata import PackageNotFoundError, version

from .config import load_chain_config
from .contract import deploy_and_verify, retry_verify
from .exceptions import (
    ConfigurationError,
    DeploymentError,
    ForgeError,
    VerificationError,
)
from .scripts import setup_contracts, verify_contract
from .types import (
    CURATION_MANAGER,
    ChainConfig,
    ContractTarget,
    CurationManagerArgs,
    DeploymentResult,
    ForgeDeployment,
    VerificationResult,
)

try:
    __version__ = version("curation-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "load_chain_config",
    "deploy_and_verify",
    "retry_verify",
    "setup_contracts",
    "verify_contract",
    "CURATION_MANAGER",
    "ChainConfig",
    "ContractTarget",
    "CurationManagerArgs",
    "DeploymentResult",
    "ForgeDeployment",
    "VerificationResult",
    "DeploymentError",
    "ConfigurationError",
    "ForgeError",
    "VerificationError",
]
