"""Data types and dataclasses for curation-deployments."""

from dataclasses import dataclass
from typing import Any, List, Optional

from web3 import Web3

from .constants import CURATION_MANAGER_ADDRESS, CURATION_MANAGER_ID, ZERO_ADDRESS
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class CurationManagerArgs:
    """Constructor arguments of CurationManager, in constructor order."""

    ABI_TYPES = ("string", "address", "uint256", "bool")

    title: str
    curation_pass: str  # ERC-721 pass contract, ZERO_ADDRESS for none
    curation_limit: int  # 0 means unlimited
    is_active: bool

    def __post_init__(self):
        if not Web3.is_address(self.curation_pass):
            raise ValueError(f"Invalid curation pass address: {self.curation_pass!r}")
        if isinstance(self.curation_limit, bool) or not isinstance(self.curation_limit, int):
            raise ValueError(f"Curation limit must be an integer, got {self.curation_limit!r}")
        if self.curation_limit < 0:
            raise ValueError(f"Curation limit must be non-negative, got {self.curation_limit}")

    def as_list(self) -> List[Any]:
        return [self.title, self.curation_pass, self.curation_limit, self.is_active]


@dataclass(frozen=True)
class ContractTarget:
    """
    Everything needed to deploy and later re-verify one contract.

    The verify flow must submit exactly the arguments used at deployment,
    so both flows read them from the same instance.
    """

    contract_id: str  # e.g., "src/CurationManager.sol:CurationManager"
    args: CurationManagerArgs
    address: Optional[str] = None  # Known deployed address, if any


CURATION_MANAGER = ContractTarget(
    contract_id=CURATION_MANAGER_ID,
    args=CurationManagerArgs(
        title="title",
        curation_pass=ZERO_ADDRESS,
        curation_limit=0,
        is_active=True,
    ),
    address=CURATION_MANAGER_ADDRESS,
)


@dataclass
class ChainConfig:
    """Chain-specific settings loaded from .env.<CHAIN>."""

    chain: str  # e.g., "sepolia"
    chain_id: int
    block_explorer_url: Optional[str] = None
    rpc_url: Optional[str] = None
    private_key: Optional[str] = None
    etherscan_api_key: Optional[str] = None
    verifier_url: Optional[str] = None

    def require(self, *fields: str) -> None:
        """
        Check that the given settings are present.

        Raises:
            ConfigurationError: If any of the fields is unset or empty
        """
        missing = [f for f in fields if not getattr(self, f)]
        if missing:
            raise ConfigurationError(
                f"Missing {', '.join(missing)} for chain '{self.chain}'. "
                f"Set them in .env.{self.chain} or the process environment."
            )

    def address_url(self, address: str) -> Optional[str]:
        if self.block_explorer_url is None:
            return None
        return f"{self.block_explorer_url}/address/{address}"


@dataclass
class ForgeDeployment:
    """Output of `forge create --json`."""

    deployer: str
    deployed_to: str
    transaction_hash: str


@dataclass
class VerificationResult:
    """Outcome of a successful verification."""

    address: str
    contract_id: str
    already_verified: bool = False
    attempts: int = 1
    output: str = ""
    url: Optional[str] = None


@dataclass
class DeploymentResult:
    """Deployment record; the deployed address lives at `deploy.deployed_to`."""

    deploy: ForgeDeployment
    verify: Optional[VerificationResult] = None

    @property
    def address(self) -> str:
        return self.deploy.deployed_to
