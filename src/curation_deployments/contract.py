"""Deployment and verification operations for curation-deployments."""

import logging
import time
from typing import Any, Callable, Optional, Sequence

from .constants import DEFAULT_RETRY_DELAY, DEFAULT_VERIFY_ATTEMPTS
from .exceptions import DeploymentError, ForgeError, VerificationError
from .forge import forge_create, forge_verify
from .rpc import has_code
from .types import ChainConfig, DeploymentResult, ForgeDeployment, VerificationResult

logger = logging.getLogger(__name__)

Deployer = Callable[[str, Sequence[Any], ChainConfig], ForgeDeployment]
Verifier = Callable[[str, str, Sequence[Any], ChainConfig], VerificationResult]


def retry_verify(
    attempts: int,
    address: str,
    contract_id: str,
    args: Sequence[Any],
    config: ChainConfig,
    verifier: Optional[Verifier] = None,
    delay: float = DEFAULT_RETRY_DELAY,
    sleep: Optional[Callable[[float], None]] = None,
) -> VerificationResult:
    """
    Verify a deployed contract, retrying on failure.

    Attempts run sequentially. After failed attempt n the call waits
    delay * n seconds; there is no wait after the last attempt.

    Args:
        attempts: Retry budget (positive integer)
        address: Deployed contract address
        contract_id: Fully-qualified contract name
        args: Constructor arguments used at deployment
        config: Chain configuration
        verifier: Single verification attempt (defaults to forge_verify)
        delay: Base backoff in seconds
        sleep: Sleep function (defaults to time.sleep)

    Returns:
        VerificationResult of the first accepted attempt

    Raises:
        ValueError: If attempts is not a positive integer
        ForgeError, VerificationError: Error of the last attempt once the budget is spent
    """
    if isinstance(attempts, bool) or not isinstance(attempts, int) or attempts < 1:
        raise ValueError(f"attempts must be a positive integer, got {attempts!r}")

    if verifier is None:
        verifier = forge_verify
    if sleep is None:
        sleep = time.sleep

    for attempt in range(1, attempts + 1):
        try:
            result = verifier(address, contract_id, args, config)
        except (ForgeError, VerificationError) as e:
            logger.warning(
                "Verification attempt %d/%d for %s failed: %s", attempt, attempts, address, e
            )
            if attempt == attempts:
                raise
            wait = delay * attempt
            logger.info("Retrying verification in %.1fs", wait)
            sleep(wait)
        else:
            result.attempts = attempt
            return result

    # Unreachable: the loop either returns or re-raises
    raise AssertionError("retry loop exited without a result")


def deploy_and_verify(
    contract_id: str,
    args: Sequence[Any],
    config: ChainConfig,
    attempts: int = DEFAULT_VERIFY_ATTEMPTS,
    deployer: Optional[Deployer] = None,
    verifier: Optional[Verifier] = None,
    delay: float = DEFAULT_RETRY_DELAY,
    sleep: Optional[Callable[[float], None]] = None,
) -> DeploymentResult:
    """
    Deploy a contract, confirm its bytecode is on chain, then verify it.

    Args:
        contract_id: Fully-qualified contract name
        args: Constructor arguments, in order
        config: Chain configuration
        attempts: Verification retry budget
        deployer: Deployment step (defaults to forge_create)
        verifier: Single verification attempt (defaults to forge_verify)
        delay: Base verification backoff in seconds
        sleep: Sleep function (defaults to time.sleep)

    Returns:
        DeploymentResult; the address is at result.deploy.deployed_to

    Raises:
        DeploymentError: If no bytecode is found at the deployed address
    """
    if deployer is None:
        deployer = forge_create

    deployment = deployer(contract_id, args, config)
    address = deployment.deployed_to
    logger.info("Deployed %s to %s (tx %s)", contract_id, address, deployment.transaction_hash)

    config.require("rpc_url")
    if not has_code(address, config.rpc_url):
        raise DeploymentError(f"No bytecode found at {address} after deploying {contract_id}")

    verification = retry_verify(
        attempts,
        address,
        contract_id,
        args,
        config,
        verifier=verifier,
        delay=delay,
        sleep=sleep,
    )

    return DeploymentResult(deploy=deployment, verify=verification)
