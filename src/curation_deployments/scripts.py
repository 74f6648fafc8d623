"""Entry points for deploying and re-verifying CurationManager."""

import logging
import sys
from typing import Any, Callable, Dict, Optional

from .config import load_chain_config
from .constants import DEFAULT_VERIFY_ATTEMPTS
from .contract import deploy_and_verify, retry_verify
from .types import CURATION_MANAGER, ChainConfig, ContractTarget, DeploymentResult, VerificationResult

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Send log records to stdout as plain progress lines."""
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stdout)


def setup_contracts(
    config: ChainConfig,
    target: ContractTarget = CURATION_MANAGER,
    deploy: Optional[Callable[..., DeploymentResult]] = None,
) -> Dict[str, Any]:
    """
    Deploy the curation manager.

    Args:
        config: Chain configuration
        target: Contract id and constructor arguments
        deploy: Deployment collaborator (defaults to deploy_and_verify)

    Returns:
        {"upgrade_gate_address": deployed address}
    """
    if deploy is None:
        deploy = deploy_and_verify

    logger.info("deploying curation manager")
    upgrade_gate = deploy(target.contract_id, target.args.as_list(), config)
    upgrade_gate_address = upgrade_gate.deploy.deployed_to
    logger.info("Deployed curation manager to %s", upgrade_gate_address)

    return {"upgrade_gate_address": upgrade_gate_address}


def verify_contract(
    config: ChainConfig,
    target: ContractTarget = CURATION_MANAGER,
    retry: Optional[Callable[..., VerificationResult]] = None,
) -> Dict[str, Any]:
    """
    Re-verify the deployed curation manager on the block explorer.

    Args:
        config: Chain configuration
        target: Contract id, deployed address and constructor arguments
        retry: Retrying verification collaborator (defaults to retry_verify)

    Returns:
        {"verify": VerificationResult}

    Raises:
        ValueError: If the target has no deployed address
    """
    if retry is None:
        retry = retry_verify
    if target.address is None:
        raise ValueError(f"No deployed address known for {target.contract_id}")

    logger.info("verifying")
    verified = retry(
        DEFAULT_VERIFY_ATTEMPTS,
        target.address,
        target.contract_id,
        target.args.as_list(),
        config,
    )
    logger.info("[verified] %s", target.address)

    return {"verify": verified}


def deploy_main() -> None:
    configure_logging()
    setup_contracts(load_chain_config())


def verify_main() -> None:
    configure_logging()
    verify_contract(load_chain_config())
