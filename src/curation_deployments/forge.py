"""Foundry (forge) invocation for curation-deployments."""

import json
import logging
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from eth_abi import encode

from .artifacts import load_constructor_types
from .exceptions import ForgeError, VerificationError
from .types import ChainConfig, ForgeDeployment, VerificationResult

logger = logging.getLogger(__name__)

_SECRET_FLAGS = {"--private-key", "--etherscan-api-key"}


def _redact(cmd: Sequence[str]) -> List[str]:
    redacted = list(cmd)
    for i, arg in enumerate(redacted[:-1]):
        if arg in _SECRET_FLAGS:
            redacted[i + 1] = "***"
    return redacted


def _run(cmd: List[str], cwd: Optional[Union[Path, str]]) -> subprocess.CompletedProcess:
    logger.debug("Running %s", " ".join(_redact(cmd)))
    return subprocess.run(
        cmd,
        check=True,
        capture_output=True,
        text=True,
        cwd=cwd,
    )


def format_constructor_arg(value: Any) -> str:
    """Format a constructor argument the way forge parses it on the command line."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_constructor_args(args: Sequence[Any], abi_types: Sequence[str]) -> str:
    """
    ABI-encode constructor arguments.

    Args:
        args: Constructor argument values, in order
        abi_types: Matching ABI types, e.g. ["string", "address"]

    Returns:
        0x-prefixed hex encoding

    Raises:
        ValueError: If the number of values and types differ
    """
    if len(args) != len(abi_types):
        raise ValueError(
            f"Constructor takes {len(abi_types)} arguments, got {len(args)}"
        )
    return "0x" + encode(list(abi_types), list(args)).hex()


def _parse_create_output(stdout: str) -> Dict[str, Any]:
    # forge may print compiler progress before the JSON object
    for line in reversed(stdout.strip().splitlines()):
        line = line.strip()
        if not line.startswith("{"):
            continue
        try:
            data = json.loads(line)
        except json.JSONDecodeError:
            continue
        if "deployedTo" in data:
            return data

    raise ForgeError(f"Could not find deployment JSON in forge output: {stdout!r}")


def forge_create(
    contract_id: str,
    args: Sequence[Any],
    config: ChainConfig,
    forge_bin: str = "forge",
    cwd: Optional[Union[Path, str]] = None,
) -> ForgeDeployment:
    """
    Deploy a contract with `forge create`.

    Args:
        contract_id: Fully-qualified contract name
        args: Constructor arguments, in order
        config: Chain configuration (rpc_url and private_key required)
        forge_bin: forge executable
        cwd: Foundry project root (defaults to the working directory)

    Returns:
        ForgeDeployment with deployer, deployed address and transaction hash

    Raises:
        ConfigurationError: If rpc_url or private_key is missing
        ForgeError: If forge fails or its output cannot be parsed
    """
    config.require("rpc_url", "private_key")

    cmd = [
        forge_bin,
        "create",
        contract_id,
        "--rpc-url",
        config.rpc_url,
        "--private-key",
        config.private_key,
        "--broadcast",
        "--json",
    ]
    # --constructor-args is variadic and has to come last
    if args:
        cmd += ["--constructor-args", *(format_constructor_arg(a) for a in args)]

    try:
        result = _run(cmd, cwd)
    except subprocess.CalledProcessError as e:
        raise ForgeError(f"forge create failed for {contract_id}: {e.stderr}") from e

    data = _parse_create_output(result.stdout)
    return ForgeDeployment(
        deployer=data.get("deployer", ""),
        deployed_to=data["deployedTo"],
        transaction_hash=data.get("transactionHash", ""),
    )


def forge_verify(
    address: str,
    contract_id: str,
    args: Sequence[Any],
    config: ChainConfig,
    abi_types: Optional[Sequence[str]] = None,
    forge_bin: str = "forge",
    cwd: Optional[Union[Path, str]] = None,
) -> VerificationResult:
    """
    Submit a deployed contract for block explorer verification.

    Args:
        address: Deployed contract address
        contract_id: Fully-qualified contract name
        args: Constructor arguments used at deployment
        config: Chain configuration (etherscan_api_key required)
        abi_types: Constructor ABI types (defaults to the forge build artifact)
        forge_bin: forge executable
        cwd: Foundry project root (defaults to the working directory)

    Returns:
        VerificationResult for the address

    Raises:
        ConfigurationError: If etherscan_api_key or the build artifact is missing
        VerificationError: If the explorer rejects the submission
    """
    config.require("etherscan_api_key")

    cmd = [
        forge_bin,
        "verify-contract",
        address,
        contract_id,
        "--chain-id",
        str(config.chain_id),
        "--etherscan-api-key",
        config.etherscan_api_key,
        "--watch",
    ]
    if args:
        if abi_types is None:
            out_dir = Path(cwd) / "out" if cwd is not None else None
            abi_types = load_constructor_types(contract_id, out_dir)
        cmd += ["--constructor-args", encode_constructor_args(args, abi_types)]
    if config.verifier_url:
        cmd += ["--verifier-url", config.verifier_url]

    try:
        result = _run(cmd, cwd)
    except subprocess.CalledProcessError as e:
        raise VerificationError(
            f"Verification of {contract_id} at {address} failed: {e.stderr or e.stdout}"
        ) from e

    return VerificationResult(
        address=address,
        contract_id=contract_id,
        already_verified="already verified" in result.stdout.lower(),
        output=result.stdout,
        url=config.address_url(address),
    )
