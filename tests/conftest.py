"""Shared pytest fixtures for curation-deployments tests."""

import json
import subprocess
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

from curation_deployments.types import ChainConfig, ForgeDeployment, VerificationResult

DEPLOYED_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
DEPLOYER_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
TX_HASH = "0x" + "ab" * 32
RPC_URL = "http://test-rpc.example.com"


@pytest.fixture
def chain_config() -> ChainConfig:
    """Return a fully populated Sepolia configuration."""
    return ChainConfig(
        chain="sepolia",
        chain_id=11155111,
        block_explorer_url="https://sepolia.etherscan.io",
        rpc_url=RPC_URL,
        private_key="0x" + "11" * 32,
        etherscan_api_key="TESTKEY",
    )


@pytest.fixture
def env_root(tmp_path: Path) -> Path:
    """Create a directory holding a .env.sepolia file."""
    (tmp_path / ".env.sepolia").write_text(
        "ETH_RPC_URL=https://sepolia.example.com\n"
        "PRIVATE_KEY=0xdeadbeef\n"
        "ETHERSCAN_API_KEY=FILEKEY\n"
    )
    return tmp_path


@pytest.fixture
def curation_manager_artifact(tmp_path: Path) -> Path:
    """Create a forge output directory with a CurationManager artifact."""
    artifact_dir = tmp_path / "out" / "CurationManager.sol"
    artifact_dir.mkdir(parents=True)
    artifact = {
        "abi": [
            {
                "type": "constructor",
                "inputs": [
                    {"name": "_title", "type": "string"},
                    {"name": "_curationPass", "type": "address"},
                    {"name": "_curationLimit", "type": "uint256"},
                    {"name": "_isActive", "type": "bool"},
                ],
                "stateMutability": "nonpayable",
            },
            {"type": "function", "name": "title", "inputs": [], "outputs": []},
        ]
    }
    with open(artifact_dir / "CurationManager.json", "w") as f:
        json.dump(artifact, f)
    return tmp_path / "out"


@pytest.fixture
def fake_forge(monkeypatch) -> Callable[..., List[List[str]]]:
    """
    Replace subprocess.run with a scripted forge.

    Call the fixture with a list of (returncode, stdout, stderr) tuples;
    returns the list that collects every command run.
    """

    def install(outcomes: List[tuple]) -> List[List[str]]:
        calls: List[List[str]] = []
        remaining = list(outcomes)

        def run(cmd, check=False, capture_output=False, text=False, cwd=None, **kwargs):
            calls.append(list(cmd))
            returncode, stdout, stderr = remaining.pop(0)
            if check and returncode != 0:
                raise subprocess.CalledProcessError(returncode, cmd, output=stdout, stderr=stderr)
            return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)

        monkeypatch.setattr(subprocess, "run", run)
        return calls

    return install


@pytest.fixture
def create_output() -> str:
    """Return stdout of a successful `forge create --json`."""
    return "Compiling 1 files with 0.8.17\n" + json.dumps(
        {
            "deployer": DEPLOYER_ADDRESS,
            "deployedTo": DEPLOYED_ADDRESS,
            "transactionHash": TX_HASH,
        }
    )


@pytest.fixture
def forge_deployment() -> ForgeDeployment:
    return ForgeDeployment(
        deployer=DEPLOYER_ADDRESS,
        deployed_to=DEPLOYED_ADDRESS,
        transaction_hash=TX_HASH,
    )


@pytest.fixture
def flaky_verifier() -> Callable[[int], Any]:
    """
    Build a verifier stub that fails a given number of times, then succeeds.

    The stub records its calls in its `calls` attribute.
    """
    from curation_deployments.exceptions import VerificationError

    def build(failures: int):
        calls: List[Dict[str, Any]] = []

        def verifier(address, contract_id, args, config):
            calls.append(
                {"address": address, "contract_id": contract_id, "args": list(args), "config": config}
            )
            if len(calls) <= failures:
                raise VerificationError(f"explorer rejected attempt {len(calls)}")
            return VerificationResult(address=address, contract_id=contract_id, output="Pass - Verified")

        verifier.calls = calls
        return verifier

    return build
