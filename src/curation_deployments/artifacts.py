"""Foundry build artifact helpers for curation-deployments."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from .exceptions import ConfigurationError


def split_contract_id(contract_id: str) -> Tuple[str, str]:
    """
    Split a fully-qualified contract name into source path and contract name.

    Args:
        contract_id: e.g., "src/CurationManager.sol:CurationManager"

    Returns:
        Tuple of (source_path, contract_name)

    Raises:
        ValueError: If contract_id is not of the form <path>:<name>
    """
    source_path, sep, contract_name = contract_id.rpartition(":")
    if not sep or not source_path or not contract_name:
        raise ValueError(
            f"Expected fully-qualified contract name <path>:<Contract>, got {contract_id!r}"
        )
    return source_path, contract_name


def get_artifact_path(contract_id: str, out_dir: Optional[Union[Path, str]] = None) -> Path:
    """
    Get the forge build artifact path for a contract.

    Args:
        contract_id: Fully-qualified contract name
        out_dir: Forge output directory (defaults to ./out)

    Returns:
        Path to out/<File.sol>/<Contract>.json
    """
    if out_dir is None:
        out_dir = Path.cwd() / "out"
    else:
        out_dir = Path(out_dir).absolute()

    source_path, contract_name = split_contract_id(contract_id)
    return out_dir / Path(source_path).name / f"{contract_name}.json"


def _canonical_type(param: Dict[str, Any]) -> str:
    # Tuples are spelled out from their components, keeping any array suffix
    abi_type = param["type"]
    if abi_type.startswith("tuple"):
        inner = ",".join(_canonical_type(c) for c in param.get("components", []))
        return f"({inner}){abi_type[len('tuple'):]}"
    return abi_type


def constructor_types(abi: List[Dict[str, Any]]) -> List[str]:
    """
    Get canonical constructor input types from a contract ABI.

    Returns:
        List of ABI type strings; empty if the contract declares no constructor
    """
    for item in abi:
        if item.get("type") == "constructor":
            return [_canonical_type(p) for p in item.get("inputs", [])]
    return []


def load_constructor_types(
    contract_id: str, out_dir: Optional[Union[Path, str]] = None
) -> List[str]:
    """
    Read constructor input types from a forge build artifact.

    Raises:
        ConfigurationError: If the artifact is missing or unreadable (run `forge build`)
    """
    artifact_path = get_artifact_path(contract_id, out_dir)
    try:
        with open(artifact_path) as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(
            f"Build artifact not found at {artifact_path}. Run `forge build` first."
        ) from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Corrupted build artifact at {artifact_path}: {e}") from e

    return constructor_types(data.get("abi", []))
