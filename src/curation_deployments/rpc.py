"""JSON-RPC helpers for curation-deployments."""

import requests


def get_code(address: str, rpc_url: str, block: str = "latest") -> str:
    """
    Get the runtime bytecode stored at an address.

    Args:
        address: Contract address
        rpc_url: RPC endpoint URL
        block: Block tag or hex block number

    Returns:
        Hex bytecode; "0x" if no contract lives at the address

    Raises:
        ValueError: If RPC returns an error or a response without a result
        RuntimeError: If network error occurs
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": "eth_getCode",
                "params": [address, block],
                "id": 1,
            },
            timeout=30,
        )

        if response.status_code != 200:
            raise RuntimeError(f"RPC request failed with status {response.status_code}")

        result = response.json()

        if "error" in result:
            raise ValueError(f"RPC error: {result['error']}")

        if "result" not in result:
            raise ValueError(f"RPC response missing result: {result}")

        return result["result"]

    except requests.RequestException as e:
        raise RuntimeError(f"Network error during RPC call: {e}") from e


def has_code(address: str, rpc_url: str) -> bool:
    """Check whether a contract is deployed at an address."""
    code = get_code(address, rpc_url)
    return code not in ("0x", "0x0", "")
