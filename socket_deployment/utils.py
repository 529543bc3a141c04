import json
import os
from pathlib import Path

import yaml
from ape import networks, project
from ape.api.networks import LOCAL_NETWORK_NAME
from ape.contracts import ContractContainer
from ape.logging import logger
from eth_typing import ChecksumAddress


def _load_yaml(filepath: Path) -> dict:
    """Loads a YAML file."""
    with open(filepath, "r") as file:
        return yaml.safe_load(file)


def _load_json(filepath: Path) -> dict:
    """Loads a JSON file."""
    with open(filepath, "r") as file:
        return json.load(file)


def is_local_network() -> bool:
    """Returns True if the connected network is a local development network."""
    return networks.provider.network.name == LOCAL_NETWORK_NAME


def get_active_chain_id() -> int:
    return networks.provider.network.chain_id


def get_contract_container(contract: str) -> ContractContainer:
    """Resolves a compiled contract factory from the ape project by name."""
    try:
        contract_container = getattr(project, contract)
    except AttributeError as e:
        raise ValueError(f"No contract found with name '{contract}'.") from e

    return contract_container


def get_deployed_code(address: ChecksumAddress) -> bytes:
    """Returns the runtime code stored at an address; empty if there is no contract."""
    code = networks.provider.get_code(address)
    return bytes(code or b"")


def check_etherscan_plugin() -> None:
    """
    Checks that the ape-etherscan plugin is installed and that
    the appropriate API key environment variable is set.
    """
    if is_local_network():
        # unnecessary for local deployment
        return
    try:
        from ape_etherscan.utils import API_KEY_ENV_KEY_MAP
    except ImportError:
        raise ImportError("Please install the ape-etherscan plugin to verify contracts.")
    ecosystem_name = networks.provider.network.ecosystem.name
    explorer_envvar = API_KEY_ENV_KEY_MAP.get(ecosystem_name)
    api_key = os.environ.get(explorer_envvar) if explorer_envvar else None
    if not api_key:
        raise ValueError(f"{explorer_envvar or 'Explorer API key'} is not set.")


def verify_contract(address: ChecksumAddress, contract_name: str) -> None:
    """
    Publishes the source of a deployed contract to the network's block explorer.

    The explorer recovers the constructor arguments from the contract's creation
    transaction, so they are never sent separately. Publishing an already verified
    contract is left to the explorer to treat as a no-op.
    """
    explorer = networks.provider.network.explorer
    if explorer is None:
        raise ValueError(
            f"No block explorer configured for network '{networks.provider.network.name}'; "
            f"cannot verify {contract_name} at {address}."
        )
    print(f"(i) Verifying {contract_name} at {address}...")
    explorer.publish_contract(address)


def should_verify(verify: bool) -> bool:
    """Returns whether verification should proceed on the connected network."""
    if verify and is_local_network():
        logger.warning("Contract verification is not available on local networks; skipping.")
        return False
    return verify
