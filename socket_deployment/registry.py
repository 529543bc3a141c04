import json
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional

from ape.contracts import ContractInstance
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address
from eth_typing import ABI

from socket_deployment.utils import _load_json, get_contract_container

ChainId = int
ContractName = str


STANDARD_REGISTRY_JSON_FORMAT = {"indent": 4, "separators": (",", ": ")}


class RegistryEntry(NamedTuple):
    """A single deployed contract as recorded in a registry file."""

    chain_id: ChainId
    name: ContractName
    address: ChecksumAddress
    abi: ABI
    tx_hash: str
    block_number: int
    deployer: str


def _get_entry(contract_instance: ContractInstance) -> RegistryEntry:
    receipt = contract_instance.receipt
    abi = [
        item.model_dump(mode="json", by_alias=True, exclude_none=True)
        for item in contract_instance.contract_type.abi
    ]
    return RegistryEntry(
        chain_id=receipt.transaction.chain_id,
        name=contract_instance.contract_type.name,
        address=to_checksum_address(contract_instance.address),
        abi=abi,
        tx_hash=receipt.txn_hash,
        block_number=receipt.block_number,
        deployer=receipt.transaction.sender,
    )


def _artifacts(entry: RegistryEntry) -> dict:
    return {
        "address": entry.address,
        "abi": sorted(entry.abi, key=lambda item: (item["type"], item.get("name", ""))),
        "tx_hash": entry.tx_hash,
        "block_number": int(entry.block_number),
        "deployer": entry.deployer,
    }


def read_registry(filepath: Path) -> List[RegistryEntry]:
    return [
        RegistryEntry(chain_id=int(chain_id), name=name, **artifacts)
        for chain_id, contracts in _load_json(filepath).items()
        for name, artifacts in contracts.items()
    ]


def write_registry(entries: List[RegistryEntry], filepath: Path) -> Path:
    """
    Adds entries to a registry file, creating it if needed. Other contracts already
    registered for the same chain are kept; registering a contract name twice on one
    chain is refused and leaves the file untouched.
    """
    if not entries:
        print("No registry entries to write.")
        return filepath

    data = _load_json(filepath) if filepath.exists() else dict()
    for entry in entries:
        chain_contracts = data.setdefault(str(entry.chain_id), dict())
        if entry.name in chain_contracts:
            raise ValueError(
                f"{entry.name} is already registered for chain {entry.chain_id} "
                f"at {chain_contracts[entry.name]['address']} in {filepath}."
            )
        chain_contracts[entry.name] = _artifacts(entry)

    # chains numerically, contracts by name
    data = {
        chain_id: dict(sorted(data[chain_id].items()))
        for chain_id in sorted(data, key=int)
    }
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w") as file:
        json.dump(data, file, **STANDARD_REGISTRY_JSON_FORMAT)

    return filepath


def registry_from_ape_deployments(
    deployments: List[ContractInstance], output_filepath: Path
) -> Path:
    """Records ape deployments in a registry file."""
    entries = [_get_entry(contract_instance) for contract_instance in deployments]
    output_filepath = write_registry(entries=entries, filepath=output_filepath)
    print(f"(i) Registry written to {output_filepath}!")
    return output_filepath


def get_registry_entry(
    filepath: Path, chain_id: ChainId, contract_name: ContractName
) -> Optional[RegistryEntry]:
    matches = (
        entry
        for entry in read_registry(filepath=filepath)
        if (entry.chain_id, entry.name) == (chain_id, contract_name)
    )
    return next(matches, None)


def contracts_from_registry(filepath: Path, chain_id: ChainId) -> Dict[str, ContractInstance]:
    """Binds every contract a registry records for `chain_id` to its project container."""
    return {
        entry.name: get_contract_container(entry.name).at(entry.address)
        for entry in read_registry(filepath=filepath)
        if entry.chain_id == chain_id
    }
