import typing
from pathlib import Path

from ape.contracts import ContractInstance

from socket_deployment.constants import (
    ARTIFACTS_DIR,
    DEFAULT_REQUIRED_CONFIRMATIONS,
    SOCKET_CONTRACT_NAME,
    SOCKET_DEPENDENCIES,
)
from socket_deployment.registry import contracts_from_registry, get_registry_entry
from socket_deployment.utils import _load_yaml, get_active_chain_id, is_local_network


def get_artifact_filepath(config: typing.Dict) -> Path:
    """Returns the filepath of the registry the deployment is written to."""
    artifact_config = config.get("artifacts", {})
    artifact_dir = Path(artifact_config.get("dir", ARTIFACTS_DIR))
    filename = artifact_config.get("filename")
    if not filename:
        raise SocketParameters.Invalid("artifact filename is not set in params file.")
    return artifact_dir / filename


def validate_config(config: typing.Dict) -> Path:
    """
    Checks the params file and that a Socket has not already been
    published for the chain_id it specifies.
    """
    print("Validating parameters YAML...")

    deployment = config.get("deployment")
    if not deployment:
        raise SocketParameters.Invalid("deployment is not set in params file.")

    config_chain_id = deployment.get("chain_id")
    if not config_chain_id:
        raise SocketParameters.Invalid("chain_id is not set in params file.")
    config_chain_id = int(config_chain_id)

    dependencies = config.get("dependencies")
    if not dependencies:
        raise SocketParameters.Invalid("Params file missing 'dependencies' field.")
    for key in ("registry", *SOCKET_DEPENDENCIES):
        if not dependencies.get(key):
            raise SocketParameters.Invalid(f"dependencies.{key} is not set in params file.")

    active_chain_id = get_active_chain_id()
    if config_chain_id != active_chain_id and not is_local_network():
        raise SocketParameters.Invalid(
            f"chain_id in params file ({config_chain_id}) does not match "
            f"chain_id of current network ({active_chain_id})."
        )

    registry_filepath = get_artifact_filepath(config=config)
    if not registry_filepath.exists():
        return registry_filepath

    if get_registry_entry(registry_filepath, config_chain_id, SOCKET_CONTRACT_NAME):
        raise SocketParameters.Invalid(
            f"{SOCKET_CONTRACT_NAME} is already published for chain_id {config_chain_id} "
            f"in {registry_filepath}."
        )

    return registry_filepath


class SocketParameters:
    """Deployment parameters of a Socket, as read from a params YAML file."""

    class Invalid(Exception):
        """Raised when the params file is invalid"""

    def __init__(self, config: typing.Dict, path: typing.Optional[Path] = None):
        self.path = path
        self.config = config
        self.registry_filepath = validate_config(config=config)

        deployment = config["deployment"]
        self.name = deployment.get("name", SOCKET_CONTRACT_NAME)
        self.chain_id = int(deployment["chain_id"])
        self.required_confirmations = int(
            deployment.get("required_confirmations", DEFAULT_REQUIRED_CONFIRMATIONS)
        )

        dependencies = config["dependencies"]
        self.dependency_registry = Path(dependencies["registry"])
        self.dependency_names = {key: dependencies[key] for key in SOCKET_DEPENDENCIES}

    @classmethod
    def from_yaml(cls, filepath: Path) -> "SocketParameters":
        config = _load_yaml(filepath)
        return cls(config=config, path=filepath)

    def resolve_dependencies(self) -> typing.Dict[str, ContractInstance]:
        """Looks up the deployed hasher and vault in the dependency registry."""
        if not self.dependency_registry.exists():
            raise self.Invalid(f"No dependency registry found at {self.dependency_registry}")

        contracts = contracts_from_registry(self.dependency_registry, chain_id=self.chain_id)
        resolved = dict()
        for key, contract_name in self.dependency_names.items():
            try:
                resolved[key] = contracts[contract_name]
            except KeyError:
                raise self.Invalid(
                    f"Contract '{contract_name}' ({key}) not found in registry "
                    f"'{self.dependency_registry}' for chain {self.chain_id}"
                )
        return resolved
