"""
Deployment of the Socket contract on top of its already deployed hasher and vault.
"""

from collections import OrderedDict
from typing import Any, List, Optional

from ape.api import AccountAPI
from ape.contracts import ContractContainer, ContractInstance

from socket_deployment.confirm import _confirm_resolution
from socket_deployment.constants import DEFAULT_REQUIRED_CONFIRMATIONS, SOCKET_CONTRACT_NAME
from socket_deployment.utils import get_contract_container, get_deployed_code, verify_contract


class DeploymentError(Exception):
    """Raised when a deployment cannot proceed or was not confirmed on-chain."""


def socket_constructor_args(chain_id: int, hasher, vault) -> List[Any]:
    """Socket constructor arguments, in constructor order."""
    return [chain_id, hasher.address, vault.address]


def _require_deployed(handle, label: str) -> None:
    """Dependencies must be confirmed contracts, not pending or missing ones."""
    if handle is None:
        raise DeploymentError(f"No {label} contract provided.")
    address = getattr(handle, "address", None)
    if not address:
        raise DeploymentError(f"The {label} contract handle has no address.")
    if not get_deployed_code(address):
        raise DeploymentError(
            f"No contract code found for {label} at {address}; deploy it before the Socket."
        )


def _named_constructor_args(container: ContractContainer, args: List[Any]) -> OrderedDict:
    """
    Names constructor args after the constructor ABI inputs. Value types are left to
    the network, which rejects a creation transaction whose arguments do not encode.
    """
    contract_name = container.contract_type.name
    abi_inputs = container.constructor.abi.inputs
    if len(abi_inputs) != len(args):
        raise DeploymentError(
            f"Constructor parameters length mismatch - "
            f"{contract_name} ABI requires {len(abi_inputs)}, got {len(args)}."
        )

    return OrderedDict(
        (abi_input.name or f"arg{position}", value)
        for position, (abi_input, value) in enumerate(zip(abi_inputs, args))
    )


class SocketDeployer:
    """
    Deploys Socket contracts through a single signing account.

    Every confirmed deployment is kept in `deployments`, including those whose
    source verification failed afterwards.
    """

    def __init__(
        self,
        account: AccountAPI,
        verify: bool = True,
        confirm: bool = False,
        required_confirmations: int = DEFAULT_REQUIRED_CONFIRMATIONS,
    ):
        self.account = account
        self.verify = verify
        self.confirm = confirm
        self.required_confirmations = required_confirmations
        self.deployments: List[ContractInstance] = list()

    def deploy(self, chain_id: int, hasher, vault) -> ContractInstance:
        container = get_contract_container(SOCKET_CONTRACT_NAME)

        _require_deployed(hasher, "hasher")
        _require_deployed(vault, "vault")
        args = socket_constructor_args(chain_id, hasher, vault)
        named_args = _named_constructor_args(container, args)
        if self.confirm:
            _confirm_resolution(named_args, SOCKET_CONTRACT_NAME)

        instance = self.account.deploy(
            container,
            *args,
            publish=False,
            required_confirmations=self.required_confirmations,
        )
        self._await_deployment(instance, args)

        if self.verify:
            # the explorer reads the constructor arguments back from the creation transaction
            verify_contract(instance.address, SOCKET_CONTRACT_NAME)
        return instance

    def _await_deployment(self, instance: Optional[ContractInstance], args: List[Any]) -> None:
        address = getattr(instance, "address", None)
        if not address or not get_deployed_code(address):
            raise DeploymentError(
                f"{SOCKET_CONTRACT_NAME} deployment was not confirmed; "
                f"no contract code at {address}."
            )
        self.deployments.append(instance)
        pretty_args = ", ".join(str(arg) for arg in args)
        print(f"(i) {SOCKET_CONTRACT_NAME} deployed to {address} with arguments ({pretty_args})")


def deploy_socket(
    chain_id: int,
    hasher: ContractInstance,
    vault: ContractInstance,
    signer: AccountAPI,
    verify: bool = True,
) -> ContractInstance:
    """Deploys a Socket for `chain_id` wired to `hasher` and `vault`, then verifies it."""
    deployer = SocketDeployer(account=signer, verify=verify)
    return deployer.deploy(chain_id=chain_id, hasher=hasher, vault=vault)
