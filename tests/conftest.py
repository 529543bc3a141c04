from types import SimpleNamespace

import pytest

from socket_deployment import deployer as socket_deployer

CHAIN_ID = 11155111
HASHER_ADDRESS = "0x1111111111111111111111111111111111111111"
VAULT_ADDRESS = "0x2222222222222222222222222222222222222222"
SOCKET_ADDRESS = "0x3333333333333333333333333333333333333333"
DEPLOYER_ADDRESS = "0x4444444444444444444444444444444444444444"

RUNTIME_CODE = bytes.fromhex("6080604052")

SOCKET_CONSTRUCTOR_INPUTS = [
    SimpleNamespace(name="_chainSlug", type="uint32"),
    SimpleNamespace(name="_hasher", type="address"),
    SimpleNamespace(name="_vault", type="address"),
]


def contract_container(name, inputs):
    return SimpleNamespace(
        contract_type=SimpleNamespace(name=name),
        constructor=SimpleNamespace(abi=SimpleNamespace(inputs=inputs)),
    )


class Ledger:
    """In-memory chain: contract code by address plus every submitted deployment."""

    def __init__(self):
        self.code = {HASHER_ADDRESS: RUNTIME_CODE, VAULT_ADDRESS: RUNTIME_CODE}
        self.submitted = []
        self.verified = []

    def get_code(self, address):
        return self.code.get(address, b"")


class Signer:
    """Signing account that mines every deployment at a fixed address."""

    def __init__(self, ledger, address=SOCKET_ADDRESS):
        self.ledger = ledger
        self.address = DEPLOYER_ADDRESS
        self.deploy_address = address
        self.error = None

    def deploy(self, container, *args, **kwargs):
        self.ledger.submitted.append((container.contract_type.name, list(args), kwargs))
        if self.error:
            raise self.error
        self.ledger.code[self.deploy_address] = RUNTIME_CODE
        return SimpleNamespace(address=self.deploy_address, contract_type=container.contract_type)


@pytest.fixture
def ledger(monkeypatch):
    ledger = Ledger()
    containers = {"Socket": contract_container("Socket", SOCKET_CONSTRUCTOR_INPUTS)}

    def get_contract_container(name):
        try:
            return containers[name]
        except KeyError:
            raise ValueError(f"No contract found with name '{name}'.")

    def verify_contract(address, contract_name):
        ledger.verified.append((address, contract_name))

    monkeypatch.setattr(socket_deployer, "get_contract_container", get_contract_container)
    monkeypatch.setattr(socket_deployer, "get_deployed_code", ledger.get_code)
    monkeypatch.setattr(socket_deployer, "verify_contract", verify_contract)
    ledger.containers = containers
    return ledger


@pytest.fixture
def signer(ledger):
    return Signer(ledger)


@pytest.fixture
def hasher():
    return SimpleNamespace(address=HASHER_ADDRESS)


@pytest.fixture
def vault():
    return SimpleNamespace(address=VAULT_ADDRESS)
