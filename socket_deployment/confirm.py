from collections import OrderedDict

import click
from ape.utils import ZERO_ADDRESS


def _abort() -> None:
    print("Aborting deployment!")
    raise click.Abort()


def _continue() -> None:
    """Asks the operator to continue."""
    answer = input("Continue Y/N? ")
    if answer.lower().strip() == "n":
        _abort()


def _confirm_resolution(resolved_params: OrderedDict, contract_name: str) -> None:
    """Prints the resolved constructor parameters of a contract and asks to deploy it."""
    print(f"\nConstructor parameters for {contract_name}")
    for name, resolved_value in resolved_params.items():
        print(f"\t{name}={resolved_value}")

    answer = input(f"Deploy {contract_name} Y/N? ")
    if answer.lower().strip() == "n":
        _abort()

    if ZERO_ADDRESS in resolved_params.values():
        answer = input("Zero Address detected for deployment parameter; Continue? Y/N? ")
        if answer.lower().strip() == "n":
            _abort()
