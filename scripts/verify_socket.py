#!/usr/bin/python3

import click
from ape import networks
from ape.cli import ConnectedProviderCommand, network_option

from socket_deployment.constants import SOCKET_CONTRACT_NAME
from socket_deployment.options import registry_filepath_option, socket_address_option
from socket_deployment.registry import get_registry_entry
from socket_deployment.utils import check_etherscan_plugin, verify_contract


@click.command(cls=ConnectedProviderCommand, name="verify-socket")
@network_option(required=True)
@registry_filepath_option
@socket_address_option
def cli(network, registry_filepath, address):
    """Publishes the source of a deployed Socket to the network's block explorer."""
    if not (bool(registry_filepath) ^ bool(address)):
        raise click.BadOptionUsage(
            option_name="--registry-filepath",
            message=(
                f"Provide either 'registry_filepath' or 'address'; "
                f"got {registry_filepath}, {address}"
            ),
        )

    if registry_filepath:
        chain_id = networks.active_provider.chain_id
        entry = get_registry_entry(registry_filepath, chain_id, SOCKET_CONTRACT_NAME)
        if entry is None:
            raise click.ClickException(
                f"{SOCKET_CONTRACT_NAME} not found in registry, '{registry_filepath}', "
                f"for chain {chain_id}"
            )
        address = entry.address

    check_etherscan_plugin()
    verify_contract(address, SOCKET_CONTRACT_NAME)


if __name__ == "__main__":
    cli()
