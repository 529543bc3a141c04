from pathlib import Path

import click
from eth_utils import is_address, to_checksum_address


def _checksum_socket_address(ctx, param, value):
    if value is None:
        return None
    if not is_address(value):
        raise click.BadParameter(f"{value} is not a valid ethereum address")
    return to_checksum_address(value)


auto_option = click.option(
    "--auto",
    help="Automatically sign transactions.",
    is_flag=True,
)

params_filepath_option = click.option(
    "--params-filepath",
    "-p",
    help="Socket deployment params YAML file",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    required=True,
)

registry_filepath_option = click.option(
    "--registry-filepath",
    "-f",
    help="Registry file holding the deployed Socket",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    required=False,
)

socket_address_option = click.option(
    "--address",
    "-a",
    help="Address of a deployed Socket, if not looked up in a registry",
    callback=_checksum_socket_address,
    required=False,
)

verify_option = click.option(
    "--verify/--no-verify",
    help="Publish the contract source to the network's block explorer.",
    default=True,
    show_default=True,
)

required_confirmations_option = click.option(
    "--required-confirmations",
    "-rc",
    help="Overrides the number of block confirmations to wait for.",
    type=click.IntRange(min=1),
    required=False,
)
