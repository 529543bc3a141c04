#!/usr/bin/python3

import click
from ape import networks
from ape.cli import ConnectedProviderCommand, account_option, network_option
from ape.logging import logger

from socket_deployment.confirm import _continue
from socket_deployment.deployer import SocketDeployer
from socket_deployment.options import (
    auto_option,
    params_filepath_option,
    required_confirmations_option,
    verify_option,
)
from socket_deployment.params import SocketParameters
from socket_deployment.registry import registry_from_ape_deployments
from socket_deployment.utils import check_etherscan_plugin, should_verify


@click.command(cls=ConnectedProviderCommand, name="deploy-socket")
@account_option()
@network_option(required=True)
@params_filepath_option
@verify_option
@required_confirmations_option
@auto_option
def cli(network, account, params_filepath, verify, required_confirmations, auto):
    """
    Deploys a Socket wired to the hasher and vault recorded in a dependency registry.

    ape run deploy_socket --network ethereum:sepolia:infura --account deployer
        --params-filepath socket_deployment/constructor_params/sepolia/socket.yml
    """
    params = SocketParameters.from_yaml(filepath=params_filepath)
    verify = should_verify(verify)
    if verify:
        check_etherscan_plugin()

    if auto:
        logger.warning("Autosign is enabled. Transactions will be signed automatically.")
        account.set_autosign(True)

    print(
        f"Account: {account.address}",
        f"Config: {params.path}",
        f"Registry: {params.registry_filepath}",
        f"Dependencies: {params.dependency_registry}",
        f"Verify: {verify}",
        f"Network: {networks.provider.network.name}",
        f"Chain ID: {params.chain_id}",
        sep="\n",
    )
    if not auto:
        _continue()

    dependencies = params.resolve_dependencies()
    deployer = SocketDeployer(
        account=account,
        verify=verify,
        confirm=not auto,
        required_confirmations=required_confirmations or params.required_confirmations,
    )
    try:
        deployer.deploy(chain_id=params.chain_id, **dependencies)
    finally:
        # a confirmed Socket is recorded even when its verification failed
        if deployer.deployments:
            registry_from_ape_deployments(
                deployments=deployer.deployments, output_filepath=params.registry_filepath
            )


if __name__ == "__main__":
    cli()
