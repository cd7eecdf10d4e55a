#!/usr/bin/python3
"""
Deploys the MarketPlace and its ERC721Royalty collection.

    ape run deploy --network ethereum:local:test
    ape run deploy --network ethereum:sepolia:infura --account-id deployer --verify
"""

import click
from ape import networks
from ape.cli import ConnectedProviderCommand, network_option

from deployment.options import (
    account_id_option,
    params_filepath_option,
    save_arguments_option,
    verify_option,
)
from deployment.params import DeploymentParameters
from deployment.runner import execute
from deployment.utils import get_account


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@params_filepath_option
@account_id_option
@verify_option
@save_arguments_option
def cli(network, params_filepath, account_id, verify, persist_arguments):
    """Deploy the marketplace contracts and print their addresses."""
    parameters = DeploymentParameters.from_yaml(params_filepath)
    click.secho(
        f"Network: {networks.provider.network.name} "
        f"(chain id {networks.provider.network.chain_id}), config: {params_filepath}",
        fg="yellow",
        err=True,
    )
    execute(
        parameters=parameters,
        account=get_account(account_id),
        verify=verify,
        persist_arguments=persist_arguments,
    )


if __name__ == "__main__":
    cli()
