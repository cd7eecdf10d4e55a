import sys
import traceback
import typing
from typing import Callable, List

import click
from ape.api import AccountAPI
from ape.contracts import ContractContainer, ContractInstance

from deployment.arguments import save_arguments
from deployment.params import DEFAULT_TARGETS, DeploymentParameters, DeploymentTarget
from deployment.utils import check_etherscan_plugin, get_contract_container


class DeploymentRunner:
    """
    Deploys a fixed sequence of contracts from a single account.

    Each deployment blocks until its receipt is mined, so a target is never
    submitted before the previous one is confirmed. Failures are not retried
    and nothing already deployed is rolled back.
    """

    def __init__(
        self,
        account: AccountAPI,
        get_container: Callable[[str], ContractContainer] = get_contract_container,
        publish: bool = False,
    ):
        self.account = account
        self.get_container = get_container
        self.publish = publish

    def deploy(self, target: DeploymentTarget) -> ContractInstance:
        container = self.get_container(target.contract_name)
        instance = self.account.deploy(container, *target.constructor_args, publish=self.publish)
        print(f"{target.label}: {instance.address}")
        return instance

    def run(
        self, targets: typing.Sequence[DeploymentTarget] = DEFAULT_TARGETS
    ) -> List[ContractInstance]:
        deployments = list()
        for target in targets:
            deployments.append(self.deploy(target))
        return deployments


def main(
    runner: DeploymentRunner, targets: typing.Sequence[DeploymentTarget] = DEFAULT_TARGETS
) -> int:
    """Runs the deployments and returns the process exit status."""
    try:
        runner.run(targets)
    except Exception:
        traceback.print_exc()
        return 1
    return 0


def persist_constructor_arguments(targets: typing.Sequence[DeploymentTarget]) -> None:
    for target in targets:
        filepath = save_arguments(list(target.constructor_args), target.label.lower())
        click.secho(
            f"Constructor arguments for {target.contract_name} written to {filepath}", err=True
        )


def execute(
    parameters: DeploymentParameters,
    account: AccountAPI,
    verify: bool = False,
    persist_arguments: bool = False,
    get_container: Callable[[str], ContractContainer] = get_contract_container,
) -> None:
    """Deploys the configured targets and exits the process with the resulting status."""
    if verify:
        check_etherscan_plugin()
    if persist_arguments:
        persist_constructor_arguments(parameters.targets)

    runner = DeploymentRunner(account=account, get_container=get_container, publish=verify)
    sys.exit(main(runner, parameters.targets))
