import os

import pytest
from eth_utils import to_checksum_address

from deployment.params import DeploymentTarget


class DeploymentRejected(Exception):
    pass


class FakeContainer:
    def __init__(self, name):
        self.name = name


class FakeInstance:
    def __init__(self, contract_name, args):
        self.contract_name = contract_name
        self.args = args
        self.address = to_checksum_address("0x" + os.urandom(20).hex())


class FakeAccount:
    """Stands in for an ape account; records every deploy call in order."""

    def __init__(self, reject=()):
        self.reject = set(reject)
        self.deploy_calls = list()

    def deploy(self, container, *args, publish=False):
        self.deploy_calls.append((container.name, args, publish))
        if container.name in self.reject:
            raise DeploymentRejected(f"{container.name} deployment reverted")
        return FakeInstance(container.name, args)


def get_fake_container(contract_name):
    return FakeContainer(contract_name)


@pytest.fixture
def deployer():
    return FakeAccount()


@pytest.fixture
def rejecting_deployer():
    def _factory(*contract_names):
        return FakeAccount(reject=contract_names)

    return _factory


@pytest.fixture
def get_container():
    return get_fake_container


@pytest.fixture
def token_target():
    return DeploymentTarget(contract_name="Token", label="Token", constructor_args=(1000,))
