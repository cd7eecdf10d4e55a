import typing
from pathlib import Path
from typing import Any, List, NamedTuple, Tuple

from deployment.constants import (
    COLLECTION_NAME,
    COLLECTION_SYMBOL,
    ERC721_ROYALTY,
    MARKETPLACE,
)
from deployment.utils import _load_yaml

CONTRACT_CONSTRUCTOR_PARAMETER_KEY = "constructor"
CONTRACT_LABEL_KEY = "label"


class DeploymentConfigError(ValueError):
    pass


class DeploymentTarget(NamedTuple):
    """A contract to deploy, the label its address is printed under, and its constructor args."""

    contract_name: str
    label: str
    constructor_args: Tuple[Any, ...] = ()


DEFAULT_TARGETS = (
    DeploymentTarget(contract_name=MARKETPLACE, label="Market"),
    DeploymentTarget(
        contract_name=ERC721_ROYALTY,
        label="ERC721",
        constructor_args=(COLLECTION_NAME, COLLECTION_SYMBOL),
    ),
)


def _process_constructor_params(contract_name: str, contract_data: typing.Dict) -> Tuple[Any, ...]:
    constructor_params = contract_data.get(CONTRACT_CONSTRUCTOR_PARAMETER_KEY)
    if constructor_params is None:
        return ()
    if isinstance(constructor_params, list):
        # positional form
        return tuple(constructor_params)
    if not isinstance(constructor_params, dict):
        raise DeploymentConfigError(
            f"Malformed constructor parameter config for {contract_name}."
        )
    # YAML mappings keep document order, which is the constructor argument order
    return tuple(constructor_params.values())


def _target_from_contract_info(contract_info: Any) -> DeploymentTarget:
    if isinstance(contract_info, str):
        return DeploymentTarget(contract_name=contract_info, label=contract_info)

    if not isinstance(contract_info, dict) or len(contract_info) != 1:
        raise DeploymentConfigError("Malformed constructor parameters YAML.")

    contract_name = list(contract_info.keys())[0]  # only one entry
    contract_data = contract_info[contract_name]
    if contract_data is None:
        contract_data = dict()
    if not isinstance(contract_data, dict):
        raise DeploymentConfigError(f"Malformed deployment config for {contract_name}.")

    return DeploymentTarget(
        contract_name=contract_name,
        label=str(contract_data.get(CONTRACT_LABEL_KEY) or contract_name),
        constructor_args=_process_constructor_params(contract_name, contract_data),
    )


class DeploymentParameters:
    """Represents the ordered set of contracts to deploy and their constructor arguments."""

    def __init__(self, targets: typing.Sequence[DeploymentTarget], path: Path = None):
        self.targets = tuple(targets)
        self.path = path
        self._validate()

    def _validate(self) -> None:
        if not self.targets:
            raise DeploymentConfigError("No contracts to deploy.")
        seen: List[str] = list()
        for target in self.targets:
            if target.contract_name in seen:
                raise DeploymentConfigError(
                    f"Contract {target.contract_name} is listed more than once."
                )
            seen.append(target.contract_name)

    @classmethod
    def from_config(cls, config: typing.Dict, path: Path = None) -> "DeploymentParameters":
        contracts = (config or dict()).get("contracts")
        if not contracts:
            raise DeploymentConfigError("Constructor parameters file missing 'contracts' field.")
        if not isinstance(contracts, list):
            raise DeploymentConfigError("'contracts' must be a list.")
        targets = [_target_from_contract_info(contract_info) for contract_info in contracts]
        return cls(targets=targets, path=path)

    @classmethod
    def from_yaml(cls, filepath: Path) -> "DeploymentParameters":
        config = _load_yaml(filepath)
        return cls.from_config(config, path=filepath)
