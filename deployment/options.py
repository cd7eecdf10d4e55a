from pathlib import Path

import click

from deployment.constants import DEFAULT_PARAMS_FILEPATH

params_filepath_option = click.option(
    "--params-filepath",
    "-p",
    help="YAML file listing the contracts to deploy and their constructor parameters.",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    default=DEFAULT_PARAMS_FILEPATH,
    show_default=True,
)

account_id_option = click.option(
    "--account-id",
    "-a",
    help="Alias of the ape account to deploy from; required on live networks.",
    type=click.STRING,
    required=False,
)

verify_option = click.option(
    "--verify/--no-verify",
    help="Publish the deployed contracts to the network explorer.",
    default=False,
    show_default=True,
)

save_arguments_option = click.option(
    "--save-arguments",
    "persist_arguments",
    help="Write each contract's constructor arguments to ./arguments/<label>.js.",
    is_flag=True,
    default=False,
)
