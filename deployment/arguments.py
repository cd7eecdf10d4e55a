"""
Constructor argument files for contract verification.

Verification tooling reads constructor arguments from small CommonJS modules
(``arguments/<name>.js`` holding ``module.exports = [...]``), so that is the
format written here.
"""

import inspect
import json
from pathlib import Path
from typing import Any, Optional

from deployment.constants import (
    ARGUMENTS_DIRNAME,
    ARGUMENTS_FILE_EXTENSION,
    ARGUMENTS_MODULE_PREFIX,
)
from deployment.params import DeploymentConfigError


def get_arguments_dir() -> Path:
    return Path.cwd() / ARGUMENTS_DIRNAME


def _arguments_filename(suffix: Optional[str], script: Path) -> str:
    if suffix:
        return f"{suffix}{ARGUMENTS_FILE_EXTENSION}"
    return f"{script.stem}{ARGUMENTS_FILE_EXTENSION}"


def save_arguments(args: Any, suffix: Optional[str] = None) -> Path:
    """
    Writes ``args`` as a ``module.exports`` assignment to the arguments directory.

    The file is named ``<suffix>.js``, or after the calling script when no suffix
    is given. An existing file at that path is overwritten.
    """
    caller = Path(inspect.stack(0)[1].filename)
    filepath = get_arguments_dir() / _arguments_filename(suffix=suffix, script=caller)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w") as file:
        file.write(f"{ARGUMENTS_MODULE_PREFIX}{json.dumps(args)}")
    return filepath


def load_arguments(filepath: Path) -> Any:
    """Reads back an arguments file written by save_arguments."""
    with open(filepath, "r") as file:
        data = file.read()
    if not data.startswith(ARGUMENTS_MODULE_PREFIX):
        raise DeploymentConfigError(f"{filepath} is not a constructor arguments file.")
    return json.loads(data[len(ARGUMENTS_MODULE_PREFIX) :])
