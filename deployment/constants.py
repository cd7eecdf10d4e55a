from pathlib import Path

#
# Filesystem
#

DEPLOYMENT_DIR = Path(__file__).parent
CONSTRUCTOR_PARAMS_DIR = DEPLOYMENT_DIR / "constructor_params"
DEFAULT_PARAMS_FILEPATH = CONSTRUCTOR_PARAMS_DIR / "marketplace.yml"

# relative to the working directory
ARGUMENTS_DIRNAME = "arguments"
ARGUMENTS_FILE_EXTENSION = ".js"
ARGUMENTS_MODULE_PREFIX = "module.exports = "

#
# Networks
#

LOCAL_BLOCKCHAIN_ENVIRONMENTS = ["local"]

#
# Contracts
#

MARKETPLACE = "MarketPlace"
ERC721_ROYALTY = "ERC721Royalty"

COLLECTION_NAME = "MarketCollection"
COLLECTION_SYMBOL = "MKC"
