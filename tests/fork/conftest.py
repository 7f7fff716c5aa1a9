import os
import shutil

import pytest
from web3 import HTTPProvider, Web3

from beets_deployments import config
from beets_deployments.records import RecordStore


@pytest.fixture(scope="module")
def node() -> Web3:
    """The local anvil node the fork runs in."""
    w3 = Web3(HTTPProvider(os.environ.get(config.ENV_RPC_URL, config.DEFAULT_RPC_URL)))
    if not w3.is_connected():
        pytest.skip("No local node to fork into")
    return w3


@pytest.fixture(scope="module")
def fork_store(tmp_path_factory) -> RecordStore:
    """A scratch copy of the shipped deployments so TEST runs never touch the package."""
    root = tmp_path_factory.mktemp("deployments")
    shutil.copytree(config.PACKAGE_DEPLOYMENTS_DIR, root, dirs_exist_ok=True)
    return RecordStore(root)


@pytest.fixture(scope="module")
def accounts(node) -> list[str]:
    return node.eth.accounts
