import pytest
from web3 import Web3

from beets_deployments.records import RecordStore


@pytest.fixture
def w3() -> Web3:
    # Only used to build contract objects for encoding and decoding.
    return Web3()


@pytest.fixture
def store(tmp_path) -> RecordStore:
    return RecordStore(tmp_path)
