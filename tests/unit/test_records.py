import json

import pytest
from web3 import Web3

from beets_deployments.errors import RecordNotFoundError

TASK = "20221027-reaper-manual-rebalancer"


def test_read_missing_record_is_empty(store):
    assert store.read(TASK, "fantom") == {}
    assert not store.has(TASK, "fantom", "ReaperManualRebalancer")


def test_save_writes_checksummed_sorted_json(store):
    store.save(TASK, "fantom", {"Zeta": "0x" + "ab" * 20, "Alpha": "0x" + "cd" * 20})

    text = store.path(TASK, "fantom").read_text()
    assert text.endswith("\n")
    assert list(json.loads(text)) == ["Alpha", "Zeta"]
    assert store.get(TASK, "fantom", "Zeta").address == Web3.to_checksum_address("0x" + "ab" * 20)


def test_save_merges_with_existing_outputs(store):
    store.save(TASK, "fantom", {"A": "0x" + "11" * 20})
    store.save(TASK, "fantom", {"B": "0x" + "22" * 20})
    assert set(store.read(TASK, "fantom")) == {"A", "B"}


def test_networks_are_kept_apart(store):
    store.save(TASK, "fantom-test", {"A": "0x" + "11" * 20})
    assert store.read(TASK, "fantom") == {}
    assert store.path(TASK, "fantom-test").name == "fantom-test.json"


def test_get_missing_contract(store):
    with pytest.raises(RecordNotFoundError):
        store.get(TASK, "fantom", "ReaperManualRebalancer")
