"""Helpers shared by the fork suites."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from web3 import Web3

from beets_deployments import config
from beets_deployments.artifacts import Artifact, load_artifact
from beets_deployments.chain import send_transaction
from beets_deployments.errors import ArtifactNotFoundError, TaskInputError
from beets_deployments.fork import ForkChain
from beets_deployments.task import Task, TaskRunOptions

# Compiled test-only contracts (mock reliquary, test tokens): artifact/<Name>.json
TEST_ARTIFACTS_DIR = Path(__file__).parent


def fork_url(network: str) -> str:
    url = os.environ.get(f"{config.ENV_FORK_RPC_URL}_{network.upper()}") or os.environ.get(config.ENV_FORK_RPC_URL)
    if not url:
        pytest.skip(f"{config.ENV_FORK_RPC_URL} not set")
    return url


def fork_at(w3: Web3, network: str, block_number: int | None = None) -> ForkChain:
    fork = ForkChain(w3)
    fork.reset(fork_url(network), block_number)
    return fork


def run_task(task: Task, options: TaskRunOptions) -> None:
    """Run `task`, skipping when its artifacts or dependency records are not available."""
    try:
        task.run(options)
    except (ArtifactNotFoundError, TaskInputError) as exc:
        pytest.skip(f"{task.id} cannot run here: {exc}")


def load_test_artifact(name: str) -> Artifact:
    try:
        return load_artifact(TEST_ARTIFACTS_DIR, name)
    except ArtifactNotFoundError as exc:
        pytest.skip(str(exc))


def deploy(w3: Web3, artifact: Artifact, args: list, sender: str):
    factory = w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
    receipt = send_transaction(w3, factory.constructor(*args), {"from": sender})
    return w3.eth.contract(address=receipt["contractAddress"], abi=artifact.abi)
