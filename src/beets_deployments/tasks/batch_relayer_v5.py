"""Batch relayer v5: the library deploys its relayer entrypoint in its constructor.

The relayer is never deployed directly, so after the library lands its
entrypoint is read back, verified with the relayer's own constructor
arguments and recorded alongside the library.
"""

from __future__ import annotations

from dataclasses import dataclass

from eth_utils import to_checksum_address

from beets_deployments.task import Address, Task, TaskDefinition, TaskRunOptions
from beets_deployments.tasks.common import VAULT

TASK_ID = "20230327-batch-relayer-v5"

# Fantom integrations wired into the library.
MASTERCHEF = to_checksum_address("0x8166994d9ebBe5829EC86Bd81258149B87faCfd3")
XBOO = to_checksum_address("0xa48d959AE2E88f1dAA7D5F611E01908106dE7598")
FBEETS = to_checksum_address("0xfcef8a994209d6916eb2c86cdd2afd60aa6f54b1")
RELIQUARY = to_checksum_address("0x1ed6411670c709F4e163854654BD52c74E66D7eC")


@dataclass(frozen=True)
class BatchRelayerDeployment:
    vault: Address


def library_args(deployment: BatchRelayerDeployment) -> list:
    return [deployment.vault, MASTERCHEF, XBOO, FBEETS, RELIQUARY]


def run(task: Task, options: TaskRunOptions) -> None:
    deployment = task.input()
    library = task.deploy_and_verify("BatchRelayerLibrary", library_args(deployment), options.from_, options.force)

    relayer = library.functions.getEntrypoint().call()
    task.verify("BalancerRelayer", relayer, [deployment.vault, library.address])
    task.save({"BalancerRelayer": relayer})


DEFINITION = TaskDefinition(
    input_type=BatchRelayerDeployment,
    inputs={"fantom": {"vault": VAULT}},
    runner=run,
)
