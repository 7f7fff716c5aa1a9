"""The Vault itself predates this repository: only its records are kept."""

from __future__ import annotations

from dataclasses import dataclass

from beets_deployments.errors import ReadOnlyTaskError
from beets_deployments.task import Task, TaskDefinition, TaskRunOptions

TASK_ID = "20210418-vault"


@dataclass(frozen=True)
class VaultDeployment:
    pass


def run(task: Task, options: TaskRunOptions) -> None:
    raise ReadOnlyTaskError(f"{TASK_ID} is record-only and cannot be run")


DEFINITION = TaskDefinition(
    input_type=VaultDeployment,
    inputs={"fantom": {}, "optimism": {}, "mainnet": {}},
    runner=run,
)
