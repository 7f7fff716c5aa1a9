from __future__ import annotations

from dataclasses import dataclass

from beets_deployments.task import Address, Task, TaskDefinition, TaskRunOptions
from beets_deployments.tasks.common import VAULT

TASK_ID = "20221027-reaper-manual-rebalancer"


@dataclass(frozen=True)
class ReaperManualRebalancerDeployment:
    vault: Address


def run(task: Task, options: TaskRunOptions) -> None:
    deployment = task.input()
    task.deploy_and_verify("ReaperManualRebalancer", [deployment.vault], options.from_, options.force)


DEFINITION = TaskDefinition(
    input_type=ReaperManualRebalancerDeployment,
    inputs={"fantom": {"vault": VAULT}, "optimism": {"vault": VAULT}},
    runner=run,
)
