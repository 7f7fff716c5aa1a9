from __future__ import annotations

from dataclasses import dataclass

from beets_deployments.task import Address, Task, TaskDefinition, TaskRunOptions
from beets_deployments.tasks.common import BALANCER_QUERIES, PROTOCOL_FEE_PERCENTAGES_PROVIDER, VAULT

TASK_ID = "20221205-boo-linear-pool-v2"


@dataclass(frozen=True)
class BooLinearPoolDeployment:
    vault: Address
    protocol_fee_percentages_provider: Address
    balancer_queries: Address


def run(task: Task, options: TaskRunOptions) -> None:
    deployment = task.input()
    args = [deployment.vault, deployment.protocol_fee_percentages_provider, deployment.balancer_queries]
    task.deploy_and_verify("BooLinearPoolFactory", args, options.from_, options.force)


DEFINITION = TaskDefinition(
    input_type=BooLinearPoolDeployment,
    inputs={
        "fantom": {
            "vault": VAULT,
            "protocol_fee_percentages_provider": PROTOCOL_FEE_PERCENTAGES_PROVIDER,
            "balancer_queries": BALANCER_QUERIES,
        },
    },
    runner=run,
)
