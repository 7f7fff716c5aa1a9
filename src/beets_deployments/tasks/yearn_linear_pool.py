from __future__ import annotations

from dataclasses import dataclass

from beets_deployments.task import Address, Task, TaskDefinition, TaskRunOptions
from beets_deployments.tasks.common import BALANCER_QUERIES, PROTOCOL_FEE_PERCENTAGES_PROVIDER, VAULT, version

TASK_ID = "20221114-yearn-linear-pool"


@dataclass(frozen=True)
class YearnLinearPoolDeployment:
    vault: Address
    protocol_fee_percentages_provider: Address
    balancer_queries: Address
    factory_version: str
    pool_version: str


def run(task: Task, options: TaskRunOptions) -> None:
    deployment = task.input()
    args = [
        deployment.vault,
        deployment.protocol_fee_percentages_provider,
        deployment.balancer_queries,
        deployment.factory_version,
        deployment.pool_version,
    ]
    task.deploy_and_verify("YearnLinearPoolFactory", args, options.from_, options.force)


_INPUT = {
    "vault": VAULT,
    "protocol_fee_percentages_provider": PROTOCOL_FEE_PERCENTAGES_PROVIDER,
    "balancer_queries": BALANCER_QUERIES,
    "factory_version": version("YearnLinearPoolFactory", 1, TASK_ID),
    "pool_version": version("YearnLinearPool", 1, TASK_ID),
}

DEFINITION = TaskDefinition(
    input_type=YearnLinearPoolDeployment,
    inputs={"fantom": _INPUT, "optimism": _INPUT},
    runner=run,
)
