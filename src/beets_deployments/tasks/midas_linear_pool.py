from __future__ import annotations

from dataclasses import dataclass

from beets_deployments.task import Address, Task, TaskDefinition, TaskRunOptions
from beets_deployments.tasks.common import BALANCER_QUERIES, PROTOCOL_FEE_PERCENTAGES_PROVIDER, VAULT, version

TASK_ID = "20230424-midas-linear-pool"

DAY = 24 * 60 * 60


@dataclass(frozen=True)
class MidasLinearPoolDeployment:
    vault: Address
    protocol_fee_percentages_provider: Address
    balancer_queries: Address
    factory_version: str
    pool_version: str
    initial_pause_window_duration: int
    buffer_period_duration: int


def run(task: Task, options: TaskRunOptions) -> None:
    deployment = task.input()
    args = [
        deployment.vault,
        deployment.protocol_fee_percentages_provider,
        deployment.balancer_queries,
        deployment.factory_version,
        deployment.pool_version,
        deployment.initial_pause_window_duration,
        deployment.buffer_period_duration,
    ]
    task.deploy_and_verify("MidasLinearPoolFactory", args, options.from_, options.force)


_INPUT = {
    "vault": VAULT,
    "protocol_fee_percentages_provider": PROTOCOL_FEE_PERCENTAGES_PROVIDER,
    "balancer_queries": BALANCER_QUERIES,
    "factory_version": version("MidasLinearPoolFactory", 1, TASK_ID),
    "pool_version": version("MidasLinearPool", 1, TASK_ID),
    "initial_pause_window_duration": 90 * DAY,
    "buffer_period_duration": 30 * DAY,
}

DEFINITION = TaskDefinition(
    input_type=MidasLinearPoolDeployment,
    inputs={"fantom": _INPUT, "optimism": _INPUT},
    runner=run,
)
