from __future__ import annotations

from dataclasses import dataclass

from beets_deployments.task import Address, Task, TaskDefinition, TaskRunOptions
from beets_deployments.tasks.common import PROTOCOL_FEE_PERCENTAGES_PROVIDER, VAULT, version

TASK_ID = "20230320-weighted-pool-v4"


@dataclass(frozen=True)
class WeightedPoolV4Deployment:
    vault: Address
    protocol_fee_percentages_provider: Address
    factory_version: str
    pool_version: str


def factory_args(deployment: WeightedPoolV4Deployment, protocol_fee_provider: str | None = None) -> list:
    """Constructor arguments, optionally pointing the factory at another fee provider."""
    return [
        deployment.vault,
        protocol_fee_provider or deployment.protocol_fee_percentages_provider,
        deployment.factory_version,
        deployment.pool_version,
    ]


def run(task: Task, options: TaskRunOptions) -> None:
    task.deploy_and_verify("WeightedPoolFactory", factory_args(task.input()), options.from_, options.force)


_INPUT = {
    "vault": VAULT,
    "protocol_fee_percentages_provider": PROTOCOL_FEE_PERCENTAGES_PROVIDER,
    "factory_version": version("WeightedPoolFactory", 4, TASK_ID),
    "pool_version": version("WeightedPool", 4, TASK_ID),
}

DEFINITION = TaskDefinition(
    input_type=WeightedPoolV4Deployment,
    inputs={"fantom": _INPUT, "optimism": _INPUT, "mainnet": _INPUT},
    runner=run,
)
