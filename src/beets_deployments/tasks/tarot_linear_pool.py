from __future__ import annotations

from dataclasses import dataclass

from beets_deployments.task import Address, Task, TaskDefinition, TaskRunOptions
from beets_deployments.tasks.common import BALANCER_QUERIES, PROTOCOL_FEE_PERCENTAGES_PROVIDER, VAULT

TASK_ID = "20221205-tarot-linear-pool"

# Tarot factories take bare version strings rather than the JSON blobs.
FACTORY_VERSION = "2"
POOL_VERSION = "2"


@dataclass(frozen=True)
class TarotLinearPoolDeployment:
    vault: Address
    protocol_fee_percentages_provider: Address
    balancer_queries: Address


def run(task: Task, options: TaskRunOptions) -> None:
    deployment = task.input()
    args = [
        deployment.vault,
        deployment.protocol_fee_percentages_provider,
        deployment.balancer_queries,
        FACTORY_VERSION,
        POOL_VERSION,
    ]
    task.deploy_and_verify("TarotLinearPoolFactory", args, options.from_, options.force)


DEFINITION = TaskDefinition(
    input_type=TarotLinearPoolDeployment,
    inputs={
        "fantom": {
            "vault": VAULT,
            "protocol_fee_percentages_provider": PROTOCOL_FEE_PERCENTAGES_PROVIDER,
            "balancer_queries": BALANCER_QUERIES,
        },
    },
    runner=run,
)
