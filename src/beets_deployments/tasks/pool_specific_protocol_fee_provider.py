from __future__ import annotations

from dataclasses import dataclass

from beets_deployments.numbers import fp
from beets_deployments.task import Address, Task, TaskDefinition, TaskRunOptions
from beets_deployments.tasks.common import VAULT

TASK_ID = "20230327-pool-specific-protocol-fee-provider"


@dataclass(frozen=True)
class PoolSpecificProtocolFeePercentagesProviderDeployment:
    vault: Address
    max_yield_value: int
    max_aum_value: int


def run(task: Task, options: TaskRunOptions) -> None:
    deployment = task.input()
    args = [deployment.vault, deployment.max_yield_value, deployment.max_aum_value]
    task.deploy_and_verify("PoolSpecificProtocolFeePercentagesProvider", args, options.from_, options.force)


_INPUT = {"vault": VAULT, "max_yield_value": fp(0.5), "max_aum_value": fp(0.5)}

DEFINITION = TaskDefinition(
    input_type=PoolSpecificProtocolFeePercentagesProviderDeployment,
    inputs={"fantom": _INPUT, "optimism": _INPUT, "mainnet": _INPUT},
    runner=run,
)
