from __future__ import annotations

from dataclasses import dataclass

from beets_deployments.task import Address, Task, TaskDefinition, TaskRunOptions

TASK_ID = "20230406-balancer-pool-manager"

OWNER = "0xcd983793adb846dce4830c22f30c7ef0c864a776"


@dataclass(frozen=True)
class BalancerPoolManagerDeployment:
    owner: Address


def run(task: Task, options: TaskRunOptions) -> None:
    deployment = task.input()
    task.deploy_and_verify("BalancerPoolManager", [deployment.owner], options.from_, options.force)


DEFINITION = TaskDefinition(
    input_type=BalancerPoolManagerDeployment,
    inputs={network: {"owner": OWNER} for network in ("fantom", "optimism", "mainnet")},
    runner=run,
)
