"""Registry of deployment tasks, keyed by their dated id."""

from __future__ import annotations

from beets_deployments.errors import UnknownTaskError
from beets_deployments.task import TaskDefinition
from beets_deployments.tasks import (
    balancer_pool_manager,
    batch_relayer_v5,
    boo_linear_pool_v2,
    midas_linear_pool,
    pool_specific_protocol_fee_provider,
    reaper_manual_rebalancer,
    tarot_linear_pool,
    vault,
    weighted_pool_v4,
    yearn_linear_pool,
)

TASKS: dict[str, TaskDefinition] = {
    module.TASK_ID: module.DEFINITION
    for module in (
        vault,
        reaper_manual_rebalancer,
        yearn_linear_pool,
        boo_linear_pool_v2,
        tarot_linear_pool,
        weighted_pool_v4,
        batch_relayer_v5,
        pool_specific_protocol_fee_provider,
        balancer_pool_manager,
        midas_linear_pool,
    )
}


def get_definition(task_id: str) -> TaskDefinition:
    try:
        return TASKS[task_id]
    except KeyError:
        raise UnknownTaskError(f"Unknown task {task_id!r}; known tasks: {', '.join(sorted(TASKS))}") from None
