from __future__ import annotations

from beets_deployments.numbers import fp, to_normalized_weights
from beets_deployments.pools import CreatedPool, PoolDeploymentContext, WeightedPoolRequest, create_weighted_pool
from beets_deployments.tokens import OPTIMISM_TOKENS


def build_request() -> WeightedPoolRequest:
    third = fp("33.333333333333333333")
    return WeightedPoolRequest(
        name="Test pool",
        symbol="TEST-WEIGHTED",
        # Must be sorted by address; the factory reverts with BAL#101 otherwise.
        tokens=[OPTIMISM_TOKENS.address("WETH"), OPTIMISM_TOKENS.address("WBTC"), OPTIMISM_TOKENS.address("USDC")],
        weights=to_normalized_weights([third, third, third]),
        initial_balances=[fp("0.00051"), 3_400, 10_000_000],
        swap_fee_percentage=fp("0.0025"),
    )


def run(ctx: PoolDeploymentContext) -> CreatedPool:
    return create_weighted_pool(ctx, build_request())
