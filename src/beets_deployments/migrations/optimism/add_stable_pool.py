from __future__ import annotations

from beets_deployments.numbers import fp
from beets_deployments.pools import CreatedPool, PoolDeploymentContext, StablePoolRequest, create_stable_pool
from beets_deployments.tokens import OPTIMISM_TOKENS

OWNER = "0xd9e2889AC8C6fFF8e94c7c1bEEAde1352dF1A513"


def build_request() -> StablePoolRequest:
    return StablePoolRequest(
        name="StableFactoryV2",
        symbol="BPTs-FACv2",
        tokens=[OPTIMISM_TOKENS.address("USDT"), OPTIMISM_TOKENS.address("DAI")],
        amplification_parameter=1000,
        initial_balances=[1_000_000, fp(1)],
        swap_fee_percentage=fp("0.0004"),
        owner=OWNER,
    )


def run(ctx: PoolDeploymentContext) -> CreatedPool:
    return create_stable_pool(ctx, build_request())
