import pytest

from beets_deployments.migrations import select_migrations
from beets_deployments.migrations.optimism import add_stable_pool, weighted_test_pool
from beets_deployments.numbers import ONE
from beets_deployments.tokens import OPTIMISM_TOKENS


def test_migrations_run_in_key_order():
    assert [m.key for m in select_migrations("optimism")] == ["00_test_weighted_pool", "01_add_stable_pool"]


def test_select_by_number_or_key():
    assert [m.key for m in select_migrations("optimism", "01")] == ["01_add_stable_pool"]
    assert [m.number for m in select_migrations("optimism", "00_test_weighted_pool")] == ["00"]


def test_unknown_migration_or_network():
    with pytest.raises(KeyError):
        select_migrations("optimism", "07")
    with pytest.raises(KeyError, match="optimism"):
        select_migrations("mainnet")


def test_weighted_test_pool_request():
    request = weighted_test_pool.build_request()
    assert request.tokens == [OPTIMISM_TOKENS.address(s) for s in ("WETH", "WBTC", "USDC")]
    assert sum(request.weights) == ONE
    assert request.initial_balances == [510_000_000_000_000, 3_400, 10_000_000]
    assert request.swap_fee_percentage == 2_500_000_000_000_000


def test_tokens_are_sorted_by_address():
    for request in (weighted_test_pool.build_request(), add_stable_pool.build_request()):
        assert [t.lower() for t in request.tokens] == sorted(t.lower() for t in request.tokens)


def test_stable_pool_request():
    request = add_stable_pool.build_request()
    assert request.amplification_parameter == 1000
    assert request.initial_balances == [1_000_000, ONE]
    assert request.swap_fee_percentage == 400_000_000_000_000
    assert request.owner == add_stable_pool.OWNER
