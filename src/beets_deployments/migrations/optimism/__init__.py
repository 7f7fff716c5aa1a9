from __future__ import annotations

from beets_deployments.migrations import Migration
from beets_deployments.migrations.optimism import add_stable_pool, weighted_test_pool

MIGRATIONS = [
    Migration("00_test_weighted_pool", weighted_test_pool.run),
    Migration("01_add_stable_pool", add_stable_pool.run),
]
