"""Per-network pool migrations, applied in key order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from beets_deployments.pools import CreatedPool, PoolDeploymentContext


@dataclass(frozen=True)
class Migration:
    key: str
    run: Callable[[PoolDeploymentContext], CreatedPool]

    @property
    def number(self) -> str:
        return self.key.split("_", 1)[0]


def load_migrations(network: str) -> list[Migration]:
    from beets_deployments.migrations import optimism

    registry = {"optimism": optimism.MIGRATIONS}
    if network not in registry:
        raise KeyError(f"No pool migrations for {network!r}; known networks: {', '.join(sorted(registry))}")
    return sorted(registry[network], key=lambda migration: migration.key)


def select_migrations(network: str, only: str | None = None) -> list[Migration]:
    """All migrations for `network`, or the one whose number or key is `only`."""
    migrations = load_migrations(network)
    if only is None:
        return migrations
    selected = [m for m in migrations if only in (m.number, m.key)]
    if not selected:
        raise KeyError(f"No migration {only!r} for {network}")
    return selected
