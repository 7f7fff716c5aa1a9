"""Create and seed the pools listed in a network's migrations."""

from __future__ import annotations

import argparse
import os
from typing import Dict

from dotenv import load_dotenv

from beets_deployments import config
from beets_deployments.artifacts import Artifact, load_artifact
from beets_deployments.chain import get_web3
from beets_deployments.cli import add_connection_arguments, add_sender_argument, resolve_sender, run_cli
from beets_deployments.errors import ArtifactNotFoundError, RecordNotFoundError
from beets_deployments.fork import ForkChain
from beets_deployments.log import console, setup_logging
from beets_deployments.migrations import Migration, select_migrations
from beets_deployments.networks import load_network
from beets_deployments.pools import CreatedPool, PoolDeploymentContext
from beets_deployments.records import RecordStore
from beets_deployments.task import Task, TaskMode
from beets_deployments.tasks import weighted_pool_v4
from beets_deployments.verification import ExplorerVerifier


def parse_args(argv: list[str] | None = None, env: Dict[str, str] | os._Environ[str] = os.environ) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create the pools declared in a network's migrations.")
    add_connection_arguments(parser, env)
    add_sender_argument(parser, env)
    parser.add_argument(
        "--migration",
        help="Run only this migration, by number (01) or full key (01_add_stable_pool). Default: all, in order.",
    )
    parser.add_argument(
        "--etherscan-api-key",
        default=env.get(config.ENV_ETHERSCAN_API_KEY),
        help=f"Explorer API key used to verify the new pools (or set ${config.ENV_ETHERSCAN_API_KEY}).",
    )
    parser.add_argument(
        "--weighted-factory",
        default=env.get(config.ENV_WEIGHTED_POOL_FACTORY),
        help=f"WeightedPoolFactory address; defaults to the recorded {weighted_pool_v4.TASK_ID} output.",
    )
    parser.add_argument(
        "--stable-factory",
        default=env.get(config.ENV_STABLE_POOL_FACTORY),
        help=f"StablePoolFactory address (or set ${config.ENV_STABLE_POOL_FACTORY}).",
    )
    parser.add_argument(
        "--deployments-dir",
        default=str(config.deployments_dir(env)),
        help=f"Root holding task artifacts and outputs (or set ${config.ENV_DEPLOYMENTS_DIR}).",
    )
    return parser.parse_args(argv)


def recorded_weighted_factory(store: RecordStore, network: str) -> str | None:
    task = Task(weighted_pool_v4.TASK_ID, TaskMode.READ_ONLY, network, store=store)
    try:
        return task.address_of("WeightedPoolFactory")
    except RecordNotFoundError:
        return None


def pool_artifacts(store: RecordStore) -> dict[str, Artifact]:
    try:
        return {"WeightedPool": load_artifact(store.task_dir(weighted_pool_v4.TASK_ID), "WeightedPool")}
    except ArtifactNotFoundError:
        return {}


def log_created(migration: Migration, pool: CreatedPool) -> None:
    console.print(f"[bold green]=== {migration.key} ===[/bold green]")
    console.print(f"Pool: {pool.address}")
    console.print(f"Pool id: {pool.pool_id}")
    console.print(f"Tx hash: {pool.tx_hash}")


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    setup_logging(args.verbose)

    network = load_network(args.network)
    try:
        migrations = select_migrations(network.name, args.migration)
    except KeyError as exc:
        raise SystemExit(str(exc)) from None

    w3 = get_web3(args.rpc_url)
    sender = resolve_sender(w3, args.sender)
    if args.impersonate:
        ForkChain(w3).impersonate(sender)
        console.print(f"[green]Impersonating[/green] {sender}")

    store = RecordStore(args.deployments_dir)
    verifier = ExplorerVerifier(network.explorer_api_url, args.etherscan_api_key) if args.etherscan_api_key else None
    ctx = PoolDeploymentContext(
        w3=w3,
        network=network,
        sender=sender,
        weighted_factory=args.weighted_factory or recorded_weighted_factory(store, network.name),
        stable_factory=args.stable_factory,
        verifier=verifier,
        pool_artifacts=pool_artifacts(store),
    )

    for migration in migrations:
        console.print(f"Running {migration.key} on {network.name}")
        log_created(migration, migration.run(ctx))
    console.print("[bold green]Status: SUCCESS[/bold green]")


def cli() -> None:
    run_cli(main)


if __name__ == "__main__":
    cli()
