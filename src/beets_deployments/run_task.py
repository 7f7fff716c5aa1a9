"""Run one deployment task against a node: deploy, verify and record its contracts.

Use ``--mode test`` against a local fork: outputs then go to
``<network>-test.json`` and nothing is submitted to the explorer.
"""

from __future__ import annotations

import argparse
import os
from typing import Dict

from dotenv import load_dotenv

from beets_deployments import config
from beets_deployments.chain import get_web3
from beets_deployments.cli import add_connection_arguments, run_cli
from beets_deployments.log import console, setup_logging
from beets_deployments.networks import load_network
from beets_deployments.records import RecordStore
from beets_deployments.task import Task, TaskMode, TaskRunOptions
from beets_deployments.tasks import TASKS
from beets_deployments.verification import ExplorerVerifier

MODES = {"live": TaskMode.LIVE, "test": TaskMode.TEST}


def parse_args(argv: list[str] | None = None, env: Dict[str, str] | os._Environ[str] = os.environ) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a deployment task and record its outputs.")
    parser.add_argument("task_id", nargs="?", help="Task to run, e.g. 20230327-batch-relayer-v5.")
    add_connection_arguments(parser, env)
    parser.add_argument(
        "--mode",
        choices=sorted(MODES),
        default="live",
        help="live writes <network>.json and verifies; test writes <network>-test.json (default: live).",
    )
    parser.add_argument("--force", action="store_true", help="Redeploy even if the task already has outputs.")
    parser.add_argument("--from", dest="from_", default=env.get(config.ENV_SENDER), help="Deployer account.")
    parser.add_argument(
        "--etherscan-api-key",
        default=env.get(config.ENV_ETHERSCAN_API_KEY),
        help=f"Explorer API key for verification (or set ${config.ENV_ETHERSCAN_API_KEY}).",
    )
    parser.add_argument(
        "--deployments-dir",
        default=str(config.deployments_dir(env)),
        help=f"Root holding task artifacts and outputs (or set ${config.ENV_DEPLOYMENTS_DIR}).",
    )
    parser.add_argument("--list", action="store_true", help="List the known tasks and exit.")
    args = parser.parse_args(argv)

    if not args.list:
        if not args.task_id:
            parser.error("Missing task id (or pass --list).")
        if args.task_id not in TASKS:
            parser.error(f"Unknown task {args.task_id!r}; run with --list to see the known tasks.")

    return args


def print_tasks() -> None:
    console.print("[bold]Known tasks[/bold]")
    for task_id, definition in sorted(TASKS.items()):
        networks = ", ".join(sorted(definition.inputs))
        console.print(f"  {task_id}  [dim]({networks})[/dim]")


def log_outputs(task: Task) -> None:
    outputs = task.output()
    console.print(f"[bold green]=== {task.id} on {task.network} ({task.mode.value}) ===[/bold green]")
    if not outputs:
        console.print("No outputs recorded.")
        return
    for name, address in sorted(outputs.items()):
        console.print(f"{name}: {address}")
    console.print(f"Records: {task.store.path(task.id, task.output_network)}")


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.list:
        print_tasks()
        return

    network = load_network(args.network)
    mode = MODES[args.mode]
    w3 = get_web3(args.rpc_url)
    if w3.eth.chain_id != network.chain_id:
        console.print(
            f"[yellow]Node reports chain id {w3.eth.chain_id}, expected {network.chain_id} for {network.name}[/yellow]"
        )

    verifier = None
    if mode is TaskMode.LIVE:
        verifier = ExplorerVerifier(network.explorer_api_url, args.etherscan_api_key)

    task = Task(args.task_id, mode, network.name, w3=w3, store=RecordStore(args.deployments_dir), verifier=verifier)
    task.run(TaskRunOptions(force=args.force, from_=args.from_))
    log_outputs(task)


def cli() -> None:
    run_cli(main)


if __name__ == "__main__":
    cli()
