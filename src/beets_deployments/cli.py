"""Pieces shared by the command-line entry points."""

from __future__ import annotations

import argparse
import os
import sys
import traceback
from typing import Callable, Mapping

from beets_deployments import config
from beets_deployments.log import console
from beets_deployments.networks import NETWORKS


def add_connection_arguments(parser: argparse.ArgumentParser, env: Mapping[str, str] = os.environ) -> None:
    parser.add_argument(
        "--rpc-url",
        default=env.get(config.ENV_RPC_URL, config.DEFAULT_RPC_URL),
        help=f"RPC URL of the node or local fork (default: {config.DEFAULT_RPC_URL} or ${config.ENV_RPC_URL})",
    )
    parser.add_argument(
        "--network",
        choices=sorted(NETWORKS),
        default=env.get(config.ENV_NETWORK, config.DEFAULT_NETWORK),
        help=f"Network whose addresses to use (default: {config.DEFAULT_NETWORK} or ${config.ENV_NETWORK})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level.")


def add_sender_argument(parser: argparse.ArgumentParser, env: Mapping[str, str] = os.environ) -> None:
    parser.add_argument(
        "--sender",
        default=env.get(config.ENV_SENDER),
        help=f"Account sending the transactions (or set ${config.ENV_SENDER}); "
        "defaults to the node's first unlocked account.",
    )
    parser.add_argument(
        "--impersonate",
        action="store_true",
        help="Impersonate --sender on a local fork and top up its gas balance first.",
    )


def resolve_sender(w3, sender: str | None) -> str:
    if sender:
        return w3.to_checksum_address(sender)
    if not w3.eth.accounts:
        sys.exit("No --sender given and the node exposes no unlocked accounts.")
    return w3.eth.accounts[0]


def run_cli(main: Callable[[list[str] | None], None], argv: list[str] | None = None) -> None:
    try:
        main(argv)
    except SystemExit:
        # Allow argparse and explicit sys.exit to propagate.
        raise
    except Exception:
        console.print("[red]Unexpected error occurred[/red]")
        console.print(traceback.format_exc())
        sys.exit(1)
