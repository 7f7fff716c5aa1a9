"""Swap an exact amount of one asset for another through a single pool."""

from __future__ import annotations

import argparse
import os
from typing import Dict

from dotenv import load_dotenv
from web3 import Web3

from beets_deployments.abis import ERC20_ABI, VAULT_ABI
from beets_deployments.chain import get_web3
from beets_deployments.cli import add_connection_arguments, add_sender_argument, resolve_sender, run_cli
from beets_deployments.fork import ForkChain
from beets_deployments.log import console, setup_logging
from beets_deployments.networks import load_network
from beets_deployments.numbers import MAX_UINT256, format_units, scale
from beets_deployments.vault import FundManagement, SingleSwap, SwapKind, swap


def parse_args(argv: list[str] | None = None, env: Dict[str, str] | os._Environ[str] = os.environ) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Swap an exact amount in through one vault pool.")
    add_connection_arguments(parser, env)
    add_sender_argument(parser, env)
    parser.add_argument(
        "--pool", required=True, help="Pool key from the network config (e.g. bb-yv-4pool) or a 32-byte pool id."
    )
    parser.add_argument("--asset-in", required=True, help="Token sent (symbol, pool key or address).")
    parser.add_argument("--asset-out", required=True, help="Token received (symbol, pool key or address).")
    parser.add_argument("--amount", required=True, help="Amount of --asset-in in human units.")
    parser.add_argument("--limit", type=int, default=0, help="Minimum amount out, raw units (default: 0).")
    parser.add_argument("--recipient", help="Receiver of --asset-out (default: the sender).")
    parser.add_argument("--dry-run", action="store_true", help="Print the swap without sending it.")
    args = parser.parse_args(argv)

    if args.limit < 0:
        parser.error("--limit must not be negative.")
    return args


def log_swap(single_swap: SingleSwap, funds: FundManagement, limit: int, decimals: int) -> None:
    console.print(f"Pool id: {single_swap.pool_id}")
    console.print(f"Asset in: {single_swap.asset_in}")
    console.print(f"Asset out: {single_swap.asset_out}")
    console.print(f"Amount in: {format_units(single_swap.amount, decimals)} (raw: {single_swap.amount})")
    console.print(f"Min amount out: {limit}")
    console.print(f"Sender: {funds.sender}")
    console.print(f"Recipient: {funds.recipient}")


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    setup_logging(args.verbose)

    network = load_network(args.network)
    w3 = get_web3(args.rpc_url)
    sender = resolve_sender(w3, args.sender)
    recipient = Web3.to_checksum_address(args.recipient) if args.recipient else sender

    asset_in = network.resolve_asset(args.asset_in)
    decimals = w3.eth.contract(address=asset_in, abi=ERC20_ABI).functions.decimals().call()
    try:
        amount = scale(args.amount, decimals)
    except ValueError as exc:
        raise SystemExit(str(exc)) from None
    single_swap = SingleSwap(
        pool_id=network.resolve_pool_id(args.pool),
        kind=SwapKind.GIVEN_IN,
        asset_in=asset_in,
        asset_out=network.resolve_asset(args.asset_out),
        amount=amount,
    )
    funds = FundManagement(sender=sender, recipient=recipient)

    if args.dry_run:
        console.print("[bold yellow]=== Dry Run: Single Swap ===[/bold yellow]")
        log_swap(single_swap, funds, args.limit, decimals)
        return

    if args.impersonate:
        ForkChain(w3).impersonate(sender)

    vault = w3.eth.contract(address=network.vault, abi=VAULT_ABI)
    receipt = swap(w3, vault, single_swap, funds, args.limit, MAX_UINT256, sender)

    console.print("[bold green]=== Single Swap ===[/bold green]")
    log_swap(single_swap, funds, args.limit, decimals)
    console.print(f"Tx hash: {Web3.to_hex(receipt['transactionHash'])}")
    console.print("[bold green]Status: SUCCESS[/bold green]")


def cli() -> None:
    run_cli(main)


if __name__ == "__main__":
    cli()
