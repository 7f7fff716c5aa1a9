"""Join a pool with exact token amounts (or seed it with an INIT join)."""

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
from beets_deployments.numbers import format_units, scale
from beets_deployments.vault import JoinPoolRequest, encode_join_exact_tokens_in, encode_join_init, join_pool

KINDS = ("exact-tokens-in", "init")


def parse_args(argv: list[str] | None = None, env: Dict[str, str] | os._Environ[str] = os.environ) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Join a vault pool with exact token amounts.")
    add_connection_arguments(parser, env)
    add_sender_argument(parser, env)
    parser.add_argument(
        "--pool", required=True, help="Pool key from the network config (e.g. bpt-sFTMx) or a 32-byte pool id."
    )
    parser.add_argument(
        "--asset",
        dest="assets",
        action="append",
        required=True,
        help="Pool token (symbol, pool key or address), repeated in the pool's token order.",
    )
    parser.add_argument(
        "--amount",
        dest="amounts",
        action="append",
        required=True,
        help="Amount per --asset in human units, scaled by the token's decimals.",
    )
    parser.add_argument("--kind", choices=KINDS, default="exact-tokens-in", help="Join kind (default: exact-tokens-in).")
    parser.add_argument("--min-bpt-out", type=int, help="Minimum BPT to receive (raw units); omitted by default.")
    parser.add_argument("--recipient", help="Receiver of the BPT (default: the sender).")
    parser.add_argument("--dry-run", action="store_true", help="Print the join request without sending it.")
    args = parser.parse_args(argv)

    if len(args.assets) != len(args.amounts):
        parser.error("Pass exactly one --amount per --asset.")
    if args.kind == "init" and args.min_bpt_out is not None:
        parser.error("--min-bpt-out does not apply to an init join.")
    return args


def build_request(assets: list[str], amounts: list[int], kind: str, min_bpt_out: int | None) -> JoinPoolRequest:
    # With exact tokens in, the amounts double as the max amounts in.
    if kind == "init":
        user_data = encode_join_init(amounts)
    else:
        user_data = encode_join_exact_tokens_in(amounts, min_bpt_out)
    return JoinPoolRequest(assets=assets, max_amounts_in=amounts, user_data=user_data)


def log_request(pool_id: str, sender: str, recipient: str, request: JoinPoolRequest, decimals: list[int]) -> None:
    console.print(f"Pool id: {pool_id}")
    console.print(f"Sender: {sender}")
    console.print(f"Recipient: {recipient}")
    for asset, amount, places in zip(request.assets, request.max_amounts_in, decimals):
        console.print(f"  {asset}: {format_units(amount, places)} (raw: {amount})")
    console.print(f"userData: {Web3.to_hex(request.user_data)}")


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    setup_logging(args.verbose)

    network = load_network(args.network)
    w3 = get_web3(args.rpc_url)
    sender = resolve_sender(w3, args.sender)
    recipient = Web3.to_checksum_address(args.recipient) if args.recipient else sender
    pool_id = network.resolve_pool_id(args.pool)

    assets = [network.resolve_asset(asset) for asset in args.assets]
    decimals = [w3.eth.contract(address=asset, abi=ERC20_ABI).functions.decimals().call() for asset in assets]
    try:
        amounts = [scale(amount, places) for amount, places in zip(args.amounts, decimals)]
    except ValueError as exc:
        raise SystemExit(str(exc)) from None
    request = build_request(assets, amounts, args.kind, args.min_bpt_out)

    if args.dry_run:
        console.print("[bold yellow]=== Dry Run: Join Pool ===[/bold yellow]")
        log_request(pool_id, sender, recipient, request, decimals)
        return

    if args.impersonate:
        ForkChain(w3).impersonate(sender)

    vault = w3.eth.contract(address=network.vault, abi=VAULT_ABI)
    receipt = join_pool(w3, vault, pool_id, sender, recipient, request)

    console.print("[bold green]=== Join Pool ===[/bold green]")
    log_request(pool_id, sender, recipient, request, decimals)
    console.print(f"Tx hash: {Web3.to_hex(receipt['transactionHash'])}")
    console.print("[bold green]Status: SUCCESS[/bold green]")


def cli() -> None:
    run_cli(main)


if __name__ == "__main__":
    cli()
