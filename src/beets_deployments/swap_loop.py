"""Unwind a yearn vault position back into its linear pool, N times over.

Each iteration withdraws the sender's whole yearn vault balance into the main
token, then swaps all of that main token GIVEN_IN through the linear pool for
the wrapped token. Every transaction waits for its receipt before the next one
is sent, and the loop stops at the first revert.
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from functools import partial
from typing import Dict, Iterator

from dotenv import load_dotenv
from web3 import Web3

from beets_deployments import config
from beets_deployments.abis import ERC20_ABI, VAULT_ABI, YEARN_VAULT_ABI
from beets_deployments.chain import get_web3, send_transaction
from beets_deployments.cli import add_connection_arguments, add_sender_argument, resolve_sender, run_cli
from beets_deployments.fork import ForkChain
from beets_deployments.log import console, setup_logging
from beets_deployments.networks import load_network
from beets_deployments.numbers import MAX_UINT256, format_units
from beets_deployments.steps import TransactionStep, run_steps
from beets_deployments.vault import FundManagement, SingleSwap, SwapKind, swap

logger = logging.getLogger(__name__)


@dataclass
class LoopPlan:
    vault: str
    pool_id: str
    main_token: str
    wrapped_token: str
    sender: str
    iterations: int


def parse_args(argv: list[str] | None = None, env: Dict[str, str] | os._Environ[str] = os.environ) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Withdraw a yearn vault position and swap the main token back into its linear pool, repeatedly.",
    )
    add_connection_arguments(parser, env)
    add_sender_argument(parser, env)
    parser.add_argument(
        "--pool", default="bb-yv-USDC", help="Linear pool key or 32-byte pool id (default: bb-yv-USDC)."
    )
    parser.add_argument("--main", default="USDC", help="Main token symbol or address (default: USDC).")
    parser.add_argument("--wrapped", default="yvUSDC", help="Yearn vault token symbol or address (default: yvUSDC).")
    parser.add_argument(
        "--iterations",
        type=int,
        default=int(env.get(config.ENV_SWAP_LOOP_ITERATIONS, config.DEFAULT_SWAP_LOOP_ITERATIONS)),
        help=f"Number of withdraw+swap rounds (default: {config.DEFAULT_SWAP_LOOP_ITERATIONS} "
        f"or ${config.ENV_SWAP_LOOP_ITERATIONS}).",
    )
    parser.add_argument("--dry-run", action="store_true", help="Print the plan and balances without sending anything.")
    args = parser.parse_args(argv)

    if args.iterations < 1:
        parser.error("--iterations must be at least 1.")
    return args


def withdraw_all(w3: Web3, yearn_vault, sender: str):
    shares = yearn_vault.functions.balanceOf(sender).call()
    logger.info("vault token balance %s", shares)
    return send_transaction(w3, yearn_vault.functions.withdraw(shares), {"from": sender})


def swap_all_main(w3: Web3, vault, main_token, plan: LoopPlan):
    amount = main_token.functions.balanceOf(plan.sender).call()
    logger.info("main token balance %s", amount)
    single_swap = SingleSwap(
        pool_id=plan.pool_id,
        kind=SwapKind.GIVEN_IN,
        asset_in=plan.main_token,
        asset_out=plan.wrapped_token,
        amount=amount,
    )
    funds = FundManagement(sender=plan.sender, recipient=plan.sender)
    return swap(w3, vault, single_swap, funds, 0, MAX_UINT256, plan.sender)


def loop_steps(w3: Web3, vault, yearn_vault, main_token, plan: LoopPlan) -> Iterator[TransactionStep]:
    for i in range(plan.iterations):
        yield TransactionStep(f"unwrap {i}", partial(withdraw_all, w3, yearn_vault, plan.sender))
        yield TransactionStep(f"swap {i}", partial(swap_all_main, w3, vault, main_token, plan))


def log_dry_run(plan: LoopPlan, shares: int, main_balance: int, decimals: int) -> None:
    console.print("[bold yellow]=== Dry Run: Linear Pool Swap Loop ===[/bold yellow]")
    console.print(f"Vault: {plan.vault}")
    console.print(f"Pool id: {plan.pool_id}")
    console.print(f"Main token: {plan.main_token}")
    console.print(f"Wrapped token: {plan.wrapped_token}")
    console.print(f"Sender: {plan.sender}")
    console.print(f"Iterations: {plan.iterations} ({plan.iterations * 2} transactions)")
    console.print()
    console.print(f"Vault token balance: {format_units(shares, decimals)} (raw: {shares})")
    console.print(f"Main token balance: {format_units(main_balance, decimals)} (raw: {main_balance})")


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    setup_logging(args.verbose)

    network = load_network(args.network)
    w3 = get_web3(args.rpc_url)
    sender = resolve_sender(w3, args.sender)

    plan = LoopPlan(
        vault=network.vault,
        pool_id=network.resolve_pool_id(args.pool),
        main_token=network.resolve_asset(args.main),
        wrapped_token=network.resolve_asset(args.wrapped),
        sender=sender,
        iterations=args.iterations,
    )
    vault = w3.eth.contract(address=plan.vault, abi=VAULT_ABI)
    yearn_vault = w3.eth.contract(address=plan.wrapped_token, abi=YEARN_VAULT_ABI)
    main_token = w3.eth.contract(address=plan.main_token, abi=ERC20_ABI)

    if args.dry_run:
        log_dry_run(
            plan,
            yearn_vault.functions.balanceOf(sender).call(),
            main_token.functions.balanceOf(sender).call(),
            main_token.functions.decimals().call(),
        )
        return

    if args.impersonate:
        ForkChain(w3).impersonate(sender)
        console.print(f"[green]Impersonating[/green] {sender}")

    for result in run_steps(loop_steps(w3, vault, yearn_vault, main_token, plan)):
        console.print(f"{result.label} complete [dim]({Web3.to_hex(result.receipt['transactionHash'])})[/dim]")
    console.print("[bold green]Status: SUCCESS[/bold green]")


def cli() -> None:
    run_cli(main)


if __name__ == "__main__":
    cli()
