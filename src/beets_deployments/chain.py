"""Thin helpers around web3 for sending transactions and calling node cheat-codes."""

from __future__ import annotations

import logging
import sys

from web3 import HTTPProvider, Web3
from web3.exceptions import ContractLogicError

from beets_deployments.abis import ERC20_ABI
from beets_deployments.errors import RpcError, TransactionReverted

logger = logging.getLogger(__name__)


def get_web3(rpc_url: str) -> Web3:
    w3 = Web3(HTTPProvider(rpc_url))
    if not w3.is_connected():
        sys.exit(f"Failed to connect to RPC at {rpc_url}. Is your node or local fork running?")
    return w3


def to_checksum(address: str) -> str:
    try:
        return Web3.to_checksum_address(address)
    except ValueError as exc:
        raise ValueError(f"Invalid Ethereum address: {address}") from exc


def revert_reason(exc: ContractLogicError) -> str:
    message = getattr(exc, "message", None)
    return message if message else str(exc)


def submit_transaction(fn, tx_params: dict):
    """Send `fn` without waiting for it to be mined; returns the tx hash."""
    try:
        return fn.transact(tx_params)
    except ContractLogicError as exc:
        raise TransactionReverted(revert_reason(exc)) from exc


def send_transaction(w3: Web3, fn, tx_params: dict):
    """Submit `fn` and block until it is mined.

    Reverts are raised as TransactionReverted carrying the chain's reason.
    """
    tx_hash = submit_transaction(fn, tx_params)
    receipt = w3.eth.wait_for_transaction_receipt(tx_hash)
    if receipt["status"] != 1:
        raise TransactionReverted(f"Transaction failed (status {receipt['status']})", Web3.to_hex(tx_hash))
    logger.debug("Mined %s in block %s", Web3.to_hex(tx_hash), receipt["blockNumber"])
    return receipt


def rpc(w3: Web3, method: str, params: list):
    resp = w3.provider.make_request(method, params)
    if resp.get("error"):
        raise RpcError(method, resp["error"])
    return resp.get("result")


def erc20(w3: Web3, address: str):
    return w3.eth.contract(address=to_checksum(address), abi=ERC20_ABI)


def approve(w3: Web3, token: str, spender: str, amount: int, sender: str):
    contract = erc20(w3, token)
    return send_transaction(w3, contract.functions.approve(to_checksum(spender), amount), {"from": sender})
