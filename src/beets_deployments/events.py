"""Pick decoded events out of transaction receipts."""

from __future__ import annotations

from typing import Any, Mapping

from web3 import Web3
from web3.logs import DISCARD

from beets_deployments.errors import EventNotFoundError


def _matches(args: Mapping[str, Any], expected: Mapping[str, Any] | None) -> bool:
    if not expected:
        return True
    for key, value in expected.items():
        actual = args.get(key)
        if isinstance(value, str) and isinstance(actual, str):
            if value.lower() != actual.lower():
                return False
        elif actual != value:
            return False
    return True


def _find(decoded, receipt, event_name: str, expected_args):
    for event in decoded:
        if _matches(event["args"], expected_args):
            return event
    tx_hash = receipt.get("transactionHash")
    raise EventNotFoundError(
        f"No {event_name} event matching {dict(expected_args or {})} in receipt "
        f"{Web3.to_hex(tx_hash) if tx_hash is not None else '<unknown>'}"
    )


def in_receipt(contract, receipt, event_name: str, expected_args: Mapping[str, Any] | None = None):
    """Return the first `event_name` emitted by `contract` whose args match."""
    event = getattr(contract.events, event_name)()
    decoded = [
        log for log in event.process_receipt(receipt, errors=DISCARD)
        if log["address"].lower() == contract.address.lower()
    ]
    return _find(decoded, receipt, event_name, expected_args)


def in_indirect_receipt(
    w3: Web3,
    abi: list,
    receipt,
    event_name: str,
    expected_args: Mapping[str, Any] | None = None,
    address: str | None = None,
):
    """Like `in_receipt`, for events emitted on behalf of another contract.

    Relayer library events are emitted from the relayer's address through a
    delegatecall, so they are decoded with the library ABI and optionally
    filtered by the emitting `address`.
    """
    event = getattr(w3.eth.contract(abi=abi).events, event_name)()
    decoded = event.process_receipt(receipt, errors=DISCARD)
    if address is not None:
        decoded = [log for log in decoded if log["address"].lower() == address.lower()]
    return _find(decoded, receipt, event_name, expected_args)
