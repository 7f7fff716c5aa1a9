"""Vault call structs and pool join encodings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from eth_abi import encode
from web3 import Web3

from beets_deployments.chain import send_transaction, to_checksum


class SwapKind(IntEnum):
    GIVEN_IN = 0
    GIVEN_OUT = 1


class WeightedPoolJoinKind(IntEnum):
    INIT = 0
    EXACT_TOKENS_IN_FOR_BPT_OUT = 1
    TOKEN_IN_FOR_EXACT_BPT_OUT = 2
    ALL_TOKENS_IN_FOR_EXACT_BPT_OUT = 3


@dataclass(frozen=True)
class SingleSwap:
    pool_id: str
    kind: SwapKind
    asset_in: str
    asset_out: str
    amount: int
    user_data: bytes = b""

    def as_tuple(self) -> tuple:
        return (
            self.pool_id,
            int(self.kind),
            to_checksum(self.asset_in),
            to_checksum(self.asset_out),
            self.amount,
            self.user_data,
        )


@dataclass(frozen=True)
class FundManagement:
    sender: str
    recipient: str
    from_internal_balance: bool = False
    to_internal_balance: bool = False

    def as_tuple(self) -> tuple:
        return (
            to_checksum(self.sender),
            self.from_internal_balance,
            to_checksum(self.recipient),
            self.to_internal_balance,
        )


@dataclass(frozen=True)
class JoinPoolRequest:
    assets: Sequence[str]
    max_amounts_in: Sequence[int]
    user_data: bytes
    from_internal_balance: bool = False

    def as_tuple(self) -> tuple:
        return (
            [to_checksum(asset) for asset in self.assets],
            list(self.max_amounts_in),
            self.user_data,
            self.from_internal_balance,
        )


def encode_join_init(amounts: Sequence[int]) -> bytes:
    """userData for the first join of a weighted or stable pool."""
    return encode(["uint256", "uint256[]"], [int(WeightedPoolJoinKind.INIT), list(amounts)])


def encode_join_exact_tokens_in(amounts: Sequence[int], min_bpt_out: int | None = None) -> bytes:
    """userData for an EXACT_TOKENS_IN_FOR_BPT_OUT join.

    Without `min_bpt_out` only the kind and the amounts are encoded; the vault
    then reads no minimum and `max_amounts_in` caps what is pulled.
    """
    kind = int(WeightedPoolJoinKind.EXACT_TOKENS_IN_FOR_BPT_OUT)
    if min_bpt_out is None:
        return encode(["uint256", "uint256[]"], [kind, list(amounts)])
    return encode(["uint256", "uint256[]", "uint256"], [kind, list(amounts), min_bpt_out])


def swap(
    w3: Web3,
    vault,
    single_swap: SingleSwap,
    funds: FundManagement,
    limit: int,
    deadline: int,
    sender: str,
):
    fn = vault.functions.swap(single_swap.as_tuple(), funds.as_tuple(), limit, deadline)
    return send_transaction(w3, fn, {"from": to_checksum(sender)})


def join_pool(w3: Web3, vault, pool_id: str, sender: str, recipient: str, request: JoinPoolRequest):
    fn = vault.functions.joinPool(pool_id, to_checksum(sender), to_checksum(recipient), request.as_tuple())
    return send_transaction(w3, fn, {"from": to_checksum(sender)})
