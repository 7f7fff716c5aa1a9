"""Calldata builders for the batch relayer and its library.

The relayer executes library calls via delegatecall inside one `multicall`,
and library actions hand amounts to each other through chained references:
uint256 keys whose top 16 bits carry a marker prefix.
"""

from __future__ import annotations

from typing import Sequence

from web3 import Web3

from beets_deployments.abis import BATCH_RELAYER_LIBRARY_ABI
from beets_deployments.chain import send_transaction, to_checksum

TEMPORARY_PREFIX = "ba10"
READ_ONLY_PREFIX = "ba11"

# The prefix occupies the top 16 bits, so keys must fit in the remaining 240.
MAX_REFERENCE_KEY = 2**240 - 1


def to_chained_reference(key: int, temporary: bool = True) -> int:
    """Chained reference for `key`.

    Temporary references are cleared when read; read-only ones persist for
    the rest of the multicall.
    """
    if not 0 <= key <= MAX_REFERENCE_KEY:
        raise ValueError(f"Chained reference key out of range: {key}")
    prefix = TEMPORARY_PREFIX if temporary else READ_ONLY_PREFIX
    padded = "0x" + prefix + "0" * (64 - len(prefix))
    return int(padded, 16) + key


def is_chained_reference(value: int) -> bool:
    return (value >> 240) in (int(TEMPORARY_PREFIX, 16), int(READ_ONLY_PREFIX, 16))


class RelayerLibraryEncoder:
    def __init__(self, library):
        self.library = library

    @classmethod
    def for_abi(cls, w3: Web3, abi: list = BATCH_RELAYER_LIBRARY_ABI) -> "RelayerLibraryEncoder":
        return cls(w3.eth.contract(abi=abi))

    def _encode(self, fn_name: str, args: list) -> str:
        return self.library.encode_abi(fn_name, args=args)

    def reliquary_create_relic_and_deposit(
        self, sender: str, recipient: str, token: str, pid: int, amount: int, output_reference: int = 0
    ) -> str:
        return self._encode(
            "reliquaryCreateRelicAndDeposit",
            [to_checksum(sender), to_checksum(recipient), to_checksum(token), pid, amount, output_reference],
        )

    def reliquary_deposit(self, sender: str, token: str, relic_id: int, amount: int, output_reference: int = 0) -> str:
        return self._encode(
            "reliquaryDeposit",
            [to_checksum(sender), to_checksum(token), relic_id, amount, output_reference],
        )

    def reliquary_withdraw_and_harvest(
        self, recipient: str, relic_id: int, amount: int, output_reference: int = 0
    ) -> str:
        return self._encode("reliquaryWithdrawAndHarvest", [to_checksum(recipient), relic_id, amount, output_reference])

    def reliquary_harvest_all(self, relic_ids: Sequence[int], recipient: str) -> str:
        return self._encode("reliquaryHarvestAll", [list(relic_ids), to_checksum(recipient)])

    def set_chained_reference_value(self, ref: int, value: int) -> str:
        return self._encode("setChainedReferenceValue", [ref, value])

    def get_chained_reference_value(self, ref: int) -> str:
        return self._encode("getChainedReferenceValue", [ref])


def multicall(w3: Web3, relayer, calls: Sequence[str], sender: str):
    return send_transaction(w3, relayer.functions.multicall(list(calls)), {"from": to_checksum(sender)})
