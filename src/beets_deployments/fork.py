"""Drive a forked node (anvil) through its cheat-code RPC methods.

Only ever point this at a local fork: impersonation and balance overrides
are rejected by real nodes and meaningless against them.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from web3 import Web3

from beets_deployments import config
from beets_deployments.chain import rpc, to_checksum

logger = logging.getLogger(__name__)


class ForkChain:
    def __init__(self, w3: Web3):
        self.w3 = w3

    def reset(self, rpc_url: str, block_number: int | None = None) -> None:
        """Re-fork `rpc_url`, pinned to `block_number` when given."""
        forking: dict = {"jsonRpcUrl": rpc_url}
        if block_number is not None:
            forking["blockNumber"] = block_number
        rpc(self.w3, "anvil_reset", [{"forking": forking}])
        logger.info("Fork reset to block %s", block_number if block_number is not None else "latest")

    def impersonate(self, address: str, balance: int | None = config.DEFAULT_IMPERSONATION_BALANCE_WEI) -> str:
        """Unlock `address` on the fork and top up its gas balance."""
        address = to_checksum(address)
        rpc(self.w3, "anvil_impersonateAccount", [address])
        if balance is not None:
            rpc(self.w3, "anvil_setBalance", [address, hex(balance)])
        logger.debug("Impersonating %s", address)
        return address

    def stop_impersonating(self, address: str) -> None:
        rpc(self.w3, "anvil_stopImpersonatingAccount", [to_checksum(address)])

    def advance_time(self, seconds: int) -> None:
        rpc(self.w3, "evm_increaseTime", [seconds])
        self.advance_block()

    def advance_block(self) -> None:
        rpc(self.w3, "evm_mine", [])

    def set_automine(self, enabled: bool) -> None:
        rpc(self.w3, "evm_setAutomine", [enabled])

    def current_timestamp(self) -> int:
        return self.w3.eth.get_block("latest")["timestamp"]

    def snapshot(self) -> str:
        return rpc(self.w3, "evm_snapshot", [])

    def revert(self, snapshot_id: str) -> bool:
        return bool(rpc(self.w3, "evm_revert", [snapshot_id]))

    @contextmanager
    def automine_disabled(self) -> Iterator["ForkChain"]:
        """Queue every transaction sent inside the block into one mined block.

        Transactions must be submitted without waiting for receipts, which
        only exist once the block is mined on exit.
        """
        self.set_automine(False)
        try:
            yield self
        finally:
            self.advance_block()
            self.set_automine(True)
