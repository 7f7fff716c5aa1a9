"""Linear pools: factory creation and asset-manager rebalancing."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from web3 import Web3

from beets_deployments.abis import (
    LINEAR_POOL_REBALANCER_ABI,
    POOL_ABI,
    REAPER_MANUAL_REBALANCER_ABI,
    VAULT_ABI,
)
from beets_deployments.chain import send_transaction, to_checksum
from beets_deployments.events import in_receipt
from beets_deployments.pools import CreatedPool

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreatedLinearPool(CreatedPool):
    rebalancer: str


def create_linear_pool(
    w3: Web3,
    factory,
    vault_address: str,
    main: str,
    wrapped: str,
    upper_target: int,
    swap_fee_percentage: int,
    owner: str,
    sender: str,
    name: str = "",
    symbol: str = "",
) -> CreatedLinearPool:
    """Create a linear pool and look up its rebalancer.

    Factories register their rebalancer as the asset manager of both pool
    tokens, so it is read back from the vault.
    """
    fn = factory.functions.create(
        name,
        symbol,
        to_checksum(main),
        to_checksum(wrapped),
        upper_target,
        swap_fee_percentage,
        to_checksum(owner),
    )
    receipt = send_transaction(w3, fn, {"from": to_checksum(sender)})
    address = in_receipt(factory, receipt, "PoolCreated")["args"]["pool"]

    pool = w3.eth.contract(address=address, abi=POOL_ABI)
    pool_id = Web3.to_hex(pool.functions.getPoolId().call())
    vault = w3.eth.contract(address=to_checksum(vault_address), abi=VAULT_ABI)
    _cash, _managed, _last_change, asset_manager = vault.functions.getPoolTokenInfo(pool_id, to_checksum(main)).call()
    logger.info("Linear pool %s created (pool id %s, rebalancer %s)", address, pool_id, asset_manager)

    return CreatedLinearPool(
        address=address,
        pool_id=pool_id,
        tx_hash=Web3.to_hex(receipt["transactionHash"]),
        rebalancer=asset_manager,
    )


def rebalancer_at(w3: Web3, address: str):
    return w3.eth.contract(address=to_checksum(address), abi=LINEAR_POOL_REBALANCER_ABI)


def rebalance(w3: Web3, rebalancer, recipient: str, sender: str, extra_main: int = 0):
    """Bring the pool's main balance back within its targets.

    `extra_main` is pulled from `sender` to cover wrapper rounding.
    """
    if extra_main:
        fn = rebalancer.functions.rebalanceWithExtraMain(to_checksum(recipient), extra_main)
    else:
        fn = rebalancer.functions.rebalance(to_checksum(recipient))
    return send_transaction(w3, fn, {"from": to_checksum(sender)})


class ReaperManualRebalancer:
    def __init__(self, w3: Web3, contract):
        self.w3 = w3
        self.contract = contract

    @classmethod
    def at(cls, w3: Web3, address: str) -> "ReaperManualRebalancer":
        return cls(w3, w3.eth.contract(address=to_checksum(address), abi=REAPER_MANUAL_REBALANCER_ABI))

    def wrap(self, pool_id: str, amount: int, min_amount_out: int, sender: str):
        fn = self.contract.functions.wrap(pool_id, amount, min_amount_out)
        return send_transaction(self.w3, fn, {"from": to_checksum(sender)})

    def unwrap(self, pool_id: str, amount: int, min_amount_out: int, sender: str):
        fn = self.contract.functions.unwrap(pool_id, amount, min_amount_out)
        return send_transaction(self.w3, fn, {"from": to_checksum(sender)})
