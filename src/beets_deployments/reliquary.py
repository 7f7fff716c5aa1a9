"""Reliquary staking: relics are NFTs holding a position in one staking pool."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from web3 import Web3

from beets_deployments.abis import RELIQUARY_ABI
from beets_deployments.chain import send_transaction, to_checksum
from beets_deployments.numbers import ZERO_ADDRESS

# Seconds a position must be held to reach each level, and the allocation
# multiplier applied at that level.
DEFAULT_MATURITY_LEVELS = (0, 86400, 172800, 259200)
DEFAULT_ALLOCATION_POINTS = (100, 200, 300, 400)


@dataclass(frozen=True)
class Position:
    amount: int
    entry: int
    pool_id: int
    level: int
    reward_debt: int = 0
    reward_credit: int = 0


def expected_emissions(emission_rate: int, elapsed: int, share_numerator: int = 1, share_denominator: int = 1) -> int:
    """Emissions accrued over `elapsed` seconds by a holder of the given share."""
    return emission_rate * elapsed * share_numerator // share_denominator


class Reliquary:
    def __init__(self, w3: Web3, contract):
        self.w3 = w3
        self.contract = contract

    @classmethod
    def at(cls, w3: Web3, address: str) -> "Reliquary":
        return cls(w3, w3.eth.contract(address=to_checksum(address), abi=RELIQUARY_ABI))

    @property
    def address(self) -> str:
        return self.contract.address

    def add_pool(
        self,
        alloc_point: int,
        pool_token: str,
        sender: str,
        rewarder: str = ZERO_ADDRESS,
        required_maturities: Sequence[int] = DEFAULT_MATURITY_LEVELS,
        allocation_points: Sequence[int] = DEFAULT_ALLOCATION_POINTS,
        name: str = "",
        nft_descriptor: str = ZERO_ADDRESS,
    ):
        if len(required_maturities) != len(allocation_points):
            raise ValueError("required_maturities and allocation_points must have the same length")
        fn = self.contract.functions.addPool(
            alloc_point,
            to_checksum(pool_token),
            to_checksum(rewarder),
            list(required_maturities),
            list(allocation_points),
            name,
            to_checksum(nft_descriptor),
        )
        return send_transaction(self.w3, fn, {"from": to_checksum(sender)})

    def create_relic_and_deposit(self, to: str, pid: int, amount: int, sender: str):
        fn = self.contract.functions.createRelicAndDeposit(to_checksum(to), pid, amount)
        return send_transaction(self.w3, fn, {"from": to_checksum(sender)})

    def approve(self, spender: str, relic_id: int, sender: str):
        fn = self.contract.functions.approve(to_checksum(spender), relic_id)
        return send_transaction(self.w3, fn, {"from": to_checksum(sender)})

    def relic_ids(self, owner: str) -> list[int]:
        owner = to_checksum(owner)
        count = self.contract.functions.balanceOf(owner).call()
        return [self.contract.functions.tokenOfOwnerByIndex(owner, index).call() for index in range(count)]

    def owner_of(self, relic_id: int) -> str:
        return self.contract.functions.ownerOf(relic_id).call()

    def position(self, relic_id: int) -> Position:
        amount, reward_debt, reward_credit, entry, pool_id, level = self.contract.functions.getPositionForId(
            relic_id
        ).call()
        return Position(
            amount=amount,
            entry=entry,
            pool_id=pool_id,
            level=level,
            reward_debt=reward_debt,
            reward_credit=reward_credit,
        )

    def pending_reward(self, relic_id: int) -> int:
        return self.contract.functions.pendingReward(relic_id).call()
