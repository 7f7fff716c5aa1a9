"""Protocol fee administration: authorizer roles and fee provider calls."""

from __future__ import annotations

from enum import IntEnum

from eth_utils import function_abi_to_4byte_selector
from web3 import Web3

from beets_deployments.abis import PROTOCOL_FEE_PROVIDER_ABI
from beets_deployments.chain import send_transaction, to_checksum


class ProtocolFeeType(IntEnum):
    SWAP = 0
    FLASH_LOAN = 1
    YIELD = 2
    AUM = 3


def function_selector(contract, function_name: str) -> bytes:
    for item in contract.abi:
        if item.get("type") == "function" and item.get("name") == function_name:
            return function_abi_to_4byte_selector(item)
    raise ValueError(f"{function_name} is not in the ABI of {contract.address}")


def action_id(contract, function_name: str) -> bytes:
    """The authorizer action id guarding `function_name` on `contract`."""
    return contract.functions.getActionId(function_selector(contract, function_name)).call()


def default_admin(authorizer) -> str:
    role = authorizer.functions.DEFAULT_ADMIN_ROLE().call()
    return authorizer.functions.getRoleMember(role, 0).call()


def grant_role(w3: Web3, authorizer, role: bytes, account: str, sender: str):
    fn = authorizer.functions.grantRole(role, to_checksum(account))
    return send_transaction(w3, fn, {"from": to_checksum(sender)})


class ProtocolFeeProvider:
    def __init__(self, w3: Web3, contract):
        self.w3 = w3
        self.contract = contract

    @classmethod
    def at(cls, w3: Web3, address: str) -> "ProtocolFeeProvider":
        return cls(w3, w3.eth.contract(address=to_checksum(address), abi=PROTOCOL_FEE_PROVIDER_ABI))

    @property
    def address(self) -> str:
        return self.contract.address

    def _send(self, fn, sender: str):
        return send_transaction(self.w3, fn, {"from": to_checksum(sender)})

    def get_fee_type_percentage(self, fee_type: ProtocolFeeType) -> int:
        return self.contract.functions.getFeeTypePercentage(int(fee_type)).call()

    def set_fee_type_percentage(self, fee_type: ProtocolFeeType, value: int, sender: str):
        return self._send(self.contract.functions.setFeeTypePercentage(int(fee_type), value), sender)

    def set_fee_type_percentage_for_pool(self, pool: str, fee_type: ProtocolFeeType, value: int, sender: str):
        fn = self.contract.functions.setFeeTypePercentageForPool(to_checksum(pool), int(fee_type), value)
        return self._send(fn, sender)

    def remove_fee_type_percentage_for_pool(self, pool: str, fee_type: ProtocolFeeType, sender: str):
        fn = self.contract.functions.removeFeeTypePercentageForPool(to_checksum(pool), int(fee_type))
        return self._send(fn, sender)


def refresh_pool_fee_cache(w3: Web3, pool, sender: str):
    return send_transaction(w3, pool.functions.updateProtocolFeePercentageCache(), {"from": to_checksum(sender)})


def pool_fee_cache(pool, fee_type: ProtocolFeeType) -> int:
    return pool.functions.getProtocolFeePercentageCache(int(fee_type)).call()
