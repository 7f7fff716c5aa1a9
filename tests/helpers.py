"""Receipt and log builders for decoding events without a node."""

from __future__ import annotations

from eth_utils import keccak
from hexbytes import HexBytes
from web3 import Web3

SENDER = Web3.to_checksum_address("0x4fbe899d37fb7514adf2f41b0630e018ec275a0c")
OTHER = Web3.to_checksum_address("0xa71c1e842f6d9eb0a30f41682943478c940d8852")
TX_HASH = b"\xab" * 32


def topic(signature: str) -> HexBytes:
    return HexBytes(keccak(text=signature))


def address_topic(address: str) -> HexBytes:
    return HexBytes(b"\x00" * 12 + bytes.fromhex(address[2:]))


def make_log(address: str, topics: list, data: bytes = b"", log_index: int = 0) -> dict:
    return {
        "address": Web3.to_checksum_address(address),
        "topics": topics,
        "data": HexBytes(data),
        "logIndex": log_index,
        "transactionIndex": 0,
        "transactionHash": HexBytes(TX_HASH),
        "blockHash": HexBytes(b"\x01" * 32),
        "blockNumber": 1,
        "removed": False,
    }


def make_receipt(logs: list | None = None, status: int = 1, **extra) -> dict:
    receipt = {
        "status": status,
        "transactionHash": HexBytes(TX_HASH),
        "blockNumber": 1,
        "logs": logs or [],
    }
    receipt.update(extra)
    return receipt
