"""Create and seed weighted and stable pools through their factories.

Pool creation is three transactions deep: the factory call, one approval per
token and the INIT join that mints the first BPT. Tokens are passed to the
factory in the order given; the factory rejects unsorted lists (``BAL#101``)
and that revert is what the caller sees.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from web3 import Web3

from beets_deployments.abis import POOL_ABI, STABLE_POOL_FACTORY_ABI, VAULT_ABI, WEIGHTED_POOL_FACTORY_ABI
from beets_deployments.artifacts import Artifact
from beets_deployments.chain import approve, send_transaction, to_checksum
from beets_deployments.events import in_receipt
from beets_deployments.networks import NetworkConfig
from beets_deployments.numbers import ZERO_ADDRESS
from beets_deployments.vault import JoinPoolRequest, encode_join_init, join_pool
from beets_deployments.verification import ExplorerVerifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeightedPoolRequest:
    name: str
    symbol: str
    tokens: Sequence[str]
    weights: Sequence[int]
    initial_balances: Sequence[int]
    swap_fee_percentage: int
    owner: str | None = None
    rate_providers: Sequence[str] | None = None
    salt: bytes | None = None


@dataclass(frozen=True)
class StablePoolRequest:
    name: str
    symbol: str
    tokens: Sequence[str]
    amplification_parameter: int
    initial_balances: Sequence[int]
    swap_fee_percentage: int
    owner: str | None = None


@dataclass(frozen=True)
class CreatedPool:
    address: str
    pool_id: str
    tx_hash: str


@dataclass
class PoolDeploymentContext:
    w3: Web3
    network: NetworkConfig
    sender: str
    weighted_factory: str | None = None
    stable_factory: str | None = None
    verifier: ExplorerVerifier | None = None
    # Compiled pool contracts, keyed "WeightedPool" / "StablePool", for verification.
    pool_artifacts: Mapping[str, Artifact] = field(default_factory=dict)


def _check_lengths(request, *names: str) -> None:
    lengths = {name: len(getattr(request, name)) for name in names}
    if len(set(lengths.values())) != 1:
        details = ", ".join(f"{name}={length}" for name, length in lengths.items())
        raise ValueError(f"{request.symbol}: token-indexed lists differ in length ({details})")


def create_weighted_pool(ctx: PoolDeploymentContext, request: WeightedPoolRequest) -> CreatedPool:
    if ctx.weighted_factory is None:
        raise ValueError("No weighted pool factory configured")
    _check_lengths(request, "tokens", "weights", "initial_balances")

    factory = ctx.w3.eth.contract(address=to_checksum(ctx.weighted_factory), abi=WEIGHTED_POOL_FACTORY_ABI)
    tokens = [to_checksum(token) for token in request.tokens]
    rate_providers = [to_checksum(p) for p in request.rate_providers] if request.rate_providers else [ZERO_ADDRESS] * len(tokens)
    owner = to_checksum(request.owner or ctx.sender)
    salt = request.salt or os.urandom(32)

    fn = factory.functions.create(
        request.name,
        request.symbol,
        tokens,
        list(request.weights),
        rate_providers,
        request.swap_fee_percentage,
        owner,
        salt,
    )
    return _create_and_initialize(ctx, factory, fn, tokens, request.initial_balances, "WeightedPool")


def create_stable_pool(ctx: PoolDeploymentContext, request: StablePoolRequest) -> CreatedPool:
    if ctx.stable_factory is None:
        raise ValueError("No stable pool factory configured")
    _check_lengths(request, "tokens", "initial_balances")

    factory = ctx.w3.eth.contract(address=to_checksum(ctx.stable_factory), abi=STABLE_POOL_FACTORY_ABI)
    tokens = [to_checksum(token) for token in request.tokens]
    owner = to_checksum(request.owner or ctx.sender)

    fn = factory.functions.create(
        request.name,
        request.symbol,
        tokens,
        request.amplification_parameter,
        request.swap_fee_percentage,
        owner,
    )
    return _create_and_initialize(ctx, factory, fn, tokens, request.initial_balances, "StablePool")


def _create_and_initialize(ctx, factory, fn, tokens, initial_balances, contract_name) -> CreatedPool:
    w3 = ctx.w3
    sender = to_checksum(ctx.sender)

    receipt = send_transaction(w3, fn, {"from": sender})
    address = in_receipt(factory, receipt, "PoolCreated")["args"]["pool"]
    pool = w3.eth.contract(address=address, abi=POOL_ABI)
    pool_id = Web3.to_hex(pool.functions.getPoolId().call())
    logger.info("%s created at %s (pool id %s)", contract_name, address, pool_id)

    vault = w3.eth.contract(address=to_checksum(ctx.network.vault), abi=VAULT_ABI)
    for token, amount in zip(tokens, initial_balances):
        approve(w3, token, vault.address, amount, sender)

    request = JoinPoolRequest(
        assets=tokens,
        max_amounts_in=list(initial_balances),
        user_data=encode_join_init(initial_balances),
    )
    join_pool(w3, vault, pool_id, sender, sender, request)
    logger.info("Seeded %s with %s", address, list(initial_balances))

    _verify_pool(ctx, contract_name, address)
    return CreatedPool(address=address, pool_id=pool_id, tx_hash=Web3.to_hex(receipt["transactionHash"]))


def _verify_pool(ctx: PoolDeploymentContext, contract_name: str, address: str) -> bool:
    if ctx.verifier is None:
        return False
    artifact = ctx.pool_artifacts.get(contract_name)
    if artifact is None:
        logger.info("No %s artifact available; %s left unverified", contract_name, address)
        return False
    return ctx.verifier.verify(address, artifact)
