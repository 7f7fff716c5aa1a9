"""Reliquary actions routed through the batch relayer on a Fantom fork.

Needs compiled test contracts under tests/fork/artifact/: TestToken,
MockReliquary and MockBatchRelayerLibrary.
"""

import pytest

from beets_deployments.abis import BALANCER_RELAYER_ABI
from beets_deployments.chain import approve, send_transaction, submit_transaction
from beets_deployments.errors import TransactionReverted
from beets_deployments.events import in_indirect_receipt
from beets_deployments.fees import action_id, default_admin, grant_role
from beets_deployments.numbers import ZERO_ADDRESS, fp
from beets_deployments.relayer import RelayerLibraryEncoder, multicall, to_chained_reference
from beets_deployments.reliquary import Reliquary, expected_emissions
from beets_deployments.task import Task, TaskMode
from beets_deployments.tasks import vault
from tests.fork.support import deploy, fork_at, load_test_artifact

pytestmark = pytest.mark.fork

EMISSION_RATE = fp(2)
TOTAL_EMISSIONS = fp(10_000_000)


class Env:
    def __init__(self, **values):
        self.__dict__.update(values)


@pytest.fixture(scope="module")
def setup(node, fork_store, accounts):
    token_artifact = load_test_artifact("TestToken")
    reliquary_artifact = load_test_artifact("MockReliquary")
    library_artifact = load_test_artifact("MockBatchRelayerLibrary")
    fork = fork_at(node, "fantom")
    deployer, user, another_user = accounts[0], accounts[2], accounts[3]

    vault_task = Task(vault.TASK_ID, TaskMode.READ_ONLY, "fantom", node, fork_store)
    vault_contract = vault_task.deployed_instance("Vault")

    emission_token = deploy(node, token_artifact, ["EmissionToken", "EMT", 18], deployer)
    pool_token = deploy(node, token_artifact, ["BPT-1", "BPT1", 18], deployer)
    other_pool_token = deploy(node, token_artifact, ["BPT-2", "BPT2", 18], deployer)
    reliquary = deploy(node, reliquary_artifact, [emission_token.address, EMISSION_RATE], deployer)
    send_transaction(node, emission_token.functions.mint(reliquary.address, TOTAL_EMISSIONS), {"from": deployer})

    library = deploy(node, library_artifact, [vault_contract.address] + [ZERO_ADDRESS] * 5 + [reliquary.address], deployer)
    relayer = node.eth.contract(address=library.functions.getEntrypoint().call(), abi=BALANCER_RELAYER_ABI)

    authorizer = vault_task.instance_at("Authorizer", vault_contract.functions.getAuthorizer().call())
    admin = fork.impersonate(default_admin(authorizer))
    grant_role(node, authorizer, action_id(vault_contract, "manageUserBalance"), relayer.address, admin)
    send_transaction(
        node, vault_contract.functions.setRelayerApproval(user, relayer.address, True), {"from": user}
    )

    return Env(
        w3=node,
        fork=fork,
        deployer=deployer,
        user=user,
        another_user=another_user,
        vault=vault_contract,
        emission_token=emission_token,
        pool_token=pool_token,
        other_pool_token=other_pool_token,
        reliquary=Reliquary(node, reliquary),
        library=library,
        relayer=relayer,
        encoder=RelayerLibraryEncoder(library),
    )


@pytest.fixture
def env(setup):
    snapshot = setup.fork.snapshot()
    yield setup
    setup.fork.revert(snapshot)


def add_pool(env, token, name="Test Pool"):
    env.reliquary.add_pool(100, token.address, env.deployer, name=name)


def mint(env, token, to, amount):
    send_transaction(env.w3, token.functions.mint(to, amount), {"from": env.deployer})


def balance(token, owner):
    return token.functions.balanceOf(owner).call()


def deposit_directly(env, owner, pid, amount):
    approve(env.w3, env.pool_token.address, env.reliquary.address, amount, owner)
    env.reliquary.create_relic_and_deposit(owner, pid, amount, owner)
    return env.reliquary.relic_ids(owner)[-1]


def expect_reference(env, ref, value):
    receipt = multicall(env.w3, env.relayer, [env.encoder.get_chained_reference_value(ref)], env.user)
    in_indirect_receipt(env.w3, env.library.abi, receipt, "ChainedReferenceValueRead", {"value": value})


def test_create_relic_and_deposit_through_relayer(env):
    add_pool(env, env.pool_token)
    mint(env, env.pool_token, env.user, fp(100))
    approve(env.w3, env.pool_token.address, env.vault.address, fp(50), env.user)

    ref = to_chained_reference(0)
    calls = [env.encoder.reliquary_create_relic_and_deposit(env.user, env.user, env.pool_token.address, 0, fp(50), ref)]
    multicall(env.w3, env.relayer, calls, env.user)

    expect_reference(env, ref, fp(50))
    assert balance(env.pool_token, env.user) == fp(50)
    assert balance(env.pool_token, env.reliquary.address) == fp(50)
    (relic_id,) = env.reliquary.relic_ids(env.user)
    assert env.reliquary.owner_of(relic_id) == env.user
    assert env.reliquary.position(relic_id).amount == fp(50)


def test_deposit_into_existing_relic(env):
    add_pool(env, env.pool_token)
    mint(env, env.pool_token, env.user, fp(100))
    relic_id = deposit_directly(env, env.user, 0, fp(50))

    approve(env.w3, env.pool_token.address, env.vault.address, fp(30), env.user)
    env.reliquary.approve(env.relayer.address, relic_id, env.user)
    ref = to_chained_reference(0)
    calls = [env.encoder.reliquary_deposit(env.user, env.pool_token.address, relic_id, fp(30), ref)]
    multicall(env.w3, env.relayer, calls, env.user)

    expect_reference(env, ref, fp(30))
    assert balance(env.pool_token, env.user) == fp(20)
    assert env.reliquary.position(relic_id).amount == fp(80)


def test_token_must_match_the_pool(env):
    add_pool(env, env.pool_token)
    add_pool(env, env.other_pool_token, name="Test Pool 2")
    mint(env, env.pool_token, env.user, fp(100))
    approve(env.w3, env.pool_token.address, env.vault.address, fp(50), env.user)

    calls = [
        env.encoder.reliquary_create_relic_and_deposit(
            env.user, env.user, env.other_pool_token.address, 0, fp(50), to_chained_reference(0)
        )
    ]
    with pytest.raises(TransactionReverted, match="Incorrect token for pid"):
        multicall(env.w3, env.relayer, calls, env.user)


def test_deposit_token_must_match_the_relic_pool(env):
    add_pool(env, env.pool_token)
    add_pool(env, env.other_pool_token, name="Test Pool 2")
    mint(env, env.pool_token, env.user, fp(100))
    relic_id = deposit_directly(env, env.user, 0, fp(50))

    approve(env.w3, env.pool_token.address, env.vault.address, fp(30), env.user)
    env.reliquary.approve(env.relayer.address, relic_id, env.user)
    calls = [
        env.encoder.reliquary_deposit(env.user, env.other_pool_token.address, relic_id, fp(30), to_chained_reference(0))
    ]
    with pytest.raises(TransactionReverted, match="Incorrect token for pid"):
        multicall(env.w3, env.relayer, calls, env.user)


def test_partial_withdrawals_reduce_the_position(env):
    add_pool(env, env.pool_token)
    mint(env, env.pool_token, env.user, fp(100))
    relic_id = deposit_directly(env, env.user, 0, fp(100))
    env.reliquary.approve(env.relayer.address, relic_id, env.user)

    for recipient, amount in ((env.user, fp(20)), (env.another_user, fp(30))):
        calls = [env.encoder.reliquary_withdraw_and_harvest(recipient, relic_id, amount, to_chained_reference(0))]
        multicall(env.w3, env.relayer, calls, env.user)

    assert balance(env.pool_token, env.user) == fp(20)
    assert balance(env.pool_token, env.another_user) == fp(30)
    assert env.reliquary.position(relic_id).amount == fp(50)
    assert balance(env.pool_token, env.relayer.address) == 0


def test_single_position_earns_all_emissions(env):
    add_pool(env, env.pool_token)
    mint(env, env.pool_token, env.user, fp(100))
    relic_id = deposit_directly(env, env.user, 0, fp(100))
    deposited_at = env.fork.current_timestamp()
    env.reliquary.approve(env.relayer.address, relic_id, env.user)

    env.fork.advance_time(100)
    calls = [env.encoder.reliquary_withdraw_and_harvest(env.user, relic_id, fp(20), to_chained_reference(0))]
    multicall(env.w3, env.relayer, calls, env.user)
    harvested_at = env.fork.current_timestamp()

    assert balance(env.emission_token, env.user) == expected_emissions(EMISSION_RATE, harvested_at - deposited_at)
    assert balance(env.emission_token, env.relayer.address) == 0


def test_withdraw_from_someone_elses_relic_reverts(env):
    add_pool(env, env.pool_token)
    mint(env, env.pool_token, env.user, fp(100))
    relic_id = deposit_directly(env, env.user, 0, fp(100))

    calls = [env.encoder.reliquary_withdraw_and_harvest(env.another_user, relic_id, fp(20), to_chained_reference(0))]
    with pytest.raises(TransactionReverted, match="Sender not owner of relic"):
        multicall(env.w3, env.relayer, calls, env.another_user)


def test_harvest_all_with_someone_elses_relic_reverts(env):
    add_pool(env, env.pool_token)
    mint(env, env.pool_token, env.user, fp(100))
    mint(env, env.pool_token, env.another_user, fp(100))
    user_relic = deposit_directly(env, env.user, 0, fp(100))
    another_relic = deposit_directly(env, env.another_user, 0, fp(100))

    calls = [env.encoder.reliquary_harvest_all([user_relic, another_relic], env.another_user)]
    with pytest.raises(TransactionReverted, match="Sender not owner of relic"):
        multicall(env.w3, env.relayer, calls, env.another_user)


def test_harvest_all_splits_emissions_between_relics(env):
    add_pool(env, env.pool_token)
    add_pool(env, env.other_pool_token, name="Another Test Pool")
    for owner in (env.user, env.another_user):
        for token in (env.pool_token, env.other_pool_token):
            mint(env, token, owner, fp(100))
            approve(env.w3, token.address, env.reliquary.address, fp(100), owner)

    with env.fork.automine_disabled():
        for owner in (env.user, env.another_user):
            for pid in (0, 1):
                submit_transaction(
                    env.reliquary.contract.functions.createRelicAndDeposit(owner, pid, fp(100)), {"from": owner}
                )
    deposited_at = env.fork.current_timestamp()

    relics = {owner: env.reliquary.relic_ids(owner) for owner in (env.user, env.another_user)}
    for owner, relic_ids in relics.items():
        for relic_id in relic_ids:
            env.reliquary.approve(env.relayer.address, relic_id, owner)

    env.fork.advance_time(100)
    with env.fork.automine_disabled():
        for owner, relic_ids in relics.items():
            calls = [env.encoder.reliquary_harvest_all(relic_ids, owner)]
            submit_transaction(env.relayer.functions.multicall(calls), {"from": owner})
    harvested_at = env.fork.current_timestamp()

    assert balance(env.emission_token, env.user) == expected_emissions(EMISSION_RATE, harvested_at - deposited_at, 1, 2)
    for relic_ids in relics.values():
        for relic_id in relic_ids:
            assert env.reliquary.pending_reward(relic_id) == 0
