from unittest.mock import MagicMock

import pytest
from eth_utils import keccak

from beets_deployments import fees
from beets_deployments.abis import PROTOCOL_FEE_PROVIDER_ABI
from beets_deployments.fees import (
    ProtocolFeeProvider,
    ProtocolFeeType,
    action_id,
    default_admin,
    function_selector,
    grant_role,
    pool_fee_cache,
)
from beets_deployments.numbers import fp
from tests.helpers import OTHER, SENDER


@pytest.fixture
def sent(monkeypatch):
    calls = []
    monkeypatch.setattr(fees, "send_transaction", lambda w3, fn, params: calls.append(params) or "receipt")
    return calls


@pytest.fixture
def provider_contract():
    contract = MagicMock()
    contract.abi = PROTOCOL_FEE_PROVIDER_ABI
    return contract


def test_function_selector_matches_signature(provider_contract):
    expected = keccak(text="setFeeTypePercentage(uint256,uint256)")[:4]
    assert function_selector(provider_contract, "setFeeTypePercentage") == expected


def test_unknown_function_selector(provider_contract):
    with pytest.raises(ValueError, match="notThere"):
        function_selector(provider_contract, "notThere")


def test_action_id_is_read_from_the_contract(provider_contract):
    provider_contract.functions.getActionId.return_value.call.return_value = b"\x99" * 32
    assert action_id(provider_contract, "setFeeTypePercentage") == b"\x99" * 32
    provider_contract.functions.getActionId.assert_called_once_with(
        keccak(text="setFeeTypePercentage(uint256,uint256)")[:4]
    )


def test_default_admin_and_grant_role(sent):
    authorizer = MagicMock()
    authorizer.functions.DEFAULT_ADMIN_ROLE.return_value.call.return_value = b"\x00" * 32
    authorizer.functions.getRoleMember.return_value.call.return_value = OTHER

    assert default_admin(authorizer) == OTHER
    authorizer.functions.getRoleMember.assert_called_once_with(b"\x00" * 32, 0)

    grant_role(MagicMock(), authorizer, b"\x01" * 32, SENDER.lower(), OTHER)
    authorizer.functions.grantRole.assert_called_once_with(b"\x01" * 32, SENDER)
    assert sent == [{"from": OTHER}]


def test_provider_calls(provider_contract, sent):
    provider = ProtocolFeeProvider(MagicMock(), provider_contract)
    provider_contract.functions.getFeeTypePercentage.return_value.call.return_value = fp("0.5")

    assert provider.get_fee_type_percentage(ProtocolFeeType.YIELD) == fp("0.5")
    provider_contract.functions.getFeeTypePercentage.assert_called_once_with(2)

    provider.set_fee_type_percentage(ProtocolFeeType.SWAP, fp("0.1"), SENDER)
    provider_contract.functions.setFeeTypePercentage.assert_called_once_with(0, fp("0.1"))

    provider.set_fee_type_percentage_for_pool(OTHER, ProtocolFeeType.AUM, fp("0.2"), SENDER)
    provider_contract.functions.setFeeTypePercentageForPool.assert_called_once_with(OTHER, 3, fp("0.2"))

    provider.remove_fee_type_percentage_for_pool(OTHER, ProtocolFeeType.AUM, SENDER)
    provider_contract.functions.removeFeeTypePercentageForPool.assert_called_once_with(OTHER, 3)
    assert sent == [{"from": SENDER}] * 3


def test_pool_fee_cache():
    pool = MagicMock()
    pool.functions.getProtocolFeePercentageCache.return_value.call.return_value = 7
    assert pool_fee_cache(pool, ProtocolFeeType.YIELD) == 7
    pool.functions.getProtocolFeePercentageCache.assert_called_once_with(2)


def test_provider_at_binds_the_known_abi(w3):
    provider = ProtocolFeeProvider.at(w3, OTHER.lower())
    assert provider.address == OTHER
    assert provider.contract.abi == PROTOCOL_FEE_PROVIDER_ABI
