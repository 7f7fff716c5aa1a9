from urllib.parse import parse_qs

import httpx
import pytest
from eth_abi import encode

from beets_deployments.artifacts import Artifact
from beets_deployments.verification import ExplorerVerifier, encode_constructor_args
from tests.helpers import OTHER, SENDER

API_URL = "https://api.ftmscan.com/api"

CONSTRUCTOR_ABI = [
    {
        "inputs": [
            {"internalType": "address", "name": "vault", "type": "address"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"},
        ],
        "stateMutability": "nonpayable",
        "type": "constructor",
    }
]


@pytest.fixture
def artifact():
    return Artifact(
        contract_name="ReaperManualRebalancer",
        abi=CONSTRUCTOR_ABI,
        bytecode="0x6080",
        source_name="contracts/ReaperManualRebalancer.sol",
        compiler_version="v0.7.1+commit.f4a555be",
        build_input={"language": "Solidity", "sources": {}},
    )


def make_verifier(responses, api_key="key", max_polls=3):
    """Verifier answering each POST with the next canned body; records the forms sent."""
    sent = []
    queue = list(responses)

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append({key: values[0] for key, values in parse_qs(request.content.decode()).items()})
        status, body = queue.pop(0)
        return httpx.Response(status, json=body)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    verifier = ExplorerVerifier(API_URL, api_key, client=client, poll_interval=0, max_polls=max_polls)
    return verifier, sent


def test_constructor_args_are_abi_encoded_without_prefix():
    assert encode_constructor_args(CONSTRUCTOR_ABI, [SENDER, 5]) == encode(["address", "uint256"], [SENDER, 5]).hex()
    assert encode_constructor_args([], []) == ""


def test_no_api_key_skips_without_requests(artifact):
    verifier, sent = make_verifier([], api_key=None)
    assert verifier.verify(OTHER, artifact, [SENDER, 5]) is False
    assert sent == []


def test_submit_then_poll_until_verified(artifact):
    verifier, sent = make_verifier(
        [
            (200, {"status": "1", "message": "OK", "result": "guid-1"}),
            (200, {"status": "0", "message": "NOTOK", "result": "Pending in queue"}),
            (200, {"status": "1", "message": "OK", "result": "Pass - Verified"}),
        ]
    )
    assert verifier.verify(OTHER, artifact, [SENDER, 5]) is True

    submit, first_poll, second_poll = sent
    assert submit["action"] == "verifysourcecode"
    assert submit["contractaddress"] == OTHER
    assert submit["contractname"] == "contracts/ReaperManualRebalancer.sol:ReaperManualRebalancer"
    assert submit["constructorArguements"] == encode_constructor_args(CONSTRUCTOR_ABI, [SENDER, 5])
    assert first_poll["action"] == second_poll["action"] == "checkverifystatus"
    assert second_poll["guid"] == "guid-1"


def test_already_verified_on_submit_is_success(artifact):
    verifier, sent = make_verifier([(200, {"status": "0", "result": "Contract source code already verified"})])
    assert verifier.verify(OTHER, artifact, [SENDER, 5]) is True
    assert len(sent) == 1


def test_rejected_verification_is_reported_not_raised(artifact):
    verifier, _ = make_verifier(
        [
            (200, {"status": "1", "result": "guid-2"}),
            (200, {"status": "0", "result": "Fail - Unable to verify"}),
        ]
    )
    assert verifier.verify(OTHER, artifact, [SENDER, 5]) is False


def test_still_pending_after_max_polls(artifact):
    pending = (200, {"status": "0", "result": "Pending in queue"})
    verifier, sent = make_verifier([(200, {"status": "1", "result": "guid-3"}), pending, pending], max_polls=2)
    assert verifier.verify(OTHER, artifact, [SENDER, 5]) is False
    assert len(sent) == 3


def test_http_errors_are_reported_not_raised(artifact):
    verifier, _ = make_verifier([(500, {"message": "boom"})])
    assert verifier.verify(OTHER, artifact, [SENDER, 5]) is False


def test_artifact_without_build_input_is_not_submitted():
    verifier, sent = make_verifier([])
    bare = Artifact(contract_name="Thing", abi=[], bytecode="0x")
    assert verifier.verify(OTHER, bare) is False
    assert sent == []


def test_default_client_is_opened_and_closed_per_request(artifact, monkeypatch):
    real_client = httpx.Client
    opened = []
    answers = [{"status": "1", "result": "guid-4"}, {"status": "1", "result": "Pass - Verified"}]

    def client_factory(**kwargs):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=answers.pop(0)))
        client = real_client(transport=transport, **kwargs)
        opened.append(client)
        return client

    monkeypatch.setattr(httpx, "Client", client_factory)
    verifier = ExplorerVerifier(API_URL, "key", poll_interval=0)
    assert verifier.verify(OTHER, artifact, [SENDER, 5]) is True
    assert len(opened) == 2
    assert all(client.is_closed for client in opened)
