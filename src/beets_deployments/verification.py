"""Best-effort source verification against Etherscan-compatible explorers.

Nothing here raises: a failed verification is logged and reported as False so
that it never fails a deployment.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Sequence

import httpx
from eth_abi import encode

from beets_deployments import config
from beets_deployments.artifacts import Artifact
from beets_deployments.errors import VerificationError

logger = logging.getLogger(__name__)

ALREADY_VERIFIED = "already verified"
PENDING = "pending in queue"
PASS = "pass - verified"


def encode_constructor_args(abi: list, args: Sequence) -> str:
    constructor = next((item for item in abi if item.get("type") == "constructor"), None)
    if constructor is None or not constructor.get("inputs"):
        return ""
    types = [item["type"] for item in constructor["inputs"]]
    return encode(types, list(args)).hex()


class ExplorerVerifier:
    def __init__(
        self,
        api_url: str,
        api_key: str | None,
        client: httpx.Client | None = None,
        poll_interval: float = config.VERIFY_POLL_INTERVAL_SECONDS,
        max_polls: int = config.VERIFY_MAX_POLLS,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.client = client
        self.poll_interval = poll_interval
        self.max_polls = max_polls

    def verify(self, address: str, artifact: Artifact, constructor_args: Sequence = ()) -> bool:
        if not self.api_key:
            logger.info("No explorer API key; skipping verification of %s at %s", artifact.contract_name, address)
            return False
        try:
            guid = self._submit(address, artifact, constructor_args)
            if guid is None:
                return True
            self._wait_for_result(guid)
        except (VerificationError, httpx.HTTPError, ValueError) as exc:
            logger.warning("Verification of %s at %s failed: %s", artifact.contract_name, address, exc)
            return False
        logger.info("Verified %s at %s", artifact.contract_name, address)
        return True

    def _submit(self, address: str, artifact: Artifact, constructor_args: Sequence) -> str | None:
        if artifact.build_input is None or artifact.source_name is None:
            raise VerificationError(f"{artifact.contract_name} artifact carries no build input")

        payload = {
            "apikey": self.api_key,
            "module": "contract",
            "action": "verifysourcecode",
            "contractaddress": address,
            "sourceCode": json.dumps(artifact.build_input),
            "codeformat": "solidity-standard-json-input",
            "contractname": f"{artifact.source_name}:{artifact.contract_name}",
            "compilerversion": artifact.compiler_version or "",
            # (sic) the explorer API spells it this way
            "constructorArguements": encode_constructor_args(artifact.abi, constructor_args),
        }
        body = self._post(payload)
        if body.get("status") == "1":
            return body["result"]
        if ALREADY_VERIFIED in str(body.get("result", "")).lower():
            logger.info("%s at %s is already verified", artifact.contract_name, address)
            return None
        raise VerificationError(str(body.get("result") or body.get("message")))

    def _wait_for_result(self, guid: str) -> None:
        for _ in range(self.max_polls):
            time.sleep(self.poll_interval)
            body = self._post({"apikey": self.api_key, "module": "contract", "action": "checkverifystatus", "guid": guid})
            result = str(body.get("result", ""))
            if PENDING in result.lower():
                continue
            if PASS in result.lower() or ALREADY_VERIFIED in result.lower():
                return
            raise VerificationError(result)
        raise VerificationError(f"Still pending after {self.max_polls} polls (guid {guid})")

    def _post(self, payload: dict) -> dict:
        if self.client is not None:
            response = self.client.post(self.api_url, data=payload)
        else:
            with httpx.Client(timeout=config.VERIFY_TIMEOUT_SECONDS) as client:
                response = client.post(self.api_url, data=payload)
        response.raise_for_status()
        return response.json()
