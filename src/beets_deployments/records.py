"""Deployment record files: ``<root>/<task-id>/output/<network>.json``."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from eth_utils import to_checksum_address

from beets_deployments.errors import RecordNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeployedContractRecord:
    task_id: str
    contract_name: str
    address: str


class RecordStore:
    def __init__(self, root: Path):
        self.root = Path(root)

    def task_dir(self, task_id: str) -> Path:
        return self.root / task_id

    def path(self, task_id: str, network: str) -> Path:
        return self.task_dir(task_id) / "output" / f"{network}.json"

    def read(self, task_id: str, network: str) -> dict[str, str]:
        path = self.path(task_id, network)
        if not path.exists():
            return {}
        with open(path, "r") as f:
            return json.load(f)

    def get(self, task_id: str, network: str, contract_name: str) -> DeployedContractRecord:
        output = self.read(task_id, network)
        if contract_name not in output:
            raise RecordNotFoundError(f"No {contract_name} deployed by {task_id} on {network}")
        return DeployedContractRecord(task_id, contract_name, output[contract_name])

    def has(self, task_id: str, network: str, contract_name: str) -> bool:
        return contract_name in self.read(task_id, network)

    def save(self, task_id: str, network: str, outputs: dict[str, str]) -> None:
        merged = self.read(task_id, network)
        merged.update({name: to_checksum_address(address) for name, address in outputs.items()})

        path = self.path(task_id, network)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(merged, f, sort_keys=True, indent=2)
            f.write("\n")
        logger.info("Saved %s outputs for %s: %s", network, task_id, ", ".join(sorted(outputs)))
