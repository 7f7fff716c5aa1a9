"""Compiled contract artifacts kept next to each task.

An artifact is the usual hardhat/foundry JSON (``abi`` and ``bytecode``),
optionally carrying the ``sourceName`` and the solc standard-JSON ``input``
used to build it, which explorer verification needs.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from beets_deployments.errors import ArtifactNotFoundError


@dataclass(frozen=True)
class Artifact:
    contract_name: str
    abi: list
    bytecode: str
    source_name: str | None = None
    compiler_version: str | None = None
    build_input: dict | None = field(default=None, repr=False)


def load_artifact(task_dir: Path, name: str) -> Artifact:
    path = Path(task_dir) / "artifact" / f"{name}.json"
    if not path.exists():
        raise ArtifactNotFoundError(f"Missing artifact {path}")
    with open(path, "r") as f:
        raw = json.load(f)

    bytecode = raw.get("bytecode", "")
    # Foundry nests the bytecode: {"bytecode": {"object": "0x..."}}
    if isinstance(bytecode, dict):
        bytecode = bytecode.get("object", "")

    return Artifact(
        contract_name=raw.get("contractName", name),
        abi=raw["abi"],
        bytecode=bytecode,
        source_name=raw.get("sourceName"),
        compiler_version=raw.get("compilerVersion"),
        build_input=raw.get("input"),
    )
