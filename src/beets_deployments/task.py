"""Task runner: resolve a task's input, deploy, verify and persist its outputs.

A task is identified by a dated id (``20230327-batch-relayer-v5``) and owns a
directory under the deployments root holding its compiled artifacts and its
per-network output records.
"""

from __future__ import annotations

import dataclasses
import logging
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, NewType, Sequence

from eth_utils import is_address, to_checksum_address
from web3 import Web3

from beets_deployments import config
from beets_deployments.abis import KNOWN_ABIS
from beets_deployments.artifacts import Artifact, load_artifact
from beets_deployments.chain import send_transaction
from beets_deployments.errors import (
    ArtifactNotFoundError,
    DeploymentError,
    ReadOnlyTaskError,
    RecordNotFoundError,
    TaskInputError,
)
from beets_deployments.records import RecordStore
from beets_deployments.verification import ExplorerVerifier

logger = logging.getLogger(__name__)

Address = NewType("Address", str)


class TaskMode(Enum):
    LIVE = "live"  # deploys, verifies and writes <network>.json
    TEST = "test"  # fork runs: deploys and writes <network>-test.json, never verifies
    READ_ONLY = "read-only"  # lookups only


@dataclass(frozen=True)
class TaskRunOptions:
    force: bool = False
    from_: str | None = None


@dataclass(frozen=True)
class TaskOutput:
    """Placeholder in a task input for an address another task deployed."""

    task_id: str
    contract_name: str


@dataclass(frozen=True)
class TaskDefinition:
    input_type: type
    inputs: Mapping[str, Mapping[str, Any]]
    runner: Callable[["Task", TaskRunOptions], None]


def build_input(input_type: type, values: Mapping[str, Any]):
    """Validate `values` against the fields of the `input_type` dataclass."""
    hints = typing.get_type_hints(input_type)
    fields = [f.name for f in dataclasses.fields(input_type)]

    unknown = set(values) - set(fields)
    if unknown:
        raise TaskInputError(f"{input_type.__name__} got unknown fields: {', '.join(sorted(unknown))}")

    kwargs = {}
    for name in fields:
        if name not in values:
            raise TaskInputError(f"{input_type.__name__} is missing {name}")
        kwargs[name] = _coerce(input_type.__name__, name, hints[name], values[name])
    return input_type(**kwargs)


def _coerce(type_name: str, field: str, hint, value):
    if hint is Address:
        if not isinstance(value, str) or not is_address(value):
            raise TaskInputError(f"{type_name}.{field} must be an address, got {value!r}")
        return to_checksum_address(value)
    if hint is int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise TaskInputError(f"{type_name}.{field} must be a non-negative integer, got {value!r}")
        return value
    if hint is str:
        if not isinstance(value, str):
            raise TaskInputError(f"{type_name}.{field} must be a string, got {value!r}")
        return value
    return value


class Task:
    def __init__(
        self,
        task_id: str,
        mode: TaskMode,
        network: str,
        w3: Web3 | None = None,
        store: RecordStore | None = None,
        verifier: ExplorerVerifier | None = None,
    ):
        self.id = task_id
        self.mode = mode
        self.network = network
        self.store = store if store is not None else RecordStore(config.PACKAGE_DEPLOYMENTS_DIR)
        self.w3 = w3
        self.verifier = verifier

    def __repr__(self) -> str:
        return f"Task({self.id!r}, {self.mode.value}, {self.network!r})"

    @property
    def output_network(self) -> str:
        return f"{self.network}-test" if self.mode is TaskMode.TEST else self.network

    @property
    def definition(self) -> TaskDefinition:
        from beets_deployments.tasks import get_definition

        return get_definition(self.id)

    def input(self):
        definition = self.definition
        raw = definition.inputs.get(self.network)
        if raw is None:
            raise TaskInputError(f"{self.id} has no input for {self.network}")
        resolved = {name: self._resolve(value) for name, value in raw.items()}
        return build_input(definition.input_type, resolved)

    def _resolve(self, value):
        if not isinstance(value, TaskOutput):
            return value
        # In TEST mode a dependency may have been deployed by an earlier fork run.
        mode = TaskMode.TEST if self.mode is TaskMode.TEST else TaskMode.READ_ONLY
        dependency = Task(value.task_id, mode, self.network, self.w3, self.store)
        try:
            return dependency.address_of(value.contract_name)
        except RecordNotFoundError as exc:
            raise TaskInputError(f"{self.id} input depends on an undeployed contract: {exc}") from exc

    def run(self, options: TaskRunOptions = TaskRunOptions()) -> None:
        logger.info("Running %s on %s (%s)", self.id, self.network, self.mode.value)
        self.definition.runner(self, options)

    def artifact(self, name: str) -> Artifact:
        return load_artifact(self.store.task_dir(self.id), name)

    def _require_w3(self) -> Web3:
        if self.w3 is None:
            raise DeploymentError(f"{self} has no web3 connection")
        return self.w3

    def _default_sender(self) -> str:
        accounts = self._require_w3().eth.accounts
        if not accounts:
            raise DeploymentError("No sender given and the node exposes no unlocked accounts")
        return accounts[0]

    def deploy(self, name: str, args: Sequence, from_: str | None = None):
        if self.mode is TaskMode.READ_ONLY:
            raise ReadOnlyTaskError(f"Cannot deploy {name} from read-only {self}")
        w3 = self._require_w3()
        artifact = self.artifact(name)
        factory = w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
        sender = to_checksum_address(from_) if from_ else self._default_sender()

        receipt = send_transaction(w3, factory.constructor(*args), {"from": sender})
        address = receipt["contractAddress"]
        logger.info("%s deployed at %s", name, address)
        return w3.eth.contract(address=address, abi=artifact.abi)

    def deploy_and_verify(self, name: str, args: Sequence, from_: str | None = None, force: bool = False):
        if self.mode is TaskMode.READ_ONLY:
            raise ReadOnlyTaskError(f"Cannot deploy {name} from read-only {self}")

        existing = self.output().get(name)
        if existing and not force:
            logger.info("%s already deployed at %s; skipping (use force to redeploy)", name, existing)
            return self.instance_at(name, existing)

        instance = self.deploy(name, args, from_)
        self.verify(name, instance.address, args)
        self.save({name: instance.address})
        return instance

    def verify(self, name: str, address: str, args: Sequence) -> bool:
        if self.mode is not TaskMode.LIVE:
            return False
        if self.verifier is None:
            logger.info("No verifier configured; %s at %s left unverified", name, address)
            return False
        try:
            artifact = self.artifact(name)
        except ArtifactNotFoundError as exc:
            logger.warning("Cannot verify %s: %s", name, exc)
            return False
        return self.verifier.verify(address, artifact, args)

    def save(self, outputs: Mapping[str, str]) -> None:
        if self.mode is TaskMode.READ_ONLY:
            raise ReadOnlyTaskError(f"Cannot save outputs from read-only {self}")
        self.store.save(self.id, self.output_network, dict(outputs))

    def output(self) -> dict[str, str]:
        return self.store.read(self.id, self.output_network)

    def address_of(self, name: str) -> str:
        networks = [self.output_network]
        if self.output_network != self.network:
            networks.append(self.network)
        for network in networks:
            output = self.store.read(self.id, network)
            if name in output:
                return output[name]
        raise RecordNotFoundError(f"No {name} deployed by {self.id} on {self.network}")

    def deployed_instance(self, name: str):
        return self.instance_at(name, self.address_of(name))

    def instance_at(self, name: str, address: str):
        w3 = self._require_w3()
        try:
            abi = self.artifact(name).abi
        except ArtifactNotFoundError:
            if name not in KNOWN_ABIS:
                raise
            abi = KNOWN_ABIS[name]
        return w3.eth.contract(address=to_checksum_address(address), abi=abi)
