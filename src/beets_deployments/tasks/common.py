"""Input references and helpers shared by several task definitions."""

from __future__ import annotations

import json

from beets_deployments.task import TaskOutput

VAULT = TaskOutput("20210418-vault", "Vault")
PROTOCOL_FEE_PERCENTAGES_PROVIDER = TaskOutput(
    "20220725-protocol-fee-percentages-provider", "ProtocolFeePercentagesProvider"
)
BALANCER_QUERIES = TaskOutput("20220721-balancer-queries", "BalancerQueries")


def version(name: str, number: int, task_id: str) -> str:
    """The version string factories and pools report from `version()`."""
    return json.dumps({"name": name, "version": number, "deployment": task_id}, separators=(",", ":"))
