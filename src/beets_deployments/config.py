"""Configuration constants shared by the CLIs, the task runner and the scripts.

Addresses and ABIs live in `networks`, `tokens` and `abis`; this module only
keeps environment variable names and defaults so the entry points can focus
on flow control.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_RPC_URL = "http://127.0.0.1:8545"
DEFAULT_NETWORK = "fantom"

ENV_RPC_URL = "RPC_URL"
ENV_NETWORK = "NETWORK"
ENV_SENDER = "SENDER"
ENV_ETHERSCAN_API_KEY = "ETHERSCAN_API_KEY"
ENV_DEPLOYMENTS_DIR = "DEPLOYMENTS_DIR"
ENV_FORK_RPC_URL = "FORK_RPC_URL"
ENV_SWAP_LOOP_ITERATIONS = "SWAP_LOOP_ITERATIONS"
ENV_WEIGHTED_POOL_FACTORY = "WEIGHTED_POOL_FACTORY"
ENV_STABLE_POOL_FACTORY = "STABLE_POOL_FACTORY"

# Task records and compiled artifacts ship inside the package unless
# DEPLOYMENTS_DIR points somewhere else.
PACKAGE_DEPLOYMENTS_DIR = Path(__file__).parent / "deployments"

DEFAULT_SWAP_LOOP_ITERATIONS = 30

# Explorer verification: status is polled, the submission is never repeated.
VERIFY_POLL_INTERVAL_SECONDS = 5.0
VERIFY_MAX_POLLS = 12
VERIFY_TIMEOUT_SECONDS = 30.0

# Gas top-up for impersonated accounts on a fork.
DEFAULT_IMPERSONATION_BALANCE_WEI = 100 * 10**18


def deployments_dir(env) -> Path:
    value = env.get(ENV_DEPLOYMENTS_DIR)
    return Path(value) if value else PACKAGE_DEPLOYMENTS_DIR
