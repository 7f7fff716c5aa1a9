from __future__ import annotations


class DeploymentError(Exception):
    """Base class for every error raised by this package."""


class TransactionReverted(DeploymentError):
    """A transaction was mined with status 0 or rejected during estimation.

    `reason` is the chain's revert reason, untouched (e.g. ``BAL#101``).
    """

    def __init__(self, reason: str, tx_hash: str | None = None):
        self.reason = reason
        self.tx_hash = tx_hash
        message = reason if tx_hash is None else f"{reason} (tx {tx_hash})"
        super().__init__(message)


class RpcError(DeploymentError):
    def __init__(self, method: str, error):
        self.method = method
        self.error = error
        super().__init__(f"RPC error during {method}: {error}")


class TaskInputError(DeploymentError):
    pass


class ReadOnlyTaskError(DeploymentError):
    pass


class UnknownTaskError(DeploymentError):
    pass


class ArtifactNotFoundError(DeploymentError):
    pass


class RecordNotFoundError(DeploymentError):
    pass


class EventNotFoundError(DeploymentError):
    pass


class VerificationError(DeploymentError):
    pass
