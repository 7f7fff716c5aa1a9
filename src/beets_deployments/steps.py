"""Run a fixed sequence of transactions one at a time.

Each step submits exactly one transaction and waits for it to be mined before
the next one starts. A revert propagates out of the generator, so nothing
after the failing step is sent, and nothing is retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransactionStep:
    label: str
    submit: Callable[[], Any]


@dataclass(frozen=True)
class StepResult:
    index: int
    label: str
    receipt: Any


def run_steps(steps: Iterable[TransactionStep]) -> Iterator[StepResult]:
    for index, step in enumerate(steps):
        logger.debug("Submitting step %d: %s", index, step.label)
        receipt = step.submit()
        yield StepResult(index, step.label, receipt)
