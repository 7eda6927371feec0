"""Caller-side retry for invoke outcomes."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from starkscript.core.errors import ProviderError
from starkscript.core.outcome import Failure, InvokeOutcome
from starkscript.core.types import TransportFailureKind


@dataclass(slots=True)
class RetryPolicy:
    """Simple exponential-backoff retry policy."""

    max_attempts: int = 3
    base_delay_seconds: float = 0.5
    max_delay_seconds: float = 5.0

    def delay_for(self, attempt: int) -> float:
        return min(self.max_delay_seconds, self.base_delay_seconds * (2**attempt))


def is_retryable(outcome: InvokeOutcome) -> bool:
    """
    Only connection failures are safe to resend: the request never reached
    the node. A timeout may have been executed remotely, and node errors
    are answers, not transient faults.
    """
    return (
        isinstance(outcome, Failure)
        and isinstance(outcome.error, ProviderError)
        and outcome.error.kind is TransportFailureKind.CONNECTION_ERROR
    )


def invoke_with_retry(
    call: Callable[[], InvokeOutcome],
    policy: RetryPolicy,
    *,
    sleep: Callable[[float], None] = time.sleep,
) -> InvokeOutcome:
    """Run ``call`` until it returns a non-retryable outcome or attempts run out."""
    outcome = call()
    for attempt in range(max(1, policy.max_attempts) - 1):
        if not is_retryable(outcome):
            return outcome
        delay = policy.delay_for(attempt)
        logger.info("invoke connection failed, retrying in {}s (attempt {}/{})", delay, attempt + 2, policy.max_attempts)
        sleep(delay)
        outcome = call()
    return outcome
