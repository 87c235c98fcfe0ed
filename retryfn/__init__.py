"""Retry a single fallible operation with attempt limits, timeouts and early exit."""

from retryfn.config import DEFAULT_MAX_ATTEMPTS, RetrySettings, get_settings
from retryfn.context import AttemptContext
from retryfn.decorators import retryable
from retryfn.delay import DEFAULT_DELAY, ComputedDelay, DelayPolicy, FixedDelay, as_delay
from retryfn.exceptions import OperationTimeoutError, RetryFnError
from retryfn.executor import RetryExecutor, RetryOptions, retry_fn
from retryfn.logging import configure_logging, logger

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "AttemptContext",
    "ComputedDelay",
    "DelayPolicy",
    "FixedDelay",
    "OperationTimeoutError",
    "RetryExecutor",
    "RetryFnError",
    "RetryOptions",
    "RetrySettings",
    "as_delay",
    "configure_logging",
    "get_settings",
    "logger",
    "retry_fn",
    "retryable",
]
