"""Errors synthesized by the retry executor."""

from __future__ import annotations


class RetryFnError(Exception):
    pass


class OperationTimeoutError(RetryFnError, TimeoutError):
    """Raised when an attempt does not complete within the configured timeout."""

    def __init__(self, timeout: float | None = None) -> None:
        super().__init__("Operation timed out")
        self.timeout = timeout


__all__ = ["OperationTimeoutError", "RetryFnError"]
