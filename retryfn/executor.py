"""Async retry executor driving a single fallible operation."""

from __future__ import annotations

import asyncio
import dataclasses
import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, TypeVar, Union

from retryfn.config import DEFAULT_MAX_ATTEMPTS, RetrySettings
from retryfn.context import AttemptContext, SkipDecision
from retryfn.delay import DelayLike, as_delay
from retryfn.exceptions import OperationTimeoutError
from retryfn.logging import logger as default_logger

T = TypeVar("T")
Operation = Callable[[AttemptContext], Union[Awaitable[T], T]]
ErrorHook = Callable[[AttemptContext], Union[Awaitable[None], None]]

# Attempts that lost the race against the timeout, kept alive until they finish.
_abandoned_attempts: set[asyncio.Future[Any]] = set()


@dataclass(frozen=True, slots=True)
class RetryOptions:
    """Immutable configuration for one retry run.

    ``delay`` accepts seconds, a callable mapping the attempt ordinal to
    seconds, or a ready-made delay policy. ``timeout`` bounds every single
    attempt, not the whole run.

    A timed-out attempt is abandoned, not cancelled: its task keeps running
    and may still hold resources, while the run fails at once with
    ``OperationTimeoutError``. Whatever it later returns or raises is
    discarded. Set ``cancel_on_timeout`` to cancel that task instead; the
    caller sees the same timeout error either way. Synchronous operations
    are never raced and always run to completion.
    """

    delay: DelayLike = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    timeout: float | None = None
    on_error: ErrorHook | None = None
    cancel_on_timeout: bool = False
    logger: Any = None
    operation_name: str = "operation"

    def __post_init__(self) -> None:
        object.__setattr__(self, "delay", as_delay(self.delay))
        if isinstance(self.max_attempts, bool) or self.max_attempts < 1:
            raise ValueError(f"max_attempts must be a positive integer, got {self.max_attempts!r}")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout!r}")

    @classmethod
    def from_settings(cls, settings: RetrySettings, **overrides: Any) -> "RetryOptions":
        values: dict[str, Any] = {
            "delay": settings.delay_seconds,
            "max_attempts": settings.max_attempts,
            "timeout": settings.timeout_seconds,
            "cancel_on_timeout": settings.cancel_on_timeout,
        }
        values.update(overrides)
        return cls(**values)


class RetryExecutor:
    """Re-run an operation until it succeeds, is skipped, times out or runs out of attempts."""

    def __init__(self, options: RetryOptions | None = None) -> None:
        self.options = options or RetryOptions()
        self._logger = self.options.logger or default_logger

    async def execute(self, operation: Operation[T]) -> T:
        options = self.options
        attempts = 1
        last_error: Exception | None = None

        while attempts <= options.max_attempts:
            delay = self._delay_for(attempts)
            decision = SkipDecision()
            try:
                return await self._attempt(operation, attempts, decision)
            except Exception as exc:
                last_error = exc
                attempts += 1
                # on_error runs before the retry decision and may request a skip.
                await self._notify_error(attempts, decision)
                if decision.requested:
                    terminal = decision.error if decision.error is not None else exc
                    self._logger.info(
                        "retry_skipped",
                        operation=options.operation_name,
                        attempt=attempts - 1,
                        error=str(terminal),
                    )
                    raise terminal

            if attempts > options.max_attempts:
                break
            self._logger.warning(
                "retrying_operation",
                operation=options.operation_name,
                attempt=attempts - 1,
                max_attempts=options.max_attempts,
                delay=delay,
                error=str(last_error),
            )
            await asyncio.sleep(delay)

        if last_error is None:
            # Unreachable with max_attempts >= 1; keeps type-checkers happy.
            raise RuntimeError(f"{options.operation_name} made no attempts")
        self._logger.error(
            "retry_exhausted",
            operation=options.operation_name,
            max_attempts=options.max_attempts,
            error=str(last_error),
        )
        raise last_error

    def _delay_for(self, attempts: int) -> float:
        delay = self.options.delay.for_attempt(attempts)
        if delay < 0:
            self._logger.warning(
                "negative_delay_clamped",
                operation=self.options.operation_name,
                attempt=attempts,
                delay=delay,
            )
            return 0.0
        return delay

    async def _attempt(self, operation: Operation[T], attempts: int, decision: SkipDecision) -> T:
        result = operation(AttemptContext(attempts, decision))
        if not inspect.isawaitable(result):
            return result
        timeout = self.options.timeout
        if timeout is None:
            return await result

        task = asyncio.ensure_future(result)
        try:
            done, _ = await asyncio.wait({task}, timeout=timeout)
        except asyncio.CancelledError:
            task.cancel()
            raise
        if task in done:
            return task.result()

        # A timed-out attempt is never retried, whatever the remaining budget.
        decision.requested = True
        self._abandon(task)
        self._logger.warning(
            "operation_timed_out",
            operation=self.options.operation_name,
            attempt=attempts,
            timeout=timeout,
        )
        raise OperationTimeoutError(timeout)

    async def _notify_error(self, attempts: int, decision: SkipDecision) -> None:
        hook = self.options.on_error
        if hook is None:
            return
        outcome = hook(AttemptContext(attempts, decision))
        if inspect.isawaitable(outcome):
            await outcome

    def _abandon(self, task: asyncio.Future[Any]) -> None:
        if self.options.cancel_on_timeout:
            task.cancel()
        _abandoned_attempts.add(task)
        task.add_done_callback(self._discard_abandoned)

    def _discard_abandoned(self, task: asyncio.Future[Any]) -> None:
        _abandoned_attempts.discard(task)
        if task.cancelled():
            outcome = "cancelled"
        elif task.exception() is not None:
            outcome = "failed"
        else:
            outcome = "succeeded"
        self._logger.debug(
            "abandoned_attempt_finished",
            operation=self.options.operation_name,
            outcome=outcome,
        )


async def retry_fn(
    operation: Operation[T],
    options: RetryOptions | None = None,
    **overrides: Any,
) -> T:
    """Run ``operation`` with retries.

    Keyword overrides are the ``RetryOptions`` fields; they are applied on top
    of ``options`` when both are given.
    """

    if options is None:
        options = RetryOptions(**overrides)
    elif overrides:
        options = dataclasses.replace(options, **overrides)
    return await RetryExecutor(options).execute(operation)


__all__ = ["ErrorHook", "Operation", "RetryExecutor", "RetryOptions", "retry_fn"]
