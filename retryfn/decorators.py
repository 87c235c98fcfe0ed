"""Decorator form of :func:`retryfn.executor.retry_fn`."""

from __future__ import annotations

import functools
from typing import Any, Awaitable, Callable

from retryfn.context import AttemptContext
from retryfn.executor import RetryOptions, retry_fn


def retryable(
    options: RetryOptions | None = None,
    **overrides: Any,
) -> Callable[[Callable[..., Any]], Callable[..., Awaitable[Any]]]:
    """Wrap a function taking an ``AttemptContext`` first so each call is retried.

    Arguments passed to the wrapper are forwarded after the context.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Awaitable[Any]]:
        settings = dict(overrides)
        if options is None or options.operation_name == "operation":
            settings.setdefault("operation_name", func.__qualname__)

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            def _operation(context: AttemptContext) -> Any:
                return func(context, *args, **kwargs)

            return await retry_fn(_operation, options, **settings)

        return wrapper

    return decorator


__all__ = ["retryable"]
