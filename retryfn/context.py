"""Per-attempt context handed to operations and error hooks."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class SkipDecision:
    """Mutable record of an early-exit request for one attempt."""

    requested: bool = False
    error: BaseException | None = None

    def request(self, error: BaseException | None = None) -> None:
        self.error = error
        self.requested = True


@dataclass(frozen=True, slots=True)
class AttemptContext:
    attempts: int
    _decision: SkipDecision = field(repr=False, compare=False)

    def skip_retry(self, error: BaseException | None = None) -> None:
        """Stop retrying after this attempt, optionally failing with ``error``."""

        self._decision.request(error)


__all__ = ["AttemptContext", "SkipDecision"]
