"""Delay policies used between retry attempts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

DEFAULT_DELAY = 0.1

DelayFunction = Callable[[int], float]


@dataclass(frozen=True, slots=True)
class FixedDelay:
    seconds: float = DEFAULT_DELAY

    def __post_init__(self) -> None:
        if self.seconds < 0:
            raise ValueError(f"delay must be non-negative, got {self.seconds}")

    def for_attempt(self, attempts: int) -> float:
        return self.seconds


@dataclass(frozen=True, slots=True)
class ComputedDelay:
    """Delay derived from the ordinal of the attempt that just ran."""

    function: DelayFunction

    def for_attempt(self, attempts: int) -> float:
        return self.function(attempts)


DelayPolicy = Union[FixedDelay, ComputedDelay]
DelayLike = Union[DelayPolicy, DelayFunction, float, int, None]


def as_delay(value: DelayLike) -> DelayPolicy:
    """Coerce a number, callable or policy into a delay policy."""

    if value is None:
        return FixedDelay()
    if isinstance(value, (FixedDelay, ComputedDelay)):
        return value
    if isinstance(value, bool):
        raise TypeError("delay must be a number or a callable, not bool")
    if isinstance(value, (int, float)):
        return FixedDelay(float(value))
    if callable(value):
        return ComputedDelay(value)
    raise TypeError(f"Unsupported delay value: {value!r}")


__all__ = [
    "DEFAULT_DELAY",
    "ComputedDelay",
    "DelayFunction",
    "DelayLike",
    "DelayPolicy",
    "FixedDelay",
    "as_delay",
]
