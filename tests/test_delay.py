"""Delay policy coercion."""

from __future__ import annotations

import pytest

from retryfn.delay import DEFAULT_DELAY, ComputedDelay, FixedDelay, as_delay


def test_none_uses_default_delay():
    policy = as_delay(None)

    assert policy == FixedDelay(DEFAULT_DELAY)
    assert policy.for_attempt(7) == 0.1


def test_numbers_become_fixed_delays():
    assert as_delay(2) == FixedDelay(2.0)
    assert as_delay(0.5).for_attempt(3) == 0.5


def test_callables_become_computed_delays():
    policy = as_delay(lambda attempts: attempts * 2)

    assert isinstance(policy, ComputedDelay)
    assert policy.for_attempt(3) == 6


def test_policies_pass_through_unchanged():
    policy = ComputedDelay(lambda attempts: 1.0)

    assert as_delay(policy) is policy


def test_invalid_delays_are_rejected():
    with pytest.raises(ValueError):
        FixedDelay(-0.1)
    with pytest.raises(TypeError):
        as_delay(True)
    with pytest.raises(TypeError):
        as_delay("fast")
