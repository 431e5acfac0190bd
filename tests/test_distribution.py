import dataclasses

import pytest

from rangechart.distribution import (
    NOT_IN_RANGE,
    Distribution,
    TypedDistribution,
    approx_equal,
    is_zero,
    round_to,
)
from rangechart.hands import TypedHand

VALID = [
    (0.25, 0.25, 0.25, 0.25),
    (0.5, 0.25, 0.125, 0.125),
    (0.0625, 0.4375, 0.25, 0.25),
]


@pytest.mark.parametrize("values", VALID + [(1.0, 0.0, 0.0, 0.0), (0.0, 0.0, 0.0, 1.0)])
def test_distributions_summing_to_one_are_valid(values):
    assert Distribution.of("AKs", *values).is_valid


@pytest.mark.parametrize("values", VALID)
@pytest.mark.parametrize("component", range(4))
def test_negating_any_component_is_invalid(values, component):
    flipped = list(values)
    flipped[component] = -flipped[component]
    assert not Distribution.of("AKs", *flipped).is_valid


@pytest.mark.parametrize("delta", [1e-9, -1e-9, 0.5, -0.25])
def test_sum_away_from_one_is_invalid(delta):
    assert not Distribution.of("AKs", 0.5, 0.25, 0.125, 0.125 + delta).is_valid


def test_sentinel_is_entirely_not_in_range():
    assert NOT_IN_RANGE.is_valid
    assert (NOT_IN_RANGE.raise_, NOT_IN_RANGE.call, NOT_IN_RANGE.fold) == (0.0, 0.0, 0.0)
    assert NOT_IN_RANGE.not_in_range == 1.0


def test_typed_distribution_uses_the_same_rule():
    assert TypedDistribution(TypedHand("AhKh"), 0.5, 0.5, 0.0, 0.0).is_valid
    assert not TypedDistribution(TypedHand("AhKh"), 0.5, 0.5, 0.5, 0.0).is_valid


def test_distribution_is_immutable():
    distribution = Distribution.of("QQ", 1.0, 0.0, 0.0, 0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        distribution.raise_ = 0.5  # type: ignore[misc]
    changed = dataclasses.replace(distribution, raise_=0.5, call=0.5)
    assert changed.is_valid
    assert distribution.raise_ == 1.0


def test_float_helpers():
    assert approx_equal(0.5, 0.5)
    assert not approx_equal(0.1 + 0.2, 0.3 + 1e-12)
    assert is_zero(0.0)
    assert not is_zero(1e-9)
    assert round_to(0.125, 2) == 0.12
    assert round_to(1.23456, 3) == 1.235
