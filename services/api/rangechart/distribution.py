from __future__ import annotations

import sys
from dataclasses import dataclass

from .hands import TypedHand, UntypedHand

EPSILON = sys.float_info.epsilon


def approx_equal(lhs: float, rhs: float) -> bool:
    return abs(lhs - rhs) < EPSILON


def is_zero(value: float) -> bool:
    return approx_equal(value, 0.0)


def round_to(value: float, places: int) -> float:
    # round() already rounds half to even
    return round(value, places)


class _ActionMix:
    raise_: float
    call: float
    fold: float
    not_in_range: float

    @property
    def total(self) -> float:
        return self.fold + self.call + self.raise_ + self.not_in_range

    @property
    def is_valid(self) -> bool:
        """True when every component is non-negative and they sum to one."""
        if self.fold < 0 or self.call < 0 or self.raise_ < 0 or self.not_in_range < 0:
            return False
        return approx_equal(self.total, 1.0)


@dataclass(frozen=True)
class Distribution(_ActionMix):
    """Action frequencies for a hand class. ``raise`` may mean open, 3bet or 4bet."""

    hand: UntypedHand
    raise_: float
    call: float
    fold: float
    not_in_range: float

    @classmethod
    def of(cls, hand: str, raise_: float, call: float, fold: float, not_in_range: float) -> "Distribution":
        return cls(UntypedHand(hand), raise_, call, fold, not_in_range)


@dataclass(frozen=True)
class TypedDistribution(_ActionMix):
    hand: TypedHand
    raise_: float
    call: float
    fold: float
    not_in_range: float


NOT_IN_RANGE = Distribution(UntypedHand(""), 0.0, 0.0, 0.0, 1.0)
