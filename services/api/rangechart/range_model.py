from __future__ import annotations

from typing import Iterable, Iterator

from .cards import MalformedNotation
from .distribution import Distribution, round_to
from .hands import UntypedHand
from .starting_hands import COUNT, HAND_INDEX


def _distribution(hand: UntypedHand, raise_: float, call: float, fold: float) -> Distribution:
    return Distribution(hand, raise_, call, fold, 1.0 - (raise_ + call + fold))


def parse_range_text(text: str) -> list[Distribution]:
    """Parse ``HAND: raise call fold`` lines. Missing frequencies default to 0,
    a bare hand means a pure raise, and not-in-range takes the remainder."""
    distributions: list[Distribution] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        if ":" in line:
            hand_part, rest = line.split(":", 1)
            parts = [hand_part.strip(), *rest.replace(",", " ").split()]
        else:
            parts = line.replace(",", " ").split()
        hand = UntypedHand.parse(parts[0])
        try:
            values = [float(part) for part in parts[1:4]]
        except ValueError as exc:
            raise MalformedNotation(f"Invalid frequencies on line {lineno}: {raw!r}") from exc
        if not values:
            values = [1.0]
        values += [0.0] * (3 - len(values))
        distributions.append(_distribution(hand, *values))
    return distributions


def format_range_text(distributions: Iterable[Distribution]) -> str:
    lines = [
        f"{d.hand.string}: {round_to(d.raise_, 4):g} {round_to(d.call, 4):g} {round_to(d.fold, 4):g}"
        for d in distributions
    ]
    return "\n".join(lines) + ("\n" if lines else "")


class RangeModel:
    """Editable hand class -> distribution mapping, usable as a distribution source."""

    def __init__(self, distributions: Iterable[Distribution] = ()) -> None:
        self.cells: dict[UntypedHand, Distribution] = {}
        for distribution in distributions:
            self.set(distribution)

    def __call__(self, hand: UntypedHand) -> Distribution | None:
        return self.cells.get(hand)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Distribution]:
        return iter(sorted(self.cells.values(), key=lambda d: HAND_INDEX.get(d.hand, COUNT)))

    def get(self, hand: UntypedHand) -> Distribution | None:
        return self.cells.get(hand)

    def set(self, distribution: Distribution) -> None:
        self.cells[distribution.hand] = distribution

    def set_action(self, hand: UntypedHand, raise_: float = 0.0, call: float = 0.0, fold: float = 0.0) -> Distribution:
        distribution = _distribution(hand, raise_, call, fold)
        self.set(distribution)
        return distribution

    def clear(self, hand: UntypedHand | None = None) -> None:
        if hand is None:
            self.cells.clear()
            return
        self.cells.pop(hand, None)

    def has_any(self) -> bool:
        return bool(self.cells)

    def to_text(self) -> str:
        return format_range_text(self)

    @classmethod
    def from_text(cls, text: str) -> "RangeModel":
        return cls(parse_range_text(text))
