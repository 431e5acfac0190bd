from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from .cards import SUITS, VALUES, MalformedNotation, PlayingCard, Suit

# Descending rank order used by the starting hand grid.
RANK_GRID = VALUES[::-1]
RANK_INDEX = {rank: idx for idx, rank in enumerate(RANK_GRID)}


class Suited(str, Enum):
    SUITED = "s"
    OFFSUIT = "o"


@dataclass(frozen=True)
class UntypedHand:
    """A starting hand class without concrete suits: ``AKs``, ``AKo`` or ``88``.

    Construction performs no validation. Use :meth:`parse` when the text comes
    from an untrusted source.
    """

    string: str

    @classmethod
    def parse(cls, text: str) -> "UntypedHand":
        label = text.strip()
        if len(label) == 2:
            r1, r2 = label[0].upper(), label[1].upper()
            if r1 != r2 or r1 not in RANK_INDEX:
                raise MalformedNotation(f"Invalid pair label: {text!r}")
            return cls(f"{r1}{r2}")
        if len(label) == 3:
            r1, r2, suited = label[0].upper(), label[1].upper(), label[2].lower()
            if r1 not in RANK_INDEX or r2 not in RANK_INDEX or suited not in (Suited.SUITED, Suited.OFFSUIT):
                raise MalformedNotation(f"Invalid hand class: {text!r}")
            if r1 == r2:
                raise MalformedNotation(f"Invalid hand class (pair with suffix): {text!r}")
            if RANK_INDEX[r1] > RANK_INDEX[r2]:
                r1, r2 = r2, r1
            return cls(f"{r1}{r2}{suited}")
        raise MalformedNotation(f"Invalid range label: {text!r}")

    @property
    def is_pair(self) -> bool:
        return len(self.string) == 2

    @property
    def suitedness(self) -> Suited | None:
        if len(self.string) < 3:
            return None
        try:
            return Suited(self.string[2])
        except ValueError:
            return None

    @property
    def is_well_formed(self) -> bool:
        try:
            return UntypedHand.parse(self.string) == self
        except MalformedNotation:
            return False

    def to_typed(self, rng: random.Random) -> TypedHand:
        """Assign concrete suits at random.

        Suited hands reuse one suit for both ranks; pairs and offsuit hands
        draw the second suit uniformly from the three remaining ones.
        """
        v1, v2 = self.string[0], self.string[1]
        s1 = rng.choice(SUITS)
        if self.suitedness is Suited.SUITED:
            return TypedHand(f"{v1}{s1}{v2}{s1}")
        s2 = rng.choice([suit for suit in SUITS if suit != s1])
        return TypedHand(f"{v1}{s1}{v2}{s2}")

    def combos(self) -> list[TypedHand]:
        hand = UntypedHand.parse(self.string)
        r1, r2 = hand.string[0], hand.string[1]
        suits = list(SUITS)
        if hand.is_pair:
            return [
                TypedHand(f"{r1}{suits[i]}{r1}{suits[j]}")
                for i in range(len(suits))
                for j in range(i + 1, len(suits))
            ]
        if hand.suitedness is Suited.SUITED:
            return [TypedHand(f"{r1}{suit}{r2}{suit}") for suit in suits]
        return [TypedHand(f"{r1}{s1}{r2}{s2}") for s1 in suits for s2 in suits if s1 != s2]

    def __str__(self) -> str:
        return self.string


@dataclass(frozen=True)
class TypedHand:
    """A fully specified hand such as ``AhKh``. No validation on construction."""

    string: str

    def playing_cards(self) -> tuple[PlayingCard, PlayingCard]:
        if len(self.string) != 4:
            raise MalformedNotation(f"Invalid hand: {self.string!r}")
        return PlayingCard.parse(self.string[:2]), PlayingCard.parse(self.string[2:])

    def untyped(self) -> UntypedHand:
        c1, c2 = self.playing_cards()
        r1, r2 = c1.value.value, c2.value.value
        if r1 == r2:
            return UntypedHand(f"{r1}{r2}")
        if RANK_INDEX[r1] > RANK_INDEX[r2]:
            r1, r2 = r2, r1
        suited = Suited.SUITED if c1.suit == c2.suit else Suited.OFFSUIT
        return UntypedHand(f"{r1}{r2}{suited.value}")

    def __str__(self) -> str:
        return self.string


def to_typed(hand: UntypedHand, rng: random.Random) -> TypedHand:
    return hand.to_typed(rng)


def playing_cards(hand: TypedHand) -> tuple[PlayingCard, PlayingCard]:
    return hand.playing_cards()


__all__ = [
    "RANK_GRID",
    "RANK_INDEX",
    "Suit",
    "Suited",
    "TypedHand",
    "UntypedHand",
    "playing_cards",
    "to_typed",
]
