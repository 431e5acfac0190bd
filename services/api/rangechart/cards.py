from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MalformedNotation(ValueError):
    """Raised when hand or card text does not match the expected notation."""


class Suit(str, Enum):
    HEARTS = "h"
    SPADES = "s"
    DIAMONDS = "d"
    CLUBS = "c"

    @property
    def graphic(self) -> str:
        return SUIT_GRAPHICS[self]


SUIT_GRAPHICS = {
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}


class Value(str, Enum):
    DEUCE = "2"
    TREY = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"


SUITS = "".join(suit.value for suit in Suit)
VALUES = "".join(value.value for value in Value)


@dataclass(frozen=True)
class PlayingCard:
    value: Value
    suit: Suit

    @classmethod
    def parse(cls, card: str) -> "PlayingCard":
        """Parse a two character card such as ``Ah`` or ``Kd``."""
        if len(card) != 2:
            raise MalformedNotation(f"Invalid card: {card!r}")
        try:
            return cls(value=Value(card[0]), suit=Suit(card[1]))
        except ValueError as exc:
            raise MalformedNotation(f"Invalid card: {card!r}") from exc

    def __str__(self) -> str:
        return f"{self.value.value}{self.suit.value}"
