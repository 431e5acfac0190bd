from __future__ import annotations

from enum import Enum


class Player(str, Enum):
    HERO = "hero"
    VILLAIN = "villain"


class Position(str, Enum):
    SB = "SB"
    BB = "BB"
    UTG = "UTG"
    UTG1 = "UTG+1"
    LJ = "LJ"
    HJ = "HJ"
    CO = "CO"
    BTN = "BTN"


class Action(str, Enum):
    """The action facing the hero. Everything but RFI implies a villain."""

    LIMP = "LIMP"
    RFI = "RFI"
    VS_RAISE = "VS_RAISE"
    VS_3BET = "VS_3BET"
    VS_4BET = "VS_4BET"
    VS_5BET = "VS_5BET"
    NA = "NA"

    def human_readable(self) -> str:
        return ACTION_NAMES[self]


ACTION_NAMES = {
    Action.LIMP: "Limp",
    Action.RFI: "RFI",
    Action.VS_RAISE: "VS Raise",
    Action.VS_3BET: "VS 3Bet",
    Action.VS_4BET: "VS 4Bet",
    Action.VS_5BET: "VS 5Bet",
    Action.NA: "NA",
}


class Structure(str, Enum):
    CASH = "cash"
    TOURNAMENT = "tournament"


class Variant(str, Enum):
    NLHE = "NLHE"


class Betting(str, Enum):
    LIMIT = "limit"
    NO_LIMIT = "noLimit"
    POT = "pot"
