from .cards import MalformedNotation, PlayingCard, Suit, Value
from .distribution import NOT_IN_RANGE, Distribution, TypedDistribution
from .geometry import EMPTY_RECT, GridCell, GridGeometry, Origin, Point, Rect
from .hands import Suited, TypedHand, UntypedHand, playing_cards, to_typed
from .painting import PaintFlags, RangeBrush, pointer_down, pointer_dragged, pointer_up
from .range_model import RangeModel, parse_range_text
from .renderer import FillOp, LineOp, RangeChartRenderer, RenderPlan, TextOp
from .starting_hands import STARTING_HANDS, hand_at, index_of
from .theme import DEFAULT_THEME, Color, Theme

__all__ = [
    "DEFAULT_THEME",
    "EMPTY_RECT",
    "NOT_IN_RANGE",
    "STARTING_HANDS",
    "Color",
    "Distribution",
    "FillOp",
    "GridCell",
    "GridGeometry",
    "LineOp",
    "MalformedNotation",
    "Origin",
    "PaintFlags",
    "PlayingCard",
    "Point",
    "RangeBrush",
    "RangeChartRenderer",
    "RangeModel",
    "Rect",
    "RenderPlan",
    "Suit",
    "Suited",
    "TextOp",
    "Theme",
    "TypedDistribution",
    "TypedHand",
    "UntypedHand",
    "Value",
    "hand_at",
    "index_of",
    "parse_range_text",
    "playing_cards",
    "pointer_down",
    "pointer_dragged",
    "pointer_up",
    "to_typed",
]
