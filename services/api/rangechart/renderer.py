from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, Literal, Union

from .distribution import NOT_IN_RANGE, Distribution
from .geometry import GridCell, GridGeometry, Point, Rect
from .hands import UntypedHand
from .starting_hands import GRID_SIZE
from .theme import DEFAULT_THEME, Color, Theme

logger = logging.getLogger("range-chart")

DistributionSource = Callable[[UntypedHand], Union[Distribution, None]]
FillLayer = Literal["not_in_range", "fold", "call", "raise"]


@dataclass(frozen=True)
class FillOp:
    rect: Rect
    color: Color
    hand: UntypedHand
    layer: FillLayer


@dataclass(frozen=True)
class LineOp:
    start: Point
    end: Point
    color: Color


@dataclass(frozen=True)
class TextOp:
    rect: Rect
    text: str
    color: Color
    font_size: float


DrawOp = Union[FillOp, LineOp, TextOp]


@dataclass
class RenderPlan:
    edge: float
    chart_frame: Rect
    fills: list[FillOp] = field(default_factory=list)
    lines: list[LineOp] = field(default_factory=list)
    labels: list[TextOp] = field(default_factory=list)
    invalid_hands: list[UntypedHand] = field(default_factory=list)

    def operations(self) -> Iterator[DrawOp]:
        # Paint order: fills, grid, labels.
        yield from self.fills
        yield from self.lines
        yield from self.labels


class RangeChartRenderer:
    """Turns per-hand distributions into fill, line and text operations.

    Each cell is a left-aligned stacked bar: the not-in-range colour fills the
    whole cell, then fold, call and raise are painted over progressively
    narrower rectangles so the visible slices match the distribution.
    """

    def __init__(self, theme: Theme = DEFAULT_THEME, indicates_invalid_distribution: bool = False) -> None:
        self.theme = theme
        self.indicates_invalid_distribution = indicates_invalid_distribution

    def render(self, geometry: GridGeometry, distribution_of: DistributionSource | None = None) -> RenderPlan:
        plan = RenderPlan(edge=geometry.edge, chart_frame=geometry.chart_frame)
        fallbacks = 0
        for cell in geometry.cells():
            distribution = distribution_of(cell.hand) if distribution_of is not None else None
            if distribution is None:
                distribution = NOT_IN_RANGE
                fallbacks += 1
            invalid = not distribution.is_valid
            if invalid:
                plan.invalid_hands.append(cell.hand)
            plan.fills.extend(self.cell_fills(cell, distribution, invert=invalid and self.indicates_invalid_distribution))
            plan.labels.append(self.cell_label(cell, geometry.edge))
        plan.lines.extend(self.grid_lines(geometry))
        logger.debug(
            "rendered range chart",
            extra={"edge": plan.edge, "invalid": len(plan.invalid_hands), "fallbacks": fallbacks},
        )
        return plan

    def cell_fills(self, cell: GridCell, distribution: Distribution, invert: bool = False) -> list[FillOp]:
        frame = cell.rect
        edge = frame.width
        layers: list[tuple[FillLayer, float, Color]] = [
            ("not_in_range", 1.0, self.theme.not_in_range),
            ("fold", distribution.raise_ + distribution.call + distribution.fold, self.theme.fold),
            ("call", distribution.raise_ + distribution.call, self.theme.call),
            ("raise", distribution.raise_, self.theme.raise_),
        ]
        fills = []
        for layer, fraction, color in layers:
            width = min(edge, fraction * edge)
            if width <= 0:
                continue
            fills.append(
                FillOp(
                    rect=frame.with_width(width),
                    color=color.inverted() if invert else color,
                    hand=cell.hand,
                    layer=layer,
                )
            )
        return fills

    def cell_label(self, cell: GridCell, edge: float) -> TextOp:
        return TextOp(rect=cell.rect, text=cell.hand.string, color=self.theme.label, font_size=edge / 3.0)

    def grid_lines(self, geometry: GridGeometry) -> list[LineOp]:
        frame = geometry.chart_frame
        edge = geometry.edge
        color = self.theme.grid
        lines = []
        for i in range(GRID_SIZE + 1):
            x = frame.x + i * edge
            lines.append(LineOp(Point(x, frame.y), Point(x, frame.max_y), color))
        for i in range(GRID_SIZE + 1):
            y = frame.y + i * edge
            lines.append(LineOp(Point(frame.x, y), Point(frame.max_x, y), color))
        return lines

    def hand_at(self, geometry: GridGeometry, point: Point) -> UntypedHand | None:
        return geometry.hand_at_point(point)
