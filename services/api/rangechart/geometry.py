from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import starting_hands
from .hands import UntypedHand
from .starting_hands import GRID_SIZE


class Origin(str, Enum):
    """Where the surface puts (0, 0). Bottom-left surfaces grow upwards."""

    TOP_LEFT = "top-left"
    BOTTOM_LEFT = "bottom-left"


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def offset_by(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def with_width(self, width: float) -> "Rect":
        return Rect(self.x, self.y, width, self.height)


EMPTY_RECT = Rect(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class GridCell:
    index: int
    row: int
    column: int
    hand: UntypedHand
    rect: Rect


@dataclass(frozen=True)
class GridGeometry:
    """Maps starting hand cells to pixel rectangles on a surface of any size.

    The chart is a square of side ``min(width, height)``, optionally centred on
    either axis. Row 0 (the aces) is always drawn at the visual top; with a
    bottom-left origin that means the largest y values.
    """

    width: float
    height: float
    center_horizontally: bool = True
    center_vertically: bool = True
    origin: Origin = Origin.TOP_LEFT

    @property
    def edge(self) -> float:
        return min(self.width, self.height) / GRID_SIZE

    @property
    def chart_size(self) -> float:
        return self.edge * GRID_SIZE

    @property
    def center_offset(self) -> Point:
        dx = (self.width - self.chart_size) / 2 if self.center_horizontally else 0.0
        dy = (self.height - self.chart_size) / 2 if self.center_vertically else 0.0
        if self.origin is Origin.BOTTOM_LEFT:
            dy = -dy
        return Point(dx, dy)

    @property
    def chart_frame(self) -> Rect:
        offset = self.center_offset
        size = self.chart_size
        if self.origin is Origin.BOTTOM_LEFT:
            return Rect(0.0, self.height - size, size, size).offset_by(offset.x, offset.y)
        return Rect(0.0, 0.0, size, size).offset_by(offset.x, offset.y)

    def rect_for_index(self, index: int) -> Rect:
        starting_hands.hand_at(index)
        row, col = starting_hands.row_column(index)
        edge = self.edge
        offset = self.center_offset
        x = col * edge
        if self.origin is Origin.BOTTOM_LEFT:
            y = self.height - row * edge - edge
        else:
            y = row * edge
        return Rect(x, y, edge, edge).offset_by(offset.x, offset.y)

    def rect_for_hand(self, hand: UntypedHand) -> Rect:
        index = starting_hands.index_of(hand)
        if index is None:
            return EMPTY_RECT
        return self.rect_for_index(index)

    def cell(self, index: int) -> GridCell:
        row, col = starting_hands.row_column(index)
        return GridCell(
            index=index,
            row=row,
            column=col,
            hand=starting_hands.hand_at(index),
            rect=self.rect_for_index(index),
        )

    def cells(self) -> list[GridCell]:
        return [self.cell(index) for index in range(starting_hands.COUNT)]

    def index_at_point(self, point: Point) -> int | None:
        edge = self.edge
        if edge <= 0:
            return None
        offset = self.center_offset
        local_x = point.x - offset.x
        if self.origin is Origin.BOTTOM_LEFT:
            local_y = self.height - (point.y - offset.y)
        else:
            local_y = point.y - offset.y
        size = self.chart_size
        if not (0 <= local_x < size and 0 <= local_y < size):
            return None
        row = int(local_y // edge)
        col = int(local_x // edge)
        if row >= GRID_SIZE or col >= GRID_SIZE:
            return None
        index = row * GRID_SIZE + col
        if index >= starting_hands.COUNT:
            return None
        return index

    def hand_at_point(self, point: Point) -> UntypedHand | None:
        index = self.index_at_point(point)
        if index is None:
            return None
        return starting_hands.hand_at(index)
