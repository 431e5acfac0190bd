from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntFlag
from typing import Literal, Protocol

from .distribution import Distribution
from .geometry import GridGeometry, Point, Rect
from .hands import UntypedHand
from .range_model import RangeModel

logger = logging.getLogger("range-chart")

BrushAction = Literal["raise", "call", "fold"]


class PaintFlags(IntFlag):
    NONE = 0
    DRAGGING = 1 << 0
    PRIMARY_MODIFIER = 1 << 1
    SECONDARY_MODIFIER = 1 << 2


def event_flags(primary: bool = False, secondary: bool = False, dragging: bool = False) -> PaintFlags:
    flags = PaintFlags.NONE
    if primary:
        flags |= PaintFlags.PRIMARY_MODIFIER
    if secondary:
        flags |= PaintFlags.SECONDARY_MODIFIER
    if dragging:
        flags |= PaintFlags.DRAGGING
    return flags


class PaintDelegate(Protocol):
    def did_begin_painting(self, hand: UntypedHand, flags: PaintFlags) -> None: ...

    def did_paint(self, hand: UntypedHand, flags: PaintFlags) -> None: ...

    def did_finish_painting(self, hand: UntypedHand | None, flags: PaintFlags) -> None: ...


@dataclass(frozen=True)
class PaintEvent:
    kind: Literal["begin", "paint", "finish"]
    hand: UntypedHand | None
    flags: PaintFlags


class RecordingDelegate:
    def __init__(self) -> None:
        self.events: list[PaintEvent] = []

    def did_begin_painting(self, hand: UntypedHand, flags: PaintFlags) -> None:
        self.events.append(PaintEvent("begin", hand, flags))

    def did_paint(self, hand: UntypedHand, flags: PaintFlags) -> None:
        self.events.append(PaintEvent("paint", hand, flags))

    def did_finish_painting(self, hand: UntypedHand | None, flags: PaintFlags) -> None:
        self.events.append(PaintEvent("finish", hand, flags))


def pointer_down(
    geometry: GridGeometry,
    point: Point,
    delegate: PaintDelegate | None,
    primary: bool = False,
    secondary: bool = False,
) -> Rect | None:
    """Start a paint stroke. Returns the cell rect to redraw, or None off-chart."""
    hand = geometry.hand_at_point(point)
    if hand is None:
        return None
    flags = event_flags(primary, secondary)
    if delegate is not None:
        delegate.did_begin_painting(hand, flags)
        delegate.did_paint(hand, flags)
    return geometry.rect_for_hand(hand)


def pointer_dragged(
    geometry: GridGeometry,
    point: Point,
    delegate: PaintDelegate | None,
    primary: bool = False,
    secondary: bool = False,
) -> Rect | None:
    hand = geometry.hand_at_point(point)
    if hand is None:
        return None
    if delegate is not None:
        delegate.did_paint(hand, event_flags(primary, secondary, dragging=True))
    return geometry.rect_for_hand(hand)


def pointer_up(delegate: PaintDelegate | None, primary: bool = False, secondary: bool = False) -> None:
    if delegate is not None:
        delegate.did_finish_painting(None, event_flags(primary, secondary))


class RangeBrush:
    """Paint delegate that writes pure actions into a :class:`RangeModel`.

    The primary modifier paints call, the secondary modifier erases. Starting a
    stroke on a cell that already holds the brush action erases for the rest of
    the stroke.
    """

    def __init__(self, model: RangeModel, action: BrushAction = "raise") -> None:
        self.model = model
        self.action: BrushAction = action
        self.erasing = False
        self.stroke_action: BrushAction = action
        self.last_hand: UntypedHand | None = None

    def _target(self, hand: UntypedHand, action: BrushAction) -> Distribution:
        return Distribution(
            hand,
            raise_=1.0 if action == "raise" else 0.0,
            call=1.0 if action == "call" else 0.0,
            fold=1.0 if action == "fold" else 0.0,
            not_in_range=0.0,
        )

    def did_begin_painting(self, hand: UntypedHand, flags: PaintFlags) -> None:
        self.stroke_action = "call" if flags & PaintFlags.PRIMARY_MODIFIER else self.action
        self.erasing = bool(flags & PaintFlags.SECONDARY_MODIFIER) or (
            self.model.get(hand) == self._target(hand, self.stroke_action)
        )
        self.last_hand = None

    def did_paint(self, hand: UntypedHand, flags: PaintFlags) -> None:
        if flags & PaintFlags.DRAGGING and hand == self.last_hand:
            return
        self.last_hand = hand
        if self.erasing:
            self.model.clear(hand)
        else:
            self.model.set(self._target(hand, self.stroke_action))
        logger.debug("painted %s erasing=%s action=%s", hand.string, self.erasing, self.stroke_action)

    def did_finish_painting(self, hand: UntypedHand | None, flags: PaintFlags) -> None:
        self.last_hand = None
        self.erasing = False
