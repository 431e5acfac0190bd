from __future__ import annotations

import logging
import random
from typing import Any
from uuid import uuid4

import httpx
from supabase import Client

from . import starting_hands
from .cards import PlayingCard
from .config import Settings
from .distribution import Distribution
from .geometry import GridGeometry, Origin, Point, Rect
from .hands import Suited, TypedHand, UntypedHand
from .painting import PaintFlags, RecordingDelegate, pointer_down, pointer_dragged, pointer_up
from .range_model import RangeModel
from .renderer import RangeChartRenderer, RenderPlan
from .schemas import (
    DrillMetadataResponse,
    LabelledValue,
    ColorModel,
    DistributionModel,
    FillModel,
    LabelModel,
    LineModel,
    PaintEventModel,
    PlayingCardModel,
    PlayingCardsResponse,
    PointerRequest,
    PointerResponse,
    PointModel,
    RangeChartResponse,
    RectModel,
    RenderRequest,
    RenderResponse,
    StartingHandItem,
    StartingHandsResponse,
    SurfaceModel,
    ThemeModel,
    TypedHandRequest,
    TypedHandResponse,
)
from .table import Action, Betting, Player, Position, Structure, Variant
from .theme import Color, Theme

logger = logging.getLogger("range-chart-api")


def request_id() -> str:
    return str(uuid4())


def _safe_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


# -- conversions ---------------------------------------------------------------


def resolve_geometry(surface: SurfaceModel, settings: Settings) -> GridGeometry:
    return GridGeometry(
        width=surface.width,
        height=surface.height,
        center_horizontally=(
            settings.center_horizontally if surface.centerHorizontally is None else surface.centerHorizontally
        ),
        center_vertically=settings.center_vertically if surface.centerVertically is None else surface.centerVertically,
        origin=settings.origin if surface.origin is None else Origin(surface.origin),
    )


def resolve_theme(theme: ThemeModel | None) -> Theme:
    if theme is None:
        return Theme.from_hex({})
    return Theme.from_hex(
        {
            "not_in_range": theme.notInRange or "",
            "raise_": theme.raise_ or "",
            "call": theme.call or "",
            "fold": theme.fold or "",
            "grid": theme.grid or "",
            "label": theme.label or "",
        },
    )


def distribution_from_model(item: DistributionModel) -> Distribution:
    hand = UntypedHand.parse(item.hand)
    if item.notInRange is None:
        not_in_range = 1.0 - (item.raise_ + item.call + item.fold)
    else:
        not_in_range = item.notInRange
    return Distribution(hand, item.raise_, item.call, item.fold, not_in_range)


def distribution_to_model(distribution: Distribution) -> DistributionModel:
    return DistributionModel(
        hand=distribution.hand.string,
        raise_=distribution.raise_,
        call=distribution.call,
        fold=distribution.fold,
        notInRange=distribution.not_in_range,
    )


def _rect_model(rect: Rect) -> RectModel:
    return RectModel(x=rect.x, y=rect.y, width=rect.width, height=rect.height)


def _color_model(color: Color) -> ColorModel:
    return ColorModel(hex=color.to_hex(), alpha=color.alpha)


def _card_model(card: PlayingCard) -> PlayingCardModel:
    return PlayingCardModel(
        value=card.value.value,
        suit=card.suit.value,
        valueName=card.value.name.lower(),
        suitName=card.suit.name.lower(),
        graphic=card.suit.graphic,
    )


def _flag_names(flags: PaintFlags) -> list[str]:
    return [flag.name.lower() for flag in PaintFlags if flag and flag in flags]


# -- hand notation ---------------------------------------------------------------


def _hand_kind(hand: UntypedHand) -> str:
    if hand.is_pair:
        return "pair"
    return "suited" if hand.suitedness is Suited.SUITED else "offsuit"


def list_starting_hands() -> StartingHandsResponse:
    items = []
    for index, hand in enumerate(starting_hands.STARTING_HANDS):
        row, column = starting_hands.row_column(index)
        items.append(StartingHandItem(index=index, row=row, column=column, hand=hand.string, kind=_hand_kind(hand)))
    return StartingHandsResponse(count=starting_hands.COUNT, hands=items)


def assign_suits(payload: TypedHandRequest) -> TypedHandResponse:
    hand = UntypedHand.parse(payload.hand)
    rng = random.Random(payload.seed)
    typed = hand.to_typed(rng)
    return TypedHandResponse(
        requestId=request_id(),
        hand=hand.string,
        typed=typed.string,
        cards=[_card_model(card) for card in typed.playing_cards()],
    )


def describe_typed_hand(text: str) -> PlayingCardsResponse:
    typed = TypedHand(text.strip())
    cards = typed.playing_cards()
    return PlayingCardsResponse(
        typed=typed.string,
        hand=typed.untyped().string,
        cards=[_card_model(card) for card in cards],
    )


def drill_metadata() -> DrillMetadataResponse:
    return DrillMetadataResponse(
        players=[player.value for player in Player],
        positions=[position.value for position in Position],
        actions=[LabelledValue(code=action.value, name=action.human_readable()) for action in Action],
        structures=[structure.value for structure in Structure],
        variants=[variant.value for variant in Variant],
        betting=[betting.value for betting in Betting],
    )


# -- distribution sources ----------------------------------------------------------


def load_stored_chart(supabase: Client, table: str, chart_id: str) -> RangeModel:
    rows = supabase.table(table).select("*").eq("chart_id", chart_id).execute().data or []
    model = RangeModel()
    for row in rows:
        hand = UntypedHand(str(row.get("hand", "")))
        if starting_hands.index_of(hand) is None:
            logger.warning("skipping stored row with unknown hand", extra={"chart_id": chart_id, "hand": hand.string})
            continue
        model.set(
            Distribution(
                hand,
                _safe_float(row.get("raise")),
                _safe_float(row.get("call")),
                _safe_float(row.get("fold")),
                _safe_float(row.get("not_in_range"), 1.0),
            ),
        )
    return model


def save_stored_chart(supabase: Client, table: str, chart_id: str, distributions: list[Distribution]) -> int:
    rows = [
        {
            "chart_id": chart_id,
            "hand": distribution.hand.string,
            "raise": distribution.raise_,
            "call": distribution.call,
            "fold": distribution.fold,
            "not_in_range": distribution.not_in_range,
        }
        for distribution in distributions
    ]
    if not rows:
        return 0
    supabase.table(table).upsert(rows, on_conflict="chart_id,hand").execute()
    return len(rows)


def _action_bucket(action: str) -> str:
    lowered = action.strip().lower()
    if lowered == "fold":
        return "fold"
    if lowered in {"check", "call"}:
        return "call"
    return "raise"


def distribution_from_frequencies(hand: UntypedHand, frequencies: list[dict[str, Any]]) -> Distribution:
    buckets = {"raise": 0.0, "call": 0.0, "fold": 0.0}
    for item in frequencies:
        buckets[_action_bucket(str(item.get("action", "")))] += max(0.0, _safe_float(item.get("frequencyPct")))
    raise_ = buckets["raise"] / 100.0
    call = buckets["call"] / 100.0
    fold = buckets["fold"] / 100.0
    return Distribution(hand, raise_, call, fold, max(0.0, 1.0 - (raise_ + call + fold)))


def fetch_remote_spot(settings: Settings, spot_id: str, client: httpx.Client | None = None) -> RangeModel:
    """Load a spot's hand matrix from the study API configured by RANGE_SOURCE_URL."""
    if not settings.range_source_url:
        raise RuntimeError("Range source missing. Please set RANGE_SOURCE_URL.")
    url = f"{settings.range_source_url}/api/study/spots/{spot_id}/matrix"
    owns_client = client is None
    http = client or httpx.Client(timeout=settings.range_source_timeout_sec)
    try:
        response = http.get(url)
        response.raise_for_status()
        data = response.json()
    finally:
        if owns_client:
            http.close()

    model = RangeModel()
    for item in data.get("hands") or []:
        hand = UntypedHand(str(item.get("hand", "")))
        if starting_hands.index_of(hand) is None:
            continue
        model.set(distribution_from_frequencies(hand, item.get("frequencies") or []))
    logger.info("fetched remote spot", extra={"spot_id": spot_id, "hands": len(model)})
    return model


# -- rendering ----------------------------------------------------------------------


def _render_response(plan: RenderPlan, source: str) -> RenderResponse:
    return RenderResponse(
        requestId=request_id(),
        source=source,
        edge=plan.edge,
        chartFrame=_rect_model(plan.chart_frame),
        fills=[
            FillModel(rect=_rect_model(op.rect), color=_color_model(op.color), hand=op.hand.string, layer=op.layer)
            for op in plan.fills
        ],
        lines=[
            LineModel(
                start=PointModel(x=op.start.x, y=op.start.y),
                end=PointModel(x=op.end.x, y=op.end.y),
                color=_color_model(op.color),
            )
            for op in plan.lines
        ],
        labels=[
            LabelModel(rect=_rect_model(op.rect), text=op.text, color=_color_model(op.color), fontSize=op.font_size)
            for op in plan.labels
        ],
        invalidHands=[hand.string for hand in plan.invalid_hands],
    )


def render_chart(
    payload: RenderRequest,
    settings: Settings,
    supabase: Client | None = None,
    http_client: httpx.Client | None = None,
) -> RenderResponse:
    source = "empty"
    model: RangeModel | None = None
    if payload.distributions is not None:
        model = RangeModel(distribution_from_model(item) for item in payload.distributions)
        source = "inline"
    elif payload.chartId:
        if supabase is None:
            raise RuntimeError("Supabase credentials missing. Please set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY.")
        model = load_stored_chart(supabase, settings.range_chart_table, payload.chartId)
        source = "stored"
    elif payload.spotId:
        model = fetch_remote_spot(settings, payload.spotId, client=http_client)
        source = "remote"

    renderer = RangeChartRenderer(
        theme=resolve_theme(payload.theme),
        indicates_invalid_distribution=(
            settings.indicate_invalid if payload.indicateInvalid is None else payload.indicateInvalid
        ),
    )
    plan = renderer.render(resolve_geometry(payload.surface, settings), model)
    return _render_response(plan, source)


def handle_pointer(payload: PointerRequest, settings: Settings) -> PointerResponse:
    geometry = resolve_geometry(payload.surface, settings)
    point = Point(payload.point.x, payload.point.y)
    delegate = RecordingDelegate()
    dirty: Rect | None = None
    if payload.phase == "down":
        dirty = pointer_down(geometry, point, delegate, payload.primaryModifier, payload.secondaryModifier)
    elif payload.phase == "drag":
        dirty = pointer_dragged(geometry, point, delegate, payload.primaryModifier, payload.secondaryModifier)
    else:
        pointer_up(delegate, payload.primaryModifier, payload.secondaryModifier)
    hand = geometry.hand_at_point(point)
    return PointerResponse(
        requestId=request_id(),
        hand=hand.string if hand is not None else None,
        events=[
            PaintEventModel(
                kind=event.kind,
                hand=event.hand.string if event.hand is not None else None,
                flags=_flag_names(event.flags),
            )
            for event in delegate.events
        ],
        dirtyRect=_rect_model(dirty) if dirty is not None else None,
    )


def get_stored_chart(supabase: Client, settings: Settings, chart_id: str) -> RangeChartResponse:
    model = load_stored_chart(supabase, settings.range_chart_table, chart_id)
    return RangeChartResponse(
        requestId=request_id(),
        chartId=chart_id,
        distributions=[distribution_to_model(distribution) for distribution in model],
        invalidHands=[distribution.hand.string for distribution in model if not distribution.is_valid],
    )


def replace_stored_chart(
    supabase: Client,
    settings: Settings,
    chart_id: str,
    items: list[DistributionModel],
) -> RangeChartResponse:
    model = RangeModel(distribution_from_model(item) for item in items)
    saved = save_stored_chart(supabase, settings.range_chart_table, chart_id, list(model))
    logger.info("stored range chart", extra={"chart_id": chart_id, "rows": saved})
    return RangeChartResponse(
        requestId=request_id(),
        chartId=chart_id,
        distributions=[distribution_to_model(distribution) for distribution in model],
        invalidHands=[distribution.hand.string for distribution in model if not distribution.is_valid],
    )
