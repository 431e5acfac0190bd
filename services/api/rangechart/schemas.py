from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

OriginName = Literal["top-left", "bottom-left"]
HandKind = Literal["pair", "suited", "offsuit"]
PointerPhase = Literal["down", "drag", "up"]
FillLayerName = Literal["not_in_range", "fold", "call", "raise"]


class ErrorBody(BaseModel):
    code: str
    message: str
    requestId: str


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    service: Literal["range-chart-api"] = "range-chart-api"
    timestamp: str


class PointModel(BaseModel):
    x: float
    y: float


class RectModel(BaseModel):
    x: float
    y: float
    width: float
    height: float


class ColorModel(BaseModel):
    hex: str
    alpha: float = 1.0


class SurfaceModel(BaseModel):
    width: float = Field(ge=0)
    height: float = Field(ge=0)
    centerHorizontally: bool | None = None
    centerVertically: bool | None = None
    origin: OriginName | None = None


class ThemeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    notInRange: str | None = None
    raise_: str | None = Field(default=None, alias="raise")
    call: str | None = None
    fold: str | None = None
    grid: str | None = None
    label: str | None = None


class DistributionModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    hand: str
    raise_: float = Field(default=0.0, alias="raise")
    call: float = 0.0
    fold: float = 0.0
    notInRange: float | None = None


class StartingHandItem(BaseModel):
    index: int
    row: int
    column: int
    hand: str
    kind: HandKind


class StartingHandsResponse(BaseModel):
    count: int
    hands: list[StartingHandItem]


class PlayingCardModel(BaseModel):
    value: str
    suit: str
    valueName: str
    suitName: str
    graphic: str


class TypedHandRequest(BaseModel):
    hand: str = Field(min_length=2, max_length=3)
    seed: int | None = None


class TypedHandResponse(BaseModel):
    requestId: str
    hand: str
    typed: str
    cards: list[PlayingCardModel]


class PlayingCardsResponse(BaseModel):
    typed: str
    hand: str
    cards: list[PlayingCardModel]


class RenderRequest(BaseModel):
    surface: SurfaceModel
    theme: ThemeModel | None = None
    indicateInvalid: bool | None = None
    distributions: list[DistributionModel] | None = None
    chartId: str | None = None
    spotId: str | None = None


class FillModel(BaseModel):
    rect: RectModel
    color: ColorModel
    hand: str
    layer: FillLayerName


class LineModel(BaseModel):
    start: PointModel
    end: PointModel
    color: ColorModel


class LabelModel(BaseModel):
    rect: RectModel
    text: str
    color: ColorModel
    fontSize: float


class RenderResponse(BaseModel):
    requestId: str
    source: Literal["empty", "inline", "stored", "remote"]
    edge: float
    chartFrame: RectModel
    fills: list[FillModel]
    lines: list[LineModel]
    labels: list[LabelModel]
    invalidHands: list[str]


class PointerRequest(BaseModel):
    surface: SurfaceModel
    point: PointModel
    phase: PointerPhase
    primaryModifier: bool = False
    secondaryModifier: bool = False


class PaintEventModel(BaseModel):
    kind: Literal["begin", "paint", "finish"]
    hand: str | None
    flags: list[str]


class PointerResponse(BaseModel):
    requestId: str
    hand: str | None
    events: list[PaintEventModel]
    dirtyRect: RectModel | None


class RangeChartResponse(BaseModel):
    requestId: str
    chartId: str
    distributions: list[DistributionModel]
    invalidHands: list[str]


class RangeChartUpdateRequest(BaseModel):
    distributions: list[DistributionModel] = Field(max_length=169)


class LabelledValue(BaseModel):
    code: str
    name: str


class DrillMetadataResponse(BaseModel):
    players: list[str]
    positions: list[str]
    actions: list[LabelledValue]
    structures: list[str]
    variants: list[str]
    betting: list[str]
