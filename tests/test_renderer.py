import pytest

from rangechart.distribution import NOT_IN_RANGE, Distribution
from rangechart.geometry import GridGeometry, Origin, Point
from rangechart.hands import UntypedHand
from rangechart.renderer import FillOp, LineOp, RangeChartRenderer, TextOp
from rangechart.starting_hands import STARTING_HANDS
from rangechart.theme import DEFAULT_THEME, Color, InvalidColor, Theme

THEME = Theme(
    not_in_range=Color.from_hex("#101010"),
    raise_=Color.from_hex("#e35c29"),
    call=Color.from_hex("#439b1d"),
    fold=Color.from_hex("#439bdf"),
    grid=Color.from_hex("#f2f2f2"),
    label=Color.from_hex("#fafafa"),
)
GEOMETRY = GridGeometry(130, 130)


def _fills_for(plan, label):
    return [op for op in plan.fills if op.hand == UntypedHand(label)]


def test_sentinel_source_never_paints_action_colours():
    plan = RangeChartRenderer(THEME).render(GEOMETRY, lambda hand: NOT_IN_RANGE)
    assert len(plan.fills) == 169
    assert {op.layer for op in plan.fills} == {"not_in_range"}
    assert not {op.color for op in plan.fills} & {THEME.raise_, THEME.call, THEME.fold}
    assert plan.invalid_hands == []


def test_missing_distributions_fall_back_to_the_sentinel():
    sentinel_plan = RangeChartRenderer(THEME).render(GEOMETRY, lambda hand: NOT_IN_RANGE)
    assert RangeChartRenderer(THEME).render(GEOMETRY, lambda hand: None) == sentinel_plan
    assert RangeChartRenderer(THEME).render(GEOMETRY) == sentinel_plan


def test_stacked_bar_widths_follow_the_distribution():
    mix = Distribution.of("AA", 0.5, 0.25, 0.125, 0.125)
    plan = RangeChartRenderer(THEME).render(GEOMETRY, lambda hand: mix if hand == mix.hand else None)
    fills = _fills_for(plan, "AA")
    assert [op.layer for op in fills] == ["not_in_range", "fold", "call", "raise"]
    assert [op.rect.width for op in fills] == [10.0, 8.75, 7.5, 5.0]
    assert [op.color for op in fills] == [THEME.not_in_range, THEME.fold, THEME.call, THEME.raise_]
    cell = GEOMETRY.rect_for_index(0)
    for op in fills:
        assert (op.rect.x, op.rect.y, op.rect.height) == (cell.x, cell.y, cell.height)


def test_zero_components_emit_no_fill():
    pure_call = Distribution.of("KK", 0.0, 1.0, 0.0, 0.0)
    plan = RangeChartRenderer(THEME).render(GEOMETRY, lambda hand: pure_call if hand == pure_call.hand else None)
    fills = _fills_for(plan, "KK")
    # fold and call frames coincide, raise frame is empty
    assert [op.layer for op in fills] == ["not_in_range", "fold", "call"]
    assert fills[-1].rect.width == 10.0


def test_fills_are_clipped_to_the_cell():
    overfull = Distribution.of("AA", 0.75, 0.75, 0.0, 0.0)
    plan = RangeChartRenderer(THEME).render(GEOMETRY, lambda hand: overfull if hand == overfull.hand else None)
    assert all(op.rect.width <= 10.0 for op in plan.fills)


def test_invalid_distributions_are_inverted_only_when_indicated():
    invalid = Distribution.of("AA", 0.5, 0.5, 0.5, 0.0)

    def source(hand):
        return invalid if hand == invalid.hand else None

    plain = RangeChartRenderer(THEME).render(GEOMETRY, source)
    flagged = RangeChartRenderer(THEME, indicates_invalid_distribution=True).render(GEOMETRY, source)
    assert plain.invalid_hands == [UntypedHand("AA")]
    assert flagged.invalid_hands == [UntypedHand("AA")]
    assert [op.color for op in _fills_for(plain, "AA")] == [THEME.not_in_range, THEME.fold, THEME.call, THEME.raise_]
    assert [op.color for op in _fills_for(flagged, "AA")] == [
        THEME.not_in_range.inverted(),
        THEME.fold.inverted(),
        THEME.call.inverted(),
        THEME.raise_.inverted(),
    ]
    # valid neighbours keep their colours
    assert _fills_for(flagged, "KK")[0].color == THEME.not_in_range


def test_inversion_keeps_alpha():
    color = Color(0.25, 0.5, 1.0, 0.4)
    assert color.inverted() == Color(0.75, 0.5, 0.0, 0.4)


@pytest.mark.parametrize("origin", list(Origin))
def test_grid_lines_bound_every_cell(origin):
    geometry = GridGeometry(130, 200, origin=origin)
    plan = RangeChartRenderer(THEME).render(geometry)
    assert len(plan.lines) == 28
    assert all(op.color == THEME.grid for op in plan.lines)
    frame = geometry.chart_frame
    vertical = sorted(op.start.x for op in plan.lines if op.start.x == op.end.x)
    horizontal = sorted(op.start.y for op in plan.lines if op.start.y == op.end.y)
    assert vertical == [frame.x + i * 10.0 for i in range(14)]
    assert horizontal == [frame.y + i * 10.0 for i in range(14)]


def test_labels_are_the_hand_names_in_table_order():
    plan = RangeChartRenderer(THEME).render(GridGeometry(390, 390))
    assert [op.text for op in plan.labels] == [hand.string for hand in STARTING_HANDS]
    assert all(op.color == THEME.label for op in plan.labels)
    assert all(op.font_size == 10.0 for op in plan.labels)
    assert plan.labels[0].rect.center == Point(15.0, 15.0)


def test_operations_paint_fills_then_grid_then_labels():
    ops = list(RangeChartRenderer().render(GEOMETRY).operations())
    kinds = [type(op) for op in ops]
    assert kinds == [FillOp] * 169 + [LineOp] * 28 + [TextOp] * 169


def test_hit_testing_goes_through_the_geometry():
    renderer = RangeChartRenderer()
    assert renderer.hand_at(GEOMETRY, Point(15, 5)) == UntypedHand("AKs")
    assert renderer.hand_at(GEOMETRY, Point(-1, 5)) is None


def test_theme_hex_round_trip():
    theme = Theme.from_hex({"raise": "#ff0000"})
    assert theme.raise_ == Color.from_hex("#ff0000")
    assert theme.call == DEFAULT_THEME.call
    assert theme.to_hex()["raise"] == "#ff0000"
    assert Color.from_hex("#00000080").alpha == pytest.approx(128 / 255)
    with pytest.raises(ValueError):
        Color.from_hex("#12")


@pytest.mark.parametrize("value", ["#zzzzzz", "#123", "12345g", ""])
def test_malformed_hex_colours_are_rejected(value):
    with pytest.raises(InvalidColor):
        Color.from_hex(value)
