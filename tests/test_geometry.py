import itertools

import pytest

from rangechart.geometry import EMPTY_RECT, GridGeometry, Origin, Point, Rect
from rangechart.hands import UntypedHand
from rangechart.starting_hands import COUNT, hand_at

SIZES = [(260.0, 390.0), (500.0, 300.0), (123.4, 987.6), (130.0, 130.0)]
CONFIGS = [
    GridGeometry(width, height, center_h, center_v, origin)
    for (width, height), center_h, center_v, origin in itertools.product(
        SIZES, [True, False], [True, False], list(Origin)
    )
]


def test_edge_and_offsets_top_left():
    geometry = GridGeometry(260, 390)
    assert geometry.edge == 20
    assert geometry.chart_size == 260
    assert geometry.center_offset == Point(0, 65)
    assert geometry.chart_frame == Rect(0, 65, 260, 260)
    assert geometry.rect_for_index(0) == Rect(0, 65, 20, 20)
    assert geometry.rect_for_index(14) == Rect(20, 85, 20, 20)


def test_edge_and_offsets_bottom_left():
    geometry = GridGeometry(260, 390, origin=Origin.BOTTOM_LEFT)
    assert geometry.center_offset == Point(0, -65)
    assert geometry.chart_frame == Rect(0, 65, 260, 260)
    # row 0 sits at the visual top, i.e. the highest y values
    assert geometry.rect_for_index(0) == Rect(0, 305, 20, 20)
    assert geometry.rect_for_index(168) == Rect(240, 65, 20, 20)


def test_horizontal_centering():
    geometry = GridGeometry(500, 260)
    assert geometry.center_offset == Point(120, 0)
    assert geometry.rect_for_index(0) == Rect(120, 0, 20, 20)
    uncentred = GridGeometry(500, 260, center_horizontally=False)
    assert uncentred.rect_for_index(0) == Rect(0, 0, 20, 20)


@pytest.mark.parametrize("geometry", CONFIGS)
def test_cell_centres_map_back_to_their_hand(geometry):
    for index in range(COUNT):
        centre = geometry.rect_for_index(index).center
        assert geometry.hand_at_point(centre) == hand_at(index)


@pytest.mark.parametrize("geometry", CONFIGS)
def test_points_outside_the_chart_have_no_hand(geometry):
    frame = geometry.chart_frame
    outside = [
        Point(frame.x - 0.5, frame.center.y),
        Point(frame.max_x + 0.5, frame.center.y),
        Point(frame.center.x, frame.y - 0.5),
        Point(frame.center.x, frame.max_y + 0.5),
        Point(-1000, -1000),
        Point(1e6, 1e6),
    ]
    for point in outside:
        assert geometry.hand_at_point(point) is None


def test_right_and_bottom_chart_edges_are_excluded():
    geometry = GridGeometry(130, 130)
    assert geometry.hand_at_point(Point(130, 5)) is None
    assert geometry.hand_at_point(Point(5, 130)) is None
    assert geometry.hand_at_point(Point(129.99, 129.99)) == UntypedHand("22")


def test_boundary_pixels_belong_to_the_right_and_lower_cell():
    geometry = GridGeometry(130, 130)
    assert geometry.hand_at_point(Point(9.99, 0)) == UntypedHand("AA")
    assert geometry.hand_at_point(Point(10, 0)) == UntypedHand("AKs")
    assert geometry.hand_at_point(Point(0, 10)) == UntypedHand("AKo")


def test_rect_for_hand():
    geometry = GridGeometry(130, 130)
    assert geometry.rect_for_hand(UntypedHand("AKo")) == geometry.rect_for_index(13)
    assert geometry.rect_for_hand(UntypedHand("KAo")) == EMPTY_RECT
    assert geometry.rect_for_hand(UntypedHand("nonsense")).is_empty


def test_rect_for_index_out_of_range_raises():
    with pytest.raises(IndexError):
        GridGeometry(130, 130).rect_for_index(169)


def test_empty_surface_has_no_hands():
    geometry = GridGeometry(0, 200)
    assert geometry.edge == 0
    assert geometry.hand_at_point(Point(0, 0)) is None


def test_cells_describe_every_grid_position():
    cells = GridGeometry(130, 130).cells()
    assert len(cells) == COUNT
    assert cells[14].row == 1 and cells[14].column == 1
    assert cells[14].hand == UntypedHand("KK")
    assert cells[14].rect == Rect(10, 10, 10, 10)
