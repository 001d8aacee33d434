import itertools

import pytest
from shapely.geometry import Polygon, box

from roi_sat.geometry import (
    InvalidPolygonError,
    Point,
    Rect,
    Vector,
    bounding_box,
    edge_normals,
    intersects,
    project,
)

TRIANGLE = [(200, 0), (200, 200), (0, 200)]
SQUARE = [(0, 0), (100, 0), (100, 100), (0, 100)]
PENTAGON = [(50, 0), (100, 40), (80, 100), (20, 100), (0, 40)]


def test_point_minus_point_is_vector():
    assert Point(5, 7) - Point(2, 10) == Vector(3, -3)


def test_normal_is_not_normalized():
    v = Vector(0, 200)
    assert v.normal() == Vector(200, 0)
    assert v.dot(v.normal()) == 0


def test_bounding_box():
    assert bounding_box([Point(*p) for p in PENTAGON]) == (0, 0, 100, 100)


def test_edge_normals_one_per_edge():
    normals = edge_normals([Point(*p) for p in TRIANGLE])
    assert normals == [Vector(200, 0), Vector(0, 200), Vector(-200, -200)]


def test_project_can_be_negative():
    pts = [Point(*p) for p in TRIANGLE]
    assert project(pts, Vector(-200, -200)) == (-80000, -40000)


@pytest.mark.parametrize("rect, expected", [
    (Rect(0, 0, 100, 100), True),     # corner touches the hypotenuse
    (Rect(0, 0, 99, 99), False),
    (Rect(50, 50, 40, 40), False),
    (Rect(201, 101, 50, 50), False),
    (Rect(180, 100, 50, 50), True),
    (Rect(120, 120, 40, 40), True),
])
def test_triangle_scenarios(rect, expected):
    assert intersects(TRIANGLE, rect) is expected


def test_disjoint_bounding_boxes():
    for rect in [Rect(-50, 0, 49, 10), Rect(101, 0, 10, 10), Rect(0, -20, 10, 19), Rect(0, 101, 10, 10)]:
        assert intersects(SQUARE, rect) is False


def test_rect_inside_roi():
    assert intersects(PENTAGON, Rect(40, 40, 10, 10)) is True


def test_roi_inside_rect():
    assert intersects(PENTAGON, Rect(-10, -10, 200, 200)) is True


def test_touching_edge_and_vertex():
    assert intersects(SQUARE, Rect(100, 20, 30, 30)) is True
    assert intersects(SQUARE, Rect(100, -10, 10, 10)) is True
    assert intersects(SQUARE, Rect(20, 100, 10, 0)) is True


def test_separated_along_roi_edge_normal():
    # diamond whose bounding box overlaps the rect but a slanted edge separates them
    diamond = [(50, 0), (100, 50), (50, 100), (0, 50)]
    assert intersects(diamond, Rect(0, 0, 20, 20)) is False
    assert intersects(diamond, Rect(0, 0, 25, 25)) is True


def test_separated_along_both_rect_axes():
    assert intersects(SQUARE, Rect(101, 40, 5, 5)) is False
    assert intersects(SQUARE, Rect(40, 101, 5, 5)) is False
    assert intersects(SQUARE, Rect(100, 40, 5, 5)) is True
    assert intersects(SQUARE, Rect(40, 100, 5, 5)) is True


@pytest.mark.parametrize("roi", [[], [(0, 0)], [(0, 0), (10, 10)]])
def test_too_few_points(roi):
    for rect in [Rect(0, 0, 10, 10), Rect(-5, -5, 0, 0)]:
        with pytest.raises(InvalidPolygonError) as exc:
            intersects(roi, rect)
        assert exc.value.count == len(roi)


def test_too_few_points_is_logged(caplog):
    with pytest.raises(InvalidPolygonError):
        intersects([(0, 0)], Rect(0, 0, 1, 1))
    assert "roi points must be >= 3" in caplog.text


def test_winding_order_does_not_matter():
    reversed_roi = list(reversed(PENTAGON))
    for left, top in itertools.product(range(-40, 140, 15), repeat=2):
        rect = Rect(left, top, 20, 12)
        assert intersects(PENTAGON, rect) is intersects(reversed_roi, rect)


def test_agrees_with_shapely():
    poly = Polygon(PENTAGON)
    for left, top in itertools.product(range(-40, 140, 10), repeat=2):
        for w, h in [(5, 5), (30, 10), (10, 30)]:
            rect = Rect(left, top, w, h)
            expected = poly.intersects(box(rect.left, rect.top, rect.right, rect.bottom))
            assert intersects(PENTAGON, rect) is expected, rect


def test_duplicate_and_collinear_vertices():
    # midpoint on the top edge and a repeated corner
    roi = [(0, 0), (50, 0), (100, 0), (100, 100), (100, 100), (0, 100)]
    assert Vector(0, 0) in edge_normals([Point(*p) for p in roi])
    for points in (roi, list(reversed(roi))):
        assert intersects(points, Rect(101, 10, 5, 5)) is False
        assert intersects(points, Rect(90, 10, 5, 5)) is True
        assert intersects(points, Rect(100, 100, 0, 0)) is True
        assert intersects(points, Rect(40, -10, 20, 9)) is False


def test_from_xyxy_orders_corners():
    assert Rect.from_xyxy(40, 25, 10, 20) == Rect(10, 20, 30, 5)
    assert intersects(SQUARE, Rect.from_xyxy(130, 30, 101, 10)) is False
    assert intersects(SQUARE, Rect.from_xyxy(90, 30, 50, 10)) is True


def test_accepts_points_and_tuples():
    assert intersects([Point(*p) for p in SQUARE], Rect(10, 10, 5, 5)) is True
