import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MIN_ROI_POINTS = 3


class InvalidPolygonError(ValueError):
    """ROI has too few vertices to form a polygon."""

    def __init__(self, count: int):
        super().__init__(f"roi points must be >= {MIN_ROI_POINTS}, got {count}")
        self.count = count


@dataclass(frozen=True)
class Vector:
    x: int
    y: int

    def normal(self) -> "Vector":
        """Rotate by 90 degrees. Not unit length.

        >>> Vector(3, 4).normal()
        Vector(x=4, y=-3)
        """
        return Vector(self.y, -self.x)

    def dot(self, other: "Vector") -> int:
        return self.x * other.x + self.y * other.y


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __sub__(self, other: "Point") -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def to_vector(self) -> Vector:
        return Vector(self.x, self.y)


@dataclass(frozen=True)
class Rect:
    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @classmethod
    def from_xyxy(cls, x1: int, y1: int, x2: int, y2: int) -> "Rect":
        """Corners may come in either order.

        >>> Rect.from_xyxy(10, 20, 40, 25)
        Rect(left=10, top=20, width=30, height=5)
        >>> Rect.from_xyxy(40, 25, 10, 20)
        Rect(left=10, top=20, width=30, height=5)
        """
        return cls(min(x1, x2), min(y1, y2), abs(x2 - x1), abs(y2 - y1))


def as_points(points: Iterable) -> list[Point]:
    """Accept Points or (x, y) pairs."""
    return [p if isinstance(p, Point) else Point(*p) for p in points]


def rect_to_points(rect: Rect) -> list[Point]:
    """Corners as top-left, top-right, bottom-right, bottom-left.

    >>> [(p.x, p.y) for p in rect_to_points(Rect(0, 0, 2, 1))]
    [(0, 0), (2, 0), (2, 1), (0, 1)]
    """
    return [
        Point(rect.left, rect.top),
        Point(rect.right, rect.top),
        Point(rect.right, rect.bottom),
        Point(rect.left, rect.bottom),
    ]


def bounding_box(points: Sequence[Point]) -> tuple[int, int, int, int]:
    """Return (x1, y1, x2, y2) over all points."""
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return min(xs), min(ys), max(xs), max(ys)


def edge_normals(points: Sequence[Point]) -> list[Vector]:
    """Normal of each closed-polygon edge i -> i+1."""
    n = len(points)
    return [(points[(i + 1) % n] - points[i]).normal() for i in range(n)]


def project(points: Sequence[Point], axis: Vector) -> tuple[int, int]:
    """Return the (min, max) projection interval of points onto axis."""
    lengths = [axis.dot(p.to_vector()) for p in points]
    return min(lengths), max(lengths)


def check_roi(points: Sequence):
    """Log and raise InvalidPolygonError when there are fewer than 3 points."""
    if len(points) < MIN_ROI_POINTS:
        logger.warning("roi points must be >= %d, got %d", MIN_ROI_POINTS, len(points))
        raise InvalidPolygonError(len(points))


def intersects(roi: Sequence, rect: Rect) -> bool:
    """Separating axis test between a convex ROI and an axis-aligned rect.

    Touching boundaries count as intersecting. Raises InvalidPolygonError
    when the ROI has fewer than 3 points.

    The triangle below covers the half of its bounding box where x + y >= 200.
    (100, 100) lies on the hypotenuse, so the first rect only touches:

    >>> roi = [(200, 0), (200, 200), (0, 200)]
    >>> intersects(roi, Rect(0, 0, 100, 100))
    True
    >>> intersects(roi, Rect(0, 0, 99, 99))
    False
    >>> intersects(roi, Rect(50, 50, 40, 40))
    False
    >>> intersects(roi, Rect(201, 101, 50, 50))
    False
    >>> intersects(roi, Rect(180, 100, 50, 50))
    True
    """
    roi = as_points(roi)
    check_roi(roi)

    # bounding box reject: rect and roi boxes disjoint means no intersection
    x1, y1, x2, y2 = bounding_box(roi)
    if rect.left > x2 or rect.right < x1 or rect.top > y2 or rect.bottom < y1:
        return False

    rect_points = rect_to_points(rect)

    # roi edge normals plus the top and right rect edges; the other two
    # rect edges are parallel to these
    axes = edge_normals(roi) + [
        (rect_points[i + 1] - rect_points[i]).normal() for i in range(2)
    ]
    for axis in axes:
        roi_min, roi_max = project(roi, axis)
        rect_min, rect_max = project(rect_points, axis)
        if rect_max < roi_min or rect_min > roi_max:
            return False

    return True
