import numpy as np
from shapely.geometry import Polygon

from roi_sat.geometry import MIN_ROI_POINTS, Point, Rect, as_points, intersects


class ROI:
    """Convex monitoring region.

    >>> roi = ROI()
    >>> roi.set_points([(0, 0), (200, 0), (200, 200), (0, 200)])
    >>> roi.valid, roi.area
    (True, 40000.0)
    >>> roi.intersects(Rect(190, 190, 20, 20))
    True

    Concave outlines are rejected:

    >>> roi.set_points([(0, 0), (10, 0), (5, 2), (10, 10), (0, 10)])
    >>> roi.valid
    False
    """

    def __init__(self):
        self.points: list[Point] = []
        self._polygon: Polygon | None = None

    @property
    def valid(self) -> bool:
        if self._polygon is None or not self._polygon.is_valid:
            return False
        return self._polygon.convex_hull.equals(self._polygon)

    @property
    def area(self) -> float:
        return self._polygon.area if self.valid else 0.0

    def set_points(self, points):
        self.points = as_points(points)
        self._rebuild()

    def add_point(self, x: int, y: int):
        self.points.append(Point(x, y))
        self._rebuild()

    def clear(self):
        self.points = []
        self._polygon = None

    def _rebuild(self):
        if len(self.points) >= MIN_ROI_POINTS:
            self._polygon = Polygon([(p.x, p.y) for p in self.points])
        else:
            self._polygon = None

    def intersects(self, rect: Rect) -> bool:
        """Raises InvalidPolygonError with fewer than 3 points."""
        return intersects(self.points, rect)

    def polygon_array(self) -> np.ndarray | None:
        if not self.points:
            return None
        return np.array([(p.x, p.y) for p in self.points], dtype=np.int32)
