import logging
from dataclasses import dataclass

from roi_sat.geometry import Rect, check_roi
from roi_sat.roi import ROI

logger = logging.getLogger(__name__)


@dataclass
class Detection:
    bbox: Rect
    confidence: float = 1.0
    label: str = ""
    in_roi: bool = False

    @classmethod
    def from_xyxy(cls, x1: int, y1: int, x2: int, y2: int, **kwargs) -> "Detection":
        return cls(bbox=Rect.from_xyxy(x1, y1, x2, y2), **kwargs)


def classify(detections: list[Detection], roi: ROI) -> list[Detection]:
    """Tag each detection with whether its box touches the ROI.

    >>> roi = ROI()
    >>> roi.set_points([(200, 0), (200, 200), (0, 200)])
    >>> dets = [Detection(Rect(180, 100, 50, 50)), Detection(Rect(201, 101, 50, 50))]
    >>> [d.in_roi for d in classify(dets, roi)]
    [True, False]
    """
    check_roi(roi.points)
    for d in detections:
        d.in_roi = roi.intersects(d.bbox)
    logger.debug("classified %d detections, %d in roi",
                 len(detections), sum(d.in_roi for d in detections))
    return detections
