import cv2
import numpy as np

from roi_sat.detection import Detection
from roi_sat.roi import ROI

IN_COLOR = (0, 0, 255)
OUT_COLOR = (0, 255, 0)
ROI_COLOR = (255, 255, 0)


def blank_canvas(width: int, height: int) -> np.ndarray:
    return np.zeros((height, width, 3), dtype=np.uint8)


class OverlayPainter:
    def draw(self, frame: np.ndarray, detections: list[Detection], roi: ROI) -> np.ndarray:
        out = frame.copy()
        self._draw_roi(out, roi)
        self._draw_detections(out, detections)
        return out

    def _draw_roi(self, frame: np.ndarray, roi: ROI):
        pts = roi.polygon_array()
        if pts is None:
            return
        overlay = frame.copy()
        cv2.fillPoly(overlay, [pts], ROI_COLOR)
        cv2.addWeighted(overlay, 0.2, frame, 0.8, 0, frame)
        cv2.polylines(frame, [pts], isClosed=True, color=ROI_COLOR, thickness=2)

    def _draw_detections(self, frame: np.ndarray, detections: list[Detection]):
        for i, d in enumerate(detections, start=1):
            r = d.bbox
            color = IN_COLOR if d.in_roi else OUT_COLOR
            cv2.rectangle(frame, (r.left, r.top), (r.right, r.bottom), color, 2)
            label = d.label or f"rect{i}"
            cv2.putText(frame, label, (r.left, r.top - 8), cv2.FONT_HERSHEY_SIMPLEX, 0.5, color, 1)
