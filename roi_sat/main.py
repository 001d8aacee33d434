import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import cv2

from roi_sat.config import Config
from roi_sat.detection import Detection, classify
from roi_sat.geometry import MIN_ROI_POINTS, InvalidPolygonError, Rect
from roi_sat.overlay import OverlayPainter, blank_canvas
from roi_sat.roi import ROI

logger = logging.getLogger(__name__)


_handlers: list[logging.Handler] = []


def _setup_logging(log_file: str = "", verbose: bool = False):
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    # repeated main() calls replace rather than stack handlers
    while _handlers:
        h = _handlers.pop()
        root.removeHandler(h)
        h.close()
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(path, maxBytes=5_000_000, backupCount=3)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
        ))
        root.addHandler(handler)
        _handlers.append(handler)
    # WARNING+ on stderr unless -v
    stderr = logging.StreamHandler()
    stderr.setLevel(logging.DEBUG if verbose else logging.WARNING)
    stderr.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root.addHandler(stderr)
    _handlers.append(stderr)


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Check rectangles against a convex ROI.")
    ap.add_argument("--config", help="JSON file with roi_points and rects")
    ap.add_argument("--render", help="write an annotated PNG to this path")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return ap.parse_args(argv)


def run(config: Config, render: str | None = None) -> list[Detection]:
    roi = ROI()
    roi.set_points(config.roi_points)
    if len(roi.points) >= MIN_ROI_POINTS and not roi.valid:
        logger.warning("roi is not a simple convex polygon, results are undefined")

    detections = [
        Detection(bbox=Rect(*r), label=f"rect{i}") for i, r in enumerate(config.rects, start=1)
    ]
    classify(detections, roi)
    for d in detections:
        print(f"{d.label} and roi: {'collision' if d.in_roi else 'no collision'}")

    if render:
        canvas = blank_canvas(config.canvas_width, config.canvas_height)
        annotated = OverlayPainter().draw(canvas, detections, roi)
        cv2.imwrite(render, annotated)
        logger.info("wrote %s", render)
    return detections


def main(argv=None) -> int:
    args = parse_args(argv)
    config = Config.load(args.config)
    _setup_logging(config.log_file, args.verbose)
    try:
        run(config, args.render)
    except InvalidPolygonError as e:
        logger.error("%s", e)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
