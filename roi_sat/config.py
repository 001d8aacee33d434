import json
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_ROI = [[200, 0], [200, 200], [0, 200]]
DEFAULT_RECTS = [
    [0, 0, 100, 100],
    [50, 50, 40, 40],
    [201, 101, 50, 50],
    [180, 100, 50, 50],
]


@dataclass
class Config:
    roi_points: list[list[int]] = field(default_factory=lambda: [list(p) for p in DEFAULT_ROI])
    rects: list[list[int]] = field(default_factory=lambda: [list(r) for r in DEFAULT_RECTS])
    canvas_width: int = 320
    canvas_height: int = 240
    log_file: str = ""

    @classmethod
    def load(cls, path: str | Path | None = None) -> "Config":
        if path is None:
            return cls()
        data = json.loads(Path(path).read_text())
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
