from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Margin:
    top: int = 40
    right: int = 30
    bottom: int = 50
    left: int = 60


@dataclass(frozen=True)
class CanvasConfig:
    """
    Fixed pixel canvas every chart is drawn on.

    The plot area is the canvas minus the margins; cartesian scales map onto it.
    """

    width: int = 600
    height: int = 400
    margin: Margin = field(default_factory=Margin)

    @property
    def x_range(self) -> Tuple[float, float]:
        return float(self.margin.left), float(self.width - self.margin.right)

    @property
    def y_range(self) -> Tuple[float, float]:
        # Pixel y grows downward, so value 0 sits at the bottom edge
        return float(self.height - self.margin.bottom), float(self.margin.top)

    @property
    def center(self) -> Tuple[float, float]:
        return self.width / 2, self.height / 2

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> CanvasConfig:
        if not isinstance(data, dict):
            raise TypeError(f"canvas must be an object, got {type(data).__name__}")
        margin_raw = data.get("margin", {})
        if not isinstance(margin_raw, dict):
            raise TypeError(f"canvas.margin must be an object, got {type(margin_raw).__name__}")
        return cls(
            width=int(data.get("width", 600)),
            height=int(data.get("height", 400)),
            margin=Margin(**{k: int(v) for k, v in margin_raw.items()}),
        )


@dataclass
class GlobalConfig:
    ui_title: str = "CSV Chart Browser"
    subtitle: str = "Upload a CSV and visualise it"
    preview_rows: int = 10
    max_upload_bytes: int = 50_000_000
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
