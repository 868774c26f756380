"""
Chart Configuration

Window, catalog and initial view settings.
Module-level defaults are collected in ChartConfig so the CLI can
override them in one place.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .types import ViewState

# Window settings
CANVAS_WIDTH, CANVAS_HEIGHT = 1280, 720
PANEL_HEIGHT = 110            # widget strip below the star canvas
FPS = 60
TITLE = "Star Position Chart"

# Catalog
DEFAULT_CATALOG = Path("data") / "sortedMag_hyglike_from_athyg_v24.csv"
DISTANCE_CEILING_PC = 82083.9594   # farthest catalogued distance, maps to canvas height
WIKI_BASE = "https://en.wikipedia.org/wiki/"

# Magnitude bounds (lower = brighter)
MAX_MAGNITUDE = -2.0
MIN_MAGNITUDE = 6.0


@dataclass
class ChartConfig:
    """Start-up configuration for the chart application"""
    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT
    fps: int = FPS
    catalog_path: Optional[Path] = DEFAULT_CATALOG
    distance_ceiling: float = DISTANCE_CEILING_PC
    wiki_base: str = WIKI_BASE
    report_malformed_rows: bool = False

    # Initial view
    initial_view: ViewState = field(default_factory=lambda: ViewState(
        zoom=1,
        min_magnitude=MIN_MAGNITUDE,
        max_magnitude=MAX_MAGNITUDE,
        scale_factor=0.2,
        color_enabled=False,
        rotation_enabled=False,
        rotation_speed=0.0025,
    ))

    @property
    def canvas_size(self) -> tuple[int, int]:
        return (self.canvas_width, self.canvas_height)
