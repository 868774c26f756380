"""
Star Field

Owns every StarEntity on the chart and runs the per-frame pass:
update -> (rotate) -> hit-test -> render.
"""

from __future__ import annotations
from typing import Iterable, List, Tuple

from core.config import DISTANCE_CEILING_PC
from core.types import CatalogRecord, HoverResult, ViewState
from .star import StarEntity
from .surface import DrawingSurface

# rotation speed is applied per frame at this fraction
ROTATION_DIVISOR = 10


class StarField:
    """
    The plotted star collection

    The collection is built once by populate(). Changing the magnitude
    bound later only hides or shows stars that were plotted at populate
    time; nothing outside the initial range is ever added.
    """

    def __init__(self, distance_ceiling: float = DISTANCE_CEILING_PC):
        self.distance_ceiling = distance_ceiling
        self._stars: List[StarEntity] = []
        self.drawn_count = 0

    def __len__(self) -> int:
        return len(self._stars)

    def __iter__(self):
        return iter(self._stars)

    @property
    def stars(self) -> Tuple[StarEntity, ...]:
        return tuple(self._stars)

    def populate(self, records: Iterable[CatalogRecord], view: ViewState,
                 canvas_size: Tuple[int, int]) -> int:
        """
        Build entities for every record inside the view's magnitude range
        with a non-zero chart radius. Replaces any previous collection.
        """
        stars = []
        skipped = 0
        for record in records:
            if not (view.max_magnitude <= record.apparent_magnitude <= view.min_magnitude):
                skipped += 1
                continue
            star = StarEntity(record, view, canvas_size, self.distance_ceiling)
            if not star.radial_distance:
                skipped += 1
                continue
            stars.append(star)

        self._stars = stars
        print(f"  Plotted: {len(stars):,} stars ({skipped:,} outside range)")
        return len(stars)

    def pan(self, dx: float, dy: float):
        for star in self._stars:
            star.pan(dx, dy)

    def frame_update(self, surface: DrawingSurface, view: ViewState) -> HoverResult:
        """
        Redraw the chart for one frame.

        Every star is hit-tested against the pointer, visible or not; when
        several stars are under it the last one in plot order is reported.
        """
        surface.clear()
        px, py = view.pointer
        hovered = HoverResult()
        drawn = 0

        for star in self._stars:
            star.update(view.zoom, view.scale_factor, view.min_magnitude,
                        view.color_enabled)
            if view.rotation_enabled:
                star.rotate(view.rotation_speed / ROTATION_DIVISOR)
            star_id = star.hit_test(px, py)
            if star_id is not None:
                hovered = HoverResult(star_id, star.resolve_name(px, py))
            if star.render(surface):
                drawn += 1

        self.drawn_count = drawn
        return hovered
