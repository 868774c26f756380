"""
Star Entity

One plotted star: catalog fields plus its live projected position and
size. Created once when the star field is populated, then updated,
rotated and panned every frame.
"""

from __future__ import annotations
from typing import Optional, Tuple

from core import celestial_math as cm
from core.config import DISTANCE_CEILING_PC
from core.types import CatalogRecord, ViewState
from .surface import DrawingSurface


class StarEntity:
    """A catalog star placed on the polar chart."""

    def __init__(self, record: CatalogRecord, view: ViewState,
                 canvas_size: Tuple[int, int],
                 distance_ceiling: float = DISTANCE_CEILING_PC):
        self.id = record.id
        self.name = record.name
        self.spectral_class = record.spectral_class
        self.apparent_magnitude = record.apparent_magnitude
        self.width, self.height = canvas_size

        # Fixed at construction
        self.radial_distance = cm.radial_distance(record.distance, self.height,
                                                  distance_ceiling)
        self.brightness = cm.brightness_index(record.apparent_magnitude,
                                              view.max_magnitude, view.min_magnitude)
        self.mag_norm = cm.magnitude_norm(record.apparent_magnitude,
                                          view.max_magnitude, view.min_magnitude,
                                          self.width)
        self.max_magnitude = view.max_magnitude

        # Live state
        self.ra = record.right_ascension
        self.pan_offset: Tuple[float, float] = (0, 0)
        self.zoom = view.zoom
        self.scale_factor = view.scale_factor
        self.min_magnitude = view.min_magnitude
        self.color_enabled = view.color_enabled

        self.x, self.y = self._position(self.pan_offset)
        self.size = cm.star_size(self.mag_norm, self.zoom, self.scale_factor)

    def __repr__(self):
        return (f"StarEntity(id={self.id}, name={self.name!r}, "
                f"x={self.x:.1f}, y={self.y:.1f}, size={self.size})")

    @property
    def angle(self) -> float:
        return cm.angle_from_ra(self.ra)

    def _position(self, pan: Tuple[float, float]) -> Tuple[float, float]:
        return cm.project(self.ra, self.radial_distance, self.zoom,
                          self.width, self.height, pan)

    # -----------------------------------------------------------------------
    # Per-frame mutation
    # -----------------------------------------------------------------------

    def update(self, zoom: int, scale_factor: float, min_magnitude: float,
               color_enabled: bool):
        """Re-project with new view values, keeping angle and pan offset."""
        self.zoom = zoom
        self.scale_factor = scale_factor
        self.min_magnitude = min_magnitude
        self.color_enabled = color_enabled

        self.x, self.y = self._position(self.pan_offset)
        self.size = cm.star_size(self.mag_norm, self.zoom, scale_factor)

    def rotate(self, delta: float):
        """
        Turn the star about the chart centre by delta (RA hours).

        The position is recomputed without the pan offset, so a rotating
        chart ignores panning for that frame.
        """
        self.ra -= delta
        self.x, self.y = self._position((0, 0))

    def pan(self, dx: float, dy: float):
        """
        Replace the pan offset and shift the current position by it.

        Callers pass the total drag delta since the press, not an increment.
        """
        self.pan_offset = (dx, dy)
        self.x += dx
        self.y += dy

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------

    def in_magnitude_range(self) -> bool:
        return self.max_magnitude <= self.apparent_magnitude <= self.min_magnitude

    def on_canvas(self) -> bool:
        return 0 <= self.x <= self.width and 0 <= self.y <= self.height

    def is_visible(self) -> bool:
        return self.on_canvas() and self.in_magnitude_range()

    def _under(self, px: float, py: float) -> bool:
        tol = cm.hit_tolerance(self.zoom)
        return abs(px - self.x) <= tol and abs(py - self.y) <= tol

    def hit_test(self, px: float, py: float) -> Optional[int]:
        """Star id when (px, py) is within ln(zoom) pixels, else None."""
        return self.id if self._under(px, py) else None

    def resolve_name(self, px: float, py: float) -> Optional[str]:
        if self.name and self._under(px, py):
            return self.name
        return None

    # -----------------------------------------------------------------------
    # Draw
    # -----------------------------------------------------------------------

    def fill(self) -> cm.StarFill:
        return cm.star_fill(self.spectral_class, self.brightness, self.color_enabled)

    def render(self, surface: DrawingSurface) -> bool:
        """Draw the star if visible. Returns True when something was drawn."""
        if not self.is_visible():
            return False

        fill = self.fill()
        if fill.mode is cm.FillMode.SPECTRAL:
            surface.set_fill_hsb(*fill.values)
        else:
            gray = fill.values[0]
            surface.set_fill_color(gray, gray, gray, 255)
        surface.draw_circle(self.x, self.y, self.size)
        return True
