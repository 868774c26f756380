"""
Celestial Mathematics

Projection of catalog stars onto the chart canvas:
- Right ascension -> polar angle, distance -> radius
- Magnitude remaps for star size and brightness
- Spectral class -> HSB hue/saturation

Every function here is pure; view parameters are passed in explicitly.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


def linear_map(value: float, start1: float, stop1: float,
               start2: float, stop2: float) -> float:
    """Re-map value from [start1, stop1] to [start2, stop2] (unclamped)."""
    return start2 + (value - start1) * (stop2 - start2) / (stop1 - start1)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def round_half_up(value: float) -> int:
    """Round .5 toward +infinity (Python's round() is banker's rounding)."""
    return math.floor(value + 0.5)


# ---------------------------------------------------------------------------
# Position
# ---------------------------------------------------------------------------

def angle_from_ra(ra_hours: float) -> float:
    """
    Polar angle for a right ascension.

    The result is in degrees but is handed straight to cos/sin, which take
    radians. Charts made with this projection depend on that, so keep it.
    """
    return linear_map(ra_hours, 0, 24, 0, 360)


def screen_x(ra_hours: float, dist: float, zoom: float, pan_dx: float,
             width: float) -> float:
    return width / 2 + dist * zoom * math.cos(angle_from_ra(ra_hours)) + pan_dx


def screen_y(ra_hours: float, dist: float, zoom: float, pan_dy: float,
             height: float) -> float:
    return height / 2 + dist * zoom * math.sin(angle_from_ra(ra_hours)) + pan_dy


def project(ra_hours: float, dist: float, zoom: float,
            width: float, height: float,
            pan: Tuple[float, float] = (0.0, 0.0)) -> Tuple[float, float]:
    """Screen (x, y) for a star at radius dist and the given RA."""
    return (screen_x(ra_hours, dist, zoom, pan[0], width),
            screen_y(ra_hours, dist, zoom, pan[1], height))


def radial_distance(distance_pc: float, canvas_height: float,
                    ceiling_pc: float) -> float:
    """Fixed chart radius for a catalog distance, computed once per star."""
    return linear_map(distance_pc, 0, ceiling_pc, 0, canvas_height)


# ---------------------------------------------------------------------------
# Magnitude
# ---------------------------------------------------------------------------

def magnitude_norm(mag: float, max_mag: float, min_mag: float,
                   canvas_width: float) -> float:
    """Apparent magnitude spread across [0, canvas_width]; drives star size."""
    return linear_map(mag, max_mag, min_mag, 0, canvas_width)


def brightness_index(mag: float, max_mag: float, min_mag: float) -> float:
    """
    Power-law remap of apparent magnitude onto [0, 400].

    Magnitude is logarithmic, so 10**mag is spread linearly between the
    bright and faint limits. Bright stars land near 0.
    """
    return linear_map(10 ** mag, 10 ** max_mag, 10 ** min_mag, 0, 400)


def star_size(mag_norm: float, zoom: float, scale_factor: float) -> int:
    """Circle diameter in pixels. At zoom 1, ln(1) = 0 so every star is 1px."""
    return 1 + round_half_up(mag_norm * math.log(zoom) * scale_factor / 100)


def hit_tolerance(zoom: float) -> float:
    """Pointer hit box half-width; 0 at zoom 1, grows with ln(zoom)."""
    return math.log(zoom)


def grayscale(brightness: float) -> float:
    return clamp(255 - brightness, 0, 255)


def hsb_brightness(brightness: float) -> float:
    return clamp(100 - (brightness / 255) * 100, 0, 100)


# ---------------------------------------------------------------------------
# Spectral colour
# ---------------------------------------------------------------------------

# O/B/A/F share one hue on this chart; only saturation separates them.
_SPECTRAL_HUE = {
    'O': 240, 'W': 240, 'B': 240, 'A': 240, 'F': 240,
    'G': 50,
    'K': 350,
    'M': 0, 'C': 0,
}

_SPECTRAL_SATURATION = {
    'O': 80, 'W': 80,
    'B': 30,
    'A': 20,
    'F': 0,
    'G': 60,
    'K': 50,
    'M': 90, 'C': 90,
}


def spectral_hue(spectral_class: Optional[str]) -> Optional[int]:
    """HSB hue from the first letter of the class, None when unknown."""
    if not spectral_class:
        return None
    return _SPECTRAL_HUE.get(spectral_class[0])


def spectral_saturation(spectral_class: Optional[str]) -> int:
    if not spectral_class:
        return 0
    return _SPECTRAL_SATURATION.get(spectral_class[0], 0)


class FillMode(Enum):
    GRAYSCALE = "grayscale"
    SPECTRAL = "spectral"


@dataclass(frozen=True)
class StarFill:
    mode: FillMode
    values: Tuple[float, ...]   # (gray,) or (hue, saturation, brightness)


def star_fill(spectral_class: Optional[str], brightness: float,
              color_enabled: bool) -> StarFill:
    """
    Fill for a star.

    Grayscale fallback: used when color is off, the star has no spectral
    class, or the class letter has no hue.
    """
    hue = spectral_hue(spectral_class)
    if not color_enabled or hue is None:
        return StarFill(FillMode.GRAYSCALE, (grayscale(brightness),))
    return StarFill(FillMode.SPECTRAL, (hue,
                                        spectral_saturation(spectral_class),
                                        hsb_brightness(brightness)))
