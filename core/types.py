
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True, slots=True)
class CatalogRecord:
    id: int
    right_ascension: float       # hours, [0, 24)
    declination: float           # degrees, unused by the radial projection
    apparent_magnitude: float
    absolute_magnitude: float = 0.0
    distance: float = 0.0        # parsecs
    name: Optional[str] = None
    spectral_class: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ViewState:
    # read once per frame; StateManager produces a new one on every snapshot
    zoom: int = 1
    min_magnitude: float = 6.0
    max_magnitude: float = -2.0
    scale_factor: float = 0.2
    color_enabled: bool = False
    rotation_enabled: bool = False
    rotation_speed: float = 0.0025
    pointer: Tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True, slots=True)
class HoverResult:
    star_id: Optional[int] = None
    name: Optional[str] = None

    @property
    def display_id(self) -> str:
        return NOT_AVAILABLE if self.star_id is None else str(self.star_id)

    @property
    def display_name(self) -> str:
        return self.name or NOT_AVAILABLE

    def reference_url(self, base: str) -> Optional[str]:
        """Reference page for a named star, None otherwise."""
        if not self.name:
            return None
        return base + self.name
