"""
Chart State Manager

Holds the live view parameters (zoom, magnitude bound, scale, toggles,
pointer) that input handlers and widgets change between frames.

The frame loop never reads these fields directly: it takes one ViewState
snapshot per frame and passes it to the star field.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .celestial_math import round_half_up
from .config import ChartConfig
from .types import HoverResult, ViewState

PRIMARY_BUTTON = 1
SECONDARY_BUTTON = 3


def zoom_step(zoom: int) -> int:
    """Zoom increment for one wheel notch at the current zoom level."""
    return round_half_up(1 + zoom / 10)


@dataclass
class ChartState:
    """Mutable chart state"""
    view: ViewState = field(default_factory=ViewState)
    press_position: Tuple[float, float] = (0.0, 0.0)
    hovered: HoverResult = field(default_factory=HoverResult)


class StateManager:
    """
    Owns chart state and applies input to it

    Responsibilities:
    - External setters for slider/checkbox values
    - Wheel zoom, pointer press/move/drag
    - Per-frame snapshots and hover bookkeeping
    """

    def __init__(self, config: Optional[ChartConfig] = None):
        self.config = config or ChartConfig()
        self.state = ChartState(view=self.config.initial_view)

    # -----------------------------------------------------------------------
    # Widget setters
    # -----------------------------------------------------------------------

    def _set(self, **changes):
        self.state.view = replace(self.state.view, **changes)

    def set_min_magnitude(self, value: float):
        self._set(min_magnitude=float(value))

    def set_scale_factor(self, slider_value: float):
        """Slider value is in tenths."""
        self._set(scale_factor=slider_value / 10)

    def set_rotation_speed(self, slider_value: float):
        """Slider value is in thousandths."""
        self._set(rotation_speed=slider_value / 1000)

    def set_color_enabled(self, enabled: bool):
        self._set(color_enabled=bool(enabled))

    def set_rotation_enabled(self, enabled: bool):
        self._set(rotation_enabled=bool(enabled))

    # -----------------------------------------------------------------------
    # Pointer and wheel
    # -----------------------------------------------------------------------

    def scroll(self, direction: int) -> int:
        """
        Apply one wheel notch and return the new zoom.

        direction > 0 (wheel down) zooms in; anything else zooms out, but
        never below 1.
        """
        zoom = self.state.view.zoom
        if direction > 0:
            zoom += zoom_step(zoom)
        elif zoom > 1:
            zoom = max(1, zoom - zoom_step(zoom))
        self._set(zoom=zoom)
        return zoom

    def pointer_move(self, x: float, y: float):
        self._set(pointer=(x, y))

    def pointer_down(self, x: float, y: float,
                     button: int = PRIMARY_BUTTON) -> Optional[str]:
        """
        Record a press. Returns the reference URL when a secondary click
        lands while a named star is hovered.
        """
        self.state.press_position = (x, y)
        self._set(pointer=(x, y))
        if button == SECONDARY_BUTTON:
            return self.state.hovered.reference_url(self.config.wiki_base)
        return None

    def pointer_drag(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """
        Pan delta from the press position, or None when the pointer is
        outside the canvas.
        """
        self._set(pointer=(x, y))
        if not (0 <= x <= self.config.canvas_width and
                0 <= y <= self.config.canvas_height):
            return None
        px, py = self.state.press_position
        return (round_half_up(x - px), round_half_up(y - py))

    # -----------------------------------------------------------------------
    # Frame bookkeeping
    # -----------------------------------------------------------------------

    def snapshot(self) -> ViewState:
        return self.state.view

    def record_hover(self, result: HoverResult):
        self.state.hovered = result

    @property
    def hovered(self) -> HoverResult:
        return self.state.hovered

    def reference_url(self) -> Optional[str]:
        return self.state.hovered.reference_url(self.config.wiki_base)
