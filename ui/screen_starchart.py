"""
Star Chart Screen

Polar star chart: right ascension is the angle, distance is the radius.
The chart canvas fills the window above a strip of controls.

Controls
--------
  Drag mouse            Pan
  Scroll / +/-          Zoom
  Hover                 Show star id / name
  Right click           Open the hovered star's reference page
  C                     Toggle spectral color
  R                     Toggle rotation
  ESC                   Quit
"""

import webbrowser
import pygame
from typing import Callable, List, Optional, Tuple

from core.config import PANEL_HEIGHT
from core.state_manager import PRIMARY_BUTTON, StateManager
from core.types import HoverResult, ViewState
from rendering.star_field import StarField
from rendering.surface import PygameSurface
from .base_screen import BaseScreen
from .components import Checkbox, Slider

# Magnitude slider spans the whole catalog range, even though stars fainter
# than the start-up bound were never plotted.
MAG_SLIDER_RANGE = (-2.0, 22.0)
SCALE_SLIDER_RANGE = (0.0, 50.0)       # tenths
ROTATION_SLIDER_RANGE = (0.0, 50.0)    # thousandths


def overlay_lines(view: ViewState, hovered: HoverResult,
                  canvas_size: Tuple[int, int], wiki_base: str,
                  line_height: int = 10) -> List[Tuple[str, int, int]]:
    """
    Overlay text as (text, x, y) rows, bottom-up from the canvas edge.

    View values go bottom-right; hovered star id, name and reference link
    bottom-left. The link row only appears for named stars.
    """
    w, h = canvas_size
    right_x = w - 100
    rows = [
        (f"Minimum Mag: {view.min_magnitude:g}", right_x, h - 1 * line_height - 4),
        (f"Zoom: {view.zoom}",                  right_x, h - 2 * line_height - 4),
        (f"Scale Factor: {view.scale_factor:g}", right_x, h - 3 * line_height - 4),
        (f"ID: {hovered.display_id}",           3, h - 1 * line_height - 4),
        (f"Name: {hovered.display_name}",       3, h - 2 * line_height - 4),
    ]
    url = hovered.reference_url(wiki_base)
    if url:
        rows.append((url, 3, h - 3 * line_height - 4))
    return rows


class StarChartScreen(BaseScreen):
    """Interactive polar star chart."""

    def __init__(self, state_manager: StateManager, star_field: StarField,
                 open_url: Callable[[str], object] = webbrowser.open_new_tab):
        super().__init__("STARCHART")
        self.state_manager = state_manager
        self.star_field = star_field
        self.open_url = open_url

        cfg = state_manager.config
        self.canvas_rect = pygame.Rect(0, 0, cfg.canvas_width, cfg.canvas_height)
        self.panel_rect = pygame.Rect(0, cfg.canvas_height, cfg.canvas_width, PANEL_HEIGHT)

        # Drag state
        self.dragging = False

        self.last_hover = HoverResult()
        self._create_widgets()

    # -----------------------------------------------------------------------
    # Setup
    # -----------------------------------------------------------------------

    def _create_widgets(self):
        sm = self.state_manager
        view = sm.snapshot()
        x0 = self.panel_rect.x + 150
        y0 = self.panel_rect.y + 16
        step = self.theme.widget_spacing

        self.sliders = {
            'min_mag':  Slider(x0, y0, 260, "Minimum Mag",
                               *MAG_SLIDER_RANGE, view.min_magnitude, step=0.5,
                               callback=sm.set_min_magnitude),
            'scale':    Slider(x0, y0 + step, 260, "Scale Factor",
                               *SCALE_SLIDER_RANGE, view.scale_factor * 10, step=1,
                               callback=sm.set_scale_factor),
            'rotation': Slider(x0, y0 + 2 * step, 260, "Rotation Speed",
                               *ROTATION_SLIDER_RANGE, view.rotation_speed * 1000, step=0.5,
                               callback=sm.set_rotation_speed),
        }
        cx = x0 + 360
        self.checkboxes = {
            'color':    Checkbox(cx, y0, "Color", view.color_enabled,
                                 callback=sm.set_color_enabled),
            'rotation': Checkbox(cx, y0 + step, "Rotate", view.rotation_enabled,
                                 callback=sm.set_rotation_enabled),
        }

    def _widgets(self):
        return list(self.sliders.values()) + list(self.checkboxes.values())

    # -----------------------------------------------------------------------
    # Input
    # -----------------------------------------------------------------------

    def handle_input(self, events) -> Optional[str]:
        sm = self.state_manager

        for event in events:
            if event.type == pygame.KEYDOWN:
                k = event.key
                if   k == pygame.K_ESCAPE: return 'QUIT'
                elif k in (pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS): sm.scroll(1)
                elif k in (pygame.K_MINUS, pygame.K_KP_MINUS):                sm.scroll(-1)
                elif k == pygame.K_c: self._toggle('color')
                elif k == pygame.K_r: self._toggle('rotation')

            elif event.type == pygame.MOUSEWHEEL:
                # wheel down (y < 0) zooms in
                sm.scroll(1 if event.y < 0 else -1)

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button in (4, 5):
                    continue  # legacy wheel buttons, handled via MOUSEWHEEL
                if any(w.handle_event(event) for w in self._widgets()):
                    continue
                if self.canvas_rect.collidepoint(event.pos):
                    url = sm.pointer_down(*event.pos, button=event.button)
                    self.dragging = event.button == PRIMARY_BUTTON
                    if url:
                        print(f"Opening {url}")
                        self.open_url(url)

            elif event.type == pygame.MOUSEBUTTONUP:
                for w in self.sliders.values():
                    w.handle_event(event)
                self.dragging = False

            elif event.type == pygame.MOUSEMOTION:
                if any(s.handle_event(event) for s in self.sliders.values()):
                    continue
                if self.dragging:
                    delta = sm.pointer_drag(*event.pos)
                    if delta is not None:
                        self.star_field.pan(*delta)
                else:
                    sm.pointer_move(*event.pos)

        return None

    def _toggle(self, key: str):
        box = self.checkboxes[key]
        box.set_checked(not box.is_checked())

    # -----------------------------------------------------------------------
    # Update / render
    # -----------------------------------------------------------------------

    def update(self, dt: float):
        # the chart is redrawn from state every frame; nothing is time-based
        pass

    def render(self, surface: pygame.Surface):
        view = self.state_manager.snapshot()

        canvas = PygameSurface(surface.subsurface(self.canvas_rect),
                               font=self.theme.fonts.overlay(),
                               text_color=self.theme.colors.FG_TEXT)
        self.last_hover = self.star_field.frame_update(canvas, view)
        self.state_manager.record_hover(self.last_hover)

        for text, x, y in overlay_lines(view, self.last_hover,
                                        self.canvas_rect.size,
                                        self.state_manager.config.wiki_base,
                                        self.theme.line_height):
            canvas.draw_text(text, x, y)

        self._draw_panel(surface)

    def _draw_panel(self, surface: pygame.Surface):
        colors = self.theme.colors
        pygame.draw.rect(surface, colors.BG_PANEL, self.panel_rect)
        pygame.draw.line(surface, colors.BORDER, self.panel_rect.topleft,
                         self.panel_rect.topright, 1)
        for widget in self._widgets():
            widget.draw(surface)

        self.theme.draw_text(surface, self.theme.fonts.small(),
                             self.panel_rect.right - 12, self.panel_rect.bottom - 22,
                             f"{self.star_field.drawn_count:,} / {len(self.star_field):,} stars",
                             colors.FG_DIM, align='right')
