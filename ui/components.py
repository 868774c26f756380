"""
UI Components - Chart Controls

- Slider: Horizontal value slider (minimum magnitude, scale, rotation speed)
- Checkbox: Toggle checkbox (color, rotation)

Both report changes through a callback so the chart state is only ever
changed through its setters.
"""

import pygame
from typing import Callable, Optional
from .theme import get_theme


class Slider:
    """
    Horizontal slider

    Drag the knob or click on the track. Values snap to `step`.
    """

    KNOB_W = 8

    def __init__(self, x: int, y: int, width: int, label: str,
                 minimum: float, maximum: float, value: float,
                 step: float = 1, callback: Optional[Callable[[float], None]] = None):
        """
        Initialize slider

        Args:
            x, y: Position of the track
            width: Track width
            label: Text drawn left of the track
            minimum, maximum: Value range
            value: Initial value
            step: Snap increment
            callback: Called with the new value whenever it changes
        """
        self.rect = pygame.Rect(x, y, width, 16)
        self.label = label
        self.minimum = minimum
        self.maximum = maximum
        self.step = step
        self.value = self._snap(value)
        self.callback = callback
        self.dragging = False
        self.theme = get_theme()

    def _snap(self, value: float) -> float:
        value = max(self.minimum, min(self.maximum, value))
        steps = round((value - self.minimum) / self.step)
        snapped = self.minimum + steps * self.step
        return round(min(self.maximum, snapped), 6)

    def _value_at(self, px: int) -> float:
        t = (px - self.rect.x) / max(1, self.rect.width)
        return self._snap(self.minimum + t * (self.maximum - self.minimum))

    def set_value(self, value: float):
        new = self._snap(value)
        if new != self.value:
            self.value = new
            if self.callback:
                self.callback(new)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle input event

        Returns:
            True if the event was consumed by the slider
        """
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.inflate(0, 8).collidepoint(event.pos):
                self.dragging = True
                self.set_value(self._value_at(event.pos[0]))
                return True

        elif event.type == pygame.MOUSEMOTION and self.dragging:
            self.set_value(self._value_at(event.pos[0]))
            return True

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.dragging:
                self.dragging = False
                return True

        return False

    def knob_rect(self) -> pygame.Rect:
        span = self.maximum - self.minimum
        t = (self.value - self.minimum) / span if span else 0.0
        cx = self.rect.x + int(t * self.rect.width)
        return pygame.Rect(cx - self.KNOB_W // 2, self.rect.y - 2,
                           self.KNOB_W, self.rect.height + 4)

    def draw(self, surface: pygame.Surface):
        colors = self.theme.colors
        font = self.theme.fonts.small()

        self.theme.draw_text(surface, font, self.rect.x - 8, self.rect.y,
                             self.label, colors.FG_LABEL, align='right')

        track = pygame.Rect(self.rect.x, self.rect.centery - 2, self.rect.width, 4)
        pygame.draw.rect(surface, colors.TRACK, track)
        knob_color = colors.KNOB_ACTIVE if self.dragging else colors.KNOB
        pygame.draw.rect(surface, knob_color, self.knob_rect())

        self.theme.draw_text(surface, font, self.rect.right + 10, self.rect.y,
                             f"{self.value:g}", colors.FG_DIM)


class Checkbox:
    """
    Toggle checkbox

    Simple checkbox for boolean options.
    """

    def __init__(self, x: int, y: int, label: str, checked: bool = False,
                 callback: Optional[Callable[[bool], None]] = None):
        """
        Initialize checkbox

        Args:
            x, y: Position
            label: Checkbox label
            checked: Initial state
            callback: Called with the new state when toggled
        """
        self.rect = pygame.Rect(x, y, 16, 16)
        self.label = label
        self.checked = checked
        self.callback = callback
        self.theme = get_theme()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle input event

        Returns:
            True if state changed
        """
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            label_rect = pygame.Rect(self.rect.right + 6, self.rect.y,
                                     120, self.rect.height)
            if self.rect.collidepoint(event.pos) or label_rect.collidepoint(event.pos):
                self.set_checked(not self.checked)
                return True
        return False

    def draw(self, surface: pygame.Surface):
        colors = self.theme.colors
        pygame.draw.rect(surface, colors.BG_INPUT, self.rect)
        pygame.draw.rect(surface, colors.BORDER, self.rect, 1)

        if self.checked:
            pygame.draw.rect(surface, colors.CHECK, self.rect.inflate(-6, -6))

        self.theme.draw_text(surface, self.theme.fonts.small(),
                             self.rect.right + 6, self.rect.y,
                             self.label, colors.FG_LABEL)

    def is_checked(self) -> bool:
        return self.checked

    def set_checked(self, checked: bool):
        checked = bool(checked)
        if checked != self.checked:
            self.checked = checked
            if self.callback:
                self.callback(checked)
